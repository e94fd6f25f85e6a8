from __future__ import annotations

import json
from pathlib import Path

import pytest

from huffpack.errors import UsageError
from huffpack.job_spec import JobSpecError, load_job_spec


def test_job_inline_minimal_uses_historical_paths() -> None:
    spec = load_job_spec(json.dumps({"spec": "huffpack.job.v1"}))
    assert spec.name == "job"
    assert spec.input == Path("input.txt")
    assert spec.output == Path("compressed.bin")
    assert spec.codes is None
    assert spec.report is None
    assert spec.baseline is False


def test_job_unknown_key_rejected() -> None:
    obj = {"spec": "huffpack.job.v1", "input": "a.txt", "wat": 1}
    with pytest.raises(JobSpecError):
        load_job_spec(json.dumps(obj))


def test_job_wrong_spec_id_rejected() -> None:
    with pytest.raises(JobSpecError):
        load_job_spec(json.dumps({"spec": "huffpack.job.v0"}))


@pytest.mark.parametrize("arg", ["", "   ", "[1, 2]", "{not json", "@/does/not/exist.json"])
def test_job_bad_argument(arg: str) -> None:
    with pytest.raises(JobSpecError):
        load_job_spec(arg)


def test_job_bad_types() -> None:
    with pytest.raises(JobSpecError):
        load_job_spec(json.dumps({"spec": "huffpack.job.v1", "baseline": "yes"}))
    with pytest.raises(JobSpecError):
        load_job_spec(json.dumps({"spec": "huffpack.job.v1", "input": 3}))


def test_job_error_is_usage_error() -> None:
    assert issubclass(JobSpecError, UsageError)
    assert issubclass(JobSpecError, ValueError)
    assert JobSpecError("x").exit_code == 2


def test_job_from_file_resolves_relative_paths(tmp_path: Path) -> None:
    p = tmp_path / "job.json"
    p.write_text(
        json.dumps(
            {
                "spec": "huffpack.job.v1",
                "name": "demo",
                "input": "data/in.bin",
                "output": "out.huf",
                "codes": "codes.json",
                "baseline": True,
            }
        ),
        encoding="utf-8",
    )
    spec = load_job_spec("@" + str(p))
    assert spec.name == "demo"
    assert spec.input == tmp_path / "data" / "in.bin"
    assert spec.output == tmp_path / "out.huf"
    assert spec.codes == tmp_path / "codes.json"
    assert spec.report is None
    assert spec.baseline is True
