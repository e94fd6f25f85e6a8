"""Job spec (v1) for huffpack.

Goal: make a compression run reproducible and scriptable (CLI, CI).

This module intentionally stays *small* and strict:
  - JSON only
  - explicit schema id
  - unknown keys are rejected
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from huffpack.errors import UsageError

SPEC_ID_V1 = "huffpack.job.v1"

# Fixed paths of the historical single-file compressor.
DEFAULT_INPUT = "input.txt"
DEFAULT_OUTPUT = "compressed.bin"


class JobSpecError(UsageError, ValueError):
    pass


def _load_json_arg(job_arg: str) -> tuple[dict[str, Any], Path | None]:
    s = job_arg.strip()
    if not s:
        raise JobSpecError("job: argomento vuoto")

    if s.startswith("@"):
        p = Path(s[1:]).expanduser()
        if not p.exists() or not p.is_file():
            raise JobSpecError(f"job: file non trovato: {p}")
        raw = p.read_text(encoding="utf-8")
        try:
            obj = json.loads(raw)
        except Exception as e:
            raise JobSpecError(f"job: JSON non valido in {p}: {e}") from e
        if not isinstance(obj, dict):
            raise JobSpecError(f"job: il JSON in {p} deve essere un oggetto")
        return obj, p.parent

    try:
        obj = json.loads(s)
    except Exception as e:
        raise JobSpecError(f"job: JSON inline non valido: {e}") from e
    if not isinstance(obj, dict):
        raise JobSpecError("job: il JSON inline deve essere un oggetto")
    return obj, None


def _optional_path(obj: dict[str, Any], key: str, base: Path | None) -> Path | None:
    if key not in obj or obj.get(key) is None:
        return None
    v = obj.get(key)
    if not isinstance(v, str) or not v.strip():
        raise JobSpecError(f"job: campo '{key}' deve essere un path (string)")
    p = Path(v.strip()).expanduser()
    if base is not None and not p.is_absolute():
        p = base / p
    return p


def _optional_bool(obj: dict[str, Any], key: str) -> bool | None:
    if key not in obj:
        return None
    v = obj.get(key)
    if isinstance(v, bool):
        return v
    raise JobSpecError(f"job: campo '{key}' deve essere booleano")


@dataclass(frozen=True)
class JobSpecV1:
    """A single compression run."""

    name: str
    input: Path
    output: Path
    codes: Path | None = None
    report: Path | None = None
    baseline: bool = False


def load_job_spec(job_arg: str) -> JobSpecV1:
    """Load and validate a job spec.

    job_arg:
      - '@file.json' (relative paths resolve against the file's directory)
      - inline JSON object (relative paths resolve against the CWD)
    """
    obj, base = _load_json_arg(job_arg)

    allowed = {"spec", "name", "input", "output", "codes", "report", "baseline"}
    extra = sorted(set(obj.keys()) - allowed)
    if extra:
        raise JobSpecError(f"job: chiavi non supportate: {', '.join(extra)}")

    spec_id = obj.get("spec")
    if spec_id != SPEC_ID_V1:
        raise JobSpecError(f"job: spec non supportata: {spec_id!r} (attesa {SPEC_ID_V1!r})")

    name = obj.get("name")
    if name is None:
        name = "job"
    if not isinstance(name, str) or not name.strip():
        raise JobSpecError("job: campo 'name' deve essere stringa")

    input_path = _optional_path(obj, "input", base)
    if input_path is None:
        input_path = (base / DEFAULT_INPUT) if base is not None else Path(DEFAULT_INPUT)
    output_path = _optional_path(obj, "output", base)
    if output_path is None:
        output_path = (base / DEFAULT_OUTPUT) if base is not None else Path(DEFAULT_OUTPUT)

    baseline = _optional_bool(obj, "baseline")

    return JobSpecV1(
        name=name.strip(),
        input=input_path,
        output=output_path,
        codes=_optional_path(obj, "codes", base),
        report=_optional_path(obj, "report", base),
        baseline=bool(baseline),
    )
