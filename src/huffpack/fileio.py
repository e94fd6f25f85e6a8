"""Thin file I/O around the Huffman core.

The core never touches the filesystem; this module reads the whole input,
runs the pipeline and writes the artifacts.

Every artifact of a run (packed output, codes sidecar, report) is built in
memory first, then staged to temp files next to its target and published with
os.replace. A failed run leaves none of them behind.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from huffpack.core.codec_huffman import HuffmanResult, encode
from huffpack.errors import IOUnavailable
from huffpack.report import build_code_table_doc, build_compress_report, render_json


def read_input(path: str | Path) -> bytes:
    p = Path(path)
    try:
        return p.read_bytes()
    except OSError as e:
        raise IOUnavailable(f"cannot read input {p}: {e.strerror or e}") from e


def _stage(target: Path, data: bytes) -> str:
    """Write data to a temp file in target's directory, return its name."""
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent)
    )
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
    except OSError:
        os.unlink(tmp_name)
        raise
    return tmp_name


def write_artifacts_atomic(artifacts: list[tuple[Path, bytes]]) -> None:
    """All-or-nothing write of several files.

    Phase 1 stages every file; phase 2 renames them into place. On failure
    the temp files are removed and targets already published are unlinked.
    """
    staged: list[tuple[str, Path]] = []
    published: list[Path] = []
    current: Path | None = None
    try:
        for target, data in artifacts:
            current = target
            staged.append((_stage(target, data), target))
        for tmp_name, target in staged:
            current = target
            os.replace(tmp_name, target)
            published.append(target)
    except OSError as e:
        for tmp_name, _ in staged:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
        for target in published:
            target.unlink(missing_ok=True)
        raise IOUnavailable(f"cannot write {current}: {e.strerror or e}") from e


def write_output_atomic(path: str | Path, data: bytes) -> None:
    write_artifacts_atomic([(Path(path), data)])


def compress_file(
    input_path: str | Path,
    output_path: str | Path,
    *,
    codes_path: str | Path | None = None,
    report_path: str | Path | None = None,
    baseline: bool = False,
    job_name: str | None = None,
) -> HuffmanResult:
    """input file -> packed output file (+ optional codes/report JSON)."""
    data = read_input(input_path)
    result = encode(data)

    artifacts: list[tuple[Path, bytes]] = [(Path(output_path), result.packed.data)]
    if codes_path is not None:
        artifacts.append((Path(codes_path), render_json(build_code_table_doc(result))))
    if report_path is not None:
        rep = build_compress_report(result, data=data, baseline=baseline, job_name=job_name)
        artifacts.append((Path(report_path), render_json(rep)))

    write_artifacts_atomic(artifacts)
    return result
