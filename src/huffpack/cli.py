"""huffpack CLI.

This is the stable CLI entrypoint (console-script: ``huffpack``).

UX policy:
  - ``compress`` with no arguments keeps the historical behaviour:
    input.txt -> compressed.bin.
  - Human summary on stdout, errors on stderr prefixed ``[huffpack]``.
  - Exit codes come from huffpack.errors (single source of truth).
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from huffpack.core.codec_huffman import HuffmanResult
from huffpack.errors import EXIT_GENERIC, EXIT_USAGE, HuffpackError, UsageError
from huffpack.job_spec import DEFAULT_INPUT, DEFAULT_OUTPUT, JobSpecError, load_job_spec


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--debug", action="store_true", help="Show stack traces on errors")


def _print_summary(
    input_path: Path, output_path: Path, result: HuffmanResult, job_name: str | None = None
) -> None:
    n_in = result.n_input
    n_out = len(result.packed.data)
    ratio = n_out / n_in if n_in else 0.0
    print("=== huffpack ===")
    if job_name is not None:
        print(f"Job            : {job_name}")
    print(f"Input          : {input_path} ({n_in} bytes)")
    print(f"Output         : {output_path} ({n_out} bytes)")
    print(f"Symbols        : {len(result.freq)} distinct, {result.packed.bit_count} bits")
    print(f"Ratio          : {ratio:.3f} (1.0 = no compression)")
    print("================")
    print("File compressed successfully!")


def _cmd_compress(
    input_path: Path,
    output_path: Path,
    *,
    codes: Path | None,
    report: Path | None,
    baseline: bool,
    quiet: bool,
    job_name: str | None = None,
) -> int:
    from huffpack.fileio import compress_file

    if baseline and report is None:
        raise UsageError("--baseline richiede --report")

    result = compress_file(
        input_path,
        output_path,
        codes_path=codes,
        report_path=report,
        baseline=baseline,
        job_name=job_name,
    )
    if not quiet:
        _print_summary(input_path, output_path, result, job_name)
    return 0


def _cmd_inspect(input_path: Path, *, as_json: bool) -> int:
    from huffpack.core.codec_huffman import encode
    from huffpack.fileio import read_input
    from huffpack.report import build_code_table_doc, build_compress_report

    data = read_input(input_path)
    result = encode(data)

    if as_json:
        doc = {
            "codes": build_code_table_doc(result),
            "report": build_compress_report(result),
        }
        print(json.dumps(doc, sort_keys=True, separators=(",", ":")))
        return 0

    rep = build_compress_report(result)
    print(f"Input          : {input_path} ({rep['input_bytes']} bytes)")
    print(f"Packed         : {rep['output_bytes']} bytes, {rep['bit_count']} bits (+{rep['pad_bits']} pad)")
    print(f"Entropy        : {rep['entropy_bits_per_symbol']:.4f} bits/symbol")
    print(f"Avg code len   : {rep['avg_code_length']:.4f} bits/symbol")
    print("Sym   Count      Code")
    for sym, cw in result.codes.items():
        print(f"0x{sym:02x}  {result.freq[sym]:<10d} {cw}")
    return 0


def _cmd_run(job_arg: str, *, quiet: bool) -> int:
    spec = load_job_spec(job_arg)
    return _cmd_compress(
        spec.input,
        spec.output,
        codes=spec.codes,
        report=spec.report,
        baseline=spec.baseline,
        quiet=quiet,
        job_name=spec.name,
    )


def _cmd_job_validate(job_arg: str) -> int:
    # load is the validation
    load_job_spec(job_arg)
    print("OK")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="huffpack", description="Huffman byte-stream compressor")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_c = sub.add_parser("compress", help="Compress a file into a headerless Huffman bitstream")
    p_c.add_argument("input", type=Path, nargs="?", default=Path(DEFAULT_INPUT))
    p_c.add_argument("output", type=Path, nargs="?", default=Path(DEFAULT_OUTPUT))
    p_c.add_argument(
        "--codes",
        type=Path,
        default=None,
        help="Write the code table (JSON sidecar, needed to decode the stream out of band)",
    )
    p_c.add_argument("--report", type=Path, default=None, help="Write a JSON stats report")
    p_c.add_argument(
        "--baseline", action="store_true", help="Add a zstd size baseline to the report"
    )
    p_c.add_argument("--quiet", action="store_true", help="No summary on stdout")
    _add_common_args(p_c)

    p_i = sub.add_parser("inspect", help="Show code table and stats without writing anything")
    p_i.add_argument("input", type=Path)
    p_i.add_argument("--json", action="store_true", help="Print one JSON object on stdout")
    _add_common_args(p_i)

    p_r = sub.add_parser("run", help="Run a job spec (v1)")
    p_r.add_argument("job", help="Job spec JSON (@file.json or inline JSON)")
    p_r.add_argument("--quiet", action="store_true", help="No summary on stdout")
    _add_common_args(p_r)

    p_v = sub.add_parser("job-validate", help="Validate a job spec (v1)")
    p_v.add_argument("job", help="Job spec JSON (@file.json or inline JSON)")
    _add_common_args(p_v)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    p = build_parser()
    ns = p.parse_args(argv)

    try:
        if ns.cmd == "compress":
            return _cmd_compress(
                ns.input,
                ns.output,
                codes=ns.codes,
                report=ns.report,
                baseline=bool(ns.baseline),
                quiet=bool(ns.quiet),
            )
        if ns.cmd == "inspect":
            return _cmd_inspect(ns.input, as_json=bool(ns.json))
        if ns.cmd == "run":
            return _cmd_run(str(ns.job), quiet=bool(ns.quiet))
        if ns.cmd == "job-validate":
            return _cmd_job_validate(str(ns.job))
        raise AssertionError("unreachable")

    except SystemExit:
        raise
    except JobSpecError as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[huffpack] {e}", file=sys.stderr)
        return EXIT_USAGE
    except HuffpackError as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[huffpack] {e}", file=sys.stderr)
        return int(getattr(e, "exit_code", EXIT_GENERIC) or EXIT_GENERIC)
    except Exception as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[huffpack] error: {e}", file=sys.stderr)
        return EXIT_GENERIC


if __name__ == "__main__":
    raise SystemExit(main())
