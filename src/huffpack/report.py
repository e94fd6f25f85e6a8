"""Reports for a compression run: code table sidecar + stats.

Determinism note:
Both documents are written next to the compressed output and must be
byte-identical across runs given the same input content.

Concretely, we DO NOT embed:
- timestamps
- absolute paths
Anything run/environment-specific would break determinism.

The code table sidecar is the only way to decode a packed stream: the stream
itself carries no header (no tree, no pad length).
"""

from __future__ import annotations

import json
import math
from typing import Any

from huffpack.core.codec_huffman import HuffmanResult
from huffpack.core.codec_zstd import CodecZstd

CODES_FORMAT_V1 = "huffpack.codes.v1"
REPORT_FORMAT_V1 = "huffpack.report.v1"


def shannon_entropy(freq: dict[int, int]) -> float:
    """Bits per symbol, lower bound for any prefix code on this distribution."""
    n = sum(freq.values())
    if n == 0:
        return 0.0
    h = 0.0
    for f in freq.values():
        p = f / n
        h -= p * math.log2(p)
    return h


def build_code_table_doc(result: HuffmanResult) -> dict[str, Any]:
    return {
        "format": CODES_FORMAT_V1,
        "bit_order": "msb-first",
        "n_symbols": result.n_input,
        "bit_count": result.packed.bit_count,
        "pad_bits": result.packed.pad_bits,
        "codes": {str(sym): cw for sym, cw in result.codes.items()},
    }


def build_compress_report(
    result: HuffmanResult,
    *,
    data: bytes | None = None,
    baseline: bool = False,
    job_name: str | None = None,
) -> dict[str, Any]:
    """Build a deterministic stats report.

    `data` is only needed for the zstd baseline (baseline=True).
    `job_name` comes from the job spec when the run was started by one.
    """
    n_in = result.n_input
    n_out = len(result.packed.data)
    avg_len = result.packed.bit_count / n_in if n_in else 0.0

    rep: dict[str, Any] = {
        "format": REPORT_FORMAT_V1,
        "codec": "huffman",
        "input_bytes": n_in,
        "output_bytes": n_out,
        "distinct_symbols": len(result.freq),
        "bit_count": result.packed.bit_count,
        "pad_bits": result.packed.pad_bits,
        "max_code_length": max(len(cw) for cw in result.codes.values()),
        "entropy_bits_per_symbol": round(shannon_entropy(result.freq), 6),
        "avg_code_length": round(avg_len, 6),
        "ratio": round(n_out / n_in, 6) if n_in else 0.0,
    }

    if job_name is not None:
        rep["job"] = job_name

    if baseline:
        if data is None:
            raise ValueError("report: baseline richiede i dati originali")
        rep["zstd_baseline_bytes"] = len(CodecZstd(tight=True).compress(data))

    return rep


def render_json(obj: dict[str, Any]) -> bytes:
    """Stable serialization: sorted keys, 2-space indent, trailing newline."""
    return (json.dumps(obj, indent=2, sort_keys=True, ensure_ascii=False) + "\n").encode("utf-8")
