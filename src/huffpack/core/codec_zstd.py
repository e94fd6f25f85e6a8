from __future__ import annotations

from dataclasses import dataclass

from huffpack.core.codec_base import Codec

try:
    import zstandard as zstd  # type: ignore
except Exception:  # pragma: no cover
    zstd = None


@dataclass
class CodecZstd(Codec):
    """
    Compressore di riferimento per il confronto nel report (baseline).
    Nota: lavora su bytes, non sostituisce il codec Huffman.

    "tight" minimizza l'overhead del frame zstd:
      - no content size nel frame
      - no checksum
    """

    level: int = 19
    codec_id: str = "zstd"
    tight: bool = False

    def _require(self) -> None:
        if zstd is None:
            raise RuntimeError(
                "Modulo 'zstandard' non disponibile. Installa con: python3 -m pip install zstandard"
            )

    def compress(self, data: bytes) -> bytes:
        self._require()
        if self.tight:
            cctx = zstd.ZstdCompressor(
                level=int(self.level), write_content_size=False, write_checksum=False
            )
        else:
            cctx = zstd.ZstdCompressor(level=int(self.level))
        return cctx.compress(bytes(data))
