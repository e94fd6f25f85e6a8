from __future__ import annotations

from abc import ABC, abstractmethod


class Codec(ABC):
    """
    Interfaccia minima per i compressori byte -> byte.

    NOTA: solo compressione. Il flusso Huffman non e' auto-descrittivo,
    quindi non esiste una decompress() simmetrica.
    """

    codec_id: str

    @abstractmethod
    def compress(self, data: bytes) -> bytes:
        raise NotImplementedError
