from __future__ import annotations

from dataclasses import dataclass

from huffpack.core.bitpack import PackedBits, pack_codewords
from huffpack.core.codec_base import Codec
from huffpack.core.codes import build_code_table
from huffpack.core.freq import count_frequencies
from huffpack.core.tree import HuffmanNode, build_huffman_tree
from huffpack.errors import EmptyInput


@dataclass(frozen=True)
class HuffmanResult:
    """Everything one compression run produced, stage by stage."""

    freq: dict[int, int]
    root: HuffmanNode
    codes: dict[int, str]
    packed: PackedBits

    @property
    def n_input(self) -> int:
        return sum(self.freq.values())


def encode(data: bytes | bytearray | memoryview) -> HuffmanResult:
    """
    Core riusabile: data -> HuffmanResult.

    freq -> albero -> codici -> bitstream, in sequenza. Input vuoto: EmptyInput.
    """
    data_b = bytes(data)
    if not data_b:
        raise EmptyInput()
    freq = count_frequencies(data_b)
    root = build_huffman_tree(freq)
    codes = build_code_table(root)
    packed = pack_codewords(data_b, codes)
    return HuffmanResult(freq=freq, root=root, codes=codes, packed=packed)


def compress(data: bytes | bytearray | memoryview) -> bytes:
    """data -> packed bitstream (MSB-first, zero-padded, headerless)."""
    return encode(data).packed.data


class CodecHuffman(Codec):
    codec_id = "huffman"

    def compress(self, data: bytes) -> bytes:
        return compress(data)
