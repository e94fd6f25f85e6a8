from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from huffpack.errors import CodeMapIncomplete

# Formato bit: MSB-first. Il primo bit accumulato finisce nel bit 7 del byte;
# l'ultimo byte, se incompleto, e' riempito a zero sui bit bassi.
# Nessun header: ne' pad length ne' tabella codici finiscono nel flusso.


@dataclass(frozen=True)
class PackedBits:
    data: bytes
    bit_count: int

    @property
    def pad_bits(self) -> int:
        return len(self.data) * 8 - self.bit_count


def pack_codewords(data: bytes | bytearray | memoryview, codes: Mapping[int, str]) -> PackedBits:
    """
    data + {simbolo: codeword} -> PackedBits.

    Un byte di data senza codeword e' una violazione di contratto: CodeMapIncomplete.
    """
    # codeword -> (valore intero, lunghezza), una sola volta per simbolo
    table: dict[int, tuple[int, int]] = {}
    for sym, cw in codes.items():
        if not cw or set(cw) - {"0", "1"}:
            raise ValueError(f"invalid codeword for symbol {sym}: {cw!r}")
        table[sym] = (int(cw, 2), len(cw))

    out_bytes = bytearray()
    current = 0
    bit_count = 0  # bit in attesa nell'accumulatore
    total_bits = 0

    for pos, b in enumerate(bytes(data)):
        entry = table.get(b)
        if entry is None:
            raise CodeMapIncomplete(b, pos)
        value, length = entry
        current = (current << length) | value
        bit_count += length
        total_bits += length
        while bit_count >= 8:
            bit_count -= 8
            out_bytes.append((current >> bit_count) & 0xFF)
        current &= (1 << bit_count) - 1

    if bit_count > 0:
        out_bytes.append((current << (8 - bit_count)) & 0xFF)

    return PackedBits(data=bytes(out_bytes), bit_count=total_bits)


def unpack_bits(packed: bytes, bit_count: int | None = None) -> str:
    """
    Strumento di ispezione: bytes -> stringa di bit MSB-first.
    Con bit_count scarta il padding finale.
    """
    bits = "".join(format(byte, "08b") for byte in packed)
    if bit_count is None:
        return bits
    if bit_count < 0 or bit_count > len(bits):
        raise ValueError(f"bit_count out of range: {bit_count} (have {len(bits)} bits)")
    return bits[:bit_count]
