from __future__ import annotations

from collections.abc import Mapping


def count_frequencies(data: bytes | bytearray | memoryview) -> dict[int, int]:
    """data -> {byte: count}, only for bytes that occur, keys in ascending order."""
    freq = [0] * 256
    for b in bytes(data):
        freq[b] += 1
    return {sym: f for sym, f in enumerate(freq) if f > 0}


def merge_frequencies(*maps: Mapping[int, int]) -> dict[int, int]:
    """
    Somma chiave per chiave di piu' FrequencyMap parziali (es. conteggi per chunk).
    Commutativa e associativa: l'ordine degli argomenti non cambia il risultato.
    """
    total: dict[int, int] = {}
    for m in maps:
        for sym, f in m.items():
            total[sym] = total.get(sym, 0) + f
    return {sym: total[sym] for sym in sorted(total)}
