from __future__ import annotations

from collections.abc import Mapping
from typing import cast

from huffpack.core.tree import HuffmanNode

_BIT_CHARS = {0: "0", 1: "1"}


def build_code_table(root: HuffmanNode) -> dict[int, str]:
    """
    Albero -> {simbolo: codeword}, codeword come stringa di "0"/"1".

    DFS iterativa con stack esplicito e un solo buffer di percorso condiviso:
    ogni discesa tronca il buffer alla profondita' del nodo e aggiunge un bit.
    Ramo zero -> "0", ramo one -> "1". Radice foglia (un solo simbolo) -> "0".
    """
    if root.is_leaf:
        return {cast(int, root.symbol): "0"}

    codes: dict[int, str] = {}
    path = bytearray()
    # (nodo, profondita' del padre, bit dell'arco entrante)
    stack: list[tuple[HuffmanNode, int, int]] = [
        (cast(HuffmanNode, root.one), 0, 1),
        (cast(HuffmanNode, root.zero), 0, 0),
    ]

    while stack:
        node, parent_depth, bit = stack.pop()
        del path[parent_depth:]
        path.append(bit)

        if node.is_leaf:
            codes[cast(int, node.symbol)] = "".join(_BIT_CHARS[b] for b in path)
            continue

        depth = parent_depth + 1
        stack.append((cast(HuffmanNode, node.one), depth, 1))
        stack.append((cast(HuffmanNode, node.zero), depth, 0))

    return {sym: codes[sym] for sym in sorted(codes)}


def is_prefix_free(codes: Mapping[int, str]) -> bool:
    # in ordine lessicografico un prefisso precede sempre le sue estensioni
    words = sorted(codes.values())
    for a, b in zip(words, words[1:]):
        if b.startswith(a):
            return False
    return all(words)


def code_lengths(codes: Mapping[int, str]) -> dict[int, int]:
    return {sym: len(cw) for sym, cw in codes.items()}
