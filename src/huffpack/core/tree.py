from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Optional, cast

from huffpack.errors import EmptyInput

# -------------------
# Albero di Huffman
# -------------------
#
# Tie-break (fisso, per output riproducibile):
#   1. peso minore prima
#   2. a parita' di peso, seq minore prima: le foglie ricevono seq in ordine
#      crescente di simbolo, i nodi interni il seq successivo alla creazione
#
# Dei due nodi estratti, il secondo (peso >= primo) diventa il figlio "zero",
# il primo diventa il figlio "one".


@dataclass(frozen=True)
class HuffmanNode:
    weight: int
    symbol: Optional[int] = None  # 0-255 per foglie, None per interni
    zero: Optional["HuffmanNode"] = None
    one: Optional["HuffmanNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.zero is None and self.one is None


def build_huffman_tree(freq: Mapping[int, int]) -> HuffmanNode:
    """
    FrequencyMap -> radice dell'albero.

    Con un solo simbolo la radice e' una foglia (nessuna fusione): il codeword
    di default "0" lo assegna build_code_table.
    """
    if not freq:
        raise EmptyInput("empty frequency map: nothing to build a code tree from")

    heap: list[tuple[int, int, HuffmanNode]] = []
    counter = itertools.count()

    for sym in sorted(freq):
        f = freq[sym]
        if not 0 <= sym <= 255:
            raise ValueError(f"symbol out of range: {sym}")
        if f <= 0:
            raise ValueError(f"non-positive count for symbol {sym}: {f}")
        heap.append((f, next(counter), HuffmanNode(weight=f, symbol=sym)))
    heapq.heapify(heap)

    while len(heap) > 1:
        f1, _, n1 = heapq.heappop(heap)
        f2, _, n2 = heapq.heappop(heap)
        parent = HuffmanNode(weight=f1 + f2, zero=n2, one=n1)
        heapq.heappush(heap, (parent.weight, next(counter), parent))

    return heap[0][2]


def iter_leaves(root: HuffmanNode) -> Iterator[tuple[HuffmanNode, int]]:
    """Yield (leaf, depth), zero branch first. Iterative, no recursion."""
    stack: list[tuple[HuffmanNode, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if node.is_leaf:
            yield node, depth
            continue
        stack.append((cast(HuffmanNode, node.one), depth + 1))
        stack.append((cast(HuffmanNode, node.zero), depth + 1))


def weighted_path_length(root: HuffmanNode) -> int:
    """Sum of depth * weight over leaves; a bare leaf root counts as depth 1."""
    if root.is_leaf:
        return root.weight
    return sum(depth * leaf.weight for leaf, depth in iter_leaves(root))
