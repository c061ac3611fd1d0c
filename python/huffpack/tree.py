import heapq
from typing import TypeAlias

from huffpack.abc import FreqTableType


class Leaf(object):
    __slots__ = ("symbol", "freq")

    def __init__(self, symbol: int, freq: int) -> None:
        self.symbol = symbol
        self.freq = freq

    def __repr__(self) -> str:
        return f"Leaf({self.symbol}, {self.freq})"


class Internal(object):
    __slots__ = ("freq", "left", "right")

    def __init__(self, freq: int, left: "Node", right: "Node") -> None:
        self.freq = freq
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"Internal({self.freq}, {self.left!r}, {self.right!r})"


Node: TypeAlias = Leaf | Internal


def build_tree(freq: FreqTableType) -> Node | None:
    """Build a Huffman tree from a frequency table.

    Heap entries are (freq, order, node). Leaves are numbered in ascending
    symbol order and each merged node takes the next number, so equal
    frequencies are always resolved the same way no matter how `freq` was
    populated. The first node popped becomes the left child.
    """
    if not freq:
        return None

    heap: list[tuple[int, int, Node]] = [
        (f, order, Leaf(s, f)) for order, (s, f) in enumerate(sorted(freq.items()))
    ]
    heapq.heapify(heap)
    order = len(heap)

    while len(heap) > 1:
        f1, _, left = heapq.heappop(heap)
        f2, _, right = heapq.heappop(heap)
        heapq.heappush(heap, (f1 + f2, order, Internal(f1 + f2, left, right)))
        order += 1

    return heap[0][2]
