import heapq
from itertools import count
from typing import Dict, Sequence, Tuple


class HuffNode:
    def __init__(self, value: int, weight: int, left: "HuffNode" = None, right: "HuffNode" = None):
        self.value = value
        self.weight = weight
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf():
            return f"HuffNode(value={self.value}, weight={self.weight})"
        return f"HuffNode(weight={self.weight}, left={self.left!r}, right={self.right!r})"


class HuffmanCoding:
    """Builds a Huffman tree from symbol counts and derives its code table.

    Heap entries are ``(weight, sequence, node)``. The sequence number comes
    from a counter owned by this instance, so equal weights are popped in
    insertion order: leaves by ascending symbol, then merged nodes in the
    order they were created.
    """

    def __init__(self):
        self.codes = {}
        self.count = count()

    def build_priority_queue(self, frequencies: Sequence[int]):
        heap = [(int(freq), next(self.count), HuffNode(symbol, int(freq)))
                for symbol, freq in enumerate(frequencies) if freq > 0]
        heapq.heapify(heap)
        return heap

    def build_tree(self, heap) -> HuffNode:
        if not heap:
            raise ValueError("cannot build a Huffman tree without any non-zero count")
        if len(heap) == 1:
            # A lone leaf would get an empty code; pair it with a placeholder
            # leaf that is never emitted so it gets the 1-bit code 0.
            lone = heap[0][2]
            placeholder = 1 if lone.value == 0 else 0
            return HuffNode(-1, lone.weight, lone, HuffNode(placeholder, 0))

        while len(heap) > 1:
            weight1, _, left = heapq.heappop(heap)
            weight2, _, right = heapq.heappop(heap)
            merged = HuffNode(-1, weight1 + weight2, left, right)
            heapq.heappush(heap, (merged.weight, next(self.count), merged))
        return heap[0][2]

    def generate_codes(self, node: HuffNode, prefix: int = 0, depth: int = 0):
        if node.is_leaf():
            self.codes[node.value] = (prefix, depth)
        else:
            self.generate_codes(node.left, prefix << 1, depth + 1)
            self.generate_codes(node.right, (prefix << 1) | 1, depth + 1)


def make_tree_from_counts(counts: Sequence[int]) -> HuffNode:
    huffman = HuffmanCoding()
    return huffman.build_tree(huffman.build_priority_queue(counts))


def make_codings_from_tree(root: HuffNode) -> Dict[int, Tuple[int, int]]:
    """Map every leaf symbol to ``(code, length)``.

    The code is the root-to-leaf path read as a binary number (0 = left,
    1 = right); the length keeps any leading zeros.
    """
    huffman = HuffmanCoding()
    huffman.generate_codes(root)
    return huffman.codes


def count_leaves(root: HuffNode) -> int:
    if root.is_leaf():
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def code_to_string(code: int, length: int) -> str:
    return f"{code:0{length}b}"
