"""Huffman tree construction from byte frequencies."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

LEAF_COUNT = 256


@dataclass
class HuffmanNode:
    """One node of the tree; links are indices into the node list, -1 for none."""

    count: int = 0
    parent: int = -1
    right: int = -1
    left: int = -1


@dataclass
class HuffmanTree:
    """A tree whose first 256 nodes are the byte leaves.

    ``root`` is -1 when no byte occurred at all.
    """

    nodes: list[HuffmanNode]
    root: int

    def code_for(self, byte: int) -> tuple[int, ...]:
        """Return the bits for a byte, root first: 0 for right, 1 for left."""
        if not 0 <= byte < LEAF_COUNT:
            raise ValueError(f"byte out of range: {byte}")
        leaf = self.nodes[byte]
        if leaf.count == 0:
            raise ValueError(f"byte {byte} does not occur in the tree")
        bits: list[int] = []
        child = byte
        parent = leaf.parent
        while parent != -1:
            node = self.nodes[parent]
            bits.append(0 if child == node.right else 1)
            child = parent
            parent = node.parent
        bits.reverse()
        return tuple(bits)


def build_tree(counts: Sequence[int]) -> HuffmanTree:
    """Build a Huffman tree from 256 byte frequencies."""
    if len(counts) != LEAF_COUNT:
        raise ValueError(f"expected {LEAF_COUNT} counts, got {len(counts)}")
    if any(c < 0 for c in counts):
        raise ValueError("counts must not be negative")
    nodes = [HuffmanNode(count=c) for c in counts]
    while True:
        h1 = h2 = -1
        for i, node in enumerate(nodes):
            if node.count <= 0 or node.parent != -1:
                continue
            if h1 == -1 or node.count < nodes[h1].count:
                if h2 == -1 or nodes[h1].count < nodes[h2].count:
                    h2 = h1
                h1 = i
            elif h2 == -1 or node.count < nodes[h2].count:
                h2 = i
        if h2 == -1:
            return HuffmanTree(nodes, h1)
        new = len(nodes)
        nodes[h1].parent = new
        nodes[h2].parent = new
        nodes.append(
            HuffmanNode(
                count=nodes[h1].count + nodes[h2].count,
                parent=-1,
                right=h1,
                left=h2,
            )
        )