"""Huffman compressor for help text files."""

from __future__ import annotations

import struct
import sys
from collections import Counter
from collections.abc import Iterable, Iterator
from os import PathLike

from dflatkit.htree import LEAF_COUNT, build_tree

_NEWLINE = ord("\n")
_COMMENT = ord(";")


def strip_comments(data: bytes) -> bytes:
    """Replace every line that starts with ';' by an empty line.

    An unterminated comment at the end of the data is dropped entirely.
    """
    out = bytearray()
    last = _NEWLINE
    it = iter(data)
    for c in it:
        if c == _COMMENT and last == _NEWLINE:
            for c in it:
                if c == _NEWLINE:
                    break
            else:
                return bytes(out)
        out.append(c)
        last = c
    return bytes(out)


def _pack_bits(bits: Iterable[int]) -> Iterator[int]:
    value = 0
    filled = 0
    for bit in bits:
        value = (value << 1) | (bit & 1)
        filled += 1
        if filled == 8:
            yield value
            value = 0
            filled = 0
    if filled:
        yield value << (8 - filled)


def compress(data: bytes) -> bytes:
    """Compress help text into the header, tree and bit stream format.

    The header is the byte count, the node count and the root index as
    little-endian 32-bit values, followed by a left/right pair for every
    internal node, then the packed codes, most significant bit first.
    """
    text = strip_comments(data)
    frequency = Counter(text)
    tree = build_tree([frequency.get(b, 0) for b in range(LEAF_COUNT)])
    out = bytearray(struct.pack("<Iii", len(text), len(tree.nodes), tree.root))
    for node in tree.nodes[LEAF_COUNT:]:
        out += struct.pack("<ii", node.left, node.right)
    codes = {b: tree.code_for(b) for b in frequency}
    out.extend(_pack_bits(bit for b in text for bit in codes[b]))
    return bytes(out)


def compress_file(source: str | PathLike, target: str | PathLike) -> int:
    """Compress one file into another; return the number of bytes written."""
    with open(source, "rb") as fi:
        data = fi.read()
    packed = compress(data)
    with open(target, "wb") as fo:
        fo.write(packed)
    return len(packed)


def main(argv: list[str] | None = None) -> int:
    """Command entry point: huffc infile outfile."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        print("\nusage: huffc infile outfile")
        return 1
    source, target = args[0], args[1]
    try:
        with open(source, "rb") as fi:
            data = fi.read()
    except OSError:
        print(f"\nCannot open {source}")
        return 1
    try:
        with open(target, "wb") as fo:
            fo.write(compress(data))
    except OSError:
        print(f"\nCannot open {target}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())