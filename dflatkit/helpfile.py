"""Help file index: loading, name lookup and help window placement.

A compiled help file ends with the offset of its index.  The index holds
an entry count followed, for every entry, by a length-prefixed name, a
length-prefixed comment and the entry's position and dimensions.  Integers
are little-endian: 32 bits for ``int`` fields and 64 bits for ``long``.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from itertools import zip_longest
from os import PathLike

_INT = struct.Struct("<i")
_LONG = struct.Struct("<q")
_RECORD = struct.Struct("<qiiiii")


@dataclass
class HelpEntry:
    """One help text collection in the index."""

    name: str | None
    comment: str | None
    hptr: int
    bit: int
    height: int
    width: int
    next_index: int = -1
    prev_index: int = -1

    @property
    def has_next(self) -> bool:
        return self.next_index != -1

    @property
    def has_prev(self) -> bool:
        return self.prev_index != -1


@dataclass
class HelpIndex:
    """The table of help entries read from a help file."""

    entries: list[HelpEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def find(self, name: str) -> HelpEntry | None:
        """Return the first entry whose name matches, '?' matching any character."""
        return next(
            (e for e in self.entries if e.name is not None and wildcmp(name, e.name)),
            None,
        )

    def comment(self, name: str) -> str | None:
        """Return the comment of the entry named by a menu title, tildes ignored."""
        entry = self.find(strip_tildes(name))
        return entry.comment if entry is not None else None


@dataclass(frozen=True)
class Placement:
    """Where a help box goes; -1 in a coordinate means centre it."""

    x: int
    y: int


def strip_tildes(name: str) -> str:
    """Remove the shortcut markers from a menu or help name."""
    return name.replace("~", "")


def wildcmp(pattern: str, name: str) -> bool:
    """Return True when two names match, ignoring case.

    A '?' on either side matches any character, including a missing one.
    """
    for a, b in zip_longest(pattern, name, fillvalue="\0"):
        if a.lower() != b.lower() and a != "?" and b != "?":
            return False
    return True


def help_length(line: str) -> int:
    """Return the displayed length of a help text line.

    Every '[' keyword marker costs four characters and every '<name>'
    reference is not displayed at all.
    """
    length = len(line) - 4 * line.count("[")
    start = line.find("<")
    while start != -1:
        end = line.find(">", start)
        if end == -1:
            break
        length -= end - start + 1
        start = line.find("<", end)
    return length


def _overlap(a: int, b: int) -> int:
    return max(a - b, 0)


def best_fit(
    left: int,
    top: int,
    right: int,
    bottom: int,
    width: int,
    height: int,
    screen_width: int,
    screen_height: int,
    top_level: bool,
) -> Placement:
    """Place a help box of the given size beside the window it explains.

    ``top_level`` is true for the application window and the menu bar,
    whose help is always centred.
    """
    if top_level:
        return Placement(-1, -1)
    above = _overlap(height, top)
    below = _overlap(bottom, screen_height - height)
    right_ov = _overlap(right, screen_width - width)
    left_ov = _overlap(width, left)

    if above < below:
        y = max(0, top - height - 2)
    else:
        y = min(screen_height - height, bottom + 2)
    if right_ov < left_ov:
        x = min(right + 2, screen_width - width)
    else:
        x = max(0, left - width - 2)

    if x == right + 2 or x == left - width - 2:
        y = -1
    if y == top - height - 2 or y == bottom + 2:
        x = -1
    return Placement(x, y)


def _read_text(data: bytes, offset: int) -> tuple[str | None, int]:
    (length,) = _INT.unpack_from(data, offset)
    offset += _INT.size
    if length == 0:
        return None, offset
    if length < 0 or offset + length + 1 > len(data):
        raise ValueError("help index string runs past the end of the file")
    raw = data[offset : offset + length + 1]
    return raw.split(b"\0", 1)[0].decode("latin-1"), offset + length + 1


def parse_help_index(data: bytes) -> HelpIndex:
    """Parse the index of a compiled help file held in memory."""
    data = bytes(data)
    if len(data) < _LONG.size:
        raise ValueError("help file too short to hold an index offset")
    (where,) = _LONG.unpack_from(data, len(data) - _LONG.size)
    if not 0 <= where <= len(data) - _LONG.size:
        raise ValueError(f"help index offset out of range: {where}")
    try:
        (count,) = _INT.unpack_from(data, where)
        if count < 0:
            raise ValueError(f"negative help entry count: {count}")
        offset = where + _INT.size
        entries: list[HelpEntry] = []
        for _ in range(count):
            name, offset = _read_text(data, offset)
            comment, offset = _read_text(data, offset)
            hptr, bit, height, width, nxt, prev = _RECORD.unpack_from(data, offset)
            offset += _RECORD.size
            entries.append(HelpEntry(name, comment, hptr, bit, height, width, nxt, prev))
    except struct.error as exc:
        raise ValueError("help index is truncated") from exc
    return HelpIndex(entries)


def load_help_index(path: str | PathLike) -> HelpIndex:
    """Read and parse the index of a compiled help file."""
    with open(path, "rb") as fp:
        return parse_help_index(fp.read())