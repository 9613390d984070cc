# dflatkit

Pieces of a classic text-mode windowing toolkit, written as plain Python
with no runtime dependencies:

- `dflatkit.cp437`: IBM code page 437 text, with printable glyphs for the
  control range.
- `dflatkit.htree`: Huffman trees built from byte frequencies.
- `dflatkit.huffc`: the help-text compressor and its `dflat-huffc` command.
- `dflatkit.helpfile`: reading the index of a compiled help file, matching
  topic names, and placing a help window on the screen.
- `dflatkit.messages`: bounded event and message queues, mouse and keyboard
  capture chains, and the status-bar clock text.
- `dflatkit.windows`: rectangles, the window tree, visibility, hit testing
  and focus movement between sibling windows.

## Installation

```
pip install .
```

You need Python 3.10 or later.

## CP437 text

```python
from dflatkit.cp437 import decode, encode

text = decode(b"\xc9\xcd\xbb")   # "╔═╗"
assert encode(text) == b"\xc9\xcd\xbb"
```

`decode` maps every byte through `TABLE`. Byte 0 becomes a no-break space.
Bytes 1 to 31 become symbols such as `☺` and `♥`. The double quote, the
apostrophe and the question mark become `“`, `‘` and `⁇`, so decoded text
is always safe to put inside a string literal. `encode` is the reverse
mapping. It raises `UnicodeEncodeError` for any character that is not in
the table, plain `"` included.

## Huffman trees

`build_tree(counts)` takes exactly 256 non-negative byte frequencies and
returns a `HuffmanTree`. `nodes` is a list of `HuffmanNode` (`count`,
`parent`, `right`, `left`, where -1 means no link). The first 256 nodes are
the byte leaves, and internal nodes follow them. `root` is -1 when no byte
occurs.

`HuffmanTree.code_for(byte)` returns the bits of a byte's code, root first:
0 for a right branch, 1 for a left one. A byte that does not occur raises
`ValueError`.

## Compressing help text

```
dflat-huffc memopad.txt memopad.hlp
```

The command needs an input file and an output file. If it gets fewer
arguments it prints a usage line and exits with status 1. It does the same
when a file cannot be opened.

From Python:

```python
from dflatkit.huffc import compress, compress_file, strip_comments

compress_file("memopad.txt", "memopad.hlp")   # returns bytes written
```

- `strip_comments(data)` empties every line that starts with `;`. It keeps
  the line break, and it drops an unterminated comment at the end of the
  data.
- `compress(data)` strips comments, then writes a header of three
  little-endian 32-bit values: the byte count, the node count and the root
  index. Next comes a left/right pair for every internal node. Last is the
  packed codes, most significant bit first, with the final byte padded with
  zeros.

## Help file indexes

A compiled help file ends with a 64-bit little-endian offset of its index.
The index holds an entry count. For each entry it holds a length-prefixed
name, a length-prefixed comment, and then the position, the bit, the
height, the width and the next and previous entry numbers.

```python
from dflatkit.helpfile import load_help_index

index = load_help_index("memopad.hlp")
entry = index.find("File?enu")       # '?' matches any character, case ignored
print(index.comment("~File"))        # tildes are stripped before lookup
```

- `parse_help_index(data)` does the same job on bytes in memory. It raises
  `ValueError` for a truncated or out-of-range index.
- `HelpEntry` has `has_next` and `has_prev` for the neighbouring entries.
- `strip_tildes`, `wildcmp` and `help_length` work on help names and on
  help text lines. `help_length` gives the displayed length of a line: each
  `[` costs four characters and `<name>` references are not shown.
- `best_fit(left, top, right, bottom, width, height, screen_width,
  screen_height, top_level)` returns a `Placement` for a help box beside a
  window. A coordinate of -1 means centre the box on that axis.

## Queues, captures and the clock

```python
from dflatkit.messages import BoundedQueue, CaptureChain, Event, format_clock

events = BoundedQueue()            # capacity 50
events.post(Event("KEYBOARD", 13, 0))
for event in events.drain():
    ...

mouse = CaptureChain()
mouse.capture("dialog")
mouse.capture("button")
mouse.release("button")            # capture returns to "dialog"

format_clock(13, 5)                # " 1:05pm "
format_clock(13, 5, blink=True)    # " 1 05pm "
```

- `post` returns `False` and drops the item when the queue is full.
- `pop` raises `IndexError` on an empty queue.
- `drain` keeps yielding items that are posted while it runs.
- `CaptureChain.release(None)` clears the capture. If you release a window
  from the middle of the chain, it is unlinked from the chain. If you
  release a window that holds no capture, the capture is cleared.

## Windows and focus

```python
from dflatkit.windows import APPLICATION, Rect, Window, set_next_focus

app = Window(Rect(0, 0, 79, 24), window_class=APPLICATION)
a = Window(Rect(1, 1, 20, 10), parent=app)
b = Window(Rect(30, 1, 50, 10), parent=app)
assert set_next_focus(a) is b
```

Use `Window.append`, `remove` and `refocus` to keep the child order. The
last child is the one on top. You can also ask a window about itself:

- `is_ancestor(other)` tells whether `other` is the window or one of its
  ancestors.
- `is_visible()` tells whether neither the window nor any ancestor is
  hidden.
- `get_ancestor()` returns the oldest ancestor below the application
  window.
- `inside(x, y)` tests a point against the window's rectangle, clipped to
  the client areas of its parents.

`set_next_focus` and `set_prev_focus` return the window that should take
the focus next, or `None`. They skip status bars, and `set_next_focus`
also skips menu bars.

## What this package does not do

It does not draw anything on a terminal or read the keyboard or mouse.
There are no screens, menus, dialog boxes or message dispatch loop. The
queues and window tree are data structures that a front end would drive.
Help text can be compressed and a help file's index can be read, but the
package does not decompress help text or write the index into a help file.

## Running the tests

```
pip install .[test]
pytest
```