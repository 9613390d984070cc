"""Text-mode windowing toolkit pieces: CP437 text, Huffman help files, queues and window trees."""

__version__ = "0.1.0"

__all__ = [
    "cp437",
    "helpfile",
    "htree",
    "huffc",
    "messages",
    "windows",
]