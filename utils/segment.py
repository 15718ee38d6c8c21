# utils/segment.py
"""
Split text into comparison units.

- grapheme -> extended grapheme clusters (regex \\X), the default
- char     -> code points
- word     -> runs of word characters; whitespace/punctuation dropped

No normalization happens here: case, accents and width are compared as-is.
"""
from typing import Iterable, List, Tuple

import regex

UNITS = ("grapheme", "char", "word")

_GRAPHEME = regex.compile(r"\X")
_WORD = regex.compile(r"\w+")


def graphemes(text: str) -> List[str]:
    return _GRAPHEME.findall(text)


def segment_spans(text: str, unit: str = "grapheme") -> List[Tuple[int, int]]:
    """(start, end) character offsets of each unit of `text`."""
    if unit == "grapheme":
        return [m.span() for m in _GRAPHEME.finditer(text)]
    if unit == "char":
        return [(i, i + 1) for i in range(len(text))]
    if unit == "word":
        return [m.span() for m in _WORD.finditer(text)]
    raise ValueError(f"unknown unit {unit!r}, expected one of {', '.join(UNITS)}")


def to_char_spans(
    runs: Iterable[Tuple[int, int]], spans: List[Tuple[int, int]]
) -> List[Tuple[int, int]]:
    """Map (first_unit, n_units) runs to (char_start, char_len) over the source text."""
    out = []
    for start, size in runs:
        if size <= 0:
            continue
        s = spans[start][0]
        e = spans[start + size - 1][1]
        out.append((s, e - s))
    return out
