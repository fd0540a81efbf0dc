"""Terminal display width of text, and slicing by column position.

A string is treated as a sequence of terminal cells rather than characters:
combining and zero-width characters take 0 columns, most Latin text takes 1,
and East Asian wide forms take 2. Column positions therefore do not map
linearly onto string indices.

Usage:
    from termtext.width import rune_slice_width, rune_slice_width_range

    rune_slice_width("日本ab")             # Returns 6
    rune_slice_width_range("日本ab", 2, 5)  # Returns "本a"
"""

from __future__ import annotations

from wcwidth import wcwidth


def rune_width(ch: str) -> int:
    """Columns taken by a single character (0, 1 or 2).

    Non-printable characters (wcwidth -1) take no space.
    """
    w = wcwidth(ch)
    return w if w > 0 else 0


def rune_slice_width(rs: str) -> int:
    """Total number of columns taken by ``rs``."""
    return sum(rune_width(ch) for ch in rs)


def rune_slice_width_range(rs: str, beg: int, end: int) -> str:
    """Return the part of ``rs`` covering columns ``[beg, end)``.

    The result starts at the first character whose starting column is at
    least ``beg``. It stops before the character starting at column ``end``
    or before a wide character that would cross ``end``; such a character is
    left out whole rather than split.
    """
    if beg == end:
        return ""

    curr = 0
    b = 0
    found_b = False
    for i, ch in enumerate(rs):
        w = rune_width(ch)
        if curr >= beg and not found_b:
            b = i
            found_b = True
        if curr == end or curr + w > end:
            return rs[b:i] if found_b else ""
        curr += w

    if not found_b:
        return ""
    return rs[b:]


def rune_slice_width_last_range(rs: str, max_width: int) -> str:
    """Return the longest suffix of ``rs`` that fits in ``max_width`` columns."""
    last_width = 0
    for i in range(len(rs) - 1, -1, -1):
        w = rune_width(rs[i])
        if last_width + w > max_width:
            return rs[i + 1:]
        last_width += w
    return rs
