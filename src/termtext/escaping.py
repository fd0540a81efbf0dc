"""Backslash escaping of whitespace and config special characters."""

from __future__ import annotations

# Unicode White_Space characters. str.isspace() also accepts the \x1c-\x1f
# separators, which are not whitespace in config lines.
WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# Characters besides whitespace that carry meaning in config lines
SPECIAL_CHARS = frozenset("\\;#")


def is_space(ch: str) -> bool:
    return ch in WHITESPACE


def _needs_escape(ch: str) -> bool:
    return is_space(ch) or ch in SPECIAL_CHARS


def escape(s: str) -> str:
    """Escape whitespace and special characters with backslashes.

    Example:
        escape("my file;1")  # Returns "my\\ file\\;1"
    """
    buf = []
    for ch in s:
        if _needs_escape(ch):
            buf.append("\\")
        buf.append(ch)
    return "".join(buf)


def unescape(s: str) -> str:
    """Remove backslashes that escape whitespace and special characters.

    A backslash before any other character is kept, and a trailing lone
    backslash is emitted as is.
    """
    esc = False
    buf = []
    for ch in s:
        if esc:
            if not _needs_escape(ch):
                buf.append("\\")
            buf.append(ch)
            esc = False
            continue
        if ch == "\\":
            esc = True
            continue
        buf.append(ch)
    if esc:
        buf.append("\\")
    return "".join(buf)
