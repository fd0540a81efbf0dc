"""Whitespace tokenization aware of backslash-escaped whitespace."""

from __future__ import annotations

from termtext.escaping import WHITESPACE, is_space


def tokenize(s: str) -> list[str]:
    """Split ``s`` by whitespace, keeping escaped whitespace in tokens.

    Escape backslashes are kept verbatim; use ``unescape`` to remove them.
    Every backslash marks the next character as literal, including another
    backslash's successor, so ``a\\\\ b`` stays one token. Every unescaped
    whitespace character closes a token, so consecutive separators yield
    empty tokens, and the last token is always appended.

    Examples:
        tokenize("a\\ b c")  # Returns ["a\\ b", "c"]
        tokenize("a  b")     # Returns ["a", "", "b"]
        tokenize("")         # Returns [""]
    """
    esc = False
    buf: list[str] = []
    toks: list[str] = []
    for ch in s:
        if ch == "\\":
            esc = True
            buf.append(ch)
            continue
        if esc:
            esc = False
            buf.append(ch)
            continue
        if is_space(ch):
            toks.append("".join(buf))
            buf = []
        else:
            buf.append(ch)
    toks.append("".join(buf))
    return toks


def split_word(s: str) -> tuple[str, str]:
    """Split the first whitespace-delimited word of ``s`` from the rest.

    Leading whitespace of both the word and the rest is trimmed. Used to
    consume a string one token at a time without touching the remainder.

    Example:
        split_word("  map  j down")  # Returns ("map", "j down")
    """
    s = s.lstrip(WHITESPACE)
    ind = len(s)
    for i, ch in enumerate(s):
        if is_space(ch):
            ind = i
            break
    return s[:ind], s[ind:].lstrip(WHITESPACE)
