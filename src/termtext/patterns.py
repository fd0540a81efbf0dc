"""Regular expressions for key notation, ruler formats and word motion.

    RE_MOD_KEY    "<c-x>", "<s-down>", "<a-f>" modifier key notation
    RE_RULER_SUB  "%p", "%{lf_user_var}" ruler placeholders
    RE_WORD       a run of letters and digits
    RE_WORD_BEG   a word start (group 2 is its first character)
    RE_WORD_END   a word end (group 1 is its last character)
"""

from __future__ import annotations

import re

RE_MOD_KEY = re.compile(r"<(c|s|a)-(.+)>")
RE_RULER_SUB = re.compile(r"%[apmcsfithd]|%\{[^}]+\}")

# [^\W_] is a letter or a digit in any script
RE_WORD = re.compile(r"[^\W_]+")
RE_WORD_BEG = re.compile(r"([\W_]|^)([^\W_])")
RE_WORD_END = re.compile(r"([^\W_])([\W_]|$)")

MODIFIERS = {"c": "ctrl", "s": "shift", "a": "alt"}


def parse_mod_key(key: str) -> tuple[str, str] | None:
    """Split "<c-x>" style notation into (modifier, key).

    Returns None if ``key`` is not modifier notation.

    Example:
        parse_mod_key("<c-x>")  # Returns ("ctrl", "x")
    """
    match = RE_MOD_KEY.fullmatch(key)
    if not match:
        return None
    return MODIFIERS[match.group(1)], match.group(2)


def ruler_placeholders(fmt: str) -> list[str]:
    """Placeholders used in a ruler format string, in order."""
    return RE_RULER_SUB.findall(fmt)


def word_starts(s: str) -> list[int]:
    """Indices where a word begins in ``s``."""
    return [m.start(2) for m in RE_WORD_BEG.finditer(s)]


def word_ends(s: str) -> list[int]:
    """Indices just past the end of each word in ``s``."""
    return [m.end(1) for m in RE_WORD_END.finditer(s)]
