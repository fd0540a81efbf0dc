"""Text primitives for terminal config parsing and column layout."""

from __future__ import annotations

from .collation import LOCALE_DISABLE, LOCALE_SYSTEM, make_collator, make_comparator
from .escaping import escape, unescape
from .exceptions import ConfigurationError, LocaleError, MalformedRowError, TermTextError
from .humanize import humanize
from .natural import NaturalComparator, natural_key, natural_less
from .parsers.array_parser import read_arrays, read_pairs
from .paths import file_extension, is_root, replace_tilde
from .patterns import (
    RE_MOD_KEY,
    RE_RULER_SUB,
    RE_WORD,
    parse_mod_key,
    ruler_placeholders,
    word_ends,
    word_starts,
)
from .tokenizer import split_word, tokenize
from .width import (
    rune_slice_width,
    rune_slice_width_last_range,
    rune_slice_width_range,
    rune_width,
)

__version__ = "0.1.0"

__all__ = [
    # escaping / tokenizing
    "escape",
    "unescape",
    "tokenize",
    "split_word",
    # config lines
    "read_arrays",
    "read_pairs",
    # ordering
    "natural_less",
    "natural_key",
    "NaturalComparator",
    "make_collator",
    "make_comparator",
    "LOCALE_DISABLE",
    "LOCALE_SYSTEM",
    # display width
    "rune_width",
    "rune_slice_width",
    "rune_slice_width_range",
    "rune_slice_width_last_range",
    # formatting / paths
    "humanize",
    "file_extension",
    "is_root",
    "replace_tilde",
    # key, ruler and word patterns
    "RE_MOD_KEY",
    "RE_RULER_SUB",
    "RE_WORD",
    "parse_mod_key",
    "ruler_placeholders",
    "word_starts",
    "word_ends",
    # errors
    "TermTextError",
    "MalformedRowError",
    "LocaleError",
    "ConfigurationError",
]
