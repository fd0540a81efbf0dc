"""
Exception Hierarchy for termtext

Exception Types:
    - TermTextError: Base exception for all termtext errors
    - MalformedRowError: A config line has the wrong number of fields
    - LocaleError: Invalid locale identifier or disabled locale requested
    - ConfigurationError: Invalid configuration value or config file

Usage:
    from termtext.exceptions import MalformedRowError

    try:
        rows = read_pairs(stream)
    except MalformedRowError as e:
        print(f"line {e.line_no}: {e}")
"""

from __future__ import annotations


class TermTextError(Exception):
    """Base exception for termtext.

    All custom exceptions inherit from this class, allowing callers to catch
    all termtext errors with a single except clause if desired.
    """

    pass


class MalformedRowError(TermTextError):
    """A line's field count falls outside the configured column bound.

    Carries the expected bound and the original line text (before comment
    stripping) so the message shows what the user actually wrote.
    """

    def __init__(self, min_cols: int, max_cols: int, line: str, line_no: int = 0) -> None:
        self.min_cols = min_cols
        self.max_cols = max_cols
        self.line = line
        self.line_no = line_no
        super().__init__(f"expected {self.expected} columns but found: {line}")

    @property
    def expected(self) -> str:
        """Expected column count, exact (``"2"``) or a range (``"1~3"``)."""
        if self.min_cols == self.max_cols:
            return str(self.min_cols)
        return f"{self.min_cols}~{self.max_cols}"


class LocaleError(TermTextError):
    """Locale identifier could not be used.

    Examples:
        - Malformed language tag
        - Collator requested for a disabled locale
    """

    pass


class ConfigurationError(TermTextError):
    """Configuration problem detected.

    Examples:
        - Invalid log level
        - Config file does not contain a mapping
    """

    pass
