"""Config line parser — quote-aware whitespace fields with comment stripping.

Each non-empty line of the stream becomes one row of fields. Single or double
quotes protect whitespace, ``#`` outside quotes starts a comment running to
the end of the line, and leading/trailing whitespace is trimmed.

Example:
    rows = read_pairs(io.StringIO("key1 value1\\nkey2 'value two'  # note\\n"))
    # Returns [["key1", "value1"], ["key2", "value two"]]
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable, Iterator

from termtext.escaping import WHITESPACE, is_space
from termtext.exceptions import MalformedRowError

logger = logging.getLogger(__name__)


def _iter_lines(stream: Iterable[str] | Iterable[bytes] | str | bytes) -> Iterator[str]:
    """Yield lines from ``stream`` with their terminators removed."""
    if isinstance(stream, str):
        stream = io.StringIO(stream)
    elif isinstance(stream, bytes):
        stream = io.BytesIO(stream)
    for line in stream:
        if isinstance(line, bytes):
            line = line.decode("utf-8", errors="replace")
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def strip_comment(line: str) -> str:
    """Cut ``line`` at the first ``#`` that is not inside quotes."""
    squote = dquote = False
    for i, ch in enumerate(line):
        if ch == "'" and not dquote:
            squote = not squote
        elif ch == '"' and not squote:
            dquote = not dquote
        if not squote and not dquote and ch == "#":
            return line[:i]
    return line


def split_fields(line: str) -> list[str]:
    """Split ``line`` on whitespace outside quotes.

    Quote characters are kept in the fields; runs of separators never
    produce empty fields.
    """
    squote = dquote = False
    fields: list[str] = []
    buf: list[str] = []
    for ch in line:
        if ch == "'" and not dquote:
            squote = not squote
        elif ch == '"' and not squote:
            dquote = not dquote
        if not squote and not dquote and is_space(ch):
            if buf:
                fields.append("".join(buf))
                buf = []
            continue
        buf.append(ch)
    if buf:
        fields.append("".join(buf))
    return fields


def strip_quotes(field: str) -> str:
    """Drop the quote characters of ``field`` that open or close a quote.

    A quote of the other kind inside an active quote is literal text.
    """
    squote = dquote = False
    buf = []
    for ch in field:
        if ch == "'" and not dquote:
            squote = not squote
            continue
        if ch == '"' and not squote:
            dquote = not dquote
            continue
        buf.append(ch)
    return "".join(buf)


def read_arrays(
    stream: Iterable[str] | Iterable[bytes] | str | bytes,
    min_cols: int,
    max_cols: int,
) -> list[list[str]]:
    """Read whitespace separated string arrays, one per line.

    Args:
        stream: Open file, in-memory buffer or any iterable of lines
            (``str``, or ``bytes`` decoded as UTF-8). Not closed here.
        min_cols: Minimum number of fields per line.
        max_cols: Maximum number of fields per line.

    Returns:
        One list of fields per non-empty, non-comment line.

    Raises:
        MalformedRowError: A line has fewer than ``min_cols`` or more than
            ``max_cols`` fields. Nothing is returned for earlier lines.
    """
    arrays: list[list[str]] = []
    for line_no, raw in enumerate(_iter_lines(stream), start=1):
        line = strip_comment(raw).strip(WHITESPACE)
        if not line:
            continue

        fields = split_fields(line)

        if len(fields) < min_cols or len(fields) > max_cols:
            logger.debug(
                "Line %d has %d fields, expected %d~%d",
                line_no, len(fields), min_cols, max_cols,
                extra={"line_no": line_no},
            )
            raise MalformedRowError(min_cols, max_cols, raw, line_no)

        arrays.append([strip_quotes(f) for f in fields])

    logger.debug("Parsed %d rows", len(arrays))
    return arrays


def read_pairs(stream: Iterable[str] | Iterable[bytes] | str | bytes) -> list[list[str]]:
    """Read key/value pairs: ``read_arrays`` with exactly two columns."""
    return read_arrays(stream, 2, 2)
