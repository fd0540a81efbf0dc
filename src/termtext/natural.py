"""Natural sort order: numbers inside strings compare by value.

'2' sorts before '10', 'foo2bar' before 'foo10bar', but 'bar2bar' still
sorts before 'foo10bar' because the first differing runs are not numeric.
"""

from __future__ import annotations

import functools

# Digit runs beyond a signed 64-bit value compare as plain text
_MAX_NUMERIC = 2**63 - 1
_MAX_DIGITS = len(str(_MAX_NUMERIC))


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def natural_less(s1: str, s2: str) -> bool:
    """Return True if ``s1`` sorts before ``s2`` in natural order."""
    hi1 = hi2 = 0
    n1, n2 = len(s1), len(s2)
    while True:
        if hi1 >= n1:
            return hi2 != n2
        if hi2 >= n2:
            return False

        is_digit1 = _is_digit(s1[hi1])
        is_digit2 = _is_digit(s2[hi2])

        lo1 = hi1
        while hi1 < n1 and _is_digit(s1[hi1]) == is_digit1:
            hi1 += 1

        lo2 = hi2
        while hi2 < n2 and _is_digit(s2[hi2]) == is_digit2:
            hi2 += 1

        run1 = s1[lo1:hi1]
        run2 = s2[lo2:hi2]
        if run1 == run2:
            continue

        if is_digit1 and is_digit2:
            num1 = _parse_run(run1)
            num2 = _parse_run(run2)
            if num1 is not None and num2 is not None:
                return num1 < num2

        return run1 < run2


def _parse_run(run: str) -> int | None:
    """Integer value of a digit run, or None if it overflows 64 bits."""
    significant = run.lstrip("0")
    if len(significant) > _MAX_DIGITS:
        return None
    value = int(significant or "0")
    if value > _MAX_NUMERIC:
        return None
    return value


def natural_compare(s1: str, s2: str) -> int:
    """Three-way form of ``natural_less`` (-1, 0 or 1)."""
    if natural_less(s1, s2):
        return -1
    if natural_less(s2, s1):
        return 1
    return 0


natural_key = functools.cmp_to_key(natural_compare)
"""Sort key for ``sorted(names, key=natural_key)``."""


class NaturalComparator:
    """Ordering strategy using natural order, independent of locale."""

    name = "natural"

    def less(self, a: str, b: str) -> bool:
        return natural_less(a, b)

    def sort(self, items: list[str]) -> list[str]:
        return sorted(items, key=natural_key)
