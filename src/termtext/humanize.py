"""Human readable byte sizes with metric suffixes (1K = 1000)."""

from __future__ import annotations

SUFFIXES = ("K", "M", "G", "T", "P", "E", "Z", "Y")

# Pulls values like 9.96 down to 9.9 instead of rounding up to 10.0
_ROUND_DOWN_BIAS = 0.0499


def humanize(size: int) -> str:
    """Convert a size in bytes to a short human readable string.

    Values below 10 units show one decimal digit, larger ones none. Numbers
    are always rounded down.

    Examples:
        humanize(999)        # Returns "999B"
        humanize(1500)       # Returns "1.5K"
        humanize(123456789)  # Returns "123M"
    """
    if size < 1000:
        return f"{size}B"

    curr = size / 1000
    for suffix in SUFFIXES:
        if curr < 10:
            return f"{curr - _ROUND_DOWN_BIAS:.1f}{suffix}"
        if curr < 1000:
            return f"{int(curr)}{suffix}"
        curr /= 1000

    return ""
