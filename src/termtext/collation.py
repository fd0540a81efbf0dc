"""Locale-aware ordering of names, as an alternative to natural order.

Locale values:
    ""    Locale ordering disabled (natural order is used instead)
    "*"   Read the locale from the process environment
    other A BCP 47 language tag such as "en-US" or "zh-Hant-TW"

Usage:
    from termtext.collation import make_comparator

    comparator = make_comparator(config.locale)
    names = comparator.sort(names)
"""

from __future__ import annotations

import locale
import logging
import os
import re
import threading
from collections.abc import Mapping
from typing import Protocol

from termtext.exceptions import LocaleError
from termtext.natural import NaturalComparator

logger = logging.getLogger(__name__)

LOCALE_DISABLE = ""  # disable locale ordering for this locale value
LOCALE_SYSTEM = "*"  # read the locale value from the environment

# language[-script][-region](-variant)*
_TAG_PATTERN = re.compile(
    r"^(?P<language>[A-Za-z]{2,3}|[A-Za-z]{5,8})"
    r"(?:-(?P<script>[A-Za-z]{4}))?"
    r"(?:-(?P<region>[A-Za-z]{2}|[0-9]{3}))?"
    r"(?P<variants>(?:-(?:[A-Za-z0-9]{5,8}|[0-9][A-Za-z0-9]{3}))*)$"
)

# Checked in order; LANGUAGE may hold a colon separated preference list
_LOCALE_ENV_VARS = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")

# setlocale() is process-wide
_LOCALE_LOCK = threading.Lock()


class Comparator(Protocol):
    """Ordering strategy: given two strings, say whether the first sorts first."""

    name: str

    def less(self, a: str, b: str) -> bool: ...

    def sort(self, items: list[str]) -> list[str]: ...


def parse_locale_tag(locale_str: str) -> str:
    """Validate a language tag and return it in canonical casing.

    Underscores are accepted as separators ("en_us" -> "en-US").

    Raises:
        LocaleError: If the value is not a well-formed language tag.
    """
    candidate = locale_str.strip().replace("_", "-")
    match = _TAG_PATTERN.match(candidate)
    if not match:
        raise LocaleError(f"invalid locale {locale_str!r}: not a well-formed language tag")

    parts = [match.group("language").lower()]
    if match.group("script"):
        parts.append(match.group("script").title())
    if match.group("region"):
        parts.append(match.group("region").upper())
    variants = match.group("variants")
    if variants:
        parts.extend(v.lower() for v in variants.split("-") if v)
    return "-".join(parts)


def _strip_posix_locale(value: str) -> str:
    """Reduce a POSIX locale name like "de_DE.UTF-8@euro" to "de_DE"."""
    value = value.split("@", 1)[0]
    return value.split(".", 1)[0]


def detect_locale(environ: Mapping[str, str] | None = None) -> str:
    """Read the user's locale from the environment as a language tag.

    Raises:
        LocaleError: If no usable locale is set, or only "C"/"POSIX".
    """
    env = os.environ if environ is None else environ
    for var in _LOCALE_ENV_VARS:
        value = env.get(var, "")
        if var == "LANGUAGE":
            value = value.split(":", 1)[0]
        value = _strip_posix_locale(value)
        if not value or value in ("C", "POSIX"):
            continue
        try:
            return parse_locale_tag(value)
        except LocaleError:
            logger.debug("Ignoring unparseable %s=%r", var, value)
    raise LocaleError("invalid locale '*': no locale found in environment")


def get_locale_tag(locale_str: str, environ: Mapping[str, str] | None = None) -> str:
    """Resolve a locale value to a language tag.

    Passing "*" reads the locale from the environment.
    """
    if locale_str == LOCALE_SYSTEM:
        return detect_locale(environ)
    return parse_locale_tag(locale_str)


def _posix_name(tag: str) -> str:
    """POSIX locale name for a language tag ("en-US" -> "en_US.UTF-8")."""
    parts = tag.split("-")
    language = parts[0]
    region = next((p for p in parts[1:] if len(p) == 2 and p.isupper()), None)
    name = f"{language}_{region}" if region else language
    return f"{name}.UTF-8"


class LocaleCollator:
    """Ordering strategy using the system collation rules for a locale.

    When the system has no such locale installed, strings are ordered by
    code point and a warning is logged.
    """

    def __init__(self, tag: str) -> None:
        self.tag = tag
        self.name = tag
        self.posix_name = _posix_name(tag)
        self.available = self._check_available()
        if not self.available:
            logger.warning(
                "Locale %s (%s) not available on this system, using code point order",
                tag,
                self.posix_name,
                extra={"locale": tag},
            )

    def _check_available(self) -> bool:
        with _LOCALE_LOCK:
            previous = locale.setlocale(locale.LC_COLLATE)
            try:
                locale.setlocale(locale.LC_COLLATE, self.posix_name)
            except locale.Error:
                return False
            finally:
                locale.setlocale(locale.LC_COLLATE, previous)
        return True

    def key(self, s: str) -> str:
        """Collation key for ``s``; usable with ``sorted(key=...)``."""
        if not self.available:
            return s
        with _LOCALE_LOCK:
            previous = locale.setlocale(locale.LC_COLLATE)
            try:
                locale.setlocale(locale.LC_COLLATE, self.posix_name)
                return locale.strxfrm(s)
            finally:
                locale.setlocale(locale.LC_COLLATE, previous)

    def less(self, a: str, b: str) -> bool:
        return self.key(a) < self.key(b)

    def sort(self, items: list[str]) -> list[str]:
        return sorted(items, key=self.key)

    def __repr__(self) -> str:
        return f"LocaleCollator({self.tag!r})"


def make_collator(locale_str: str, environ: Mapping[str, str] | None = None) -> LocaleCollator:
    """Create a collator for a locale value.

    Raises:
        LocaleError: If locale ordering is disabled ("") or the value is
            not a valid language tag.
    """
    if locale_str == LOCALE_DISABLE:
        raise LocaleError("locale suppose to be disabled with given string")
    return LocaleCollator(get_locale_tag(locale_str, environ))


def make_comparator(locale_str: str, environ: Mapping[str, str] | None = None) -> Comparator:
    """Pick the ordering strategy for a locale value.

    Disabled locale gives natural order; anything else a locale collator.
    """
    if locale_str == LOCALE_DISABLE:
        return NaturalComparator()
    return make_collator(locale_str, environ)
