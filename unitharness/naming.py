"""
External test names.

A test inside a suite is addressed as ``Suite-Name``; a test without a suite
is addressed by its bare name.  Lookup splits at the first separator, so
neither part may contain one.
"""
from __future__ import annotations

from unitharness.utils.exceptions import InvalidTestNameError

SEPARATOR = "-"


def format_name(suite: str, name: str) -> str:
    if not suite:
        return name
    return f"{suite}{SEPARATOR}{name}"


def parse_name(external_name: str) -> tuple[str, str]:
    """Split an external name into ``(suite, name)`` at the first separator."""
    suite, sep, name = external_name.partition(SEPARATOR)
    if not sep:
        return "", external_name
    return suite, name


def validate_names(suite: str, name: str) -> None:
    if not name:
        raise InvalidTestNameError(suite, name, "test name must not be empty")
    if SEPARATOR in suite:
        raise InvalidTestNameError(
            suite, name, f"suite name must not contain {SEPARATOR!r}"
        )
    if SEPARATOR in name:
        raise InvalidTestNameError(
            suite, name, f"test name must not contain {SEPARATOR!r}"
        )
