"""
Shared soft-check helper for the test modules.

Each module calls ``check`` for every expectation; failures are printed and
collected instead of raised so a module run as a script reports all of them.
Under pytest, ``tests/conftest.py`` turns any failure recorded during a test
into a test failure.
"""
from __future__ import annotations

import io
from contextlib import redirect_stderr, redirect_stdout
from typing import Any, Callable

PASS = "\033[32mPASS\033[0m"
FAIL = "\033[31mFAIL\033[0m"

_failures: list[str] = []


def check(condition: bool, test_name: str, detail: str = "") -> None:
    if condition:
        print(f"  {PASS}  {test_name}")
    else:
        msg = f"  {FAIL}  {test_name}"
        if detail:
            msg += f"\n       detail: {detail}"
        print(msg)
        _failures.append(test_name)


def get_failures() -> list[str]:
    return _failures


def capture(fn: Callable[..., Any], *args, **kwargs) -> tuple[Any, str, str]:
    """Call ``fn`` and return ``(result, stdout, stderr)``."""
    out = io.StringIO()
    err = io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        result = fn(*args, **kwargs)
    return result, out.getvalue(), err.getvalue()
