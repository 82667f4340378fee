"""
Declaring tests.

    from unitharness import suite, test, test_fixture, check

    @test
    def Add():
        check(1 + 1 == 2)

    with suite("Math"):
        @test
        def Sub():
            check(5 - 3 == 2)

        @test_fixture(Numbers)
        def Sum(numbers):
            check(sum(numbers.values) == 6)

Decorating a function registers it right away, so the registry order is the
order in which declarations are executed.  The decorated function is returned
unchanged, with the registered ``TestCase`` attached as ``.test_case``.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

from unitharness.registry import Registry, RegistryGuard, TestCase, get_registry
from unitharness.utils.log import log

# Keeps the process-wide registry alive while declarations can happen.
_registry_guard = RegistryGuard()

_suite_stack: list[str] = []


@contextmanager
def suite(name: str) -> Iterator[str]:
    """Group the tests declared inside the ``with`` block under ``name``."""
    _suite_stack.append(name)
    try:
        yield name
    finally:
        _suite_stack.pop()


def current_suite() -> str:
    return _suite_stack[-1] if _suite_stack else ""


@contextmanager
def acquire_fixture(fixture: Callable[[], Any]) -> Iterator[Any]:
    """
    Build a fixture and release it when the block exits, however it exits.

    A fixture that is a context manager is entered and exited; otherwise its
    ``teardown()`` method is called, if it has one.
    """
    instance = fixture()
    if hasattr(instance, "__enter__") and hasattr(instance, "__exit__"):
        with instance as entered:
            yield instance if entered is None else entered
        return
    try:
        yield instance
    finally:
        teardown = getattr(instance, "teardown", None)
        if callable(teardown):
            teardown()


def _declare(
    func: Callable,
    name: Optional[str],
    suite_name: Optional[str],
    registry: Optional[Registry],
    body: Optional[Callable[[], None]] = None,
) -> Callable:
    test_case = TestCase(
        suite_name if suite_name is not None else current_suite(),
        name or func.__name__,
        body or func,
    )
    (registry if registry is not None else get_registry()).register(test_case)
    log(f"[unitharness] registered {test_case.external_name}")
    func.test_case = test_case
    return func


def test(
    name: Optional[str | Callable] = None,
    *,
    suite: Optional[str] = None,
    registry: Optional[Registry] = None,
):
    """Register a zero-argument test body. Usable bare or with arguments."""
    if callable(name):
        return _declare(name, None, suite, registry)

    def decorator(func: Callable[[], None]) -> Callable[[], None]:
        return _declare(func, name, suite, registry)

    return decorator


def test_fixture(
    fixture: Callable[[], Any],
    name: Optional[str] = None,
    *,
    suite: Optional[str] = None,
    registry: Optional[Registry] = None,
):
    """Register a test body that receives a fresh ``fixture()`` instance."""

    def decorator(func: Callable[[Any], None]) -> Callable[[Any], None]:
        def body() -> None:
            with acquire_fixture(fixture) as instance:
                func(instance)

        return _declare(func, name, suite, registry, body=body)

    return decorator


# Keep pytest from collecting the decorators themselves when imported into
# a test module.
test.__test__ = False
test_fixture.__test__ = False
