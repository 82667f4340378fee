"""
Test cases and the process-wide registry that collects them.

Tests register themselves while their declaring modules are imported, so the
registry has to exist before the first declaration runs, regardless of which
module is imported first.  Its storage is owned by a ``RegistryLifetime``:
the first live ``RegistryGuard`` creates it, the last one to be released
drops it.  ``unitharness.declare`` holds the one process-wide guard and never
releases it, so the storage lives until the interpreter exits; other guards
are taken only by code that manages a private ``RegistryLifetime``.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Iterator

from unitharness.naming import format_name, validate_names
from unitharness.utils.exceptions import RegistryNotAliveError


@dataclass(eq=False)
class TestCase:
    suite_name: str
    test_name: str
    body: Callable[[], None]

    def __post_init__(self) -> None:
        validate_names(self.suite_name, self.test_name)

    @property
    def external_name(self) -> str:
        return format_name(self.suite_name, self.test_name)

    def matches(self, suite: str, name: str) -> bool:
        return self.suite_name == suite and self.test_name == name

    def __call__(self) -> None:
        self.body()


# pytest would otherwise try to collect TestCase as a test class.
TestCase.__test__ = False


class Registry:
    """Ordered collection of every registered test case."""

    def __init__(self) -> None:
        self._tests: list[TestCase] = []

    def register(self, test_case: TestCase) -> TestCase:
        # Duplicate names are accepted; lookup takes the first one.
        self._tests.append(test_case)
        return test_case

    def all(self) -> tuple[TestCase, ...]:
        return tuple(self._tests)

    def clear(self) -> None:
        self._tests.clear()

    def __len__(self) -> int:
        return len(self._tests)

    def __iter__(self) -> Iterator[TestCase]:
        return iter(self.all())


class RegistryLifetime:
    """Reference-counted owner of one registry's storage."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._count = 0
        self._registry: Registry | None = None
        self.constructions = 0
        self.destructions = 0

    @property
    def alive(self) -> bool:
        return self._registry is not None

    @property
    def guard_count(self) -> int:
        return self._count

    @property
    def registry(self) -> Registry:
        registry = self._registry
        if registry is None:
            raise RegistryNotAliveError()
        return registry

    def acquire(self) -> Registry:
        with self._lock:
            if self._count == 0:
                self._registry = Registry()
                self.constructions += 1
            self._count += 1
            return self._registry

    def release(self) -> None:
        with self._lock:
            if self._count == 0:
                return
            self._count -= 1
            if self._count == 0:
                self._registry.clear()
                self._registry = None
                self.destructions += 1


class RegistryGuard:
    """Holds one acquisition of a ``RegistryLifetime`` until released."""

    def __init__(self, lifetime: RegistryLifetime | None = None) -> None:
        self._lifetime = lifetime if lifetime is not None else _LIFETIME
        self.registry = self._lifetime.acquire()
        self._released = False

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        self._lifetime.release()

    def __enter__(self) -> Registry:
        return self.registry

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


_LIFETIME = RegistryLifetime()


def get_registry() -> Registry:
    """Return the process-wide registry. A guard must be alive."""
    return _LIFETIME.registry
