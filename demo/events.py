"""
Example test program: a tiny event/descriptor matcher and its tests.

    python demo/events.py
    Events-Constructor: [Passed]
    Events-DescriptorSpecificity: [Passed]
    Events-EventMatching: [Passed]
    Geometry-Rotation: [Passed]
    Geometry-Scale: [Passed]
"""
from __future__ import annotations

import math
import os
import sys
from dataclasses import dataclass, field

_REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from unitharness import (  # noqa: E402
    check,
    check_array2d_close,
    check_array_equal,
    check_close,
    check_equal,
    suite,
    test,
    test_fixture,
    test_main,
)


# ---------------------------------------------------------------------------
# Code under test
# ---------------------------------------------------------------------------

@dataclass
class Event:
    kind: str
    tags: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Descriptor:
    """Matches events of ``kind`` whose tags include every pair in ``tags``."""
    kind: str
    tags: tuple[tuple[str, str], ...] = ()

    @property
    def specificity(self) -> int:
        return len(self.tags)

    def matches(self, event: Event) -> bool:
        if self.kind != "*" and self.kind != event.kind:
            return False
        return all(event.tags.get(k) == v for k, v in self.tags)


def rotation(angle: float) -> list[list[float]]:
    c, s = math.cos(angle), math.sin(angle)
    return [[c, -s], [s, c]]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

class EventLog:
    def __init__(self) -> None:
        self.events = [
            Event("click", {"button": "left"}),
            Event("click", {"button": "right"}),
            Event("key", {"code": "Enter"}),
        ]

    def matching(self, descriptor: Descriptor) -> list[Event]:
        return [e for e in self.events if descriptor.matches(e)]

    def teardown(self) -> None:
        self.events.clear()


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

with suite("Events"):
    @test
    def Constructor():
        e = Event("click")
        check_equal("click", e.kind)
        check(not e.tags)

    @test
    def DescriptorSpecificity():
        general = Descriptor("click")
        specific = Descriptor("click", (("button", "left"),))
        check(specific.specificity > general.specificity)
        check_equal(0, Descriptor("*").specificity)

    @test_fixture(EventLog)
    def EventMatching(log):
        kinds = [e.kind for e in log.matching(Descriptor("click"))]
        check_array_equal(kinds, ["click", "click"], 2)
        check_equal(1, len(log.matching(Descriptor("click", (("button", "right"),)))))
        check_equal(3, len(log.matching(Descriptor("*"))))


with suite("Geometry"):
    @test
    def Rotation():
        check_array2d_close(rotation(math.pi / 2), [[0.0, -1.0], [1.0, 0.0]], 2, 2, 1e-12)

    @test
    def Scale():
        check_close(math.hypot(3.0, 4.0), 5.0, 1e-9)


if __name__ == "__main__":
    test_main()
