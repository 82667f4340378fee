"""
One passing test and one failing test.

    python demo/scenario.py            # Add: [Passed] / Math-Sub: [Failed], exit 1
    python demo/scenario.py --list     # Add / Math-Sub
    python demo/scenario.py Math-Sub   # one diagnostic line on stderr, exit 1
    python demo/scenario.py Add        # silent, exit 0
"""
from __future__ import annotations

import os
import sys

# Ensure repo root is on sys.path so the script runs from a checkout.
_REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from unitharness import check, suite, test, test_main  # noqa: E402


@test
def Add():
    check(1 + 1 == 2)


with suite("Math"):
    @test
    def Sub():
        check(5 - 3 == 1)


if __name__ == "__main__":
    test_main()
