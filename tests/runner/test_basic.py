"""
Tests for the three runner modes against private registries.
"""
from __future__ import annotations

import json
import os
import shutil
import sys
import tempfile

from tests.helpers import capture, check, get_failures
from unitharness import checks
from unitharness.registry import Registry, TestCase
from unitharness.runner import HARNESS_FILE, Runner


def _scenario_registry(calls: list | None = None) -> Registry:
    """Bare ``Add`` (passes) and ``Math-Sub`` (fails)."""
    calls = calls if calls is not None else []

    def add():
        calls.append("Add")
        checks.check(1 + 1 == 2)

    def sub():
        calls.append("Math-Sub")
        checks.check(5 - 3 == 1)

    registry = Registry()
    registry.register(TestCase("", "Add", add))
    registry.register(TestCase("Math", "Sub", sub))
    return registry


def _runner(registry: Registry, **kwargs) -> Runner:
    kwargs.setdefault("color", False)
    kwargs.setdefault("report_path", "")
    return Runner(registry=registry, **kwargs)


# ---------------------------------------------------------------------------
# List mode
# ---------------------------------------------------------------------------

def test_list_prints_names_in_order():
    calls: list = []
    rc, out, err = capture(_runner(_scenario_registry(calls)).list_all)
    check(out == "Add\nMath-Sub\n", "list: names in registration order", repr(out))
    check(rc == 0, "list: exit code 0")
    check(calls == [], "list: no body invoked", repr(calls))
    check(err == "", "list: nothing on stderr")


def test_list_keeps_duplicates():
    registry = Registry()
    registry.register(TestCase("S", "Dup", lambda: None))
    registry.register(TestCase("S", "Dup", lambda: None))
    _, out, _ = capture(_runner(registry).list_all)
    check(out == "S-Dup\nS-Dup\n", "list: duplicates listed once each", repr(out))


# ---------------------------------------------------------------------------
# Run-all mode
# ---------------------------------------------------------------------------

def test_run_all_scenario():
    rc, out, err = capture(_runner(_scenario_registry()).run_all)
    check(out == "Add: [Passed]\nMath-Sub: [Failed]\n", "run-all: per-test banners", repr(out))
    check(rc == 1, "run-all: exit 1 when any test failed", str(rc))
    lines = err.splitlines()
    check(len(lines) == 1, "run-all: one diagnostic line", repr(lines))
    check(
        lines and lines[0].startswith("Failed checks.check(5 - 3 == 1) test_basic.py:"),
        "run-all: diagnostic names the failing expression",
        repr(lines),
    )
    check(lines and lines[0].endswith(" [UnitTest]"), "run-all: diagnostic suffix")


def test_run_all_success():
    registry = Registry()
    registry.register(TestCase("", "Empty", lambda: None))
    registry.register(TestCase("S", "Ok", lambda: checks.check(True)))
    rc, out, _ = capture(_runner(registry).run_all)
    check(out == "Empty: [Passed]\nS-Ok: [Passed]\n", "run-all: bodies without failing checks pass", repr(out))
    check(rc == 0, "run-all: exit 0 when all pass")


def test_run_all_resets_between_tests():
    registry = Registry()
    registry.register(TestCase("", "First", lambda: checks.check(False)))
    registry.register(TestCase("", "Second", lambda: None))
    rc, out, _ = capture(_runner(registry).run_all)
    check(out == "First: [Failed]\nSecond: [Passed]\n", "run-all: failure does not leak into next test", repr(out))
    check(rc == 1, "run-all: aggregate still failed")


def test_run_all_runs_every_duplicate():
    calls: list = []
    registry = Registry()
    registry.register(TestCase("S", "Dup", lambda: calls.append(1)))
    registry.register(TestCase("S", "Dup", lambda: calls.append(2)))
    _, out, _ = capture(_runner(registry).run_all)
    check(calls == [1, 2], "run-all: every duplicate instance runs", repr(calls))
    check(out.count("S-Dup: [Passed]") == 2, "run-all: each duplicate reported")


def test_run_all_empty_registry():
    rc, out, err = capture(_runner(Registry()).run_all)
    check(rc == 0 and out == "" and err == "", "run-all: empty registry succeeds silently")


def test_run_all_does_not_catch_body_exceptions():
    registry = Registry()

    def boom():
        raise RuntimeError("crash")

    registry.register(TestCase("", "Boom", boom))
    raised = False
    try:
        capture(_runner(registry).run_all)
    except RuntimeError:
        raised = True
    check(raised, "run-all: exceptions from a body propagate")


def test_run_all_report():
    runner = _runner(_scenario_registry())
    capture(runner.run_all)
    report = runner.last_report
    check(report is not None and report.total == 2, "report: two outcomes recorded")
    check(report.passed == 1 and report.failed == 1, "report: counts", repr(report.to_dict()))
    names = [o.external_name for o in report.outcomes]
    check(names == ["Add", "Math-Sub"], "report: run order kept", repr(names))


def test_run_all_writes_report_file():
    tmp_dir = tempfile.mkdtemp(prefix="unitharness_report_")
    try:
        path = os.path.join(tmp_dir, "out", "results.json")
        capture(_runner(_scenario_registry(), report_path=path).run_all)
        check(os.path.exists(path), "report file: written")
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
        check(payload["total"] == 2 and payload["failed"] == 1, "report file: counts", repr(payload))
        check(payload["success"] is False, "report file: success flag")
        check("timestamp" in payload, "report file: timestamp present")
        check(payload["results"][1]["suite"] == "Math", "report file: suite recorded")
    finally:
        shutil.rmtree(tmp_dir, ignore_errors=True)


def test_run_all_color_keeps_banner_text():
    rc, out, _ = capture(_runner(_scenario_registry(), color=True).run_all)
    check("Passed" in out and "Failed" in out, "color: banner text still present", repr(out))
    check(rc == 1, "color: exit code unchanged")


# ---------------------------------------------------------------------------
# Run-one mode
# ---------------------------------------------------------------------------

def test_run_one_pass_is_silent():
    rc, out, err = capture(_runner(_scenario_registry()).run_one, "Add")
    check(rc == 0, "run-one: passing test exits 0")
    check(out == "" and err == "", "run-one: no banner, no diagnostics", repr((out, err)))


def test_run_one_failure():
    calls: list = []
    rc, out, err = capture(_runner(_scenario_registry(calls)).run_one, "Math-Sub")
    check(rc == 1, "run-one: failing test exits 1")
    check(out == "", "run-one: nothing on stdout", repr(out))
    check(len(err.splitlines()) == 1, "run-one: one diagnostic line", repr(err))
    check(calls == ["Math-Sub"], "run-one: only the named test runs", repr(calls))


def test_run_one_unknown():
    rc, out, err = capture(_runner(_scenario_registry()).run_one, "Suite-DoesNotExist")
    expected = f'Unknown test "Suite-DoesNotExist" for file {HARNESS_FILE}\n'
    check(rc == 1, "run-one unknown: exit 1")
    check(err == expected, "run-one unknown: message", repr(err))
    check(out == "", "run-one unknown: nothing on stdout")
    check(HARNESS_FILE == "runner.py", "run-one unknown: harness file is the runner module")


def test_run_one_bare_name_needs_empty_suite():
    calls: list = []
    registry = Registry()
    registry.register(TestCase("Math", "Sub", lambda: calls.append("suite")))
    registry.register(TestCase("", "Sub", lambda: calls.append("bare")))
    capture(_runner(registry).run_one, "Sub")
    check(calls == ["bare"], "run-one: bare name only matches tests without suite", repr(calls))

    rc, _, _ = capture(_runner(registry).run_one, "Mat-Sub")
    check(rc == 1, "run-one: suite must match exactly")


def test_run_one_first_match_wins():
    calls: list = []
    registry = Registry()
    registry.register(TestCase("S", "Dup", lambda: calls.append(1)))
    registry.register(TestCase("S", "Dup", lambda: calls.append(2)))
    capture(_runner(registry).run_one, "S-Dup")
    check(calls == [1], "run-one: first duplicate wins", repr(calls))


def test_run_one_resets_stale_failure():
    registry = Registry()
    registry.register(TestCase("", "Ok", lambda: None))
    runner = _runner(registry)
    runner.sink.failed = True
    rc, _, _ = capture(runner.run_one, "Ok")
    check(rc == 0, "run-one: sink reset before the body runs")


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

def run() -> list[str]:
    print("=== test_basic.py (runner) ===")

    test_list_prints_names_in_order()
    test_list_keeps_duplicates()
    test_run_all_scenario()
    test_run_all_success()
    test_run_all_resets_between_tests()
    test_run_all_runs_every_duplicate()
    test_run_all_empty_registry()
    test_run_all_does_not_catch_body_exceptions()
    test_run_all_report()
    test_run_all_writes_report_file()
    test_run_all_color_keeps_banner_text()
    test_run_one_pass_is_silent()
    test_run_one_failure()
    test_run_one_unknown()
    test_run_one_bare_name_needs_empty_suite()
    test_run_one_first_match_wins()
    test_run_one_resets_stale_failure()

    return get_failures()


if __name__ == "__main__":
    failures = run()
    if failures:
        print(f"\n{len(failures)} test(s) FAILED: {failures}")
        sys.exit(1)
    else:
        print("\nAll tests passed.")
