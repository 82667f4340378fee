"""
The three execution modes: list, run-all and run-one.

Every mode walks the registry in registration order.  Around each body the
failure sink is reset, the body is called, and the sink is read; nothing else
may happen in between.  Exceptions raised by a body are not caught.
"""
from __future__ import annotations

import os

import click
from termcolor import colored

from unitharness.config import get_settings
from unitharness.failure_sink import FailureSink, get_sink
from unitharness.naming import parse_name
from unitharness.registry import Registry, TestCase, get_registry
from unitharness.result import RunReport, TestOutcome, write_report
from unitharness.utils.log import log

HARNESS_FILE = os.path.basename(__file__)


class Runner:
    def __init__(
        self,
        registry: Registry | None = None,
        sink: FailureSink | None = None,
        color: bool | None = None,
        report_path: str | None = None,
    ) -> None:
        settings = get_settings()
        self.registry = registry if registry is not None else get_registry()
        self.sink = sink if sink is not None else get_sink()
        self.color = settings.color if color is None else color
        self.report_path = settings.report_path if report_path is None else report_path
        self.last_report: RunReport | None = None

    def _invoke(self, test_case: TestCase) -> bool:
        """Run one body and return True if any check failed."""
        self.sink.reset()
        test_case()
        return self.sink.is_failed()

    def _banner(self, failed: bool) -> str:
        text = "[Failed]" if failed else "[Passed]"
        if self.color:
            return colored(text, "red" if failed else "green", attrs=["bold"])
        return text

    def list_all(self) -> int:
        for test_case in self.registry.all():
            click.echo(test_case.external_name)
        return 0

    def run_all(self) -> int:
        tests = self.registry.all()
        log(f"[unitharness] run-all: {len(tests)} test(s)")

        report = RunReport()
        any_failed = False
        for test_case in tests:
            name = test_case.external_name
            click.echo(f"{name}: ", nl=False)
            failed = self._invoke(test_case)
            click.echo(self._banner(failed))
            any_failed |= failed

            report.add(
                TestOutcome(
                    external_name=name,
                    suite_name=test_case.suite_name,
                    test_name=test_case.test_name,
                    passed=not failed,
                )
            )
            log(f"[unitharness] {name}: {'failed' if failed else 'passed'}")

        self.last_report = report
        if self.report_path:
            write_report(report, self.report_path)
        return 1 if any_failed else 0

    def find(self, external_name: str) -> TestCase | None:
        suite, name = parse_name(external_name)
        for test_case in self.registry.all():
            if test_case.matches(suite, name):
                return test_case
        return None

    def run_one(self, external_name: str) -> int:
        test_case = self.find(external_name)
        if test_case is None:
            click.echo(
                f'Unknown test "{external_name}" for file {HARNESS_FILE}', err=True
            )
            log(f"[unitharness] unknown test {external_name!r}")
            return 1

        log(f"[unitharness] run-one: {external_name}")
        failed = self._invoke(test_case)
        log(f"[unitharness] {external_name}: {'failed' if failed else 'passed'}")
        return 1 if failed else 0
