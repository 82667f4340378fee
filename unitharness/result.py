from __future__ import annotations

import datetime
import json
import os
from dataclasses import dataclass, field


@dataclass
class TestOutcome:
    external_name: str
    suite_name: str
    test_name: str
    passed: bool


@dataclass
class RunReport:
    outcomes: list[TestOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def passed(self) -> int:
        return sum(1 for o in self.outcomes if o.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def success(self) -> bool:
        return self.failed == 0

    def add(self, outcome: TestOutcome) -> None:
        self.outcomes.append(outcome)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "success": self.success,
            "results": [
                {
                    "name": o.external_name,
                    "suite": o.suite_name,
                    "test": o.test_name,
                    "passed": o.passed,
                }
                for o in self.outcomes
            ],
        }


# pytest would otherwise try to collect TestOutcome as a test class.
TestOutcome.__test__ = False


def write_report(report: RunReport, path: str) -> None:
    """Write the report as JSON, creating parent directories as needed."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    payload = {
        "timestamp": datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        **report.to_dict(),
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
