from __future__ import annotations

from typing import TextIO

import click


class FailureSink:
    """
    Pass/fail signal shared by the checks and the runner.

    Checks call ``report`` when a condition is false; the runner calls
    ``reset`` right before a test body and ``is_failed`` right after it.
    Diagnostics go to stderr unless another stream is given.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.failed = False

    def reset(self) -> None:
        self.failed = False

    def report(self, condition_text: str, file: str, line: int) -> None:
        message = f"Failed {condition_text} {file}:{line} [UnitTest]"
        if self._stream is None:
            click.echo(message, err=True)
        else:
            click.echo(message, file=self._stream)
        self.failed = True

    def is_failed(self) -> bool:
        return self.failed


_sink: FailureSink | None = None


def get_sink() -> FailureSink:
    global _sink
    if _sink is None:
        _sink = FailureSink()
    return _sink
