from __future__ import annotations

from unitharness.checks import (
    check,
    check_array2d_close,
    check_array2d_equal,
    check_array_close,
    check_array_equal,
    check_close,
    check_equal,
)
from unitharness.cli_obj import cli, main, parse_arguments, test_main
from unitharness.declare import acquire_fixture, suite, test, test_fixture
from unitharness.failure_sink import FailureSink, get_sink
from unitharness.naming import SEPARATOR, format_name, parse_name
from unitharness.registry import (
    Registry,
    RegistryGuard,
    RegistryLifetime,
    TestCase,
    get_registry,
)
from unitharness.result import RunReport, TestOutcome
from unitharness.runner import Runner
from unitharness.utils.exceptions import (
    ArgumentError,
    InvalidTestNameError,
    RegistryNotAliveError,
    TooManyArgumentsError,
    UnrecognizedOptionError,
)

__all__ = [
    "check",
    "check_equal",
    "check_array_equal",
    "check_array2d_equal",
    "check_close",
    "check_array_close",
    "check_array2d_close",
    "cli",
    "main",
    "parse_arguments",
    "test_main",
    "acquire_fixture",
    "suite",
    "test",
    "test_fixture",
    "FailureSink",
    "get_sink",
    "SEPARATOR",
    "format_name",
    "parse_name",
    "Registry",
    "RegistryGuard",
    "RegistryLifetime",
    "TestCase",
    "get_registry",
    "RunReport",
    "TestOutcome",
    "Runner",
    "ArgumentError",
    "InvalidTestNameError",
    "RegistryNotAliveError",
    "TooManyArgumentsError",
    "UnrecognizedOptionError",
]
