from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import NoReturn, Optional, Sequence

import click

from unitharness.config import load_env_file
from unitharness.runner import Runner
from unitharness.utils.exceptions import (
    ArgumentError,
    TooManyArgumentsError,
    UnrecognizedOptionError,
)
from unitharness.utils.log import log

LIST_OPTION = "--list"
RAW_ARGS_KEY = "unitharness.raw_args"

MODE_ALL = "all"
MODE_LIST = "list"
MODE_ONE = "one"


@dataclass(frozen=True)
class Invocation:
    mode: str
    name: Optional[str] = None


def parse_arguments(program: str, args: Sequence[str]) -> Invocation:
    """
    Map the argument vector (program name excluded) to a runner mode.

    Raises an ``ArgumentError`` for more than one argument or for an option
    other than ``--list``.
    """
    if len(args) > 1:
        raise TooManyArgumentsError(program)
    if not args:
        return Invocation(MODE_ALL)

    arg = args[0]
    if arg.startswith("-"):
        if arg == LIST_OPTION:
            return Invocation(MODE_LIST)
        raise UnrecognizedOptionError(program, arg)
    return Invocation(MODE_ONE, arg)


def dispatch(invocation: Invocation, runner: Runner) -> int:
    if invocation.mode == MODE_LIST:
        return runner.list_all()
    if invocation.mode == MODE_ONE:
        return runner.run_one(invocation.name)
    return runner.run_all()


def main(argv: Optional[Sequence[str]] = None, program: Optional[str] = None) -> int:
    """Parse ``argv``, run the selected mode and return the process exit code."""
    load_env_file()
    if argv is None:
        argv = sys.argv[1:]
    if program is None:
        program = sys.argv[0]

    try:
        invocation = parse_arguments(program, list(argv))
    except ArgumentError as e:
        click.echo(str(e), err=True)
        log(f"[unitharness] {e}")
        return 1

    return dispatch(invocation, Runner())


class RawArgsCommand(click.Command):
    """A command that also keeps the argument vector as it was given."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        # click's parser consumes "--"; the test program must still see it.
        ctx.meta[RAW_ARGS_KEY] = list(args)
        return super().parse_args(ctx, args)


@click.command(
    cls=RawArgsCommand,
    context_settings={"ignore_unknown_options": True, "help_option_names": []},
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, args: tuple[str, ...]):
    """
    Usage: PROGRAM [--list | TEST_NAME]

    Without arguments every registered test runs and a pass/fail line is
    printed for each.  With a test name (Suite-Name, or Name for tests
    outside a suite) only that test runs, silently.  --list prints the test
    names without running them.
    """
    ctx.exit(main(ctx.meta.get(RAW_ARGS_KEY, list(args)), ctx.find_root().info_name))


def test_main(argv: Optional[Sequence[str]] = None, program: Optional[str] = None) -> NoReturn:
    """Entry point for a test program: run the requested mode and exit."""
    cli.main(
        args=list(argv) if argv is not None else None,
        prog_name=program if program is not None else sys.argv[0],
    )
    # cli.main exits in standalone mode; this keeps the NoReturn contract.
    sys.exit(0)


test_main.__test__ = False
