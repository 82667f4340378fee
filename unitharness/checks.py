"""
Checks callable from inside a test body.

``check`` is the only primitive: when its condition is false it reports the
condition text and the caller's file and line to the failure sink, and the
body keeps running.  Every other check computes a boolean and hands it to
the same reporting path exactly once.

Without an explicit message, the condition text is the source of the call
expression as written at the call site, e.g. ``check(5 - 3 == 1)``.
"""
from __future__ import annotations

import ast
import inspect
import linecache
import os
from types import FrameType
from typing import Any, Optional, Sequence

from unitharness.failure_sink import get_sink


def _call_end(frame: FrameType) -> Optional[tuple[int, int]]:
    """End line and column of the instruction the frame is executing."""
    positions = list(frame.f_code.co_positions())
    index = frame.f_lasti // 2
    if index >= len(positions):
        return None
    _, end_line, _, end_col = positions[index]
    if end_line is None or end_col is None:
        return None
    return end_line, end_col


def _source_text(frame: FrameType) -> Optional[str]:
    # The start of a method call spanning lines is moved to the attribute,
    # so only the end position identifies the call node.
    end = _call_end(frame)
    if end is None:
        return None
    source = "".join(
        linecache.getlines(frame.f_code.co_filename, frame.f_globals)
    )
    if not source:
        return None
    try:
        tree = ast.parse(source)
    except SyntaxError:
        return None
    for node in ast.walk(tree):
        if (
            isinstance(node, ast.Call)
            and (node.end_lineno, node.end_col_offset) == end
        ):
            if node.lineno != node.end_lineno:
                return ast.unparse(node)
            return ast.get_source_segment(source, node)
    return None


def _render_call(func_name: str, args: Sequence[Any]) -> str:
    return f"{func_name}({', '.join(repr(a) for a in args)})"


def _record(
    passed: bool,
    frame: FrameType,
    func_name: str,
    args: Sequence[Any],
    message: Optional[str] = None,
) -> bool:
    if passed:
        return True
    if message is None:
        message = _source_text(frame) or _render_call(func_name, args)
    get_sink().report(
        message, os.path.basename(frame.f_code.co_filename), frame.f_lineno
    )
    return False


def check(condition: Any, message: Optional[str] = None) -> bool:
    return _record(
        bool(condition), inspect.currentframe().f_back, "check", (condition,), message
    )


def check_equal(expected: Any, actual: Any) -> bool:
    return _record(
        bool(expected == actual),
        inspect.currentframe().f_back,
        "check_equal",
        (expected, actual),
    )


def check_array_equal(x: Sequence[Any], y: Sequence[Any], size: int) -> bool:
    # Every element is compared, even after a mismatch.
    equal = True
    for i in range(size):
        equal &= bool(x[i] == y[i])
    return _record(
        equal, inspect.currentframe().f_back, "check_array_equal", (x, y, size)
    )


def check_array2d_equal(
    x: Sequence[Sequence[Any]],
    y: Sequence[Sequence[Any]],
    size_x: int,
    size_y: int,
) -> bool:
    equal = True
    for i in range(size_x):
        for j in range(size_y):
            equal &= bool(x[i][j] == y[i][j])
    return _record(
        equal,
        inspect.currentframe().f_back,
        "check_array2d_equal",
        (x, y, size_x, size_y),
    )


def check_close(x: Any, y: Any, tolerance: Any) -> bool:
    return _record(
        bool(abs(x - y) < tolerance),
        inspect.currentframe().f_back,
        "check_close",
        (x, y, tolerance),
    )


def check_array_close(
    x: Sequence[Any], y: Sequence[Any], size: int, tolerance: Any
) -> bool:
    close = True
    for i in range(size):
        close &= bool(abs(x[i] - y[i]) < tolerance)
    return _record(
        close,
        inspect.currentframe().f_back,
        "check_array_close",
        (x, y, size, tolerance),
    )


def check_array2d_close(
    x: Sequence[Sequence[Any]],
    y: Sequence[Sequence[Any]],
    size_x: int,
    size_y: int,
    tolerance: Any,
) -> bool:
    close = True
    for i in range(size_x):
        for j in range(size_y):
            close &= bool(abs(x[i][j] - y[i][j]) < tolerance)
    return _record(
        close,
        inspect.currentframe().f_back,
        "check_array2d_close",
        (x, y, size_x, size_y, tolerance),
    )
