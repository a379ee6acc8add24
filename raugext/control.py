"""Conditional selection and comparison of signal values."""

from __future__ import annotations

from typing import Any, TypeVar

__all__ = ["cond", "gt", "lt", "ge", "le", "eq", "ne"]

T = TypeVar("T")


def cond(condition: bool, if_true: T, if_false: T) -> T:
    """Select ``if_true`` when ``condition`` holds, else ``if_false``."""
    return if_true if condition else if_false


def gt(a: Any, b: Any) -> bool:
    """``a > b``."""
    return bool(a > b)


def lt(a: Any, b: Any) -> bool:
    """``a < b``."""
    return bool(a < b)


def ge(a: Any, b: Any) -> bool:
    """``a >= b``."""
    return bool(a >= b)


def le(a: Any, b: Any) -> bool:
    """``a <= b``."""
    return bool(a <= b)


def eq(a: Any, b: Any) -> bool:
    """``a == b``."""
    return bool(a == b)


def ne(a: Any, b: Any) -> bool:
    """``a != b``."""
    return bool(a != b)