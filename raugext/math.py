"""Single-precision math operations on signal values."""

from __future__ import annotations

import math
from typing import Callable, TypeVar

import numpy as np

__all__ = [
    "powf", "powi", "sqrt", "cbrt", "exp", "exp2", "ln", "log", "log2",
    "log10", "sin", "cos", "tan", "asin", "acos", "atan", "atan2", "hypot",
    "sinh", "cosh", "tanh", "asinh", "acosh", "atanh", "abs_", "signum",
    "floor", "ceil", "round_", "trunc", "fract", "recip", "max_", "min_",
    "clamp", "lerp", "smooth_step",
]

_F32 = np.float32
T = TypeVar("T")


def _unary(fn: Callable, a: float) -> float:
    with np.errstate(all="ignore"):
        return float(fn(_F32(a)))


def _binary(fn: Callable, a: float, b: float) -> float:
    with np.errstate(all="ignore"):
        return float(fn(_F32(a), _F32(b)))


def _wrap_i32(n: int) -> int:
    return ((int(n) + 2**31) % 2**32) - 2**31


def powf(a: float, b: float) -> float:
    """Raise ``a`` to the floating-point power ``b``."""
    return _binary(np.power, a, b)


def powi(a: float, b: int) -> float:
    """Raise ``a`` to an integer power; the exponent wraps to 32 bits."""
    exponent = _wrap_i32(b)
    with np.errstate(all="ignore"):
        value = np.power(np.float64(_F32(a)), np.float64(exponent))
        return float(_F32(value))


def sqrt(a: float) -> float:
    """Square root; NaN for negative input."""
    return _unary(np.sqrt, a)


def cbrt(a: float) -> float:
    """Cube root."""
    return _unary(np.cbrt, a)


def exp(a: float) -> float:
    """Natural exponential."""
    return _unary(np.exp, a)


def exp2(a: float) -> float:
    """Two raised to ``a``."""
    return _unary(np.exp2, a)


def ln(a: float) -> float:
    """Natural logarithm."""
    return _unary(np.log, a)


def log(a: float, b: float) -> float:
    """Logarithm of ``a`` in base ``b``."""
    with np.errstate(all="ignore"):
        return float(np.log(_F32(a)) / np.log(_F32(b)))


def log2(a: float) -> float:
    """Base-2 logarithm."""
    return _unary(np.log2, a)


def log10(a: float) -> float:
    """Base-10 logarithm."""
    return _unary(np.log10, a)


def sin(a: float) -> float:
    """Sine."""
    return _unary(np.sin, a)


def cos(a: float) -> float:
    """Cosine."""
    return _unary(np.cos, a)


def tan(a: float) -> float:
    """Tangent."""
    return _unary(np.tan, a)


def asin(a: float) -> float:
    """Arcsine; NaN outside [-1, 1]."""
    return _unary(np.arcsin, a)


def acos(a: float) -> float:
    """Arccosine; NaN outside [-1, 1]."""
    return _unary(np.arccos, a)


def atan(a: float) -> float:
    """Arctangent."""
    return _unary(np.arctan, a)


def atan2(a: float, b: float) -> float:
    """Four-quadrant arctangent of ``a / b``."""
    return _binary(np.arctan2, a, b)


def hypot(a: float, b: float) -> float:
    """Length of the hypotenuse with legs ``a`` and ``b``."""
    return _binary(np.hypot, a, b)


def sinh(a: float) -> float:
    """Hyperbolic sine."""
    return _unary(np.sinh, a)


def cosh(a: float) -> float:
    """Hyperbolic cosine."""
    return _unary(np.cosh, a)


def tanh(a: float) -> float:
    """Hyperbolic tangent."""
    return _unary(np.tanh, a)


def asinh(a: float) -> float:
    """Inverse hyperbolic sine."""
    return _unary(np.arcsinh, a)


def acosh(a: float) -> float:
    """Inverse hyperbolic cosine."""
    return _unary(np.arccosh, a)


def atanh(a: float) -> float:
    """Inverse hyperbolic tangent."""
    return _unary(np.arctanh, a)


def abs_(a: float) -> float:
    """Absolute value."""
    return _unary(np.abs, a)


def signum(a: float) -> float:
    """1.0 for positive (including +0.0), -1.0 for negative (including -0.0)."""
    value = float(_F32(a))
    if math.isnan(value):
        return value
    return math.copysign(1.0, value)


def floor(a: float) -> float:
    """Largest integer not above ``a``."""
    return _unary(np.floor, a)


def ceil(a: float) -> float:
    """Smallest integer not below ``a``."""
    return _unary(np.ceil, a)


def round_(a: float) -> float:
    """Round to nearest integer, halves away from zero."""
    with np.errstate(all="ignore"):
        x = _F32(a)
        t = np.trunc(x)
        if abs(x - t) >= 0.5:
            t = t + _F32(math.copysign(1.0, float(x)))
        return float(t)


def trunc(a: float) -> float:
    """Integer part of ``a``."""
    return _unary(np.trunc, a)


def fract(a: float) -> float:
    """Fractional part of ``a``: ``a - trunc(a)``."""
    with np.errstate(all="ignore"):
        x = _F32(a)
        return float(x - np.trunc(x))


def recip(a: float) -> float:
    """Reciprocal ``1 / a``; infinite for zero."""
    with np.errstate(all="ignore"):
        return float(_F32(1.0) / _F32(a))


def max_(a: T, b: T) -> T:
    """The larger of ``a`` and ``b``; ``b`` when they are unordered."""
    return a if a > b else b


def min_(a: T, b: T) -> T:
    """The smaller of ``a`` and ``b``; ``b`` when they are unordered."""
    return a if a < b else b


def clamp(a: T, lo: T, hi: T) -> T:
    """Restrict ``a`` to the range ``[lo, hi]``."""
    if a < lo:
        return lo
    if a > hi:
        return hi
    return a


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from ``a`` to ``b`` by ``t``."""
    with np.errstate(all="ignore"):
        fa, fb, ft = _F32(a), _F32(b), _F32(t)
        return float(fa + (fb - fa) * ft)


def smooth_step(edge0: float, edge1: float, x: float) -> float:
    """Smoothed step between ``edge0`` and ``edge1``."""
    with np.errstate(all="ignore"):
        e0, e1, fx = _F32(edge0), _F32(edge1), _F32(x)
        t = (fx - e0) / (e1 - e0)
        clamped = clamp(t, _F32(0.0), _F32(1.0))
        poly = t * (t * _F32(6.0) - _F32(15.0)) + _F32(10.0)
        return float(np.power(clamped, _F32(3.0)) * poly)