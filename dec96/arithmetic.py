"""Arithmetic and comparison on 96-bit decimal values."""

from __future__ import annotations

from .value import (
    MAX_MANTISSA,
    MAX_SCALE,
    Decimal96,
    NegativeOverflowError,
    PositiveOverflowError,
    Sign,
)

_ONE = Decimal96(1)
_HALF = Decimal96(5, 1)


def _signed(value: Decimal96) -> int:
    return -value.mantissa if value.sign is Sign.MINUS else value.mantissa


def _aligned(a: Decimal96, b: Decimal96) -> tuple[int, int, int]:
    """Signed mantissas of both values brought to their common scale."""
    scale = max(a.scale, b.scale)
    return (
        _signed(a) * 10 ** (scale - a.scale),
        _signed(b) * 10 ** (scale - b.scale),
        scale,
    )


def _round_half_even(value: int, divisor: int) -> int:
    quotient, remainder = divmod(value, divisor)
    twice = 2 * remainder
    if twice > divisor or (twice == divisor and quotient & 1):
        quotient += 1
    return quotient


def _fit(magnitude: int, scale: int, sign: Sign) -> Decimal96:
    """Shrink the scale, rounding half to even, until the mantissa fits."""
    drop = max(0, scale - MAX_SCALE)
    while True:
        reduced = _round_half_even(magnitude, 10**drop)
        if reduced <= MAX_MANTISSA:
            return Decimal96(reduced, scale - drop, sign)
        if drop >= scale:
            if sign is Sign.MINUS:
                raise NegativeOverflowError("result is too small to represent")
            raise PositiveOverflowError("result is too large to represent")
        drop += 1


def add(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return a + b; raise an overflow error if it cannot be represented."""
    x, y, scale = _aligned(a, b)
    total = x + y
    both_negative = a.sign is Sign.MINUS and b.sign is Sign.MINUS
    if total < 0 or (total == 0 and both_negative):
        sign = Sign.MINUS
    else:
        sign = Sign.PLUS
    return _fit(abs(total), scale, sign)


def sub(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return a - b; a zero result is a plain positive zero of scale 0."""
    result = add(a, b.negate())
    return Decimal96() if result.is_zero() else result


def mul(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return a * b, both factors first brought to their common scale."""
    scale = max(a.scale, b.scale)
    x = a.mantissa * 10 ** (scale - a.scale)
    y = b.mantissa * 10 ** (scale - b.scale)
    sign = Sign.MINUS if a.sign is not b.sign else Sign.PLUS
    return _fit(x * y, 2 * scale, sign)


def round_decimal(value: Decimal96) -> Decimal96:
    """Round to the nearest integer, halves away from zero."""
    truncated = value.truncate()
    fraction = sub(value, truncated)
    if value.sign is Sign.MINUS:
        fraction = fraction.negate()
    if is_greater_or_equal(fraction, _HALF):
        if value.sign is Sign.MINUS:
            return sub(truncated, _ONE)
        return add(truncated, _ONE)
    return truncated


def _compare(a: Decimal96, b: Decimal96) -> int:
    x, y, _ = _aligned(a, b)
    return (x > y) - (x < y)


def is_less(a: Decimal96, b: Decimal96) -> bool:
    """True when a < b."""
    return _compare(a, b) < 0


def is_less_or_equal(a: Decimal96, b: Decimal96) -> bool:
    """True when a <= b."""
    return _compare(a, b) <= 0


def is_greater(a: Decimal96, b: Decimal96) -> bool:
    """True when a > b."""
    return _compare(a, b) > 0


def is_greater_or_equal(a: Decimal96, b: Decimal96) -> bool:
    """True when a >= b."""
    return _compare(a, b) >= 0


def is_equal(a: Decimal96, b: Decimal96) -> bool:
    """True when a and b have the same value; +0 equals -0."""
    return _compare(a, b) == 0


def is_not_equal(a: Decimal96, b: Decimal96) -> bool:
    """True when a and b differ in value."""
    return _compare(a, b) != 0