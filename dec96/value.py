"""A signed 96-bit decimal value with a power-of-ten scale."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

WORD_BITS = 32
WORD_MASK = 0xFFFFFFFF
MAX_SCALE = 28
MAX_MANTISSA = (1 << 96) - 1

SCALE_SHIFT = 16
MASK_SCALE = 0x00FF0000
MASK_SIGN = 0x80000000


class Sign(IntEnum):
    """Sign of a decimal value as stored in its top bit."""

    PLUS = 0
    MINUS = 1


class DecimalOverflowError(ArithmeticError):
    """A result does not fit into 96 bits of mantissa."""

    code = 0


class PositiveOverflowError(DecimalOverflowError):
    """A result is too large or equal to positive infinity."""

    code = 1


class NegativeOverflowError(DecimalOverflowError):
    """A result is too small or equal to negative infinity."""

    code = 2


@dataclass(frozen=True)
class Decimal96:
    """An unsigned 96-bit mantissa, a scale of 0..28 and a sign.

    The value is ``(-1) ** sign * mantissa / 10 ** scale``. A negative
    zero keeps its sign, as the four-word layout allows.
    """

    mantissa: int = 0
    scale: int = 0
    sign: Sign = Sign.PLUS

    def __post_init__(self) -> None:
        if not 0 <= self.mantissa <= MAX_MANTISSA:
            raise ValueError(f"mantissa out of 96-bit range: {self.mantissa}")
        if not 0 <= self.scale <= MAX_SCALE:
            raise ValueError(f"scale must be within 0..{MAX_SCALE}: {self.scale}")
        object.__setattr__(self, "sign", Sign(self.sign))

    @classmethod
    def from_bits(cls, bits: Iterable[int]) -> "Decimal96":
        """Build a value from four 32-bit words: low, mid, high, flags."""
        words = tuple(bits)
        if len(words) != 4:
            raise ValueError(f"expected 4 words, got {len(words)}")
        for word in words:
            if not 0 <= word <= WORD_MASK:
                raise ValueError(f"word out of 32-bit range: {word}")
        low, mid, high, flags = words
        mantissa = low | (mid << WORD_BITS) | (high << 2 * WORD_BITS)
        scale = (flags & MASK_SCALE) >> SCALE_SHIFT
        sign = Sign.MINUS if flags & MASK_SIGN else Sign.PLUS
        return cls(mantissa, scale, sign)

    def to_bits(self) -> tuple[int, int, int, int]:
        """Return the four 32-bit words: low, mid, high, flags."""
        flags = (self.scale << SCALE_SHIFT) | (MASK_SIGN if self.sign else 0)
        return (
            self.mantissa & WORD_MASK,
            (self.mantissa >> WORD_BITS) & WORD_MASK,
            (self.mantissa >> 2 * WORD_BITS) & WORD_MASK,
            flags,
        )

    @classmethod
    def from_int(cls, value: int) -> "Decimal96":
        """Build a value with scale 0 from an integer."""
        if value > MAX_MANTISSA:
            raise PositiveOverflowError(f"{value} does not fit in 96 bits")
        if value < -MAX_MANTISSA:
            raise NegativeOverflowError(f"{value} does not fit in 96 bits")
        return cls(abs(value), 0, Sign.MINUS if value < 0 else Sign.PLUS)

    def to_int(self) -> int:
        """Return the integer part, dropping the fraction toward zero."""
        whole = self.mantissa // 10**self.scale
        return -whole if self.sign is Sign.MINUS else whole

    def is_zero(self) -> bool:
        """True when the mantissa is zero, whatever the sign and scale."""
        return self.mantissa == 0

    def negate(self) -> "Decimal96":
        """Return the value with its sign flipped."""
        flipped = Sign.PLUS if self.sign is Sign.MINUS else Sign.MINUS
        return Decimal96(self.mantissa, self.scale, flipped)

    def truncate(self) -> "Decimal96":
        """Drop the fractional digits, keeping the sign, scale becomes 0."""
        return Decimal96(self.mantissa // 10**self.scale, 0, self.sign)

    def __str__(self) -> str:
        digits = str(self.mantissa).rjust(self.scale + 1, "0")
        if self.scale:
            digits = f"{digits[:-self.scale]}.{digits[-self.scale:]}"
        return f"-{digits}" if self.sign is Sign.MINUS else digits