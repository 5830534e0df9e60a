# dec96

`dec96` provides `Decimal96`, an immutable decimal number made of a 96-bit
unsigned mantissa, a decimal scale from 0 to 28 and a sign. Its value is
`(-1) ** sign * mantissa / 10 ** scale`, so the largest magnitude it holds is
79228162514264337593543950335. It converts to and from the four-word layout:
three 32-bit words for the mantissa (low, mid, high) and a fourth word that
holds the scale in bits 16 to 23 and the sign in bit 31.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Building values

```python
from dec96.value import Decimal96, Sign

a = Decimal96.from_int(-1234)
b = Decimal96.from_bits([12345, 0, 0, 0x00040000])  # 1.2345
c = Decimal96(12345, 4, Sign.MINUS)                  # -1.2345

a.to_int()          # -1234
b.to_bits()         # (12345, 0, 0, 262144)
str(b)              # '1.2345'
str(b.truncate())   # '1', scale 0
str(b.negate())     # '-1.2345'
Decimal96.from_bits([0, 0, 0, 0x80000000]).is_zero()  # True
```

`to_int()` drops the fraction toward zero. A negative zero keeps its sign.
The constructor and `from_bits` raise `ValueError` for a mantissa outside
96 bits, a scale outside 0..28, or a word outside 32 bits.

## Arithmetic and comparison

```python
from dec96.arithmetic import (
    add, sub, mul, round_decimal,
    is_less, is_less_or_equal, is_greater,
    is_greater_or_equal, is_equal, is_not_equal,
)

x = Decimal96.from_bits([111, 0, 0, 0x00030000])  # 0.111
one = Decimal96.from_int(1)

add(x, one).to_bits()      # (1111, 0, 0, 196608), that is 1.111
str(sub(one, x))           # '0.889'
str(mul(x, one))           # '0.111000'
str(round_decimal(Decimal96.from_bits([25, 0, 0, 0x00010000])))  # '3'

is_less_or_equal(x, one)   # True
is_equal(Decimal96.from_bits([0, 0, 0, 0x80000000]), Decimal96.from_int(0))  # True
```

- `add` and `sub` work at the larger of the two scales. A zero result of
  `sub` is a plain positive zero with scale 0.
- `mul` first brings both factors to their common scale, so the product
  carries twice that scale (reduced only when it must be, see below).
- `round_decimal` rounds to the nearest integer, halves away from zero.
- Comparisons go by numeric value whatever the scales; negative zero
  equals zero.

## Overflow

When a result has a scale above 28 or does not fit in 96 bits, fractional
digits are dropped with round-half-to-even until it fits. If it still does
not fit, the operation raises:

- `PositiveOverflowError` when the result is too large,
- `NegativeOverflowError` when it is negative and too large in magnitude.

Both are subclasses of `DecimalOverflowError`, itself an `ArithmeticError`.
`Decimal96.from_int` raises the same errors for integers beyond 96 bits.

```python
from dec96.value import PositiveOverflowError

biggest = Decimal96.from_bits([0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0])
try:
    add(biggest, one)
except PositiveOverflowError:
    ...
```

## What it does not do

There is no division, no floor, and no conversion to or from floating-point
numbers; the package covers addition, subtraction, multiplication, rounding,
truncation, negation and comparison. It has no command-line tool.