import pytest

from dec96.value import (
    DecimalOverflowError,
    Decimal96,
    NegativeOverflowError,
    PositiveOverflowError,
    Sign,
)

MAX_WORDS = (0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0)
BIG_FRACTION = (
    0b01001110111001000011100101110110,
    0b01001011001101011010000111011001,
    0b00011001101110010111010010111111,
    0b00000000000011110000000000000000,
)


@pytest.mark.parametrize(
    "bits",
    [
        (0, 0, 0, 0),
        (11, 0, 0, 65536),
        (111, 0, 0, 196608),
        (1, 0, 0, 0x80000000),
        MAX_WORDS,
        BIG_FRACTION,
        (
            0b10000010111000100101101011101101,
            0b11111001111010000010010110101101,
            0b10110000001111101111000010010100,
            0b10000000000011100000000000000000,
        ),
    ],
)
def test_bits_round_trip(bits):
    assert Decimal96.from_bits(bits).to_bits() == bits


def test_from_bits_reads_scale_and_sign():
    value = Decimal96.from_bits((11, 0, 0, 65536))
    assert value.mantissa == 11
    assert value.scale == 1
    assert value.sign is Sign.PLUS
    negative = Decimal96.from_bits((2, 0, 0, 0x80000000))
    assert negative.sign is Sign.MINUS
    assert negative.scale == 0


def test_from_bits_joins_words():
    value = Decimal96.from_bits((0, 1, 0, 0))
    assert value.mantissa == 1 << 32
    assert Decimal96.from_bits(MAX_WORDS).mantissa == 79228162514264337593543950335


def test_from_bits_rejects_bad_input():
    with pytest.raises(ValueError):
        Decimal96.from_bits((0, 0, 0))
    with pytest.raises(ValueError):
        Decimal96.from_bits((1 << 32, 0, 0, 0))
    with pytest.raises(ValueError):
        Decimal96.from_bits((1, 0, 0, 29 << 16))


def test_constructor_validates():
    with pytest.raises(ValueError):
        Decimal96(-1)
    with pytest.raises(ValueError):
        Decimal96(1 << 96)
    with pytest.raises(ValueError):
        Decimal96(1, 29)


@pytest.mark.parametrize("n", [0, 42, -15, 2147483647, -2147483647, -100099])
def test_int_round_trip(n):
    assert Decimal96.from_int(n).to_int() == n


def test_from_int_layout():
    assert Decimal96.from_int(-1).to_bits() == (1, 0, 0, 0x80000000)
    assert Decimal96.from_int(4294967294).to_bits() == (4294967294, 0, 0, 0)


def test_from_int_overflow():
    with pytest.raises(PositiveOverflowError):
        Decimal96.from_int(1 << 96)
    with pytest.raises(NegativeOverflowError):
        Decimal96.from_int(-(1 << 96))
    with pytest.raises(DecimalOverflowError):
        Decimal96.from_int(1 << 100)


def test_overflow_errors_are_arithmetic_errors():
    with pytest.raises(ArithmeticError):
        Decimal96.from_int(1 << 96)
    with pytest.raises(ArithmeticError):
        Decimal96.from_int(-(1 << 96))
    with pytest.raises(NegativeOverflowError):
        Decimal96.from_int(-(1 << 97))


def test_is_zero_ignores_sign_and_scale():
    assert Decimal96.from_bits((0, 0, 0, 0x80000000)).is_zero()
    assert Decimal96(0, 5).is_zero()
    assert not Decimal96.from_int(-1).is_zero()


def test_negate_flips_sign_only():
    value = Decimal96.from_bits(BIG_FRACTION)
    negated = value.negate()
    assert negated.sign is Sign.MINUS
    assert negated.mantissa == value.mantissa
    assert negated.scale == value.scale
    assert negated.negate() == value


def test_negate_zero():
    assert Decimal96().negate().to_bits() == (0, 0, 0, 0x80000000)


def test_truncate_big_fraction():
    value = Decimal96.from_bits(BIG_FRACTION)
    assert value.truncate().to_int() == 7961327845421
    assert value.truncate().scale == 0


def test_truncate_keeps_sign():
    value = Decimal96.from_bits(BIG_FRACTION).negate()
    truncated = value.truncate()
    assert truncated.sign is Sign.MINUS
    assert truncated.to_int() == -7961327845421


def test_truncate_is_idempotent_and_matches_to_int():
    for bits in [(11, 0, 0, 65536), (111, 0, 0, 196608), MAX_WORDS, BIG_FRACTION]:
        value = Decimal96.from_bits(bits)
        once = value.truncate()
        assert once.truncate() == once
        assert once.to_int() == value.to_int()


def test_truncate_integer_unchanged():
    value = Decimal96.from_int(-9403)
    assert value.truncate() == value


def test_str():
    assert str(Decimal96.from_bits((11, 0, 0, 65536))) == "1.1"
    assert str(Decimal96.from_int(-1234)) == "-1234"
    assert str(Decimal96.from_bits(MAX_WORDS)) == "79228162514264337593543950335"
    assert str(Decimal96.from_bits(BIG_FRACTION)) == "7961327845421.879754123131254"