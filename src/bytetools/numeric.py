"""Integer parsing and number formatting over byte strings.

Parsing follows the C strtol/strtoul family: leading whitespace, an
optional sign, an optional 0x prefix for base 16 (base 0 picks 16, 8 or 10
from the prefix) and then as many digits as are valid in the base.  Failure
is never raised; it is reported through ParseResult.ok, and value then holds
whatever the conversion produced (0 when no digits were read, the type's
limit on overflow).
"""

from typing import NamedTuple

# C isspace() in the "C" locale
_SPACE = frozenset(b" \t\n\v\f\r")
_INVALID_DIGIT = 99

_DIGIT_VALUES = [_INVALID_DIGIT] * 256
for _i, _ch in enumerate(b"0123456789"):
    _DIGIT_VALUES[_ch] = _i
for _i, _ch in enumerate(b"abcdefghijklmnopqrstuvwxyz"):
    _DIGIT_VALUES[_ch] = _i + 10
    _DIGIT_VALUES[_ch - 32] = _i + 10
del _i, _ch

_UINT64_MASK = (1 << 64) - 1


class ParseResult(NamedTuple):
    value: int
    ok: bool


def parse_integer(data, base: int = 10, signed: bool = True, bits: int = 64) -> ParseResult:
    """Parse data as an integer of the given width.

    ok is True only when every byte was consumed and the value fitted.
    """
    if base != 0 and not 2 <= base <= 36:
        return ParseResult(0, False)

    size = len(data)
    i = 0
    while i < size and data[i] in _SPACE:
        i += 1

    negative = False
    if i < size and data[i] in b"+-":
        negative = data[i] == ord("-")
        i += 1

    has_hex_prefix = (
        i + 2 < size
        and data[i] == ord("0")
        and data[i + 1] in b"xX"
        and _DIGIT_VALUES[data[i + 2]] < 16
    )
    if base in (0, 16) and has_hex_prefix:
        base = 16
        i += 2
    elif base == 0:
        base = 8 if i < size and data[i] == ord("0") else 10

    digits_start = i
    magnitude = 0
    while i < size:
        digit = _DIGIT_VALUES[data[i]]
        if digit >= base:
            break
        magnitude = magnitude * base + digit
        i += 1

    if i == digits_start:
        # No conversion: C leaves the end pointer at the start of the input
        return ParseResult(0, size == 0)

    range_error = False
    if signed:
        upper = (1 << (bits - 1)) - 1
        lower = -(1 << (bits - 1))
        value = -magnitude if negative else magnitude
        if value > upper:
            value, range_error = upper, True
        elif value < lower:
            value, range_error = lower, True
    else:
        limit = (1 << bits) - 1
        if magnitude > limit:
            value, range_error = limit, True
        elif negative:
            # Unsigned conversion of a negative number wraps around like C
            value = (-magnitude) & limit
        else:
            value = magnitude

    return ParseResult(value, not range_error and i == size)


def to_long_long(data, base: int = 10) -> ParseResult:
    return parse_integer(data, base, signed=True, bits=64)


def to_ulong_long(data, base: int = 10) -> ParseResult:
    return parse_integer(data, base, signed=False, bits=64)


def to_long(data, base: int = 10) -> ParseResult:
    return parse_integer(data, base, signed=True, bits=32)


def to_ulong(data, base: int = 10) -> ParseResult:
    return parse_integer(data, base, signed=False, bits=32)


_INT_FORMATS = {
    10: b"%d",
    16: b"0x%x",
    8: b"%o",
}


def number(value, base: int = 10, precision: int = 2) -> bytes:
    """Render a number as bytes.

    Integers: base 10 plain, base 16 with a 0x prefix, base 8 without a
    prefix, and base 1 as binary digits least significant bit first.
    Negative integers render as 64-bit two's complement in every base but 10.
    Floats render fixed-point with precision decimals and ignore base.

    Any other base raises ValueError.
    """
    if isinstance(value, float):
        return b"%.*f" % (precision, value)

    if not isinstance(value, int):
        raise TypeError(f"number() needs an int or a float, got {type(value).__name__}")
    if not -(1 << 63) <= value <= _UINT64_MASK:
        raise ValueError(f"{value} does not fit in 64 bits")

    if base == 1:
        value &= _UINT64_MASK
        digits = bytearray()
        while value:
            digits.append(ord("1") if value & 1 else ord("0"))
            value >>= 1
        return bytes(digits)

    fmt = _INT_FORMATS.get(base)
    if fmt is None:
        raise ValueError(f"Unsupported base {base}, expected one of 1, 8, 10 or 16")
    if base != 10:
        value &= _UINT64_MASK
    return fmt % value


def to_hex(data) -> bytes:
    """Two lowercase hex digits per byte."""
    return bytes(data).hex().encode("ascii")
