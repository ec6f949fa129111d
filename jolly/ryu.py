"""Shortest round-trip formatting and parsing of 32-bit floats."""

from __future__ import annotations

import struct
from typing import NamedTuple

from jolly.pow5 import POW5_BITCOUNT, pow5_split
from jolly.pow5_inv import POW5_INV_BITCOUNT, pow5_inv_split

FLOAT_MANTISSA_BITS = 23
FLOAT_EXPONENT_BITS = 8
FLOAT_EXPONENT_BIAS = 127

FLOAT_POW5_INV_BITCOUNT = POW5_INV_BITCOUNT - 64
FLOAT_POW5_BITCOUNT = POW5_BITCOUNT - 64

_MANTISSA_MASK = (1 << FLOAT_MANTISSA_BITS) - 1
_EXPONENT_MASK = (1 << FLOAT_EXPONENT_BITS) - 1


class _Decimal(NamedTuple):
    mantissa: int
    exponent: int


def _pow5bits(e: int) -> int:
    """Number of bits in 5**e (1 for e == 0)."""
    return (5**e).bit_length()


def _log2pow5(e: int) -> int:
    """floor(log2(5**e))."""
    return (5**e).bit_length() - 1


def _ceil_log2pow5(e: int) -> int:
    return _log2pow5(e) + 1


def _log10pow2(e: int) -> int:
    """floor(log10(2**e))."""
    return len(str(2**e)) - 1


def _log10pow5(e: int) -> int:
    """floor(log10(5**e))."""
    return len(str(5**e)) - 1


def _floor_log2(value: int) -> int:
    return value.bit_length() - 1


def _pow5_factor(value: int) -> int:
    count = 0
    while value and value % 5 == 0:
        value //= 5
        count += 1
    return count


def _multiple_of_pow5(value: int, p: int) -> bool:
    return _pow5_factor(value) >= p


def _multiple_of_pow2(value: int, p: int) -> bool:
    return value & ((1 << p) - 1) == 0


def _mul_pow5_inv_div_pow2(m: int, q: int, j: int) -> int:
    return (m * (pow5_inv_split(q)[1] + 1)) >> j


def _mul_pow5_div_pow2(m: int, i: int, j: int) -> int:
    return (m * pow5_split(i)[1]) >> j


def _f2d(ieee_mantissa: int, ieee_exponent: int) -> _Decimal:
    if ieee_exponent == 0:
        e2 = 1 - FLOAT_EXPONENT_BIAS - FLOAT_MANTISSA_BITS - 2
        m2 = ieee_mantissa
    else:
        e2 = ieee_exponent - FLOAT_EXPONENT_BIAS - FLOAT_MANTISSA_BITS - 2
        m2 = (1 << FLOAT_MANTISSA_BITS) | ieee_mantissa

    accept_bounds = m2 % 2 == 0

    mv = 4 * m2
    mp = 4 * m2 + 2
    mm_shift = 1 if ieee_mantissa != 0 or ieee_exponent <= 1 else 0
    mm = 4 * m2 - 1 - mm_shift

    vm_trailing_zeros = False
    vr_trailing_zeros = False
    last_removed_digit = 0

    if e2 >= 0:
        q = _log10pow2(e2)
        e10 = q
        k = FLOAT_POW5_INV_BITCOUNT + _pow5bits(q) - 1
        i = -e2 + q + k
        vr = _mul_pow5_inv_div_pow2(mv, q, i)
        vp = _mul_pow5_inv_div_pow2(mp, q, i)
        vm = _mul_pow5_inv_div_pow2(mm, q, i)

        if q != 0 and (vp - 1) // 10 <= vm // 10:
            l = FLOAT_POW5_INV_BITCOUNT + _pow5bits(q - 1) - 1
            last_removed_digit = _mul_pow5_inv_div_pow2(mv, q - 1, -e2 + q - 1 + l) % 10

        if q <= 9:
            if mv % 5 == 0:
                vr_trailing_zeros = _multiple_of_pow5(mv, q)
            elif accept_bounds:
                vm_trailing_zeros = _multiple_of_pow5(mm, q)
            else:
                vp -= int(_multiple_of_pow5(mp, q))
    else:
        q = _log10pow5(-e2)
        e10 = q + e2
        i = -e2 - q
        k = _pow5bits(i) - FLOAT_POW5_BITCOUNT
        j = q - k
        vr = _mul_pow5_div_pow2(mv, i, j)
        vp = _mul_pow5_div_pow2(mp, i, j)
        vm = _mul_pow5_div_pow2(mm, i, j)

        if q != 0 and (vp - 1) // 10 <= vm // 10:
            j = q - 1 - (_pow5bits(i + 1) - FLOAT_POW5_BITCOUNT)
            last_removed_digit = _mul_pow5_div_pow2(mv, i + 1, j) % 10

        if q <= 1:
            vr_trailing_zeros = True
            if accept_bounds:
                vm_trailing_zeros = mm_shift == 1
            else:
                vp -= 1
        elif q < 31:
            vr_trailing_zeros = _multiple_of_pow2(mv, q - 1)

    removed = 0
    if vm_trailing_zeros or vr_trailing_zeros:
        while vp // 10 > vm // 10:
            vm_trailing_zeros = vm_trailing_zeros and vm % 10 == 0
            vr_trailing_zeros = vr_trailing_zeros and last_removed_digit == 0
            last_removed_digit = vr % 10
            vr //= 10
            vp //= 10
            vm //= 10
            removed += 1

        if vm_trailing_zeros:
            while vm % 10 == 0:
                vr_trailing_zeros = vr_trailing_zeros and last_removed_digit == 0
                last_removed_digit = vr % 10
                vr //= 10
                vp //= 10
                vm //= 10
                removed += 1

        if vr_trailing_zeros and last_removed_digit == 5 and vr % 2 == 0:
            last_removed_digit = 4

        round_up = (vr == vm and (not accept_bounds or not vm_trailing_zeros)) or last_removed_digit >= 5
        output = vr + int(round_up)
    else:
        while vp // 10 > vm // 10:
            last_removed_digit = vr % 10
            vr //= 10
            vp //= 10
            vm //= 10
            removed += 1
        output = vr + int(vr == vm or last_removed_digit >= 5)

    return _Decimal(output, e10 + removed)


def _special_str(sign: bool, exponent: int, mantissa: int) -> str:
    if mantissa:
        return "NaN"
    prefix = "-" if sign else ""
    if exponent:
        return f"{prefix}Infinity"
    return f"{prefix}0e0"


def _to_chars(value: _Decimal, sign: bool) -> str:
    digits = str(value.mantissa)
    body = digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
    exponent = value.exponent + len(digits) - 1
    return f"{'-' if sign else ''}{body}e{exponent}"


def format_f32(value: float) -> str:
    """Format a float, rounded to single precision, in shortest scientific notation.

    Raises OverflowError if a finite value is out of single-precision range.
    """
    (bits,) = struct.unpack("<I", struct.pack("<f", value))
    sign = (bits >> (FLOAT_MANTISSA_BITS + FLOAT_EXPONENT_BITS)) & 1 != 0
    ieee_mantissa = bits & _MANTISSA_MASK
    ieee_exponent = (bits >> FLOAT_MANTISSA_BITS) & _EXPONENT_MASK

    if ieee_exponent == _EXPONENT_MASK or (ieee_exponent == 0 and ieee_mantissa == 0):
        return _special_str(sign, ieee_exponent, ieee_mantissa)

    return _to_chars(_f2d(ieee_mantissa, ieee_exponent), sign)


def _bits_to_float(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits))[0]


def _signed_infinity(negative: bool) -> float:
    sign_bit = int(negative) << (FLOAT_EXPONENT_BITS + FLOAT_MANTISSA_BITS)
    return _bits_to_float(sign_bit | (_EXPONENT_MASK << FLOAT_MANTISSA_BITS))


def _signed_zero(negative: bool) -> float:
    return _bits_to_float(int(negative) << (FLOAT_EXPONENT_BITS + FLOAT_MANTISSA_BITS))


def parse_f32(text: str) -> float:
    """Parse a decimal number to the nearest single-precision value.

    Underscores are ignored as digit separators. At most nine significant
    mantissa digits and four exponent digits are accepted. Raises ValueError
    for malformed input.
    """
    m10_digits = 0
    e10_digits = 0
    dot_index = -1
    e_index = -1
    dot_underscores = 0
    e_underscores = 0
    m10 = 0
    e10 = 0
    signed_m = text.startswith("-")
    signed_e = False

    begin = 1 if text[:1] in ("-", "+") else 0
    for i, c in enumerate(text[begin:], start=begin):
        if c == "_":
            dot_underscores += dot_index == -1
            e_underscores += e_index == -1
            continue

        if c == ".":
            if dot_index != -1:
                raise ValueError(f"more than one decimal point in {text!r}")
            dot_index = i
            continue

        if c == "e":
            if e_index != -1:
                raise ValueError(f"more than one exponent in {text!r}")
            e_index = i
            continue

        if c in "-+":
            if e_index == -1 or text[i - 1] != "e":
                raise ValueError(f"misplaced sign in {text!r}")
            signed_e = c == "-"
            continue

        if not ("0" <= c <= "9"):
            raise ValueError(f"invalid character {c!r} in {text!r}")
        digit = ord(c) - ord("0")

        if e_index == -1:
            if m10_digits >= 9:
                raise ValueError(f"too many mantissa digits in {text!r}")
            m10 = 10 * m10 + digit
            m10_digits += m10 != 0
        else:
            if e10_digits > 3:
                raise ValueError(f"too many exponent digits in {text!r}")
            e10 = 10 * e10 + digit
            e10_digits += e10 != 0

    end = len(text)
    dot_index = (end if dot_index == -1 else dot_index) - dot_underscores
    e_index = (end if e_index == -1 else e_index) - e_underscores

    if signed_e:
        e10 = -e10
    if dot_index < e_index:
        e10 -= e_index - dot_index - 1

    if m10 == 0:
        return _signed_zero(signed_m)

    if m10_digits + e10 <= -46:
        return _signed_zero(signed_m)

    if m10_digits + e10 >= 40:
        return _signed_infinity(signed_m)

    if e10 >= 0:
        e2 = _floor_log2(m10) + e10 + _log2pow5(e10) - (FLOAT_MANTISSA_BITS + 1)
        j = e2 - e10 - _ceil_log2pow5(e10) + FLOAT_POW5_BITCOUNT
        if j < 0:
            raise ValueError(f"cannot convert {text!r}")
        m2 = _mul_pow5_div_pow2(m10, e10, j)
        trailing_zeros = e2 < e10 or (e2 - e10 < 32 and _multiple_of_pow2(m10, e2 - e10))
    else:
        e2 = _floor_log2(m10) + e10 - _ceil_log2pow5(-e10) - (FLOAT_MANTISSA_BITS + 1)
        j = e2 - e10 + _ceil_log2pow5(-e10) - 1 + FLOAT_POW5_INV_BITCOUNT
        m2 = _mul_pow5_inv_div_pow2(m10, -e10, j)
        trailing_zeros = (
            e2 < e10 or (e2 - e10 < 32 and _multiple_of_pow2(m10, e2 - e10))
        ) and _multiple_of_pow5(m10, -e10)

    ieee_e2 = max(0, e2 + FLOAT_EXPONENT_BIAS + _floor_log2(m2))
    if ieee_e2 > 0xFE:
        return _signed_infinity(signed_m)

    shift = (1 if ieee_e2 == 0 else ieee_e2) - e2 - FLOAT_EXPONENT_BIAS - FLOAT_MANTISSA_BITS
    if shift < 0:
        raise ValueError(f"cannot convert {text!r}")

    if shift > 0:
        trailing_zeros = trailing_zeros and m2 & ((1 << (shift - 1)) - 1) == 0
        last_removed_bit = (m2 >> (shift - 1)) & 1
    else:
        last_removed_bit = 0
    round_up = last_removed_bit != 0 and (not trailing_zeros or (m2 >> shift) & 1 != 0)

    ieee_m2 = (m2 >> shift) + int(round_up)
    ieee_m2 &= _MANTISSA_MASK
    if ieee_m2 == 0 and round_up:
        ieee_e2 += 1

    bits = (((int(signed_m) << FLOAT_EXPONENT_BITS) | ieee_e2) << FLOAT_MANTISSA_BITS) | ieee_m2
    return _bits_to_float(bits)