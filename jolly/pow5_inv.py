"""Inverse powers of five used by shortest float formatting and parsing."""

from __future__ import annotations

POW5_INV_BITCOUNT = 125
POW5_INV_TABLE_SIZE = 342

_MASK64 = (1 << 64) - 1


def _inverse_pow5(exponent: int) -> int:
    """Return 2**k / 5**exponent rounded up by one, scaled to 125 significant bits."""
    power = 5**exponent
    shift = power.bit_length() - 1 + POW5_INV_BITCOUNT
    return (1 << shift) // power + 1


_POW5_INV_SPLIT: tuple[tuple[int, int], ...] = tuple(
    (scaled & _MASK64, scaled >> 64)
    for scaled in (_inverse_pow5(i) for i in range(POW5_INV_TABLE_SIZE))
)


def pow5_inv_split(index: int) -> tuple[int, int]:
    """Return the (low, high) 64-bit words of the scaled inverse of 5**index."""
    if not 0 <= index < POW5_INV_TABLE_SIZE:
        raise IndexError(f"inverse pow5 index out of range: {index}")
    return _POW5_INV_SPLIT[index]