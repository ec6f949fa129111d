"""Powers of five and two-digit lookups used by shortest float formatting."""

from __future__ import annotations

POW5_BITCOUNT = 125
POW5_TABLE_SIZE = 326

_MASK64 = (1 << 64) - 1


def _normalised_pow5(exponent: int) -> int:
    """Return 5**exponent scaled to exactly POW5_BITCOUNT bits, truncating."""
    value = 5**exponent
    shift = value.bit_length() - POW5_BITCOUNT
    return value >> shift if shift > 0 else value << -shift


_POW5_SPLIT: tuple[tuple[int, int], ...] = tuple(
    (scaled & _MASK64, scaled >> 64)
    for scaled in (_normalised_pow5(i) for i in range(POW5_TABLE_SIZE))
)

_DIGIT_PAIRS: tuple[str, ...] = tuple(f"{n:02d}" for n in range(100))


def pow5_split(index: int) -> tuple[int, int]:
    """Return the (low, high) 64-bit words of 5**index normalised to 125 bits."""
    if not 0 <= index < POW5_TABLE_SIZE:
        raise IndexError(f"pow5 index out of range: {index}")
    return _POW5_SPLIT[index]


def digit_pair(value: int) -> str:
    """Return the two decimal digits of a number in 0..99, zero padded."""
    if not 0 <= value < 100:
        raise ValueError(f"digit pair value out of range: {value}")
    return _DIGIT_PAIRS[value]