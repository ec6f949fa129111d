"""Value formatting, '%'-style string formatting and number parsing."""

from __future__ import annotations

from jolly.ryu import format_f32, parse_f32

_MAX_DIGITS = 20
_SCAN_LIMIT = 64


def format_value(arg: object) -> str:
    """Render one value: strings verbatim, booleans as true/false, integers in
    decimal and floats in shortest single-precision scientific form."""
    if isinstance(arg, str):
        return arg
    if isinstance(arg, bool):
        return "true" if arg else "false"
    if isinstance(arg, int):
        return str(arg)
    if isinstance(arg, float):
        return format_f32(arg)
    raise TypeError(f"cannot format value of type {type(arg).__name__}")


def format_string(fmt: str, *args: object) -> str:
    """Substitute each argument for the next '%' in fmt.

    Arguments without a matching '%' are appended after the text consumed so
    far; '%' markers left over once the arguments run out stay as they are.
    """
    parts: list[str] = []
    rest = fmt
    for arg in args:
        head, marker, rest = rest.partition("%")
        parts.append(head)
        if not marker:
            rest = ""
        parts.append(format_value(arg))
    parts.append(rest)
    return "".join(parts)


def stoi(text: str) -> int:
    """Parse a signed decimal or '0x' hexadecimal integer.

    Underscores are skipped, at most twenty digits are read and scanning
    stops after the sixty-fourth character. Raises ValueError on a character
    that is not a digit of the base.
    """
    negative = text.startswith("-")
    begin = 1 if text[:1] in ("-", "+") else 0
    hexadecimal = text[begin:begin + 2] == "0x"
    base = 16 if hexadecimal else 10
    begin += 2 if hexadecimal else 0

    digits: list[int] = []
    for char in text[begin:_SCAN_LIMIT]:
        if char == "_":
            continue
        try:
            digit = int(char, base)
        except ValueError:
            raise ValueError(f"invalid digit {char!r} in {text!r}") from None
        digits.append(digit)
        if len(digits) >= _MAX_DIGITS:
            break

    number = 0
    for digit in digits:
        number = number * base + digit
    return -number if negative else number


def stof(text: str) -> float:
    """Parse a decimal number to the nearest single-precision value."""
    return parse_f32(text)