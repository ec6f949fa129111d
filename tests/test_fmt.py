import pytest

from jolly.fmt import format_string, format_value, stof, stoi
from jolly.ryu import format_f32


def test_format_strings_pass_through():
    assert format_value("hello") == "hello"


def test_format_booleans():
    assert format_value(True) == "true"
    assert format_value(False) == "false"


@pytest.mark.parametrize("number", [0, 7, -42, 12345, -9223372036854775807])
def test_format_integers_round_trip(number):
    assert stoi(format_value(number)) == number


def test_format_zero():
    assert format_value(0) == "0"


def test_format_float_uses_single_precision_formatter():
    assert format_value(1.5) == format_f32(1.5)
    assert format_value(1.5) == "1.5e0"


def test_format_unsupported_type():
    with pytest.raises(TypeError):
        format_value(object())


def test_format_string_assert_message():
    result = format_string("% failed! in file: %, line: %\n%", "x", "f.cpp", 12, "m")
    assert result == "x failed! in file: f.cpp, line: 12\nm"


def test_format_string_shader_name():
    assert format_string("%.vert.spv", "quad") == "quad.vert.spv"


def test_format_string_without_args_is_unchanged():
    assert format_string("no markers % here") == "no markers % here"


def test_format_string_leftover_markers_stay():
    assert format_string("a%b%", "X") == "aXb%"


def test_format_string_extra_args_are_appended():
    assert format_string("a", 1, True) == "a1true"


def test_stoi_decimal_and_sign():
    assert stoi("123") == 123
    assert stoi("-123") == -123
    assert stoi("+7") == 7


def test_stoi_hex():
    assert stoi("0x1F") == 31
    assert stoi("-0xff") == -255


def test_stoi_underscores():
    assert stoi("1_000_000") == 1000000


def test_stoi_empty_is_zero():
    assert stoi("") == 0


def test_stoi_invalid_digit():
    with pytest.raises(ValueError):
        stoi("12a")


def test_stoi_reads_at_most_twenty_digits():
    assert stoi("1" * 25) == int("1" * 20)


def test_stof_simple():
    assert stof("1.5") == 1.5
    assert stof("-2.25") == -2.25


@pytest.mark.parametrize("value", [1.5, 0.25, -3.0, 1024.0, 0.125])
def test_stof_round_trips_format(value):
    assert stof(format_value(value)) == value