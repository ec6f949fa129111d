import pytest

from jolly.pow5_inv import pow5_inv_split


def _combined(index):
    low, high = pow5_inv_split(index)
    return (high << 64) | low


def test_first_entry_matches_table():
    assert pow5_inv_split(0) == (1, 2305843009213693952)


def test_second_entry_matches_table():
    assert pow5_inv_split(1) == (11068046444225730970, 1844674407370955161)


def test_last_entry_matches_table():
    assert pow5_inv_split(341) == (673562245690857633, 1345193707530136767)


@pytest.mark.parametrize("index", [0, 1, 2, 10, 27, 100, 200, 341])
def test_words_fit_in_64_bits(index):
    low, high = pow5_inv_split(index)
    assert 0 <= low < 1 << 64
    assert 0 <= high < 1 << 64


@pytest.mark.parametrize("index", range(0, 342, 7))
def test_value_has_125_significant_bits(index):
    value = _combined(index)
    assert 1 << 124 < value <= (1 << 125) + 1


@pytest.mark.parametrize("index", range(0, 342, 11))
def test_value_is_rounded_up_inverse(index):
    value = _combined(index)
    power = 5**index
    upper = value * power
    k = upper.bit_length() - 1
    assert (value - 1) * power <= 1 << k < upper


@pytest.mark.parametrize("index", [-1, 342, 1000])
def test_out_of_range_index_raises(index):
    with pytest.raises(IndexError):
        pow5_inv_split(index)