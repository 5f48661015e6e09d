import pytest

from minitalk.numbers import INT_MAX, INT_MIN, atoi, atol, itoa

WHITESPACE = [" ", "\t", "\n", "\v", "\f", "\r"]
SAMPLES = [0, 1, -1, 7, -7, 10, -10, 2137, -469, 1000000, INT_MAX, INT_MIN]


@pytest.mark.parametrize("n", SAMPLES)
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n
    assert atol(itoa(n)) == n


@pytest.mark.parametrize("n", SAMPLES)
def test_itoa_is_plain_decimal(n):
    assert int(itoa(n)) == n
    assert itoa(n).lstrip("-").isdigit()


def test_itoa_most_negative():
    assert itoa(-2147483648) == "-2147483648"
    assert atoi("-2147483648") == -2147483648


@pytest.mark.parametrize("n", [INT_MAX + 1, INT_MIN - 1, 1 << 40])
def test_itoa_out_of_range(n):
    with pytest.raises(OverflowError):
        itoa(n)


@pytest.mark.parametrize("ws", WHITESPACE)
def test_leading_whitespace_is_skipped(ws):
    assert atoi(ws * 3 + "2137") == atoi("2137")
    assert atoi(ws + "-2137") == atoi("-2137")
    assert atol(ws + "+2137") == atol("2137")


@pytest.mark.parametrize("text", ["123", "0", "99999", "2147483647"])
def test_plain_digits_match_int(text):
    assert atoi(text) == int(text)
    assert atoi("+" + text) == int(text)
    assert atoi("-" + text) == -int(text)


@pytest.mark.parametrize("suffix", ["abc", " 5", "\n", "-3", ".5"])
def test_parsing_stops_at_first_non_digit(suffix):
    assert atoi("469" + suffix) == atoi("469")
    assert atol("-469" + suffix) == atol("-469")


@pytest.mark.parametrize("text", ["", "p469 0\n", "-", "+", "--5", "+-5", "- 5", "abc"])
def test_text_without_leading_number_gives_zero(text):
    assert atoi(text) == 0
    assert atol(text) == 0


def test_only_ascii_whitespace_and_digits_count():
    assert atoi("\u00a05") == atoi("")
    assert atoi("\u0663") == atoi("")


def test_atoi_wraps_at_32_bits():
    assert atoi("2147483648") == -2147483648
    assert atoi(str((1 << 32) + 7)) == atoi("7")
    assert atoi("-" + str((1 << 32) + 7)) == atoi("-7")


def test_atol_holds_64_bit_values():
    assert atol("2147483648") == 1 << 31
    assert atol(str((1 << 63) - 1)) == (1 << 63) - 1
    assert atol(str(1 << 63)) == -(1 << 63)
    assert atol(str((1 << 64) + 3)) == atol("3")