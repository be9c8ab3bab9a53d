import pytest

from astro_api.services.psychomatrix import (
    calculate_psychomatrix,
    digit_sum,
    first_digit_of_day,
    line_strengths,
    number_stream,
    slot_readings,
    working_numbers,
)


def test_leading_zero_day_uses_whole_value():
    assert first_digit_of_day("05") == 5
    assert first_digit_of_day("15") == 1
    assert first_digit_of_day("5") == 5
    assert first_digit_of_day("00") == 0


def test_zero_padded_day_example():
    result = calculate_psychomatrix("1990-03-05")
    assert result.meta == {"firstNum": 27, "secondNum": 9, "thirdNum": 17, "fourthNum": 8}
    assert result.square == {1: 2, 2: 1, 3: 1, 4: 0, 5: 1, 6: 0, 7: 2, 8: 1, 9: 3}
    assert not result.degraded


def test_two_digit_day_example():
    result = calculate_psychomatrix("1990-05-15")
    assert result.meta == {"firstNum": 30, "secondNum": 3, "thirdNum": 28, "fourthNum": 10}
    assert result.square == {1: 3, 2: 1, 3: 2, 4: 0, 5: 2, 6: 0, 7: 0, 8: 1, 9: 2}


def test_negative_third_number_ignores_minus_sign():
    numbers = working_numbers("2000", "01", "09")
    assert numbers.first == 12
    assert numbers.third == 12 - 2 * 9 == -6
    assert numbers.fourth == 6
    result = calculate_psychomatrix("2000-01-09")
    assert result.square == {1: 2, 2: 2, 3: 1, 4: 0, 5: 0, 6: 2, 7: 0, 8: 0, 9: 1}


def test_digit_sum_is_single_pass():
    assert digit_sum(99) == 18
    assert digit_sum(-17) == 8


@pytest.mark.parametrize(
    "date",
    ["1990-03-05", "1990-05-15", "2000-01-09", "1985-12-31", "2012-10-10", "1901-01-01"],
)
def test_tally_matches_nonzero_digits_in_stream(date):
    y, m, d = date.split("-")
    result = calculate_psychomatrix(date)
    stream = number_stream(y, m, d, working_numbers(y, m, d))
    assert set(result.square) == set(range(1, 10))
    assert sum(result.square.values()) == sum(1 for ch in stream if ch in "123456789")
    n = result.numbers
    assert n.third == n.first - 2 * first_digit_of_day(d)


def test_degenerate_input():
    result = calculate_psychomatrix("1990/03/05")
    assert result.degraded
    assert result.square == {digit: 0 for digit in range(1, 10)}
    assert result.meta == {"firstNum": 0, "secondNum": 0, "thirdNum": 0, "fourthNum": 0}


def test_readings_and_lines():
    square = calculate_psychomatrix("1990-05-15").square
    readings = {slot["digit"]: slot["reading"] for slot in slot_readings(square)}
    assert readings[1] == "strong"
    assert readings[4] == "absent"
    assert readings[8] == "weak"
    lines = {line["key"]: line["total"] for line in line_strengths(square)}
    assert lines["row_purpose"] == 3  # 1, 4, 7
    assert lines["diagonal_spirit"] == 7  # 1, 5, 9
