import pytest

from astro_api.services.zodiac import resolve_zodiac, sign_profile, zodiac_for_date

BOUNDARIES = [
    # (month, day, sign)
    (12, 21, "Sagittarius"), (12, 22, "Capricorn"),
    (1, 19, "Capricorn"), (1, 20, "Aquarius"),
    (2, 18, "Aquarius"), (2, 19, "Pisces"),
    (3, 20, "Pisces"), (3, 21, "Aries"),
    (4, 19, "Aries"), (4, 20, "Taurus"),
    (5, 20, "Taurus"), (5, 21, "Gemini"),
    (6, 20, "Gemini"), (6, 21, "Cancer"),
    (7, 22, "Cancer"), (7, 23, "Leo"),
    (8, 22, "Leo"), (8, 23, "Virgo"),
    (9, 22, "Virgo"), (9, 23, "Libra"),
    (10, 22, "Libra"), (10, 23, "Scorpio"),
    (11, 21, "Scorpio"), (11, 22, "Sagittarius"),
]


@pytest.mark.parametrize("month,day,sign", BOUNDARIES)
def test_boundaries(month, day, sign):
    assert resolve_zodiac(day, month) == sign


def test_unknown_for_impossible_values():
    assert resolve_zodiac(0, 13) == "Unknown"


def test_example_date_is_taurus():
    result = zodiac_for_date("1990-05-15")
    assert result.sign == "Taurus"
    assert not result.degraded


def test_unparseable_date_is_degraded():
    result = zodiac_for_date("garbage")
    assert result.sign == "Unknown"
    assert result.degraded


def test_sign_profile():
    assert sign_profile("Taurus")["element"] == "Earth"
    assert sign_profile("Unknown") == {}
