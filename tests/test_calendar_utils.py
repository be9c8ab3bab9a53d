from astro_api.services.calendar_utils import parse_date, parse_time, split_date_parts, to_utc_datetime


def test_split_keeps_zero_padding():
    assert split_date_parts("1990-03-05") == ("1990", "03", "05")


def test_split_rejects_wrong_shapes():
    for bad in ["", "1990/03/05", "1990-03", "1990-03-05-01", "1990-0a-05", "1990--05", None]:
        assert split_date_parts(bad) is None


def test_parse_date_valid():
    parsed = parse_date("1990-05-15")
    assert parsed.valid
    assert (parsed.year, parsed.month, parsed.day) == (1990, 5, 15)
    assert parsed.raw_day == "15"


def test_parse_date_degrades_to_sentinel():
    for bad in ["not-a-date", "1990-02-31", "15.05.1990"]:
        parsed = parse_date(bad)
        assert not parsed.valid
        assert (parsed.year, parsed.month, parsed.day) == (0, 0, 0)
        assert parsed.as_date() is None


def test_parse_time():
    t = parse_time("14:32")
    assert t.valid and (t.hour, t.minute) == (14, 32)
    assert parse_time("14:32:10").minute == 32
    assert not parse_time("25:00").valid
    assert not parse_time("").valid
    assert not parse_time(None).valid


def test_utc_moment_defaults_to_midnight():
    moment = to_utc_datetime(parse_date("2000-01-21"), parse_time(None))
    assert moment.hour == 0 and moment.minute == 0
    assert moment.utcoffset().total_seconds() == 0
    assert to_utc_datetime(parse_date("bad")) is None
