from astro_api.services.lunar_phase import phase_for_age, resolve_lunar_phase


def test_new_moon_reference():
    moon = resolve_lunar_phase("2000-01-06", "18:00")
    assert moon.phase == "New Moon"
    assert moon.emoji == "🌑"


def test_first_quarter():
    moon = resolve_lunar_phase("2000-01-14")
    assert moon.phase == "First Quarter"
    assert moon.emoji == "🌓"


def test_full_moon():
    moon = resolve_lunar_phase("2000-01-21")
    assert moon.phase == "Full Moon"
    assert moon.emoji == "🌕"
    assert not moon.degraded


def test_dates_before_the_reference_epoch():
    # Full moon of 1990-05-10.
    assert resolve_lunar_phase("1990-05-10", "12:00").phase == "Full Moon"


def test_end_of_cycle_wraps_to_new_moon():
    assert phase_for_age(29.0) == ("New Moon", "🌑")


def test_unparseable_date():
    moon = resolve_lunar_phase("yesterday")
    assert moon.phase == "Unknown"
    assert moon.emoji == ""
    assert moon.degraded


def test_invalid_time_falls_back_to_midnight():
    assert resolve_lunar_phase("2000-01-21", "99:99") == resolve_lunar_phase("2000-01-21")


def test_birth_time_moves_across_a_phase_boundary():
    # The mean new moon of 2000-01-06 14:24 UTC leaves "New Moon" about 44.3 hours later.
    assert resolve_lunar_phase("2000-01-08", "08:00").phase == "New Moon"
    assert resolve_lunar_phase("2000-01-08", "13:00").phase == "Waxing Crescent"
