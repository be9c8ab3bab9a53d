"""Moon phase at a birth moment from the mean synodic month."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .calendar_utils import parse_date, parse_time, to_utc_datetime
from .constants import (
    MOON_PHASES,
    REFERENCE_NEW_MOON_JD,
    SYNODIC_MONTH_DAYS,
    UNIX_EPOCH_JD,
    UNKNOWN,
)


@dataclass(frozen=True)
class MoonPhase:
    phase: str
    emoji: str
    age_days: float = 0.0
    degraded: bool = False


def julian_date(moment: datetime) -> float:
    return moment.timestamp() / 86400.0 + UNIX_EPOCH_JD


def lunar_age(moment: datetime) -> float:
    """Days since the most recent mean new moon, in ``[0, synodic month)``."""
    cycles = (julian_date(moment) - REFERENCE_NEW_MOON_JD) / SYNODIC_MONTH_DAYS
    fraction = cycles - int(cycles)
    if fraction < 0:
        fraction += 1
    return fraction * SYNODIC_MONTH_DAYS


def phase_for_age(age: float) -> tuple[str, str]:
    for upper, name, emoji in MOON_PHASES:
        if age < upper:
            return name, emoji
    # The last sliver of the cycle wraps back to new moon.
    _upper, name, emoji = MOON_PHASES[0]
    return name, emoji


def resolve_lunar_phase(date_text: Optional[str], time_text: Optional[str] = None) -> MoonPhase:
    moment = to_utc_datetime(parse_date(date_text), parse_time(time_text))
    if moment is None:
        return MoonPhase(phase=UNKNOWN, emoji="", degraded=True)
    age = lunar_age(moment)
    name, emoji = phase_for_age(age)
    return MoonPhase(phase=name, emoji=emoji, age_days=round(age, 2))
