"""Chinese zodiac animal of the lunar year containing a Gregorian date.

The animal changes at the lunar new year, so a date in January or early
February can belong to the previous year's animal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from lunar_python import Solar

from .calendar_utils import parse_date
from .constants import CHINESE_ANIMALS, UNKNOWN

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnimalResult:
    animal: str
    degraded: bool = False
    reason: str = ""


def lunar_year_token(year: int, month: int, day: int) -> str:
    """Animal token (e.g. ``"马"``) of the lunar year for the given solar day."""
    lunar = Solar.fromYmd(year, month, day).getLunar()
    return lunar.getYearShengXiao()


def resolve_chinese_zodiac(text: Optional[str]) -> AnimalResult:
    parsed = parse_date(text)
    if not parsed.valid:
        return AnimalResult(animal=UNKNOWN, degraded=True, reason="date could not be parsed")
    try:
        token = lunar_year_token(parsed.year, parsed.month, parsed.day)
    except Exception as exc:
        logger.warning(f"Lunar calendar conversion failed: {type(exc).__name__}: {exc}")
        return AnimalResult(animal=UNKNOWN, degraded=True, reason="lunar calendar conversion unavailable")
    animal = CHINESE_ANIMALS.get(token)
    if animal is None:
        logger.warning(f"Unrecognised lunar year animal token: {token!r}")
        return AnimalResult(animal=UNKNOWN, degraded=True, reason="lunar calendar returned an unknown animal")
    return AnimalResult(animal=animal)
