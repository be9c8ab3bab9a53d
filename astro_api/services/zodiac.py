from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .calendar_utils import parse_date
from .constants import SIGN_DATA, UNKNOWN, ZODIAC_RANGES


@dataclass(frozen=True)
class SignResult:
    sign: str
    degraded: bool = False


def resolve_zodiac(day: int, month: int) -> str:
    """Map a day/month pair to its sun sign; first matching range wins."""
    for sign, (start_month, start_day), (end_month, end_day) in ZODIAC_RANGES:
        if (month == start_month and day >= start_day) or (month == end_month and day <= end_day):
            return sign
    return UNKNOWN


def zodiac_for_date(text: Optional[str]) -> SignResult:
    parsed = parse_date(text)
    if not parsed.valid:
        return SignResult(sign=UNKNOWN, degraded=True)
    return SignResult(sign=resolve_zodiac(parsed.day, parsed.month))


def sign_profile(sign: str) -> Dict[str, str]:
    """Element, modality and ruler of a sign (empty for unknown labels)."""
    return dict(SIGN_DATA.get(sign, {}))
