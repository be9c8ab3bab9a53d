"""Parsing helpers for the birth date and time fields.

Every derivation reads the date through this module. Parsing never raises:
unusable input produces a zeroed sentinel with ``valid=False`` so callers can
tell a degraded result apart from a genuinely computed zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional, Tuple


@dataclass(frozen=True)
class ParsedDate:
    year: int
    month: int
    day: int
    # Raw digit strings exactly as received ("05", not "5").
    raw_year: str = ""
    raw_month: str = ""
    raw_day: str = ""
    valid: bool = True

    @classmethod
    def unknown(cls) -> "ParsedDate":
        return cls(year=0, month=0, day=0, valid=False)

    def as_date(self) -> Optional[date]:
        if not self.valid:
            return None
        return date(self.year, self.month, self.day)


@dataclass(frozen=True)
class ParsedTime:
    hour: int
    minute: int
    valid: bool = True

    @classmethod
    def unknown(cls) -> "ParsedTime":
        return cls(hour=0, minute=0, valid=False)


def split_date_parts(text: Optional[str]) -> Optional[Tuple[str, str, str]]:
    """Return the ``(year, month, day)`` digit strings of a ``YYYY-MM-DD`` value.

    ``None`` when the value does not split into exactly three numeric parts.
    """
    if not isinstance(text, str):
        return None
    parts = text.strip().split("-")
    if len(parts) != 3:
        return None
    if not all(p and p.isascii() and p.isdigit() for p in parts):
        return None
    y, m, d = parts
    return y, m, d


def parse_date(text: Optional[str]) -> ParsedDate:
    parts = split_date_parts(text)
    if parts is None:
        return ParsedDate.unknown()
    y, m, d = parts
    try:
        date(int(y), int(m), int(d))
    except ValueError:
        return ParsedDate.unknown()
    return ParsedDate(
        year=int(y),
        month=int(m),
        day=int(d),
        raw_year=y,
        raw_month=m,
        raw_day=d,
    )


def parse_time(text: Optional[str]) -> ParsedTime:
    """Parse ``HH:MM`` (``HH:MM:SS`` tolerated, seconds dropped)."""
    if not isinstance(text, str) or not text.strip():
        return ParsedTime.unknown()
    parts = text.strip().split(":")
    if len(parts) not in (2, 3) or not all(p.isascii() and p.isdigit() for p in parts):
        return ParsedTime.unknown()
    hour, minute = int(parts[0]), int(parts[1])
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        return ParsedTime.unknown()
    return ParsedTime(hour=hour, minute=minute)


def to_utc_datetime(parsed: ParsedDate, clock: Optional[ParsedTime] = None) -> Optional[datetime]:
    """Combine date and optional time into a UTC moment (midnight when no time)."""
    if not parsed.valid:
        return None
    hour, minute = 0, 0
    if clock is not None and clock.valid:
        hour, minute = clock.hour, clock.minute
    return datetime(parsed.year, parsed.month, parsed.day, hour, minute, tzinfo=timezone.utc)
