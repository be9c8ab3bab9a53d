"""Deterministic facts derived from a birth date (and optionally time)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .chinese_zodiac import AnimalResult, resolve_chinese_zodiac
from .lunar_phase import MoonPhase, resolve_lunar_phase
from .psychomatrix import PsychomatrixResult, calculate_psychomatrix
from .zodiac import SignResult, zodiac_for_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BirthInput:
    date: str
    time: Optional[str] = None
    place: Optional[str] = None
    gender: str = "male"
    language: str = "uk"


@dataclass(frozen=True)
class DerivedFacts:
    zodiac: SignResult
    chinese_zodiac: AnimalResult
    psychomatrix: PsychomatrixResult
    moon: MoonPhase

    @property
    def warnings(self) -> List[str]:
        out = []
        if self.zodiac.degraded:
            out.append("zodiac: date could not be parsed")
        if self.chinese_zodiac.degraded:
            out.append(f"chineseZodiac: {self.chinese_zodiac.reason}")
        if self.psychomatrix.degraded:
            out.append("pythagoras: date could not be split into year, month and day")
        if self.moon.degraded:
            out.append("moon: date could not be parsed")
        return out

    def to_payload(self) -> Dict[str, Any]:
        return {
            "zodiac": self.zodiac.sign,
            "chineseZodiac": self.chinese_zodiac.animal,
            "pythagoras": {
                "square": dict(self.psychomatrix.square),
                "meta": self.psychomatrix.meta,
            },
            "moon": {"phase": self.moon.phase, "emoji": self.moon.emoji},
        }


def derive_facts(date: Optional[str], time: Optional[str] = None) -> DerivedFacts:
    facts = DerivedFacts(
        zodiac=zodiac_for_date(date),
        chinese_zodiac=resolve_chinese_zodiac(date),
        psychomatrix=calculate_psychomatrix(date),
        moon=resolve_lunar_phase(date, time),
    )
    if facts.warnings:
        logger.warning(f"Degraded derivations: {facts.warnings}")
    return facts
