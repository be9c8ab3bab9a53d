"""Pythagorean psychomatrix (Pythagoras square) of a birth date.

The four working numbers are derived from the date digits; the square counts
how often each digit 1..9 appears across the date and the working numbers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .calendar_utils import split_date_parts
from .constants import PSYCHOMATRIX_LINES, PSYCHOMATRIX_SLOTS

DIGITS = "123456789"


def _empty_square() -> Dict[int, int]:
    return {digit: 0 for digit in range(1, 10)}


@dataclass(frozen=True)
class WorkingNumbers:
    first: int = 0
    second: int = 0
    third: int = 0
    fourth: int = 0

    def as_meta(self) -> Dict[str, int]:
        return {
            "firstNum": self.first,
            "secondNum": self.second,
            "thirdNum": self.third,
            "fourthNum": self.fourth,
        }


@dataclass(frozen=True)
class PsychomatrixResult:
    square: Dict[int, int] = field(default_factory=_empty_square)
    numbers: WorkingNumbers = field(default_factory=WorkingNumbers)
    degraded: bool = False

    @property
    def meta(self) -> Dict[str, int]:
        return self.numbers.as_meta()


def digit_sum(value: int | str) -> int:
    """Sum of the decimal digits of ``value``; a minus sign is not a digit."""
    return sum(int(ch) for ch in str(value) if ch.isdigit())


def first_digit_of_day(day: str) -> int:
    # A zero-padded day ("05") counts as its whole value, every other day as
    # its leading digit. Kept as-is: changing it shifts every such result.
    if len(day) == 2 and day.startswith("0") and day != "00":
        return int(day)
    return int(day[0])


def working_numbers(y: str, m: str, d: str) -> WorkingNumbers:
    first = digit_sum(d + m + y)
    second = digit_sum(first)
    third = first - 2 * first_digit_of_day(d)
    fourth = digit_sum(third)
    return WorkingNumbers(first=first, second=second, third=third, fourth=fourth)


def number_stream(y: str, m: str, d: str, numbers: WorkingNumbers) -> str:
    return f"{d}{m}{y}{numbers.first}{numbers.second}{numbers.third}{numbers.fourth}"


def tally(stream: str) -> Dict[int, int]:
    """Count digits 1..9; zeros and any other characters are dropped."""
    square = _empty_square()
    for ch in stream:
        if ch in DIGITS:
            square[int(ch)] += 1
    return square


def calculate_psychomatrix(text: Optional[str]) -> PsychomatrixResult:
    parts = split_date_parts(text)
    if parts is None:
        return PsychomatrixResult(degraded=True)
    y, m, d = parts
    numbers = working_numbers(y, m, d)
    return PsychomatrixResult(square=tally(number_stream(y, m, d, numbers)), numbers=numbers)


def describe_slot(count: int) -> str:
    if count <= 0:
        return "absent"
    if count == 1:
        return "weak"
    if count == 2:
        return "balanced"
    if count == 3:
        return "strong"
    return "excessive"


def line_strengths(square: Dict[int, int]) -> List[Dict[str, object]]:
    """Digit totals of the rows, columns and diagonals of the square."""
    lines = []
    for key, label, cells in PSYCHOMATRIX_LINES:
        lines.append(
            {
                "key": key,
                "label": label,
                "total": sum(square.get(cell, 0) for cell in cells),
            }
        )
    return lines


def slot_readings(square: Dict[int, int]) -> List[Dict[str, object]]:
    return [
        {
            "digit": digit,
            "meaning": meaning,
            "count": square.get(digit, 0),
            "reading": describe_slot(square.get(digit, 0)),
        }
        for digit, meaning in PSYCHOMATRIX_SLOTS.items()
    ]
