"""Fixed lookup tables shared by the resolvers and the prompt builder."""

from typing import Dict, List, Tuple

UNKNOWN = "Unknown"

# (sign, (start_month, start_day), (end_month, end_day)), checked in order.
ZODIAC_RANGES: List[Tuple[str, Tuple[int, int], Tuple[int, int]]] = [
    ("Capricorn", (12, 22), (1, 19)),
    ("Aquarius", (1, 20), (2, 18)),
    ("Pisces", (2, 19), (3, 20)),
    ("Aries", (3, 21), (4, 19)),
    ("Taurus", (4, 20), (5, 20)),
    ("Gemini", (5, 21), (6, 20)),
    ("Cancer", (6, 21), (7, 22)),
    ("Leo", (7, 23), (8, 22)),
    ("Virgo", (8, 23), (9, 22)),
    ("Libra", (9, 23), (10, 22)),
    ("Scorpio", (10, 23), (11, 21)),
    ("Sagittarius", (11, 22), (12, 21)),
]

SIGN_NAMES = [name for name, _start, _end in ZODIAC_RANGES]

# Zodiac sign data
SIGN_DATA: Dict[str, Dict[str, str]] = {
    "Aries": {"element": "Fire", "modality": "Cardinal", "ruler": "Mars"},
    "Taurus": {"element": "Earth", "modality": "Fixed", "ruler": "Venus"},
    "Gemini": {"element": "Air", "modality": "Mutable", "ruler": "Mercury"},
    "Cancer": {"element": "Water", "modality": "Cardinal", "ruler": "Moon"},
    "Leo": {"element": "Fire", "modality": "Fixed", "ruler": "Sun"},
    "Virgo": {"element": "Earth", "modality": "Mutable", "ruler": "Mercury"},
    "Libra": {"element": "Air", "modality": "Cardinal", "ruler": "Venus"},
    "Scorpio": {"element": "Water", "modality": "Fixed", "ruler": "Pluto"},
    "Sagittarius": {"element": "Fire", "modality": "Mutable", "ruler": "Jupiter"},
    "Capricorn": {"element": "Earth", "modality": "Cardinal", "ruler": "Saturn"},
    "Aquarius": {"element": "Air", "modality": "Fixed", "ruler": "Uranus"},
    "Pisces": {"element": "Water", "modality": "Mutable", "ruler": "Neptune"},
}

# Year animal tokens as returned by lunar_python (simplified Chinese).
CHINESE_ANIMALS: Dict[str, str] = {
    "鼠": "Rat",
    "牛": "Ox",
    "虎": "Tiger",
    "兔": "Rabbit",
    "龙": "Dragon",
    "蛇": "Snake",
    "马": "Horse",
    "羊": "Goat",
    "猴": "Monkey",
    "鸡": "Rooster",
    "狗": "Dog",
    "猪": "Pig",
}

# Lunar age upper bounds in days (one eighth of the synodic month per bucket,
# centred on the principal phases) with the phase glyph.
MOON_PHASES: List[Tuple[float, str, str]] = [
    (1.84566, "New Moon", "🌑"),
    (5.53699, "Waxing Crescent", "🌒"),
    (9.22831, "First Quarter", "🌓"),
    (12.91963, "Waxing Gibbous", "🌔"),
    (16.61096, "Full Moon", "🌕"),
    (20.30228, "Waning Gibbous", "🌖"),
    (23.99361, "Last Quarter", "🌗"),
    (27.68493, "Waning Crescent", "🌘"),
]

SYNODIC_MONTH_DAYS = 29.530588853
# Julian date of the reference new moon (2000-01-06 ~14:24 UTC).
REFERENCE_NEW_MOON_JD = 2451550.1
UNIX_EPOCH_JD = 2440587.5

# Psychomatrix cells as they are drawn: columns 1-2-3, 4-5-6, 7-8-9.
PSYCHOMATRIX_GRID: List[List[int]] = [
    [1, 4, 7],
    [2, 5, 8],
    [3, 6, 9],
]

PSYCHOMATRIX_SLOTS: Dict[int, str] = {
    1: "Character/Will",
    2: "Energy",
    3: "Interest/Knowledge",
    4: "Health",
    5: "Logic/Intuition",
    6: "Physical Labor/Skills",
    7: "Luck/Talent",
    8: "Duty/Responsibility",
    9: "Memory/Intellect",
}

# (key, label, cells)
PSYCHOMATRIX_LINES: List[Tuple[str, str, Tuple[int, int, int]]] = [
    ("row_purpose", "Purposefulness (row 1-4-7)", (1, 4, 7)),
    ("row_family", "Family (row 2-5-8)", (2, 5, 8)),
    ("row_habits", "Habits and stability (row 3-6-9)", (3, 6, 9)),
    ("column_self", "Self-esteem (column 1-2-3)", (1, 2, 3)),
    ("column_material", "Material life (column 4-5-6)", (4, 5, 6)),
    ("column_talent", "Talent (column 7-8-9)", (7, 8, 9)),
    ("diagonal_spirit", "Spirituality (diagonal 1-5-9)", (1, 5, 9)),
    ("diagonal_temperament", "Temperament (diagonal 3-5-7)", (3, 5, 7)),
]
