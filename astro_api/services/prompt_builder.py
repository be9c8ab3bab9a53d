"""Prompt construction for the report, compatibility and translation calls.

All builders are pure string functions of their inputs and the locale table;
none of them touches the network.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from ..i18n.locales import LocaleProfile, resolve_locale
from .constants import PSYCHOMATRIX_GRID
from .facts import BirthInput, DerivedFacts
from .psychomatrix import line_strengths, slot_readings
from .zodiac import sign_profile

MODES = {"detailed", "concise"}
DEFAULT_MODE = "detailed"

ALLOWED_TAGS = "<h3>, <p>, <strong>, <ul>, <li>"


def clamp_mode(mode: Optional[str]) -> str:
    if not mode:
        return DEFAULT_MODE
    mode = mode.strip().lower()
    return mode if mode in MODES else DEFAULT_MODE


def _section_titles(locale: LocaleProfile) -> List[tuple[str, str, str]]:
    h = locale.headings
    return [
        ("🌌", h.intro, "A grand synthesis of the person's cosmic identity. Explain the overarching vibration of their birth date."),
        ("📐", h.numerology, "A deep dive into the Pythagoras Square. Discuss character, energy, health, intelligence and luck from the numerical distribution, and the meaning of its horizontal, vertical and diagonal lines."),
        ("🐉", h.zodiac, "The intersection of East and West: how the Western sign and the Chinese animal conflict or cooperate in one soul."),
        ("🌙", h.moon, "The inner mirror: the lunar phase and its influence on intuition and the emotional landscape."),
        ("❤️", h.love, "Psychological portrait in relationships: what they seek, what they fear, and compatibility keys."),
        ("💼", h.career, "Strategy for success: professional predispositions, leadership qualities and financial karma."),
        ("🌿", h.health, "Psycho-somatic insights and energy protection based on the balance of the psychomatrix."),
        ("🔮", h.destiny, "The final revelation: the mission of the soul, the core lesson of this life and a powerful closing blessing."),
    ]


def _sign_line(sign: str) -> str:
    profile = sign_profile(sign)
    if not profile:
        return sign
    return f"{sign} ({profile['element']} element, {profile['modality']} modality, ruled by {profile['ruler']})"


def _psychomatrix_block(facts: DerivedFacts, indent: str = "  ") -> str:
    square = facts.psychomatrix.square
    lines = [
        f"{indent}{slot['digit']} ({slot['meaning']}): {slot['reading']} (count {slot['count']})"
        for slot in slot_readings(square)
    ]
    lines.append(f"{indent}Line strengths:")
    lines.extend(
        f"{indent}  {line['label']}: {line['total']}" for line in line_strengths(square)
    )
    return "\n".join(lines)


def _working_numbers(facts: DerivedFacts) -> str:
    n = facts.psychomatrix.numbers
    return f"{n.first}, {n.second}, {n.third}, {n.fourth}"


def _mode_rules(mode: str, locale: LocaleProfile) -> str:
    if mode == "concise":
        return (
            "VOLUME REQUIREMENT:\n"
            "- Keep the report focused and concise (500-700 words in total).\n"
            "- Every section MUST contain one short paragraph followed by a <ul> with 2-3 <li> bullet points.\n"
            f"- Every section MUST end with <p><strong>{locale.key_insight}:</strong> one memorable sentence</p>."
        )
    return (
        "VOLUME REQUIREMENT:\n"
        "- The report must be extensive, professional and visually structured (800-1200 words)."
    )


def _format_rules(locale: LocaleProfile) -> str:
    return (
        "FORMATTING:\n"
        f"- Use ONLY HTML tags ({ALLOWED_TAGS}).\n"
        "- DO NOT use any Markdown symbols like asterisks (**), underscores (_), or hashes (#).\n"
        "- NEVER include raw JSON data, technical objects, \"Working Numbers\" strings, or bracketed counts in the response.\n"
        "- NO <html>/<body> tags; return a bare HTML fragment.\n"
        f"- Language: {locale.prompt_language}."
    )


def build_analysis_prompt(
    birth: BirthInput, facts: DerivedFacts, mode: Optional[str] = DEFAULT_MODE
) -> str:
    locale = resolve_locale(birth.language)
    mode = clamp_mode(mode)
    zodiac = facts.zodiac.sign
    animal = facts.chinese_zodiac.animal
    moon = facts.moon
    gender = birth.gender
    sections = "\n\n".join(
        f"- <h3>{icon} {title}</h3>\n  {brief}" for icon, title, brief in _section_titles(locale)
    )

    return f"""ACT AS AN EXPERT ASTROLOGER, NUMEROLOGIST, AND COSMIC GUIDE.
Provide a PROFOUND, PERSONAL character analysis for a {gender} born on {birth.date} at {birth.time or 'unknown time'} in {birth.place or 'unknown place'}.

TECHNICAL CORE DATA:
- WESTERN ZODIAC SIGN: {_sign_line(zodiac)}
- CHINESE ZODIAC ANIMAL: {animal}
- PYTHAGORAS SQUARE (interpreted psychomatrix):
{_psychomatrix_block(facts)}
- NUMEROLOGY WORKING NUMBERS: {_working_numbers(facts)}
- LUNAR PHASE: {moon.phase} (Symbol: {moon.emoji})

IMPORTANT: DO NOT repeat the technical data lists or raw counts (e.g., "1: 5, 2: 3") in the report. Interpret what these numbers mean as professional insights.

YOUR GUIDELINES:
1. INTEGRATED APPROACH: Explain how being a {zodiac} (Western) and a {animal} (Chinese) creates a unique energetic blend.
2. MASTER NUMEROLOGY: Interpret the square through its strong and absent digits and through the strength of its lines and diagonals.
3. LUNAR MYSTICISM: Connect the {moon.phase} to the subconscious mind, emotional reactions and karmic memory.
4. PERSONALIZATION: Always tailor the advice to a {gender}.

{_mode_rules(mode, locale)}

REQUIRED SECTIONS (You MUST use these EXACT titles in <h3> tags):

{sections}

{_format_rules(locale)}
- Tone: premium, mystic, insightful, transformative, yet professional.
"""


def render_grid_table(square: Dict[int, int]) -> str:
    """Reference HTML table of a psychomatrix, cells filled with repeated digits."""
    rows = []
    for row in PSYCHOMATRIX_GRID:
        cells = "".join(
            f"<td>{str(digit) * square.get(digit, 0) if square.get(digit, 0) else '—'}</td>"
            for digit in row
        )
        rows.append(f"<tr>{cells}</tr>")
    return f"<table>{''.join(rows)}</table>"


def _partner_block(label: str, birth: BirthInput, facts: DerivedFacts) -> str:
    return f"""{label}: a {birth.gender} born on {birth.date} at {birth.time or 'unknown time'} in {birth.place or 'unknown place'}
- WESTERN ZODIAC SIGN: {_sign_line(facts.zodiac.sign)}
- CHINESE ZODIAC ANIMAL: {facts.chinese_zodiac.animal}
- LUNAR PHASE: {facts.moon.phase} (Symbol: {facts.moon.emoji})
- NUMEROLOGY WORKING NUMBERS: {_working_numbers(facts)}
- PYTHAGORAS SQUARE (interpreted psychomatrix):
{_psychomatrix_block(facts)}
- PSYCHOMATRIX TABLE TO RENDER: {render_grid_table(facts.psychomatrix.square)}"""


def build_compatibility_prompt(
    first: tuple[BirthInput, DerivedFacts],
    second: tuple[BirthInput, DerivedFacts],
    language: Optional[str],
    mode: Optional[str] = DEFAULT_MODE,
) -> str:
    locale = resolve_locale(language)
    mode = clamp_mode(mode)
    c = locale.compatibility
    volume = "600-900 words" if mode == "detailed" else "400-600 words"

    return f"""ACT AS AN EXPERT ASTROLOGER AND NUMEROLOGIST SPECIALISING IN RELATIONSHIP COMPATIBILITY.
Write ONE unified compatibility narrative for the couple described below. Speak about them together, never as two separate reports.

{_partner_block("PARTNER 1", *first)}

{_partner_block("PARTNER 2", *second)}

REQUIRED STRUCTURE (You MUST use these EXACT titles in <h3> tags, in this order):

- <h3>💞 {c.synergy}</h3>
  An introduction to the shared energy of the couple.

- <h3>🔢 {c.numerology}</h3>
  Render BOTH psychomatrices as two HTML tables placed side by side (wrap them in a single <div style="display:flex; gap:16px;">), reproducing the tables given above cell for cell, each preceded by the partner's label. Then interpret where the squares complement or mirror each other.

- <h3>✨ {c.zodiac}</h3>
  The attraction and tension between the two Western signs and the two Chinese animals.

- <h3>🧭 {c.advice}</h3>
  Practical, concrete advice for the couple as a <ul> list.

RULES:
- NEVER output raw JSON, dictionaries, arrays or bracketed counts. The tables are the only place where digits of the squares may appear.
- Use ONLY HTML tags (<h3>, <p>, <strong>, <ul>, <li>, <div>, <table>, <tr>, <td>).
- DO NOT use any Markdown symbols like asterisks (**), underscores (_), or hashes (#).
- NO <html>/<body> tags; return a bare HTML fragment.
- Length: {volume}.
- Language: {locale.prompt_language}.
- Tone: warm, insightful, honest but constructive.
"""


def build_translation_prompt(html: str, target_lang: Optional[str]) -> str:
    locale = resolve_locale(target_lang)
    return f"""Translate the following HTML fragment into {locale.prompt_language}.

RULES:
- Preserve EVERY HTML tag and attribute exactly as it appears; translate only the human-readable text between tags.
- Keep emoji and numbers unchanged.
- Do not add commentary, explanations, Markdown or code fences.
- Return ONLY the translated HTML fragment.

HTML:
{html}
"""
