"""Report language table.

One record per supported language code. Unknown or empty codes resolve to
the Russian entry, which is the default language of the report prompts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class ReportHeadings:
    intro: str
    numerology: str
    zodiac: str
    moon: str
    love: str
    career: str
    health: str
    destiny: str


@dataclass(frozen=True)
class CompatibilityHeadings:
    synergy: str
    numerology: str
    zodiac: str
    advice: str


@dataclass(frozen=True)
class LocaleProfile:
    code: str
    prompt_language: str
    headings: ReportHeadings
    compatibility: CompatibilityHeadings
    key_insight: str


DEFAULT_LANGUAGE = "ru"

LOCALES: Dict[str, LocaleProfile] = {
    "en": LocaleProfile(
        code="en",
        prompt_language="English",
        headings=ReportHeadings(
            intro="The Cosmic Blueprint",
            numerology="The Numerical Code of Soul",
            zodiac="The Animal Spirit & Stars",
            moon="Lunar Emotional Tapestry",
            love="Love, Relationships & Compatibility",
            career="Career, Success & Financial Growth",
            health="Health & Vital Energy",
            destiny="The Ultimate Destiny",
        ),
        compatibility=CompatibilityHeadings(
            synergy="The Synergy of Two Souls",
            numerology="Numerology Resonance",
            zodiac="Zodiac Attraction",
            advice="Practical Advice for the Couple",
        ),
        key_insight="Key Insight",
    ),
    "de": LocaleProfile(
        code="de",
        prompt_language="German",
        headings=ReportHeadings(
            intro="Der kosmische Bauplan",
            numerology="Der numerische Code der Seele",
            zodiac="Tiergeist & Sterne",
            moon="Mond-Emotionsgeflecht",
            love="Liebe, Beziehungen & Kompatibilität",
            career="Karriere, Erfolg & finanzielles Wachstum",
            health="Gesundheit & Vitalenergie",
            destiny="Das ultimative Schicksal",
        ),
        compatibility=CompatibilityHeadings(
            synergy="Die Synergie zweier Seelen",
            numerology="Numerologische Resonanz",
            zodiac="Anziehung der Tierkreiszeichen",
            advice="Praktische Ratschläge für das Paar",
        ),
        key_insight="Kernaussage",
    ),
    "fr": LocaleProfile(
        code="fr",
        prompt_language="French",
        headings=ReportHeadings(
            intro="Le plan cosmique",
            numerology="Le code numérique de l'âme",
            zodiac="L'esprit animal et les étoiles",
            moon="Tapisserie émotionnelle lunaire",
            love="Amour, relations et compatibilité",
            career="Carrière, succès et croissance financière",
            health="Santé et énergie vitale",
            destiny="Le destin ultime",
        ),
        compatibility=CompatibilityHeadings(
            synergy="La synergie de deux âmes",
            numerology="Résonance numérologique",
            zodiac="Attraction zodiacale",
            advice="Conseils pratiques pour le couple",
        ),
        key_insight="Idée clé",
    ),
    "es": LocaleProfile(
        code="es",
        prompt_language="Spanish",
        headings=ReportHeadings(
            intro="El plano cósmico",
            numerology="El código numérico del alma",
            zodiac="El espíritu animal y las estrellas",
            moon="Tapiz emocional lunar",
            love="Amor, relaciones y compatibilidad",
            career="Carrera, éxito y crecimiento financiero",
            health="Salud y energía vital",
            destiny="El destino final",
        ),
        compatibility=CompatibilityHeadings(
            synergy="La sinergia de dos almas",
            numerology="Resonancia numerológica",
            zodiac="Atracción zodiacal",
            advice="Consejos prácticos para la pareja",
        ),
        key_insight="Idea clave",
    ),
    "uk": LocaleProfile(
        code="uk",
        prompt_language="Ukrainian",
        headings=ReportHeadings(
            intro="Космічне креслення",
            numerology="Числовий код душі",
            zodiac="Дух тварин і зірки",
            moon="Місячне емоційне мереживо",
            love="Кохання, стосунки та сумісність",
            career="Кар’єра, успіх та фінансове зростання",
            health="Здоров’я та життєва енергія",
            destiny="Вище призначення",
        ),
        compatibility=CompatibilityHeadings(
            synergy="Синергія двох душ",
            numerology="Нумерологічний резонанс",
            zodiac="Зодіакальне тяжіння",
            advice="Практичні поради для пари",
        ),
        key_insight="Ключова думка",
    ),
    "ru": LocaleProfile(
        code="ru",
        prompt_language="Russian",
        headings=ReportHeadings(
            intro="Космический чертеж",
            numerology="Числовой код души",
            zodiac="Дух животных и звезды",
            moon="Лунный эмоциональный гобелен",
            love="Любовь, отношения и совместимость",
            career="Карьера, успех и финансовый рост",
            health="Здоровье и жизненная энергия",
            destiny="Высшее предназначение",
        ),
        compatibility=CompatibilityHeadings(
            synergy="Синергия двух душ",
            numerology="Нумерологический резонанс",
            zodiac="Зодиакальное притяжение",
            advice="Практические советы для пары",
        ),
        key_insight="Ключевая мысль",
    ),
}

SUPPORTED_LANGS = set(LOCALES)


def clamp_lang(lang: Optional[str]) -> str:
    if not lang:
        return DEFAULT_LANGUAGE
    lang = lang.strip().lower()
    return lang if lang in SUPPORTED_LANGS else DEFAULT_LANGUAGE


def resolve_locale(lang: Optional[str]) -> LocaleProfile:
    return LOCALES[clamp_lang(lang)]
