"""
Request orchestration for the report endpoints.

The deterministic facts are always returned. The narrative is best effort:
without a completion credential it is ``None``, and a failed completion call
is reported inline in the narrative field instead of failing the request.
Translation has no deterministic payload to fall back to, so its failures
are raised to the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from ..i18n.locales import clamp_lang
from ..schemas import AnalyzeRequest, CompatibilityRequest, TranslateRequest
from .facts import BirthInput, DerivedFacts, derive_facts
from .llm_client import generate_completion, llm_configured
from .prompt_builder import (
    build_analysis_prompt,
    build_compatibility_prompt,
    build_translation_prompt,
    clamp_mode,
)
from .response_normalizer import normalize_response

logger = logging.getLogger(__name__)

MAX_TOKENS = {
    "detailed": 3000,
    "concise": 2000,
    "compatibility": 3000,
    "translation": 4000,
}
NARRATIVE_TEMPERATURE = 0.7
TRANSLATION_TEMPERATURE = 0.3


class AnalysisError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputValidationError(AnalysisError):
    status_code = 400


class TranslationError(AnalysisError):
    status_code = 502


class ServiceUnavailableError(AnalysisError):
    status_code = 503


def _birth_input(req: Optional[AnalyzeRequest], missing_message: str = "Date is required") -> BirthInput:
    if req is None or not (req.date or "").strip():
        raise InputValidationError(missing_message)
    return BirthInput(
        date=req.date.strip(),
        time=req.time or None,
        place=req.place or None,
        gender=req.gender,
        language=clamp_lang(req.language),
    )


def _facts_payload(birth: BirthInput, facts: DerivedFacts, mode: str) -> Dict[str, Any]:
    payload = facts.to_payload()
    payload["aiAnalysis"] = None
    payload["input"] = {
        "date": birth.date,
        "time": birth.time,
        "place": birth.place,
        "gender": birth.gender,
        "language": birth.language,
        "mode": mode,
    }
    payload["warnings"] = facts.warnings
    return payload


async def _narrative(prompt: str, max_tokens: int, kind: str) -> str:
    try:
        raw = await generate_completion(prompt, max_tokens=max_tokens, temperature=NARRATIVE_TEMPERATURE)
    except Exception as e:
        logger.error(f"LLM {kind} generation failed: {type(e).__name__}: {e}")
        return f"AI Error: {e}. Please check API credentials."
    return normalize_response(raw)


async def analyze(req: AnalyzeRequest) -> Dict[str, Any]:
    birth = _birth_input(req)
    mode = clamp_mode(req.mode)
    facts = derive_facts(birth.date, birth.time)
    payload = _facts_payload(birth, facts, mode)

    if not llm_configured():
        logger.info("Completion credential not configured; returning facts only")
        return payload

    prompt = build_analysis_prompt(birth, facts, mode)
    payload["aiAnalysis"] = await _narrative(prompt, MAX_TOKENS[mode], "analysis")
    return payload


async def analyze_compatibility(req: CompatibilityRequest) -> Dict[str, Any]:
    message = "Date is required for both partners"
    first = _birth_input(req.partner1, message)
    second = _birth_input(req.partner2, message)
    language = clamp_lang(req.language or (req.partner1.language if req.partner1 else None))
    mode = clamp_mode(req.mode)

    pairs: Tuple[Tuple[BirthInput, DerivedFacts], ...] = tuple(
        (birth, derive_facts(birth.date, birth.time)) for birth in (first, second)
    )
    result: Dict[str, Any] = {
        "partner1": _facts_payload(pairs[0][0], pairs[0][1], mode),
        "partner2": _facts_payload(pairs[1][0], pairs[1][1], mode),
        "aiCompatibility": None,
        "language": language,
    }

    if not llm_configured():
        logger.info("Completion credential not configured; returning facts only")
        return result

    prompt = build_compatibility_prompt(pairs[0], pairs[1], language, mode)
    result["aiCompatibility"] = await _narrative(prompt, MAX_TOKENS["compatibility"], "compatibility")
    return result


async def translate(req: TranslateRequest) -> Dict[str, Any]:
    if not (req.text or "").strip() or not (req.targetLang or "").strip():
        raise InputValidationError("Text and targetLang are required")
    if not llm_configured():
        raise ServiceUnavailableError("Translation service is not configured")

    language = clamp_lang(req.targetLang)
    prompt = build_translation_prompt(req.text, language)
    try:
        raw = await generate_completion(
            prompt, max_tokens=MAX_TOKENS["translation"], temperature=TRANSLATION_TEMPERATURE
        )
    except Exception as e:
        logger.error(f"LLM translation failed: {type(e).__name__}: {e}")
        raise TranslationError(f"Translation failed: {e}") from e

    translated = normalize_response(raw)
    if not translated:
        raise TranslationError("Translation failed: completion returned no text")
    return {"translatedText": translated, "language": language}
