"""Async client for the OpenAI-compatible completion endpoint (Groq by default)."""

from __future__ import annotations

import logging
import os
from typing import Optional

from openai import AsyncOpenAI

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_MODEL = "llama3-8b-8192"


class LLMUnavailableError(RuntimeError):
    """Raised when the completion call cannot be made or fails."""


def llm_configured() -> bool:
    return bool(os.getenv("GROQ_API_KEY"))


def _client() -> AsyncOpenAI:
    api_key = os.getenv("GROQ_API_KEY")
    if not api_key:
        raise LLMUnavailableError("GROQ_API_KEY is not configured")

    base_url = os.getenv("GROQ_API_URL", DEFAULT_BASE_URL)
    timeout = float(os.getenv("AI_TIMEOUT", "120"))
    # Single attempt per request; failures are reported to the caller.
    return AsyncOpenAI(api_key=api_key, base_url=base_url, timeout=timeout, max_retries=0)


async def generate_completion(
    prompt: str, max_tokens: int = 3000, temperature: float = 0.7, model: Optional[str] = None
) -> str:
    """Send one user-role prompt and return the completion text ("" when absent)."""

    client = _client()
    model_name = model or os.getenv("AI_MODEL_NAME", DEFAULT_MODEL)
    try:
        result = await client.chat.completions.create(
            model=model_name,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=max_tokens,
            temperature=temperature,
        )
    except Exception as exc:
        error_msg = str(exc)
        error_type = type(exc).__name__
        lowered = error_msg.lower()

        if "rate_limit" in lowered or error_type == "RateLimitError":
            raise LLMUnavailableError(f"Completion rate limit exceeded: {error_msg}") from exc
        elif "invalid_api_key" in lowered or "authentication" in lowered or error_type == "AuthenticationError":
            raise LLMUnavailableError(f"Invalid completion API key: {error_msg}") from exc
        elif "timeout" in lowered or "timed out" in lowered or error_type in {"TimeoutError", "APITimeoutError"}:
            timeout_val = os.getenv("AI_TIMEOUT", "120")
            raise LLMUnavailableError(
                f"Completion request timed out after {timeout_val}s. "
                f"Consider increasing AI_TIMEOUT."
            ) from exc
        elif "insufficient_quota" in lowered:
            raise LLMUnavailableError(f"Completion quota exceeded: {error_msg}") from exc
        else:
            raise LLMUnavailableError(f"Completion API error: {error_msg}") from exc

    choices = getattr(result, "choices", None) or []
    if not choices:
        logger.warning(f"Completion response from {model_name} carried no choices")
        return ""
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    return (content or "").strip()
