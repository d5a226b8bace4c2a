from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .config import DEFAULT_TIMEOUT_SECONDS
from .errors import ConfigurationError, RemoteProviderError
from .openai_llm import SYSTEM_PROMPT, build_user_prompt


logger = logging.getLogger(__name__)

PROVIDER = "gemini"


@dataclass(frozen=True)
class GeminiConfig:
    api_key: Optional[str]
    model: str = "gemini-1.5-flash"
    temperature: float = 0.3
    max_output_tokens: int = 2000
    timeout: float = DEFAULT_TIMEOUT_SECONDS


def _require_api_key(api_key: Optional[str]) -> str:
    k = (api_key or "").strip()
    if not k:
        raise ConfigurationError("Gemini API key not configured", provider=PROVIDER)
    return k


def _response_text(resp) -> str:
    try:
        text = resp.text
    except ValueError:
        # raised when the reply has no simple text part (e.g. blocked)
        text = None
    if text:
        return text

    parts: list[str] = []
    for c in getattr(resp, "candidates", None) or []:
        content = getattr(c, "content", None)
        if not content:
            continue
        for p in getattr(content, "parts", []) or []:
            t = getattr(p, "text", None)
            if t:
                parts.append(t)
    return "\n".join(parts)


def simplify_text(text: str, *, config: GeminiConfig) -> str:
    """Simplify via Gemini using the google-generativeai SDK."""

    try:
        import google.generativeai as genai  # type: ignore
    except ImportError as e:  # pragma: no cover
        raise ConfigurationError(
            "Gemini SDK not installed. Add 'google-generativeai' to requirements and reinstall.",
            provider=PROVIDER,
        ) from e

    genai.configure(api_key=_require_api_key(config.api_key))

    model = genai.GenerativeModel(config.model, system_instruction=SYSTEM_PROMPT)
    logger.debug("gemini request model=%s chars=%d", config.model, len(text))
    try:
        resp = model.generate_content(
            build_user_prompt(text),
            generation_config={
                "temperature": float(config.temperature),
                "max_output_tokens": int(config.max_output_tokens),
            },
            request_options={"timeout": config.timeout},
        )
    except Exception as e:
        raise RemoteProviderError(f"Gemini simplification failed: {e}", provider=PROVIDER) from e

    out = _response_text(resp).strip()
    if not out:
        raise RemoteProviderError("Gemini simplification failed: empty response", provider=PROVIDER)
    return out
