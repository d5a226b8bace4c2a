from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Optional

from . import gemini_llm, huggingface_llm, openai_llm
from .config import Settings
from .errors import ConfigurationError, RemoteProviderError, ValidationError


logger = logging.getLogger(__name__)

ProviderName = Literal["openai", "huggingface", "gemini"]

PROVIDERS = ("openai", "huggingface", "gemini")

# tried in this order by the hybrid method; gemini only on explicit request
HYBRID_ORDER = ("openai", "huggingface")


def _configured_key(name: str, settings: Settings) -> Optional[str]:
    return {
        "openai": settings.openai_api_key,
        "huggingface": settings.huggingface_api_key,
        "gemini": settings.gemini_api_key,
    }[name]


def simplify_with_provider(name: str, text: str, settings: Settings) -> str:
    """Send `text` to one remote provider and return its simplified text."""

    if name == "openai":
        return openai_llm.simplify_text(
            text,
            config=openai_llm.OpenAIConfig(
                api_key=settings.openai_api_key,
                model=settings.openai_model,
                timeout=settings.request_timeout,
            ),
        )
    if name == "huggingface":
        return huggingface_llm.simplify_text(
            text,
            config=huggingface_llm.HuggingFaceConfig(
                api_key=settings.huggingface_api_key,
                model=settings.huggingface_model,
                timeout=settings.request_timeout,
            ),
        )
    if name == "gemini":
        return gemini_llm.simplify_text(
            text,
            config=gemini_llm.GeminiConfig(
                api_key=settings.gemini_api_key,
                model=settings.gemini_model,
                timeout=settings.request_timeout,
            ),
        )
    raise ValidationError(f"Unknown AI provider: {name!r} (expected one of {', '.join(PROVIDERS)})")


def hybrid_provider(settings: Settings) -> Optional[str]:
    for name in HYBRID_ORDER:
        if _configured_key(name, settings):
            return name
    return None


@dataclass(frozen=True)
class ProviderOutcome:
    provider: str
    text: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.text is not None


def try_provider(name: str, text: str, settings: Settings) -> ProviderOutcome:
    """Like `simplify_with_provider` but returns provider failures as a value."""

    try:
        out = simplify_with_provider(name, text, settings)
    except (RemoteProviderError, ConfigurationError) as e:
        return ProviderOutcome(provider=name, error=str(e))
    logger.info("%s returned %d chars", name, len(out))
    return ProviderOutcome(provider=name, text=out)
