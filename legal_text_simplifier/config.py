from __future__ import annotations

import math
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from dotenv import load_dotenv


DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class Settings:
    openai_api_key: Optional[str] = None
    huggingface_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None
    openai_model: str = "gpt-3.5-turbo"
    huggingface_model: str = "facebook/bart-large-cnn"
    gemini_model: str = "gemini-1.5-flash"
    request_timeout: float = DEFAULT_TIMEOUT_SECONDS


def _clean(value: Optional[str]) -> Optional[str]:
    v = (value or "").strip()
    return v or None


def _first(env: Mapping[str, str], *names: str) -> Optional[str]:
    for name in names:
        v = _clean(env.get(name))
        if v:
            return v
    return None


def _timeout(raw: Optional[str]) -> float:
    if raw is None:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"LEGAL_SIMPLIFIER_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if not math.isfinite(value) or value <= 0:
        raise ValueError("LEGAL_SIMPLIFIER_TIMEOUT must be a positive, finite number.")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from environment variables.

    When no mapping is given the process environment is used, after loading a
    local `.env` file if one exists (existing variables win).
    """

    if environ is None:
        load_dotenv()
        environ = os.environ

    defaults = Settings()
    return Settings(
        openai_api_key=_first(environ, "OPENAI_API_KEY"),
        huggingface_api_key=_first(environ, "HUGGING_FACE_API_KEY", "HF_API_TOKEN"),
        gemini_api_key=_first(environ, "GEMINI_API_KEY", "GOOGLE_API_KEY"),
        openai_model=_first(environ, "OPENAI_MODEL") or defaults.openai_model,
        huggingface_model=_first(environ, "HUGGING_FACE_MODEL") or defaults.huggingface_model,
        gemini_model=_first(environ, "GEMINI_MODEL") or defaults.gemini_model,
        request_timeout=_timeout(_first(environ, "LEGAL_SIMPLIFIER_TIMEOUT")),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read once."""

    return load_settings()
