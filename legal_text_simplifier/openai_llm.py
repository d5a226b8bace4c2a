from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import openai
from openai import OpenAI

from .config import DEFAULT_TIMEOUT_SECONDS
from .errors import ConfigurationError, RemoteProviderError


logger = logging.getLogger(__name__)

PROVIDER = "openai"

SYSTEM_PROMPT = """You are a legal document simplification expert. Your task is to rewrite complex legal text in simple, everyday language that anyone can understand. Follow these guidelines:

1. Use simple, common words instead of legal jargon
2. Break down long, complex sentences into shorter ones
3. Explain legal concepts in plain English
4. Maintain the original meaning and intent
5. Use active voice instead of passive voice when possible
6. Replace Latin phrases with English equivalents
7. Make the text more conversational and accessible

The output should be clear, concise, and easy to understand while preserving all important legal information."""


def build_user_prompt(text: str) -> str:
    return f'Please simplify this legal text: "{text}"'


@dataclass(frozen=True)
class OpenAIConfig:
    api_key: Optional[str]
    model: str = "gpt-3.5-turbo"
    temperature: float = 0.3
    max_tokens: int = 2000
    timeout: float = DEFAULT_TIMEOUT_SECONDS


def _require_api_key(api_key: Optional[str]) -> str:
    k = (api_key or "").strip()
    if not k:
        raise ConfigurationError("OpenAI API key not configured", provider=PROVIDER)
    return k


def simplify_text(text: str, *, config: OpenAIConfig) -> str:
    """Rewrite legal text in plain English via OpenAI Chat Completions.

    One attempt only: the client is built with `max_retries=0` and an explicit
    timeout. Every SDK failure surfaces as `RemoteProviderError`.
    """

    client = OpenAI(api_key=_require_api_key(config.api_key), timeout=config.timeout, max_retries=0)

    logger.debug("openai request model=%s chars=%d", config.model, len(text))
    try:
        resp = client.chat.completions.create(
            model=config.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_user_prompt(text)},
            ],
            max_tokens=config.max_tokens,
            temperature=config.temperature,
        )
    except openai.OpenAIError as e:
        raise RemoteProviderError(f"AI simplification failed: {e}", provider=PROVIDER) from e

    try:
        content = resp.choices[0].message.content
    except (AttributeError, IndexError, TypeError) as e:
        raise RemoteProviderError("AI simplification failed: malformed response", provider=PROVIDER) from e

    if not content or not content.strip():
        raise RemoteProviderError("AI simplification failed: empty response", provider=PROVIDER)
    return content.strip()
