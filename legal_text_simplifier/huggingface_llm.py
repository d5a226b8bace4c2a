from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from .config import DEFAULT_TIMEOUT_SECONDS
from .errors import ConfigurationError, RemoteProviderError


logger = logging.getLogger(__name__)

PROVIDER = "huggingface"

INFERENCE_URL = "https://api-inference.huggingface.co/models/{model}"


@dataclass(frozen=True)
class HuggingFaceConfig:
    api_key: Optional[str]
    model: str = "facebook/bart-large-cnn"
    max_length: int = 1000
    min_length: int = 50
    timeout: float = DEFAULT_TIMEOUT_SECONDS


def _require_api_key(api_key: Optional[str]) -> str:
    k = (api_key or "").strip()
    if not k:
        raise ConfigurationError("Hugging Face API key not configured", provider=PROVIDER)
    return k


def _summary_text(payload: Any) -> str:
    # summarization models answer with [{"summary_text": "..."}]
    if isinstance(payload, list) and payload and isinstance(payload[0], dict):
        text = payload[0].get("summary_text")
        if isinstance(text, str) and text.strip():
            return text.strip()
    if isinstance(payload, dict) and payload.get("error"):
        raise RemoteProviderError(f"Hugging Face simplification failed: {payload['error']}", provider=PROVIDER)
    raise RemoteProviderError("Hugging Face simplification failed: malformed response", provider=PROVIDER)


def simplify_text(text: str, *, config: HuggingFaceConfig) -> str:
    """Simplify via the Hugging Face Inference API (summarization endpoint)."""

    headers = {
        "Authorization": f"Bearer {_require_api_key(config.api_key)}",
        "Content-Type": "application/json",
    }
    body = {
        "inputs": f"Simplify this legal text into plain English: {text}",
        "parameters": {
            "max_length": config.max_length,
            "min_length": config.min_length,
            "do_sample": False,
        },
    }

    logger.debug("huggingface request model=%s chars=%d", config.model, len(text))
    try:
        response = requests.post(
            INFERENCE_URL.format(model=config.model),
            headers=headers,
            json=body,
            timeout=config.timeout,
        )
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as e:
        raise RemoteProviderError(f"Hugging Face simplification failed: {e}", provider=PROVIDER) from e
    except ValueError as e:
        raise RemoteProviderError(f"Hugging Face simplification failed: invalid JSON ({e})", provider=PROVIDER) from e

    return _summary_text(payload)
