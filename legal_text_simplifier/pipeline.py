from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Literal, Optional, Sequence

from .config import Settings, get_settings
from .errors import RemoteProviderError, SimplificationFailed, ValidationError
from .providers import PROVIDERS, ProviderName, hybrid_provider, simplify_with_provider, try_provider
from .readability import readability_score, round_half_up
from .simplify import basic_simplification
from .text_utils import count_words


logger = logging.getLogger(__name__)

Method = Literal["basic", "ai", "hybrid"]

METHODS = ("basic", "ai", "hybrid")


@dataclass(frozen=True)
class SimplificationOptions:
    method: Method = "hybrid"
    ai_provider: ProviderName = "openai"
    preserve_structure: bool = True


@dataclass(frozen=True)
class SimplificationResult:
    original_text: str
    simplified_text: str
    method: str
    word_count_reduction: int
    readability_score: int
    provider: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


_STRUCTURAL_PATTERNS = [
    re.compile(r"^\d+\.\s+", re.MULTILINE),  # 1. numbered lists
    re.compile(r"^[A-Z]+\.\s+", re.MULTILINE),  # A. letter lists
    re.compile(r"^Article\s+\d+", re.MULTILINE | re.IGNORECASE),
    re.compile(r"^Section\s+\d+", re.MULTILINE | re.IGNORECASE),
    re.compile(r"^Chapter\s+\d+", re.MULTILINE | re.IGNORECASE),
    re.compile(r"^\([a-z]\)", re.MULTILINE),  # (a)
    re.compile(r"^\(\d+\)", re.MULTILINE),  # (1)
]


def preserve_document_structure(simplified_text: str, original_text: str) -> str:
    """Placeholder for carrying headings/numbering over from the original.

    Structural markers are only counted for the log; the simplified text is
    returned unchanged.
    """

    markers = sum(len(p.findall(original_text)) for p in _STRUCTURAL_PATTERNS)
    if markers:
        logger.debug("original text has %d structural markers (not re-applied)", markers)
    return simplified_text


def word_count_reduction(original_text: str, simplified_text: str) -> int:
    """Percentage of words removed; negative when the text grew."""

    before = count_words(original_text)
    if before == 0:
        return 0
    after = count_words(simplified_text)
    return round_half_up(((before - after) / before) * 100)


def _validate(text: Optional[str], opts: SimplificationOptions) -> str:
    if text is None or not text.strip():
        raise ValidationError("No text provided")
    if opts.method not in METHODS:
        raise ValidationError(f"Unknown simplification method: {opts.method!r} (expected one of {', '.join(METHODS)})")
    if opts.ai_provider not in PROVIDERS:
        raise ValidationError(f"Unknown AI provider: {opts.ai_provider!r} (expected one of {', '.join(PROVIDERS)})")
    return text


def _ai(text: str, provider: str, settings: Settings) -> str:
    try:
        return simplify_with_provider(provider, text, settings)
    except RemoteProviderError as e:
        raise SimplificationFailed(f"Text simplification failed: {e}", provider=e.provider) from e


def _hybrid(text: str, settings: Settings) -> tuple[str, Optional[str]]:
    basic = basic_simplification(text)

    provider = hybrid_provider(settings)
    if provider is None:
        logger.info("no AI provider configured; using rule-based result")
        return basic, None

    outcome = try_provider(provider, basic, settings)
    if not outcome.ok:
        logger.warning("AI simplification failed, using basic result: %s", outcome.error)
        return basic, None
    return outcome.text or basic, provider


def simplify_legal_text(
    text: str,
    options: SimplificationOptions | None = None,
    *,
    settings: Settings | None = None,
) -> SimplificationResult:
    """Simplify legal text with the `basic`, `ai` or `hybrid` method.

    - `basic`: terminology, phrase patterns, long-sentence splitting, voice.
    - `ai`: the raw text goes to `options.ai_provider`; remote failures raise
      `SimplificationFailed`, a missing key raises `ConfigurationError`.
    - `hybrid`: `basic` first, then the first configured provider (OpenAI,
      then Hugging Face) refines it; any remote failure falls back to the
      `basic` result.
    """

    if options is None:
        options = SimplificationOptions()
    text = _validate(text, options)
    if settings is None:
        settings = get_settings()

    provider: Optional[str] = None
    if options.method == "basic":
        simplified = basic_simplification(text)
    elif options.method == "ai":
        simplified = _ai(text, options.ai_provider, settings)
        provider = options.ai_provider
    else:
        simplified, provider = _hybrid(text, settings)

    if options.preserve_structure:
        simplified = preserve_document_structure(simplified, text)

    simplified = simplified.strip()
    return SimplificationResult(
        original_text=text,
        simplified_text=simplified,
        method=options.method,
        word_count_reduction=word_count_reduction(text, simplified),
        readability_score=readability_score(simplified),
        provider=provider,
    )


@dataclass(frozen=True)
class BatchItemResult:
    index: int
    success: bool
    original_text: str
    result: Optional[SimplificationResult] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.result is not None:
            return {"index": self.index, "success": self.success, **self.result.to_dict()}
        return {
            "index": self.index,
            "success": self.success,
            "error": self.error,
            "original_text": self.original_text,
        }


def batch_simplify_texts(
    texts: Sequence[str],
    options: SimplificationOptions | None = None,
    *,
    settings: Settings | None = None,
) -> List[BatchItemResult]:
    """Simplify texts one after another; a failing item never stops the rest."""

    results: List[BatchItemResult] = []
    for i, text in enumerate(texts):
        try:
            r = simplify_legal_text(text, options, settings=settings)
        except Exception as e:
            logger.warning("batch item %d failed: %s", i, e)
            results.append(BatchItemResult(index=i, success=False, original_text=text, error=str(e)))
            continue
        results.append(BatchItemResult(index=i, success=True, original_text=text, result=r))
    return results
