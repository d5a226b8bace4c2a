"""Legal Text Simplifier.

This package provides:
- Rule-based simplification of legal language (terminology, phrases,
  long sentences, passive voice and modal verbs)
- Optional AI refinement via OpenAI, Hugging Face or Gemini
- Flesch Reading Ease scoring
- Simplification suggestions
- Text extraction from uploaded documents (PDF, DOCX, images via OCR)
"""

from .analysis import suggest_simplifications
from .errors import (
    ConfigurationError,
    RemoteProviderError,
    SimplificationFailed,
    SimplifierError,
    ValidationError,
)
from .pipeline import (
    BatchItemResult,
    SimplificationOptions,
    SimplificationResult,
    batch_simplify_texts,
    simplify_legal_text,
)
from .readability import count_syllables, readability_score
from .simplify import basic_simplification

__all__ = [
    "BatchItemResult",
    "ConfigurationError",
    "RemoteProviderError",
    "SimplificationFailed",
    "SimplificationOptions",
    "SimplificationResult",
    "SimplifierError",
    "ValidationError",
    "basic_simplification",
    "batch_simplify_texts",
    "count_syllables",
    "readability_score",
    "simplify_legal_text",
    "suggest_simplifications",
]
