from __future__ import annotations

from .patterns import rewrite_patterns
from .sentence_segmenter import break_down_long_sentences
from .terminology import replace_legal_terms
from .voice import normalize_voice


def basic_simplification(text: str) -> str:
    """Rule-based simplifier: plain-language terms + shorter, active sentences.

    No network calls; deterministic.
    """

    out = replace_legal_terms(text)
    out = rewrite_patterns(out)
    out = break_down_long_sentences(out)
    return normalize_voice(out)
