from __future__ import annotations

import math
import re
from dataclasses import dataclass

from .text_utils import split_sentences, tokenize_words


_SILENT_SUFFIX = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
_LEADING_Y = re.compile(r"^y")
_NUCLEUS = re.compile(r"[aeiouy]{1,2}")


def count_syllables(word: str) -> int:
    """Approximate syllables: vowel groups after dropping a silent ending."""

    w = word.lower()
    if len(w) <= 3:
        return 1
    w = _SILENT_SUFFIX.sub("", w, count=1)
    w = _LEADING_Y.sub("", w, count=1)
    nuclei = _NUCLEUS.findall(w)
    return len(nuclei) if nuclei else 1


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class ReadabilityMetrics:
    flesch_reading_ease: float
    flesch_kincaid_grade: float
    words: int
    sentences: int
    syllables: int


def compute_readability(text: str) -> ReadabilityMetrics:
    sents = split_sentences(text)
    words = tokenize_words(text)
    if not words or not sents:
        return ReadabilityMetrics(0.0, 0.0, len(words), len(sents), 0)

    syllables = sum(count_syllables(w) for w in words)
    wc = len(words)
    sc = len(sents)

    # Flesch Reading Ease and FK Grade
    fre = 206.835 - 1.015 * (wc / sc) - 84.6 * (syllables / wc)
    fk = 0.39 * (wc / sc) + 11.8 * (syllables / wc) - 15.59

    return ReadabilityMetrics(
        flesch_reading_ease=float(fre),
        flesch_kincaid_grade=float(fk),
        words=wc,
        sentences=sc,
        syllables=syllables,
    )


def readability_score(text: str) -> int:
    """Flesch Reading Ease as an integer clamped to 0..100 (0 for empty text)."""

    m = compute_readability(text)
    if m.words == 0 or m.sentences == 0:
        return 0
    return max(0, min(100, round_half_up(m.flesch_reading_ease)))
