from __future__ import annotations

from typing import List

from .text_utils import split_sentences


MAX_SENTENCE_LENGTH = 150

CONJUNCTIONS = (", and ", ", but ", ", or ", ", however ", ", therefore ", ", furthermore ")


def break_sentence(sentence: str) -> List[str]:
    """Break one trimmed sentence at a conjunction if it is too long.

    The first conjunction of `CONJUNCTIONS` that occurs wins (list order, not
    position), and the sentence is split at every occurrence of it. Fragments
    are not split again; empty ones are dropped.
    """

    if len(sentence) <= MAX_SENTENCE_LENGTH:
        return [sentence]

    for conjunction in CONJUNCTIONS:
        if conjunction in sentence:
            parts = (part.strip() for part in sentence.split(conjunction))
            return [p for p in parts if p]

    return [sentence]


def segment_sentences(text: str) -> List[str]:
    out: List[str] = []
    for sentence in split_sentences(text):
        out.extend(part + "." for part in break_sentence(sentence))
    return out


def break_down_long_sentences(text: str) -> str:
    return " ".join(segment_sentences(text))
