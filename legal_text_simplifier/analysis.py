from __future__ import annotations

import re
from dataclasses import asdict
from typing import Any, Dict, List

from .readability import compute_readability, readability_score
from .sentence_segmenter import MAX_SENTENCE_LENGTH
from .terminology import LEGAL_TERMS, find_legal_terms
from .text_utils import split_segments


_PASSIVE_VOICE = re.compile(r"\b(is|are|was|were|being|been)\s+\w+ed\b", re.IGNORECASE)


def suggest_simplifications(text: str) -> List[Dict[str, Any]]:
    """List concrete edits that would make `text` easier to read.

    Three kinds of suggestion are produced:
    - `terminology`: one per legal term found, with its plain replacement
    - `sentence_length`: one per sentence over the length limit (1-based position)
    - `passive_voice`: a single entry with the number of passive constructions
    """

    suggestions: List[Dict[str, Any]] = []

    for term in find_legal_terms(text):
        plain = LEGAL_TERMS[term]
        suggestions.append({
            "type": "terminology",
            "original": term,
            "suggestion": plain,
            "description": f'Replace legal jargon "{term}" with simpler term "{plain}"',
        })

    for i, sentence in enumerate(split_segments(text)):
        s = sentence.strip()
        if len(s) > MAX_SENTENCE_LENGTH:
            suggestions.append({
                "type": "sentence_length",
                "sentence": s,
                "position": i + 1,
                "description": "This sentence is very long and could be broken down into shorter ones",
            })

    passive = _PASSIVE_VOICE.findall(text)
    if passive:
        suggestions.append({
            "type": "passive_voice",
            "count": len(passive),
            "description": "Consider converting passive voice to active voice for better clarity",
        })

    return suggestions


def compare_readability(original: str, simplified: str) -> Dict[str, Any]:
    return {
        "original": {**asdict(compute_readability(original)), "score": readability_score(original)},
        "simplified": {**asdict(compute_readability(simplified)), "score": readability_score(simplified)},
    }
