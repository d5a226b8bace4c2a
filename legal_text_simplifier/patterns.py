from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PatternRule:
    matcher: re.Pattern[str]
    replacement: str

    def apply(self, text: str) -> str:
        return self.matcher.sub(self.replacement, text)


def make_rule(pattern: str, replacement: str) -> PatternRule:
    return PatternRule(re.compile(pattern, re.IGNORECASE), replacement)


# Applied in this order; each rule sees the output of the ones before it.
SENTENCE_PATTERNS: Tuple[PatternRule, ...] = (
    make_rule(r"shall be deemed to be", "is considered"),
    make_rule(r"in the event that", "if"),
    make_rule(r"for the purpose of", "to"),
    make_rule(r"with respect to", "about"),
    make_rule(r"in accordance with", "following"),
    make_rule(r"in connection with", "related to"),
    make_rule(r"subject to the provisions of", "following the rules in"),
    make_rule(r"without prejudice to", "without affecting"),
)


def rewrite_patterns(text: str) -> str:
    """Replace wordy legal phrases with short equivalents."""

    out = text
    for rule in SENTENCE_PATTERNS:
        out = rule.apply(out)
    return out
