from __future__ import annotations

from typing import Tuple

from .patterns import PatternRule, make_rule
from .text_utils import collapse_whitespace


PASSIVE_PATTERNS: Tuple[PatternRule, ...] = (
    make_rule(r"shall be (\w+ed) by", r"will be \1 by"),
    make_rule(r"is required to be", "must be"),
    make_rule(r"are required to", "must"),
)

# substring matches, not whole words
MODAL_PATTERNS: Tuple[PatternRule, ...] = (
    make_rule(r"shall", "will"),
    make_rule(r"may not", "cannot"),
)


def _apply_all(text: str, rules: Tuple[PatternRule, ...]) -> str:
    for rule in rules:
        text = rule.apply(text)
    return text


def normalize_voice(text: str) -> str:
    """Passive rewrites, then modal verbs, then whitespace cleanup."""

    out = _apply_all(text, PASSIVE_PATTERNS)
    out = _apply_all(out, MODAL_PATTERNS)
    return collapse_whitespace(out)
