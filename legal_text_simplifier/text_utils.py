from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class CleanOptions:
    collapse_whitespace: bool = True
    strip_page_markers: bool = True
    strip_null_bytes: bool = True


def clean_text(text: str, opts: CleanOptions | None = None) -> str:
    """Normalize text coming out of PDF/OCR extraction."""

    if opts is None:
        opts = CleanOptions()

    if opts.strip_null_bytes:
        text = text.replace("\x00", "")

    if opts.strip_page_markers:
        text = re.sub(r"Page\s+\d+\s+of\s+\d+", "", text, flags=re.IGNORECASE)
        text = re.sub(r"\n\s*\d+\s*\n", "\n", text)

    if opts.collapse_whitespace:
        text = re.sub(r"[ \t]+", " ", text)
        text = re.sub(r"\n{3,}", "\n\n", text)

    return text.strip()


_TERMINATORS = re.compile(r"[.!?]+")
_WHITESPACE = re.compile(r"\s+")


def split_segments(text: str) -> List[str]:
    """Raw pieces between runs of `.`, `!` and `?` (untrimmed, empties kept)."""

    return _TERMINATORS.split(text)


def split_sentences(text: str) -> List[str]:
    out: List[str] = []
    for p in split_segments(text):
        p = p.strip()
        if p:
            out.append(p)
    return out


def tokenize_words(text: str) -> List[str]:
    return text.split()


def count_words(text: str) -> int:
    return len(tokenize_words(text))


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()
