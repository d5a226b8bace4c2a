from __future__ import annotations

import re
from types import MappingProxyType
from typing import List, Mapping, Tuple


LEGAL_TERMS: Mapping[str, str] = MappingProxyType({
    "heretofore": "before this",
    "hereinafter": "from now on",
    "whereas": "since",
    "hereby": "by this document",
    "therein": "in that",
    "thereof": "of that",
    "hereunder": "under this agreement",
    "notwithstanding": "despite",
    "aforementioned": "mentioned before",
    "subsequent": "later",
    "prior": "before",
    "pursuant to": "according to",
    "in lieu of": "instead of",
    "forthwith": "immediately",
    "ipso facto": "by the fact itself",
    "inter alia": "among other things",
    "vis-à-vis": "in relation to",
    "force majeure": "unforeseeable circumstances",
    "caveat emptor": "buyer beware",
    "quid pro quo": "something for something",
    "sine qua non": "essential requirement",
    "ad hoc": "for this specific purpose",
    "bona fide": "genuine",
    "pro rata": "proportionally",
    "status quo": "current situation",
    "cease and desist": "stop",
    "null and void": "cancelled",
    "in perpetuity": "forever",
    "indemnify": "protect from loss",
})


def _term_pattern(term: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE)


_COMPILED: Tuple[Tuple[str, re.Pattern[str], str], ...] = tuple(
    (term, _term_pattern(term), plain) for term, plain in LEGAL_TERMS.items()
)


def replace_legal_terms(text: str) -> str:
    """Swap every whole-word legal term for its plain-English equivalent."""

    out = text
    for _, pat, plain in _COMPILED:
        out = pat.sub(plain, out)
    return out


def find_legal_terms(text: str) -> List[str]:
    return [term for term, pat, _ in _COMPILED if pat.search(text)]
