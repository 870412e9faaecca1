from __future__ import annotations

import re
from typing import List

# ASCII whitespace only; NBSP and other Unicode separators are stripped as
# non-letters instead of splitting words.
WHITESPACE_RE = re.compile(r"[ \t\n\v\f\r]+")
NON_ALPHA_RE = re.compile(r"[^A-Za-z]+")
MIN_TOKEN_LENGTH = 2


def normalize_fragment(fragment: str) -> str:
    """Drop every non-ASCII-letter character and lowercase the rest."""
    return NON_ALPHA_RE.sub("", fragment).lower()


def tokenize(text: str) -> List[str]:
    """
    Split text on ASCII whitespace and return normalized word tokens.

    Fragments that shrink below two letters after normalization (digits,
    initials, stray punctuation) are dropped.
    """
    tokens: List[str] = []
    for fragment in WHITESPACE_RE.split(text):
        cleaned = normalize_fragment(fragment)
        if len(cleaned) >= MIN_TOKEN_LENGTH:
            tokens.append(cleaned)
    return tokens
