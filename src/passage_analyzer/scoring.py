from __future__ import annotations

from typing import Sequence

from .errors import EmptyVocabularyError

BASE_WEIGHT = 1.2
LONG_WORD_LENGTH = 8
LONG_WORD_MULTIPLIER = 1.5
TECHNICAL_WORD_LENGTH = 12
TECHNICAL_WORD_MULTIPLIER = 1.3
SCORE_DIVISOR = 8.0
MAX_SCORE = 10.0


def token_weight(token: str) -> float:
    """Weight a token by length; both multipliers apply past 12 characters."""
    length = len(token)
    weight = length * BASE_WEIGHT
    if length > LONG_WORD_LENGTH:
        weight *= LONG_WORD_MULTIPLIER
    if length > TECHNICAL_WORD_LENGTH:
        weight *= TECHNICAL_WORD_MULTIPLIER
    return weight


def score_complexity(tokens: Sequence[str]) -> float:
    """
    Reduce tokens to a complexity score in [0, 10].

    The mean token weight is divided by 8 and clipped at 10; anything above
    the ceiling collapses to exactly 10.0.
    """
    if not tokens:
        raise EmptyVocabularyError()
    total = sum(token_weight(token) for token in tokens)
    raw_score = total / len(tokens)
    return min(raw_score / SCORE_DIVISOR, MAX_SCORE)
