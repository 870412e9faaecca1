from __future__ import annotations

from typing import Sequence

from .errors import EmptyVocabularyError
from .models import LexicalStats

# Tuned separately from the scorer/classifier threshold of 8.
ADVANCED_WORD_LENGTH = 7


def analyze_lexical(tokens: Sequence[str]) -> LexicalStats:
    """Compute aggregate word-length statistics for a token sequence."""
    if not tokens:
        raise EmptyVocabularyError()

    lengths = [len(token) for token in tokens]
    count = len(lengths)
    total = sum(lengths)
    advanced = sum(1 for length in lengths if length > ADVANCED_WORD_LENGTH)

    return LexicalStats(
        count=count,
        average_length=total / count,
        min_length=min(lengths),
        max_length=max(lengths),
        advanced_count=advanced,
        advanced_ratio=advanced / count * 100.0,
        total_characters=total,
    )
