from __future__ import annotations

from typing import Sequence

from .models import VocabularyBuckets

BASIC_MAX_LENGTH = 5
ADVANCED_MIN_LENGTH = 8
SAMPLE_SIZE = 5


def classify_vocabulary(tokens: Sequence[str]) -> VocabularyBuckets:
    """
    Partition tokens into basic (<= 5 letters) and advanced (> 8 letters).

    Words of six to eight letters belong to neither bucket.
    """
    basic: list[str] = []
    advanced: list[str] = []
    for token in tokens:
        length = len(token)
        if length <= BASIC_MAX_LENGTH:
            basic.append(token)
        elif length > ADVANCED_MIN_LENGTH:
            advanced.append(token)
    return VocabularyBuckets(basic=tuple(basic), advanced=tuple(advanced))


def sample_terms(bucket: Sequence[str], limit: int = SAMPLE_SIZE) -> str:
    """Comma-join the first ``limit`` tokens of a bucket."""
    return ", ".join(bucket[: max(0, limit)])
