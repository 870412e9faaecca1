from __future__ import annotations

from .models import StructuralStats

SENTENCE_TERMINATORS = frozenset(".!?")

COMPLEX_SENTENCE_CHARS = 80
MODERATE_SENTENCE_CHARS = 50

TIER_ASSESSMENTS = {
    "complex": "Complex sentence structures detected",
    "moderate": "Moderate sentence complexity observed",
    "simple": "Simple sentence structures identified",
}


def analyze_structure(raw_text: str) -> StructuralStats:
    """
    Count sentence terminators, commas and semicolons in the raw text.

    The average sentence length is measured in characters, not words, and
    the divisor is floored at one so text without terminators still gets a
    value.
    """
    sentences = 0
    commas = 0
    semicolons = 0
    for ch in raw_text:
        if ch in SENTENCE_TERMINATORS:
            sentences += 1
        elif ch == ",":
            commas += 1
        elif ch == ";":
            semicolons += 1

    average = len(raw_text) / max(sentences, 1)
    return StructuralStats(
        sentence_count=sentences,
        average_sentence_length=average,
        comma_count=commas,
        semicolon_count=semicolons,
        structural_tier=structural_tier(average),
    )


def structural_tier(average_sentence_length: float) -> str:
    if average_sentence_length > COMPLEX_SENTENCE_CHARS:
        return "complex"
    if average_sentence_length > MODERATE_SENTENCE_CHARS:
        return "moderate"
    return "simple"


def describe_tier(tier: str) -> str:
    """Return the human-readable assessment for a structural tier."""
    try:
        return TIER_ASSESSMENTS[tier]
    except KeyError as exc:
        raise ValueError(f"Unknown structural tier '{tier}'.") from exc
