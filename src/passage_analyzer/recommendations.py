from __future__ import annotations

from typing import Dict, Tuple

from .models import RecommendationSet

BASIC_SCORE_CEILING = 3.0
INTERMEDIATE_SCORE_CEILING = 6.0
OVERALL_ADVANCED_SCORE = 5.0

SHORT_PASSAGE_CHARS = 200
LONG_PASSAGE_CHARS = 500

# tier -> (primary recommendation, specific strategy, example)
PROFICIENCY_ADVICE: Dict[str, Tuple[str, str, str]] = {
    "basic": (
        "Incorporate more sophisticated vocabulary",
        "Replace simple words with professional alternatives",
        "'use' → 'utilize', 'help' → 'facilitate'",
    ),
    "intermediate": (
        "Enhance sentence structure complexity",
        "Combine shorter sentences using advanced conjunctions",
        "Add transitional phrases and subordinate clauses",
    ),
    "advanced": (
        "Maintain sophisticated language patterns",
        "Focus on precision and contextual appropriateness",
        "Refine word choice for maximum impact",
    ),
}

PROFICIENCY_ASSESSMENTS: Dict[str, str] = {
    "basic": "Basic writing proficiency detected in passage",
    "intermediate": "Intermediate writing proficiency demonstrated",
    "advanced": "Advanced writing proficiency achieved",
}

LENGTH_NOTES: Dict[str, Tuple[str, ...]] = {
    "expand": (
        "Expand passage length for comprehensive topic coverage",
        "Add supporting details and explanatory content",
    ),
    "condense": (
        "Consider paragraph breaks for improved readability",
        "Ensure concise expression without redundancy",
    ),
    "maintain": (
        "Maintain current passage length for optimal readability",
        "Focus on content quality and coherence",
    ),
}


def proficiency_tier(score: float) -> str:
    if score < BASIC_SCORE_CEILING:
        return "basic"
    if score < INTERMEDIATE_SCORE_CEILING:
        return "intermediate"
    return "advanced"


def length_tier(passage_length: int) -> str:
    if passage_length < SHORT_PASSAGE_CHARS:
        return "expand"
    if passage_length > LONG_PASSAGE_CHARS:
        return "condense"
    return "maintain"


def recommend(raw_text: str, score: float) -> RecommendationSet:
    """Look up proficiency advice by score and structural advice by length."""
    tier = proficiency_tier(score)
    primary, strategy, example = PROFICIENCY_ADVICE[tier]
    length_key = length_tier(len(raw_text))
    return RecommendationSet(
        proficiency_tier=tier,
        primary_recommendation=primary,
        specific_strategy=strategy,
        example=example,
        length_tier=length_key,
        structural_notes=LENGTH_NOTES[length_key],
    )


def overall_proficiency(score: float) -> str:
    """Two-level summary used in the closing line of a report."""
    return "advanced" if score > OVERALL_ADVANCED_SCORE else "developing"
