from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexicalStats:
    """Word-length statistics for a token sequence."""

    count: int
    average_length: float
    min_length: int
    max_length: int
    advanced_count: int
    advanced_ratio: float
    total_characters: int


@dataclass(frozen=True, slots=True)
class StructuralStats:
    """Punctuation-derived sentence metrics computed from raw text."""

    sentence_count: int
    average_sentence_length: float
    comma_count: int
    semicolon_count: int
    structural_tier: str


@dataclass(frozen=True, slots=True)
class RecommendationSet:
    """Canned advice selected by complexity score and passage length."""

    proficiency_tier: str
    primary_recommendation: str
    specific_strategy: str
    example: str
    length_tier: str
    structural_notes: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class VocabularyBuckets:
    """Tokens split into short and long words, original order preserved."""

    basic: tuple[str, ...]
    advanced: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class AnalysisReport:
    """Everything derived from one passage."""

    lexical: LexicalStats
    structure: StructuralStats
    complexity_score: float
    vocabulary: VocabularyBuckets
    recommendations: RecommendationSet


@dataclass(frozen=True, slots=True)
class AnalysisOutcome:
    """The passage that was analyzed, its report, and whether it was substituted."""

    passage: str
    report: AnalysisReport
    used_fallback: bool
