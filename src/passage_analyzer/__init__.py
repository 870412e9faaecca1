"""
passage_analyzer package exports the analysis pipeline for library consumers.
"""

from __future__ import annotations

from .config import AnalyzerConfig, config_from_dict, config_from_yaml, load_config
from .errors import EmptyVocabularyError
from .models import (
    AnalysisOutcome,
    AnalysisReport,
    LexicalStats,
    RecommendationSet,
    StructuralStats,
    VocabularyBuckets,
)
from .pipeline import analyze_with_fallback, run_analysis

__all__ = [
    "AnalyzerConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "EmptyVocabularyError",
    "AnalysisOutcome",
    "AnalysisReport",
    "LexicalStats",
    "RecommendationSet",
    "StructuralStats",
    "VocabularyBuckets",
    "analyze_with_fallback",
    "run_analysis",
]

__version__ = "0.1.0"
