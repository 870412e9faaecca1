from __future__ import annotations

from typing import List, TypedDict

from .models import AnalysisReport
from .recommendations import PROFICIENCY_ASSESSMENTS, overall_proficiency
from .structure import describe_tier
from .vocabulary import sample_terms

CHART_WIDTH = 10
FILLED_SEGMENT = "■"
EMPTY_SEGMENT = "□"
CHART_LEGEND = "Scale: □□□□□ Basic | ■■■■■ Intermediate | ■■■■■■■■■■ Advanced"


class LexicalPayload(TypedDict):
    count: int
    average_length: float
    min_length: int
    max_length: int
    advanced_count: int
    advanced_ratio: float
    total_characters: int


class StructurePayload(TypedDict):
    sentence_count: int
    average_sentence_length: float
    comma_count: int
    semicolon_count: int
    structural_tier: str


class VocabularyPayload(TypedDict):
    basic: List[str]
    advanced: List[str]


class RecommendationPayload(TypedDict):
    proficiency_tier: str
    primary_recommendation: str
    specific_strategy: str
    example: str
    length_tier: str
    structural_notes: List[str]


class ReportPayload(TypedDict):
    lexical: LexicalPayload
    structure: StructurePayload
    complexity_score: float
    overall_proficiency: str
    vocabulary: VocabularyPayload
    recommendations: RecommendationPayload


def complexity_bar(score: float, width: int = CHART_WIDTH) -> str:
    """Render the score as ``width`` segments, one filled per whole point."""
    filled = max(0, min(width, int(score)))
    return FILLED_SEGMENT * filled + EMPTY_SEGMENT * (width - filled)


def render_report(report: AnalysisReport, *, show_chart: bool = True) -> str:
    """Format a report as the sectioned plain-text summary printed by the CLI."""
    lexical = report.lexical
    structure = report.structure
    vocab = report.vocabulary
    recs = report.recommendations
    score = report.complexity_score

    lines: List[str] = []
    _heading(lines, "TEXT ANALYSIS RESULTS", 45)
    lines.append(f"Total Words Analyzed: {lexical.count}")
    lines.append(f"Average Word Length: {lexical.average_length:.2f} characters")
    lines.append(f"Minimum Word Length: {lexical.min_length} characters")
    lines.append(f"Maximum Word Length: {lexical.max_length} characters")
    lines.append(f"Advanced Vocabulary Ratio: {lexical.advanced_ratio:.2f}%")
    lines.append(f"Total Character Count: {lexical.total_characters}")

    _heading(lines, "SENTENCE STRUCTURE ANALYSIS", 30)
    lines.append(f"Total Sentences Detected: {structure.sentence_count}")
    lines.append(
        f"Average Sentence Length: {structure.average_sentence_length:.1f} characters"
    )
    lines.append(f"Comma Usage Frequency: {structure.comma_count} instances")
    lines.append(f"Advanced Punctuation Usage: {structure.semicolon_count} semicolons")
    lines.append(f"Assessment: {describe_tier(structure.structural_tier)}")

    _heading(lines, "COMPLEXITY ASSESSMENT", 30)
    lines.append(f"Overall Passage Complexity Score: {score:.2f}/10.0")
    if show_chart:
        _heading(lines, "PASSAGE COMPLEXITY VISUALIZATION", 35)
        lines.append(f"Complexity Level: {complexity_bar(score)} ({score:.1f}/10.0)")
        lines.append(CHART_LEGEND)

    _heading(lines, "VOCABULARY ENHANCEMENT SUGGESTIONS", 40)
    lines.append(
        f"Basic Terms Identified ({len(vocab.basic)} items): {sample_terms(vocab.basic)}"
    )
    lines.append(
        f"Advanced Terms Detected ({len(vocab.advanced)} items): "
        f"{sample_terms(vocab.advanced)}"
    )

    _heading(lines, "PASSAGE IMPROVEMENT RECOMMENDATIONS", 50)
    lines.append(f"ASSESSMENT: {PROFICIENCY_ASSESSMENTS[recs.proficiency_tier]}")
    lines.append(f"PRIMARY RECOMMENDATION: {recs.primary_recommendation}")
    lines.append(f"SPECIFIC STRATEGY: {recs.specific_strategy}")
    lines.append(f"EXAMPLE ENHANCEMENT: {recs.example}")
    lines.append("")
    lines.append("STRUCTURAL RECOMMENDATIONS:")
    lines.extend(f"• {note}" for note in recs.structural_notes)

    _heading(lines, "FINAL ASSESSMENT SUMMARY", 25)
    lines.append(f"Processed {lexical.count} vocabulary elements.")
    lines.append(
        f"Passage complexity indicates {overall_proficiency(score)} "
        "writing proficiency levels."
    )
    return "\n".join(lines).lstrip("\n")


def report_to_dict(report: AnalysisReport) -> ReportPayload:
    """Convert a report into a JSON-serializable dictionary."""
    lexical = report.lexical
    structure = report.structure
    recs = report.recommendations
    return {
        "lexical": {
            "count": lexical.count,
            "average_length": lexical.average_length,
            "min_length": lexical.min_length,
            "max_length": lexical.max_length,
            "advanced_count": lexical.advanced_count,
            "advanced_ratio": lexical.advanced_ratio,
            "total_characters": lexical.total_characters,
        },
        "structure": {
            "sentence_count": structure.sentence_count,
            "average_sentence_length": structure.average_sentence_length,
            "comma_count": structure.comma_count,
            "semicolon_count": structure.semicolon_count,
            "structural_tier": structure.structural_tier,
        },
        "complexity_score": report.complexity_score,
        "overall_proficiency": overall_proficiency(report.complexity_score),
        "vocabulary": {
            "basic": list(report.vocabulary.basic),
            "advanced": list(report.vocabulary.advanced),
        },
        "recommendations": {
            "proficiency_tier": recs.proficiency_tier,
            "primary_recommendation": recs.primary_recommendation,
            "specific_strategy": recs.specific_strategy,
            "example": recs.example,
            "length_tier": recs.length_tier,
            "structural_notes": list(recs.structural_notes),
        },
    }


def _heading(lines: List[str], title: str, rule_width: int) -> None:
    lines.append("")
    lines.append(f"{title}:")
    lines.append("-" * rule_width)
