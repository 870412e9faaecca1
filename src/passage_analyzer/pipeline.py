from __future__ import annotations

import logging

from .errors import EmptyVocabularyError
from .lexical import analyze_lexical
from .models import AnalysisOutcome, AnalysisReport
from .recommendations import recommend
from .samples import DEMO_PASSAGE
from .scoring import score_complexity
from .structure import analyze_structure
from .tokenization import tokenize
from .vocabulary import classify_vocabulary

logger = logging.getLogger(__name__)


def run_analysis(raw_text: str) -> AnalysisReport:
    """Run every analysis stage over a passage and bundle the results."""
    tokens = tokenize(raw_text)
    if not tokens:
        raise EmptyVocabularyError()

    lexical = analyze_lexical(tokens)
    score = score_complexity(tokens)
    logger.debug("Analyzed %s tokens, complexity score %.2f", len(tokens), score)
    return AnalysisReport(
        lexical=lexical,
        structure=analyze_structure(raw_text),
        complexity_score=score,
        vocabulary=classify_vocabulary(tokens),
        recommendations=recommend(raw_text, score),
    )


def analyze_with_fallback(
    raw_text: str, fallback_text: str = DEMO_PASSAGE
) -> AnalysisOutcome:
    """
    Analyze ``raw_text``, retrying once with ``fallback_text`` when it has no words.

    An unusable fallback propagates ``EmptyVocabularyError``.
    """
    if raw_text.strip():
        try:
            report = run_analysis(raw_text)
            return AnalysisOutcome(raw_text, report, used_fallback=False)
        except EmptyVocabularyError:
            logger.warning(
                "Passage yielded no analyzable words; using demonstration passage."
            )
    else:
        logger.warning("No input provided; using demonstration passage.")
    report = run_analysis(fallback_text)
    return AnalysisOutcome(fallback_text, report, used_fallback=True)
