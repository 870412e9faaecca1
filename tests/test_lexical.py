import pytest

from passage_analyzer.errors import EmptyVocabularyError
from passage_analyzer.lexical import analyze_lexical


def test_analyze_lexical_basic_stats():
    stats = analyze_lexical(["bb", "dddd", "abcdefgh"])

    assert stats.count == 3
    assert stats.total_characters == 14
    assert stats.average_length == pytest.approx(14 / 3)
    assert stats.min_length == 2
    assert stats.max_length == 8
    assert stats.advanced_count == 1
    assert stats.advanced_ratio == pytest.approx(100 / 3)


def test_seven_letter_words_are_not_advanced():
    stats = analyze_lexical(["testing", "example"])
    assert stats.advanced_count == 0
    assert stats.advanced_ratio == 0.0


def test_average_between_min_and_max():
    stats = analyze_lexical(["of", "understanding", "data", "frameworks"])
    assert stats.min_length <= stats.average_length <= stats.max_length


def test_analyze_lexical_rejects_empty_sequence():
    with pytest.raises(EmptyVocabularyError):
        analyze_lexical([])
