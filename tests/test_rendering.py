import json

from passage_analyzer.pipeline import run_analysis
from passage_analyzer.rendering import complexity_bar, render_report, report_to_dict
from passage_analyzer.samples import DEMO_PASSAGE


def test_complexity_bar_fills_whole_points():
    assert complexity_bar(0.0) == "□" * 10
    assert complexity_bar(1.74) == "■" + "□" * 9
    assert complexity_bar(10.0) == "■" * 10
    assert complexity_bar(3.9, width=5) == "■■■□□"


def test_render_report_for_demo_passage():
    output = render_report(run_analysis(DEMO_PASSAGE))

    assert "Total Words Analyzed: 48" in output
    assert "Average Word Length: 8.08 characters" in output
    assert "Advanced Vocabulary Ratio: 56.25%" in output
    assert "Average Sentence Length: 146.3 characters" in output
    assert "Assessment: Complex sentence structures detected" in output
    assert "Overall Passage Complexity Score: 1.74/10.0" in output
    assert "Complexity Level: ■□□□□□□□□□ (1.7/10.0)" in output
    assert "Basic Terms Identified (13 items): the, of, of, and, to" in output
    assert (
        "Advanced Terms Detected (21 items): implementation, artificial, "
        "intelligence, technologies, comprehensive"
    ) in output
    assert "ASSESSMENT: Basic writing proficiency detected in passage" in output
    assert "• Maintain current passage length for optimal readability" in output
    assert "indicates developing writing proficiency" in output


def test_render_report_without_chart():
    output = render_report(run_analysis(DEMO_PASSAGE), show_chart=False)
    assert "Complexity Level:" not in output


def test_report_to_dict_is_json_serializable():
    payload = report_to_dict(run_analysis("Hi there. Bye now!"))
    decoded = json.loads(json.dumps(payload))

    assert decoded["lexical"]["count"] == 4
    assert decoded["structure"]["sentence_count"] == 2
    assert decoded["vocabulary"]["basic"] == ["hi", "there", "bye", "now"]
    assert decoded["recommendations"]["length_tier"] == "expand"
    assert decoded["overall_proficiency"] == "developing"


def test_chart_section_has_heading_and_legend():
    output = render_report(run_analysis(DEMO_PASSAGE))
    assert "PASSAGE COMPLEXITY VISUALIZATION:" in output
    assert "Scale: □□□□□ Basic | ■■■■■ Intermediate | ■■■■■■■■■■ Advanced" in output

    hidden = render_report(run_analysis(DEMO_PASSAGE), show_chart=False)
    assert "PASSAGE COMPLEXITY VISUALIZATION" not in hidden
    assert "Scale:" not in hidden
