import json
from pathlib import Path

from typer.testing import CliRunner

from passage_analyzer.cli import app, read_passage
from passage_analyzer.samples import DEMO_PASSAGE

runner = CliRunner()


def test_cli_demo_prints_report():
    """demo command echoes the sample passage and its report."""
    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0
    assert "SAMPLE PASSAGE FOR ANALYSIS:" in result.stdout
    assert DEMO_PASSAGE in result.stdout
    assert "Total Words Analyzed: 48" in result.stdout


def test_cli_demo_json_output():
    result = runner.invoke(app, ["demo", "--format", "json"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["passage"] == DEMO_PASSAGE
    assert payload["report"]["lexical"]["count"] == 48


def test_cli_analyze_text_option():
    result = runner.invoke(
        app, ["analyze", "--text", "Hi there. Bye now!", "--format", "json"]
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["passage"] == "Hi there. Bye now!"
    assert payload["used_fallback"] is False
    assert payload["report"]["structure"]["sentence_count"] == 2


def test_cli_analyze_input_file(tmp_path: Path):
    passage = tmp_path / "passage.txt"
    passage.write_text("The storm clouds rolled over the bay.", encoding="utf-8")
    result = runner.invoke(app, ["analyze", "--input-path", str(passage), "--no-chart"])
    assert result.exit_code == 0
    assert "Total Words Analyzed: 7" in result.stdout
    assert "Complexity Level:" not in result.stdout


def test_cli_analyze_reads_stdin_until_blank_line():
    result = runner.invoke(
        app,
        ["analyze"],
        input="The storm rolled in.\nSailors watched.\n\nignored line\n",
    )
    assert result.exit_code == 0
    assert "Total Words Analyzed: 6" in result.output
    assert "Total Sentences Detected: 2" in result.output


def test_cli_analyze_empty_input_falls_back_to_demo():
    result = runner.invoke(app, ["analyze"], input="\n")
    assert result.exit_code == 0
    assert "Switching to demonstration mode" in result.output
    assert DEMO_PASSAGE in result.output
    assert "Total Words Analyzed: 48" in result.output


def test_cli_analyze_without_words_falls_back_to_demo():
    result = runner.invoke(app, ["analyze", "--text", "1 2 3 !!!"])
    assert result.exit_code == 0
    assert "No analyzable words found" in result.output
    assert "Total Words Analyzed: 48" in result.output


def test_cli_rejects_text_and_file_together(tmp_path: Path):
    passage = tmp_path / "passage.txt"
    passage.write_text("Some words here.", encoding="utf-8")
    result = runner.invoke(
        app, ["analyze", "--text", "Other words.", "--input-path", str(passage)]
    )
    assert result.exit_code != 0


def test_cli_config_file_sets_output_format(tmp_path: Path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("output_format: json\n", encoding="utf-8")
    result = runner.invoke(app, ["demo", "--config", str(config_path)])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["report"]["complexity_score"] < 2.0


def test_cli_rejects_unknown_format():
    result = runner.invoke(app, ["demo", "--format", "html"])
    assert result.exit_code != 0


def test_cli_print_config():
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "output_format: text" in result.stdout


def test_read_passage_joins_lines_with_spaces():
    lines = ["\n", "first line\n", "second line\r\n", "\n", "after blank\n"]
    assert read_passage(lines) == "first line second line"


def test_read_passage_keeps_whitespace_only_lines():
    lines = ["first\n", "   \n", "second\n", "\n", "ignored\n"]
    assert read_passage(lines) == "first     second"


def test_cli_accepts_log_level():
    result = runner.invoke(app, ["demo", "--log-level", "debug", "--no-chart"])
    assert result.exit_code == 0
    assert "Total Words Analyzed: 48" in result.output


def test_cli_rejects_unknown_log_level():
    result = runner.invoke(app, ["demo", "--log-level", "LOUD"])
    assert result.exit_code != 0
