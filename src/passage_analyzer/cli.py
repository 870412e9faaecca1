from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Iterable

import typer
import yaml

from .config import AnalyzerConfig, load_config
from .errors import EmptyVocabularyError
from .models import AnalysisOutcome
from .pipeline import analyze_with_fallback
from .rendering import render_report, report_to_dict
from .samples import DEMO_PASSAGE

app = typer.Typer(help="Passage complexity analyzer.", no_args_is_help=True)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@app.command()
def analyze(
    text: str | None = typer.Option(
        None, "--text", "-t", help="Passage to analyze (otherwise read from stdin)."
    ),
    input_path: Path | None = typer.Option(
        None,
        "--input-path",
        "-i",
        exists=True,
        readable=True,
        file_okay=True,
        dir_okay=False,
        help="Read the passage from a UTF-8 text file.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    output_format: str | None = typer.Option(
        None, "--format", "-f", help="Output format: 'text' or 'json'."
    ),
    show_chart: bool | None = typer.Option(
        None, "--chart/--no-chart", help="Toggle the complexity bar chart."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
) -> None:
    """Analyze a user-supplied passage."""
    cfg = _resolve_config(config, output_format, show_chart, log_level)
    if text is not None and input_path is not None:
        raise typer.BadParameter("Use either --text or --input-path, not both.")

    if text is not None:
        passage = text
    elif input_path is not None:
        passage = _read_file(input_path)
    else:
        typer.echo("INPUT REQUEST: Please enter the text passage for analysis", err=True)
        typer.echo(
            "INSTRUCTION: Type the complete passage and press Enter twice when finished",
            err=True,
        )
        passage = read_passage(sys.stdin)

    if not passage.strip():
        typer.echo(
            "ERROR: No input provided. Switching to demonstration mode.", err=True
        )
    outcome = _analyze(passage)
    if outcome.used_fallback and passage.strip():
        typer.echo(
            "ERROR: No analyzable words found. Switching to demonstration mode.",
            err=True,
        )
    _emit(cfg, outcome, echo_passage=outcome.used_fallback and cfg.echo_passage)


@app.command()
def demo(
    config: Path | None = typer.Option(None, "--config", "-c"),
    output_format: str | None = typer.Option(
        None, "--format", "-f", help="Output format: 'text' or 'json'."
    ),
    show_chart: bool | None = typer.Option(
        None, "--chart/--no-chart", help="Toggle the complexity bar chart."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
) -> None:
    """Analyze the built-in demonstration passage."""
    cfg = _resolve_config(config, output_format, show_chart, log_level)
    _emit(cfg, _analyze(DEMO_PASSAGE), echo_passage=cfg.echo_passage)


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = AnalyzerConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def read_passage(lines: Iterable[str]) -> str:
    """
    Collect lines until the first empty line that follows some content.

    Only a truly empty line ends input; whitespace-only lines are kept.
    Leading empty lines are skipped and the collected lines are joined with
    single spaces.
    """
    collected: list[str] = []
    for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        if not line:
            if collected:
                break
            continue
        collected.append(line)
    return " ".join(collected)


def _resolve_config(
    config_path: Path | None,
    output_format: str | None,
    show_chart: bool | None,
    log_level: str | None,
) -> AnalyzerConfig:
    """Load the config file, layer CLI overrides on top, and set up logging."""
    try:
        cfg = load_config(
            config_path,
            output_format=output_format,
            show_chart=show_chart,
            log_level=log_level,
        )
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc)) from exc
    _configure_logging(cfg.log_level)
    return cfg


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("passage_analyzer").setLevel(level)


def _read_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"Unable to read {path}: {exc}") from exc


def _analyze(passage: str) -> AnalysisOutcome:
    try:
        return analyze_with_fallback(passage)
    except EmptyVocabularyError as exc:  # pragma: no cover - demo passage has words
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _emit(cfg: AnalyzerConfig, outcome: AnalysisOutcome, *, echo_passage: bool) -> None:
    """Write the report to stdout in the configured format."""
    if cfg.output_format == "json":
        payload = {
            "passage": outcome.passage,
            "used_fallback": outcome.used_fallback,
            "report": report_to_dict(outcome.report),
        }
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    if echo_passage:
        typer.echo("SAMPLE PASSAGE FOR ANALYSIS:")
        typer.echo(f'"{outcome.passage}"')
        typer.echo("")
    typer.echo(render_report(outcome.report, show_chart=cfg.show_chart))


if __name__ == "__main__":
    main()
