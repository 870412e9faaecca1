from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json")


@dataclass(slots=True)
class AnalyzerConfig:
    """Presentation options for the command-line front end."""

    output_format: str = "text"
    show_chart: bool = True
    echo_passage: bool = True
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.output_format = str(self.output_format).lower().strip()
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}; "
                f"got '{self.output_format}'."
            )
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise ValueError(f"Unknown log level '{self.log_level}'.")

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))

    def with_overrides(self, **overrides: Any) -> "AnalyzerConfig":
        """Return a copy with every non-None override applied and re-validated."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes) if changes else self


def config_from_dict(data: Mapping[str, Any] | None) -> AnalyzerConfig:
    """Build an AnalyzerConfig from a mapping; unknown keys are logged and skipped."""
    if not data:
        return AnalyzerConfig()
    allowed = {field.name for field in fields(AnalyzerConfig)}
    unknown = sorted(str(key) for key in data if key not in allowed)
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
    return AnalyzerConfig(**{key: data[key] for key in data if key in allowed})


def config_from_yaml(path: str | Path) -> AnalyzerConfig:
    """Read a YAML mapping of presentation options."""
    with Path(path).open("r", encoding="utf-8") as handle:
        parsed = yaml.safe_load(handle)
    if parsed is not None and not isinstance(parsed, Mapping):
        raise ValueError(f"Configuration in {path} must be a YAML mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None, **overrides: Any) -> AnalyzerConfig:
    """
    Resolve the effective configuration.

    Defaults come first, then the YAML file at ``path`` when given, then any
    keyword overrides that are not None (typically CLI flags).
    """
    base = AnalyzerConfig() if path is None else config_from_yaml(path)
    return base.with_overrides(**overrides)
