"""Configuration management for a11y-heuristics.

Supports loading configuration from YAML or JSON files and environment
variables. Command-line arguments take precedence over both.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

OUTPUT_FORMATS = ("pretty", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class AnalyzerConfig:
    """Configuration for analyzers."""

    exclude: List[str] = field(default_factory=list)


@dataclass
class OutputConfig:
    """Configuration for output."""

    format: str = "pretty"  # pretty or json
    path: Optional[str] = None
    strict: bool = False


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"
    use_rich: bool = True


@dataclass
class Config:
    """Main configuration container."""

    analyzers: AnalyzerConfig = field(default_factory=AnalyzerConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create Config from dictionary.

        Raises:
            ValueError: If the output format or log level is not recognised
        """
        config = cls()

        if "analyzers" in data:
            analyzers = data["analyzers"] or {}
            config.analyzers = AnalyzerConfig(
                exclude=_as_list(analyzers.get("exclude", [])),
            )

        if "output" in data:
            output = data["output"] or {}
            fmt = output.get("format", "pretty")
            if fmt not in OUTPUT_FORMATS:
                raise ValueError(f"Unsupported output format: {fmt}")
            config.output = OutputConfig(
                format=fmt,
                path=output.get("path"),
                strict=bool(output.get("strict", False)),
            )

        if "logging" in data:
            log = data["logging"] or {}
            level = str(log.get("level", "INFO")).upper()
            if level not in LOG_LEVELS:
                raise ValueError(f"Unsupported log level: {level}")
            config.logging = LoggingConfig(
                level=level,
                use_rich=bool(log.get("use_rich", True)),
            )

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert Config to dictionary."""
        return {
            "analyzers": {
                "exclude": list(self.analyzers.exclude),
            },
            "output": {
                "format": self.output.format,
                "path": self.output.path,
                "strict": self.output.strict,
            },
            "logging": {
                "level": self.logging.level,
                "use_rich": self.logging.use_rich,
            },
        }


def _as_list(value: Any) -> List[str]:
    if isinstance(value, str):
        return [v.strip() for v in value.split(",") if v.strip()]
    return [str(v) for v in value or []]


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from file.

    Searches for configuration in the following order:
    1. Specified config_path
    2. ./a11y-heuristics.yaml or ./a11y-heuristics.yml (optionally dot-prefixed)
    3. ~/.a11y-heuristics/config.yaml

    Args:
        config_path: Optional path to configuration file

    Returns:
        Config object with loaded settings
    """
    paths_to_try = []

    if config_path:
        paths_to_try.append(Path(config_path))
    else:
        # Current directory
        paths_to_try.append(Path("a11y-heuristics.yaml"))
        paths_to_try.append(Path("a11y-heuristics.yml"))
        paths_to_try.append(Path(".a11y-heuristics.yaml"))
        paths_to_try.append(Path(".a11y-heuristics.yml"))

        # Home directory
        home = Path.home()
        paths_to_try.append(home / ".a11y-heuristics" / "config.yaml")
        paths_to_try.append(home / ".a11y-heuristics" / "config.yml")

    for path in paths_to_try:
        if path.exists():
            return load_config_from_file(path)

    if config_path:
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    return Config()


def load_config_from_file(path: Path) -> Config:
    """Load configuration from a specific file.

    Args:
        path: Path to configuration file

    Returns:
        Config object

    Raises:
        ValueError: If file format is not supported
    """
    suffix = path.suffix.lower()

    if suffix in (".yaml", ".yml"):
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    elif suffix == ".json":
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    else:
        raise ValueError(f"Unsupported configuration file format: {suffix}")

    return Config.from_dict(data)


def merge_env_config(config: Config) -> Config:
    """Merge environment variables into configuration.

    Environment variables take precedence over file configuration.
    """
    if os.environ.get("A11Y_HEURISTICS_EXCLUDE"):
        config.analyzers.exclude = _as_list(os.environ["A11Y_HEURISTICS_EXCLUDE"])

    if os.environ.get("A11Y_HEURISTICS_FORMAT"):
        fmt = os.environ["A11Y_HEURISTICS_FORMAT"]
        if fmt not in OUTPUT_FORMATS:
            raise ValueError(f"Unsupported output format: {fmt}")
        config.output.format = fmt
    if os.environ.get("A11Y_HEURISTICS_STRICT"):
        config.output.strict = os.environ["A11Y_HEURISTICS_STRICT"] not in ("0", "false", "False")

    if os.environ.get("A11Y_HEURISTICS_LOG_LEVEL"):
        level = os.environ["A11Y_HEURISTICS_LOG_LEVEL"].upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unsupported log level: {level}")
        config.logging.level = level

    return config
