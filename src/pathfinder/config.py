"""Configuration loading and defaults for Pathfinder."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when the config file exists but cannot be used."""


def get_config_dir() -> Path:
    """Get the pathfinder config directory (XDG-style)."""
    return Path.home() / ".config" / "pathfinder"


def get_config_path() -> Path:
    """Get the config file path."""
    return get_config_dir() / "config.toml"


@dataclass
class LoggingConfig:
    """Where log records go besides the Textual devtools console."""

    level: str = "WARNING"
    file: Path | None = None


@dataclass
class Config:
    """Application configuration."""

    opener: str = ""  # empty = platform default
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file, or defaults if there is none.

        The file is optional and never created.
        """
        config_path = get_config_path()
        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"{config_path}: {e}") from e

        # Parse opener command
        opener = data.get("opener", "")
        if not isinstance(opener, str):
            raise ConfigError(f"{config_path}: opener must be a string")

        # Parse logging section
        log_data = data.get("logging", {})
        level = str(log_data.get("level", "WARNING")).upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"{config_path}: unknown log level {level!r}")
        log_file = log_data.get("file", "")
        logging_config = LoggingConfig(
            level=level,
            file=Path(log_file).expanduser() if log_file else None,
        )

        return cls(opener=opener, logging=logging_config)
