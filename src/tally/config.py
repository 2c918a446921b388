"""Configuration management for Tally."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

TALLY_HOME = Path(os.environ.get("TALLY_HOME", Path.home() / "tally"))
CONFIG_FILE = TALLY_HOME / "config" / "tally.conf"
DATA_DIR = TALLY_HOME / "data"
DEFAULT_SAVE_FILE = DATA_DIR / "tasks.txt"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Tally configuration."""

    data_file: str = ""
    log_level: str = "WARNING"
    assistant_name: str = "Tally"

    def save_path(self) -> Path:
        """Resolve the save file location."""
        if self.data_file:
            return Path(self.data_file).expanduser()
        return DEFAULT_SAVE_FILE

    def logging_level(self) -> int:
        """Numeric logging level, falling back to WARNING for unknown names."""
        name = self.log_level.upper()
        if name not in LOG_LEVELS:
            logger.warning(f"Unknown LOG_LEVEL {self.log_level!r}, using WARNING")
            return logging.WARNING
        return getattr(logging, name)


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from tally.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            logger.debug(f"Ignoring config line without '=': {line!r}")
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_file":
                config.data_file = value
            case "log_level":
                config.log_level = value
            case "assistant_name":
                config.assistant_name = value
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
