"""Configuration management for houkoku."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .core.timeofday import DEFAULT_DATE_FORMAT
from .core.variants import DEFAULT_VARIANT, VARIANTS

logger = logging.getLogger(__name__)

HOUKOKU_HOME = Path(os.environ.get("HOUKOKU_HOME", Path.home() / "houkoku"))
CONFIG_FILE = HOUKOKU_HOME / "config" / "houkoku.conf"
DATA_DIR = HOUKOKU_HOME / "data"


@dataclass
class Config:
    """houkoku configuration."""

    variant: str = DEFAULT_VARIANT
    date_format: str = DEFAULT_DATE_FORMAT
    default_duration_minutes: int = 60
    state_file: Path = field(default_factory=lambda: DATA_DIR / "current.json")


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from unquoted values."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def parse_config(text: str) -> Config:
    """Parse "KEY = value" lines into a Config."""
    config = Config()

    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "variant":
                if value in VARIANTS:
                    config.variant = value
                else:
                    logger.warning(f"Unknown VARIANT '{value}', using '{config.variant}'")
            case "date_format":
                config.date_format = value or DEFAULT_DATE_FORMAT
            case "default_duration_minutes":
                try:
                    config.default_duration_minutes = int(value)
                except ValueError:
                    logger.warning(f"Invalid DEFAULT_DURATION_MINUTES: {value}")
            case "state_file":
                if value:
                    config.state_file = Path(value).expanduser()

    return config


def load_config(path: Path | None = None) -> Config:
    """Load configuration from houkoku.conf, defaults if the file is missing."""
    path = path or CONFIG_FILE
    if not path.exists():
        return Config()
    return parse_config(path.read_text())
