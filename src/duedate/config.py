"""Configuration management for duedate."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .core.gestation import AnchorKind
from .core.share import DEFAULT_HASHTAGS
from .state import parse_method

logger = logging.getLogger(__name__)

DUEDATE_HOME = Path(os.environ.get("DUEDATE_HOME", Path.home() / ".duedate"))
CONFIG_FILE = DUEDATE_HOME / "duedate.conf"


@dataclass
class Config:
    """duedate configuration."""

    default_method: AnchorKind = AnchorKind.LMP
    share_url: str = ""
    hashtags: list[str] = field(default_factory=lambda: list(DEFAULT_HASHTAGS))
    log_level: str = "WARNING"


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from duedate.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "default_method":
                method = parse_method(value)
                if method is None:
                    logger.warning(f"Unknown DEFAULT_METHOD {value!r}, using {config.default_method.value}")
                else:
                    config.default_method = method
            case "share_url":
                config.share_url = value
            case "hashtags":
                config.hashtags = [t.strip().lstrip("#") for t in value.split(",") if t.strip()]
            case "log_level":
                config.log_level = value.upper()
            case _:
                logger.debug(f"Ignoring unknown config key {key!r}")

    return config
