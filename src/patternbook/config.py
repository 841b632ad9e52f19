"""Configuration management for patternbook."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

PATTERNBOOK_HOME = Path(os.environ.get("PATTERNBOOK_HOME", Path.home() / "patternbook"))
CONFIG_FILE = PATTERNBOOK_HOME / "config" / "patternbook.conf"


@dataclass
class Config:
    """patternbook configuration."""

    journal_title: str = "My Journal"
    # Empty means PATTERNBOOK_HOME/journal.txt
    journal_file: str = ""

    @property
    def journal_path(self) -> Path:
        if self.journal_file:
            return Path(self.journal_file).expanduser()
        return PATTERNBOOK_HOME / "journal.txt"


def _strip_value(value: str) -> str:
    # Quoted values may carry an inline comment after the closing quote
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from patternbook.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _strip_value(value.strip())

        match key:
            case "journal_title":
                config.journal_title = value
            case "journal_file":
                config.journal_file = value
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
