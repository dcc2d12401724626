"""
Runtime settings read from environment variables.
"""
import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "CIRURGIAS_"

# The hospital system only exports in this encoding.
SUPPORTED_ENCODING = "iso-8859-1"


@dataclass(frozen=True)
class Settings:
    """
    Application settings.

    Attributes:
        log_level: Root logger level name
        log_file: JSON log file path (None disables the file handler)
        output_dir: Directory where the CLI writes the spreadsheets
        layout_file: Optional JSON file overriding the export tag names
    """
    log_level: str = "INFO"
    log_file: Optional[str] = "logs/app.log"
    output_dir: str = "output"
    layout_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ

        def _get(name: str, default):
            return env.get(f"{ENV_PREFIX}{name}", default)

        return cls(
            log_level=_get("LOG_LEVEL", "INFO").upper(),
            log_file=_get("LOG_FILE", "logs/app.log") or None,
            output_dir=_get("OUTPUT_DIR", "output"),
            layout_file=_get("LAYOUT_FILE", None) or None,
        )


def get_settings() -> Settings:
    """Settings for the current process environment."""
    return Settings.from_env()
