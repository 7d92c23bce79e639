"""
config.py
---------
Centralised configuration for the schema conversion engine.

Loads settings from environment variables, after reading a ``.env`` file that
sits next to this module (via python-dotenv) when one exists. Settings are
exposed as frozen dataclasses so configuration is immutable at runtime.

Design Decision:
    Class-level defaults mean the engine works without any ``.env`` file;
    the row-size limit defaults to the target engine's documented maximum
    and can be lowered for testing or stricter deployments.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

_env_path = Path(__file__).parent / ".env"
if _env_path.exists():
    load_dotenv(dotenv_path=_env_path)

# Default cap on the summed storage size of non-key columns in one row.
DEFAULT_MAX_NON_KEY_COLUMN_LENGTH = 1600 * 1024 * 1024


@dataclass(frozen=True)
class ConversionConfig:
    """Schema conversion and assessment settings."""
    max_non_key_column_length: int = field(
        default_factory=lambda: int(
            os.getenv("MAX_NON_KEY_COLUMN_LENGTH", str(DEFAULT_MAX_NON_KEY_COLUMN_LENGTH))
        )
    )
    report_dir: Path = field(
        default_factory=lambda: Path(os.getenv("REPORT_DIR", "."))
    )
    log_level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper()
    )
    log_file: str | None = field(
        default_factory=lambda: os.getenv("LOG_FILE")  # None → log to stderr only
    )


@dataclass(frozen=True)
class AppConfig:
    """Root application configuration."""
    conversion: ConversionConfig = field(default_factory=ConversionConfig)
    app_name: str = "Schema Conversion Engine"
    app_version: str = "1.0.0"


def load_config() -> AppConfig:
    """
    Build and return the application configuration.

    Returns:
        AppConfig: Fully populated (and frozen) configuration object.

    Example::

        cfg = load_config()
        print(cfg.conversion.max_non_key_column_length)  # 1677721600
    """
    return AppConfig()


# Module-level singleton used throughout the application
CONFIG: AppConfig = load_config()


def get_log_level() -> int:
    """Convert string log level from config to logging module constant."""
    level = getattr(logging, CONFIG.conversion.log_level, None)
    if not isinstance(level, int):
        return logging.INFO
    return level
