"""Runtime settings, read from the environment (and an optional .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Path | None = None


def load_settings(
    data_dir: str | Path | None = None,
    log_level: str | None = None,
) -> Settings:
    """Build settings from explicit overrides, then PMS_* variables, then defaults."""
    load_dotenv()

    resolved_dir = data_dir or os.environ.get("PMS_DATA_DIR") or DEFAULT_DATA_DIR
    resolved_level = log_level or os.environ.get("PMS_LOG_LEVEL") or DEFAULT_LOG_LEVEL
    log_file = os.environ.get("PMS_LOG_FILE")

    return Settings(
        data_dir=Path(resolved_dir).expanduser(),
        log_level=resolved_level.upper(),
        log_file=Path(log_file).expanduser() if log_file else None,
    )
