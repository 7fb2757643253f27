"""Settings loaded from environment variables (``NAEGA_*``).

The ``--file`` option of the CLI overrides ``NAEGA_DATA_FILE``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "NAEGA"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _log_level(raw: str) -> str:
    level = raw.strip().upper()
    return level if level in _LOG_LEVELS else "WARNING"


@dataclass(frozen=True, slots=True)
class Settings:
    data_file: Path
    log_level: str
    log_dir: Path
    log_to_file: bool

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            data_file=_env_path(_k("DATA_FILE"), Path("data/naega.txt")),
            log_level=_log_level(_env(_k("LOG_LEVEL"), "WARNING")),
            log_dir=_env_path(_k("LOG_DIR"), Path(".local/naega")),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
        )


def get_settings() -> Settings:
    # read on every call so tests can monkeypatch the environment
    return Settings.from_env()
