from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def _env_str(name: str) -> Optional[str]:
    value = os.environ.get(name, "").strip()
    return value or None


@dataclass(frozen=True)
class Settings:
    """Harness configuration, read from the environment."""
    log_url: Optional[str] = field(default_factory=lambda: _env_str("UNITHARNESS_LOG_URL"))
    color: bool = field(default_factory=lambda: _env_flag("UNITHARNESS_COLOR"))
    report_path: Optional[str] = field(default_factory=lambda: _env_str("UNITHARNESS_REPORT_PATH"))


_settings: Settings | None = None


def load_env_file(directory: str | os.PathLike | None = None) -> bool:
    """Load ``.env`` from ``directory`` (default: cwd). Existing variables win."""
    base = Path(directory) if directory is not None else Path.cwd()
    loaded = load_dotenv(base / ".env", override=False)
    reset_settings()
    return loaded


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
