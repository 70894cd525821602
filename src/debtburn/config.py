"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from .models.debt import AVALANCHE, STRATEGIES

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {value!r}.") from exc


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "debtburn"
    LOG_FILENAME = "debtburn.log"

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("DEBTBURN_DEV_MODE", default=True)
        self.DEFAULT_STRATEGY = os.getenv("DEBTBURN_DEFAULT_STRATEGY", AVALANCHE).strip().lower()
        self.SURPLUS_SHARE = _env_float("DEBTBURN_SURPLUS_SHARE", 0.5)
        if self.DEFAULT_STRATEGY not in STRATEGIES:
            raise ValueError(
                f"DEBTBURN_DEFAULT_STRATEGY must be one of {', '.join(STRATEGIES)}."
            )
        if not 0.0 <= self.SURPLUS_SHARE <= 1.0:
            raise ValueError("DEBTBURN_SURPLUS_SHARE must be between 0 and 1.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where log files live."""

        data_root = os.getenv("DEBTBURN_DATA_DIR", "instance")
        base_path = Path(data_root).expanduser()
        try:
            path = base_path.resolve()
            path.mkdir(parents=True, exist_ok=True)
            return path
        except PermissionError:
            # Protected install locations fall back to user-local storage.
            fallback_path = Path.home() / f".{self.APP_NAME}"
            fallback_path.mkdir(parents=True, exist_ok=True)
            return fallback_path.resolve()


class DevConfig(BaseConfig):
    """Development configuration."""

    DEBUG = True
    TESTING = False
