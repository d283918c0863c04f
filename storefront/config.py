"""Storefront application settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


PACKAGE_ROOT = Path(__file__).resolve().parent
DEFAULT_SEED_FILE = PACKAGE_ROOT / "data" / "catalog.json"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


def validate_log_level(value: str) -> str:
    v = (value or "INFO").strip().upper()
    if v not in LOG_LEVELS:
        raise ValueError(f"Invalid log level {value!r}: expected one of {sorted(LOG_LEVELS)}")
    return v


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off"}


@dataclass
class StorefrontConfig:
    """Settings for the storefront API."""

    secret_key: str = "storefront-dev-secret"
    seed_file: Path = DEFAULT_SEED_FILE
    seed_on_startup: bool = True
    cookie_name: str = "cartSessionId"
    cookie_max_age_days: int = 30
    cookie_secure: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 5000

    @property
    def cookie_max_age(self) -> int:
        """Session cookie lifetime in seconds."""
        return self.cookie_max_age_days * 24 * 60 * 60

    @classmethod
    def load(cls) -> "StorefrontConfig":
        """Build settings from environment variables (a local .env is loaded first)."""

        load_dotenv()

        max_age_days = _env_int("STOREFRONT_COOKIE_MAX_AGE_DAYS", 30)
        if max_age_days <= 0:
            raise ValueError("STOREFRONT_COOKIE_MAX_AGE_DAYS must be > 0")

        return cls(
            secret_key=os.environ.get("STOREFRONT_SECRET_KEY", "storefront-dev-secret"),
            seed_file=Path(os.environ.get("STOREFRONT_SEED_FILE") or DEFAULT_SEED_FILE),
            seed_on_startup=_env_bool("STOREFRONT_SEED", True),
            cookie_name=os.environ.get("STOREFRONT_COOKIE_NAME") or "cartSessionId",
            cookie_max_age_days=max_age_days,
            cookie_secure=_env_bool("STOREFRONT_COOKIE_SECURE", False),
            log_level=validate_log_level(os.environ.get("LOG_LEVEL", "INFO")),
            host=os.environ.get("HOST", "0.0.0.0"),
            port=_env_int("PORT", 5000),
        )
