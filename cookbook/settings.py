"""Application settings loaded from environment (and .env).

This module provides a small Settings holder backed by environment variables.
Keep this file simple and import `settings` from other modules.
"""
from __future__ import annotations

from dataclasses import dataclass
import os


def _get(name: str, default: str | None = None) -> str | None:
    v = os.getenv(name)
    if v is None:
        return default
    return v


@dataclass
class Settings:
    # Logging configuration
    # LOG_LEVEL can be DEBUG, INFO, WARNING, ERROR, or CRITICAL
    LOG_LEVEL: str = _get("LOG_LEVEL", "INFO")
    # Optional path to write logs to a file; if unset, logs go to stderr
    LOG_FILE: str | None = _get("LOG_FILE", None)

    # Separator used when formatting rescaled ingredient quantities
    DECIMAL_SEPARATOR: str = _get("DECIMAL_SEPARATOR", ".")

    # Page fetching
    FETCH_TIMEOUT: str = _get("FETCH_TIMEOUT", "20")
    USER_AGENT: str = _get(
        "USER_AGENT", "cookbook-scraper/1.0 (+https://example.com)"
    )

    @property
    def fetch_timeout(self) -> float:
        return float(self.FETCH_TIMEOUT)


settings = Settings()


def validate_settings() -> None:
    """Validate settings and raise a helpful RuntimeError if any are unusable.

    This function checks values at runtime so callers can load a .env first.
    """
    problems = []
    if settings.DECIMAL_SEPARATOR not in (".", ","):
        problems.append(
            f"DECIMAL_SEPARATOR must be '.' or ',' (got {settings.DECIMAL_SEPARATOR!r})"
        )
    try:
        if settings.fetch_timeout <= 0:
            problems.append("FETCH_TIMEOUT must be a positive number of seconds")
    except ValueError:
        problems.append(f"FETCH_TIMEOUT is not a number (got {settings.FETCH_TIMEOUT!r})")
    if problems:
        msg = (
            "Invalid configuration: "
            + "; ".join(problems)
            + "\nPlease fix them in your .env or environment and try again."
        )
        raise RuntimeError(msg)
