"""Exception types raised by the cookie synchronization pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional


class CookieSyncError(Exception):
    """Base class for failures that abort a synchronization run."""


class ConfigError(CookieSyncError):
    """Required configuration values are missing or empty."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(
            "Missing required environment variables: "
            f"{', '.join(self.missing)}. Please check your .env file."
        )


class HttpError(CookieSyncError):
    """The CookieCloud endpoint could not be reached or answered badly."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class DecryptionError(CookieSyncError):
    """Encrypted cookie data could not be decrypted or parsed."""


class CookieFileWriteError(CookieSyncError):
    """The converted cookies could not be written to disk."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to write cookies to {path}: {reason}")


__all__ = [
    "ConfigError",
    "CookieFileWriteError",
    "CookieSyncError",
    "DecryptionError",
    "HttpError",
]
