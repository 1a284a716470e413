"""
Data shapes for CookieCloud payloads and KaraKeep cookie records.

Cookie records stay plain mappings so that field presence and raw value types
survive until conversion.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Literal, Optional, TypedDict

from pydantic import BaseModel, ConfigDict, Field


class SourceCookie(TypedDict, total=False):
    """Cookie as exported by the CookieCloud browser extension."""

    name: str
    value: str
    domain: str
    path: str
    expirationDate: float
    httpOnly: bool
    secure: bool
    sameSite: str
    hostOnly: bool
    session: bool
    storeId: str


class NormalizedCookie(TypedDict, total=False):
    """Cookie in the format KaraKeep loads from its cookie file."""

    name: str
    value: str
    domain: str
    path: str
    expires: int
    httpOnly: bool
    secure: bool
    sameSite: Literal["None", "Lax", "Strict"]


class CookieCloudResponse(BaseModel):
    """Body returned by ``GET <host>/get/<uuid>``."""

    model_config = ConfigDict(extra="ignore")

    encrypted: Any = Field(
        None,
        description="Base64 ciphertext; absent or falsy until the extension uploads.",
    )


class DecryptedCookiePayload(BaseModel):
    """Plaintext document recovered from ``encrypted``."""

    model_config = ConfigDict(extra="ignore")

    cookie_data: Dict[str, Any] = Field(
        ..., description="Domain name mapped to the cookies stored for it."
    )
    local_storage_data: Optional[Dict[str, Any]] = Field(
        None, description="Per-origin localStorage snapshot; not used here."
    )


class SyncResult(BaseModel):
    """Outcome of a single synchronization run."""

    status: Literal["synced", "empty"]
    cookie_count: int = 0
    output_path: Optional[Path] = None


__all__ = [
    "CookieCloudResponse",
    "DecryptedCookiePayload",
    "NormalizedCookie",
    "SourceCookie",
    "SyncResult",
]
