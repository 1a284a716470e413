"""Public schema exports."""

from .cookie import (
    CookieCloudResponse,
    DecryptedCookiePayload,
    NormalizedCookie,
    SourceCookie,
    SyncResult,
)

__all__ = [
    "CookieCloudResponse",
    "DecryptedCookiePayload",
    "NormalizedCookie",
    "SourceCookie",
    "SyncResult",
]
