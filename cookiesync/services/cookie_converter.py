"""Convert CookieCloud cookies into KaraKeep's cookie file format."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from cookiesync.schemas import NormalizedCookie, SourceCookie

SAME_SITE_MAP = {
    "no_restriction": "None",
    "lax": "Lax",
    "unspecified": "Lax",
    "strict": "Strict",
}
SAME_SITE_FALLBACK = "Lax"


def normalize_same_site(value: Any) -> str:
    """Map a browser ``sameSite`` value onto ``None``/``Lax``/``Strict``."""
    return SAME_SITE_MAP.get(str(value).lower(), SAME_SITE_FALLBACK)


def _expires(expiration_date: Any) -> Optional[int]:
    # expirationDate is already epoch seconds; only the fraction is dropped.
    if isinstance(expiration_date, bool):
        return None
    if isinstance(expiration_date, str):
        try:
            expiration_date = float(expiration_date)
        except ValueError:
            return None
    if isinstance(expiration_date, (int, float)) and math.isfinite(expiration_date):
        return math.floor(expiration_date)
    return None


def convert_cookie(cookie: SourceCookie) -> NormalizedCookie:
    """Project one source cookie, keeping only the fields it actually carries."""
    if not isinstance(cookie, Mapping):
        return {}

    converted: NormalizedCookie = {}
    for key in ("name", "value"):
        if key in cookie:
            converted[key] = cookie[key]

    if cookie.get("domain"):
        converted["domain"] = cookie["domain"]

    if cookie.get("path"):
        converted["path"] = cookie["path"]

    if cookie.get("expirationDate"):
        expires = _expires(cookie["expirationDate"])
        if expires is not None:
            converted["expires"] = expires

    for flag in ("httpOnly", "secure"):
        if isinstance(cookie.get(flag), bool):
            converted[flag] = cookie[flag]

    if cookie.get("sameSite"):
        converted["sameSite"] = normalize_same_site(cookie["sameSite"])

    return converted


def convert_to_karakeep_format(
    cookies: Iterable[SourceCookie],
) -> List[NormalizedCookie]:
    """Convert cookies one-to-one, preserving their order."""
    return [convert_cookie(cookie) for cookie in cookies]


__all__ = [
    "SAME_SITE_MAP",
    "convert_cookie",
    "convert_to_karakeep_format",
    "normalize_same_site",
]
