"""HTTP client for fetching and decrypting cookies stored in CookieCloud."""

from __future__ import annotations

import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from cookiesync.core.errors import DecryptionError, HttpError
from cookiesync.schemas import (
    CookieCloudResponse,
    DecryptedCookiePayload,
    SourceCookie,
)
from cookiesync.services.cookie_cipher import decrypt_cookie_payload

logger = logging.getLogger(__name__)


class CookieCloudClient:
    """Download one user's cookie set from a CookieCloud server."""

    def __init__(
        self,
        *,
        host: str,
        uuid: str,
        password: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._host = host.rstrip("/")
        self._uuid = uuid
        self._password = password
        self._timeout = timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self._host}/get/{self._uuid}"

    async def fetch_cookies(self) -> List[SourceCookie]:
        """Return every stored cookie, flattened across domains in stored order.

        An empty list means the server has no encrypted data for this uuid yet.
        """
        logger.info("Fetching cookies from: %s", self.url)

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(self.url)
        except httpx.HTTPError as exc:
            raise HttpError(f"Request to {self.url} failed: {exc}") from exc

        if not response.is_success:
            raise HttpError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise HttpError(
                "CookieCloud returned a body that is not valid JSON.",
                status_code=response.status_code,
            ) from exc

        encrypted = (
            CookieCloudResponse.model_validate(body).encrypted
            if isinstance(body, dict)
            else None
        )
        if not encrypted:
            logger.info("No encrypted data found in response")
            return []

        logger.info("Decrypting cookie data...")
        decrypted = decrypt_cookie_payload(self._uuid, encrypted, self._password)
        try:
            payload = DecryptedCookiePayload.model_validate(decrypted)
        except ValidationError as exc:
            raise DecryptionError(
                "Decrypted data does not contain a cookie_data mapping."
            ) from exc

        cookies: List[SourceCookie] = []
        for domain_cookies in payload.cookie_data.values():
            if isinstance(domain_cookies, list):
                cookies.extend(domain_cookies)

        logger.info(
            "Found %d cookies from %d domains",
            len(cookies),
            len(payload.cookie_data),
        )
        return cookies


__all__ = ["CookieCloudClient"]
