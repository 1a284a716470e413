"""Persist converted cookies to the file KaraKeep reads."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Sequence

from cookiesync.core.errors import CookieFileWriteError
from cookiesync.schemas import NormalizedCookie

logger = logging.getLogger(__name__)


def save_cookies_to_file(
    cookies: Sequence[NormalizedCookie], output_path: str | Path
) -> Path:
    """Overwrite ``output_path`` with ``cookies`` as indented JSON."""
    path = Path(output_path)
    try:
        data = json.dumps(list(cookies), indent=2, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError:
        # Lone surrogates cannot be encoded raw; escape them like JSON.stringify.
        data = json.dumps(list(cookies), indent=2).encode("utf-8")

    try:
        path.write_bytes(data)
    except OSError as exc:
        logger.error("Error saving cookies to file: %s", exc)
        raise CookieFileWriteError(path, str(exc)) from exc

    logger.info("Successfully saved %d cookies to %s", len(cookies), path)
    return path


__all__ = ["save_cookies_to_file"]
