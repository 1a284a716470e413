"""Service layer exports."""

from .cookie_cipher import CookieCloudCipher, decrypt_cookie_payload, derive_key
from .cookie_converter import (
    convert_cookie,
    convert_to_karakeep_format,
    normalize_same_site,
)
from .cookie_writer import save_cookies_to_file

__all__ = [
    "CookieCloudCipher",
    "convert_cookie",
    "convert_to_karakeep_format",
    "decrypt_cookie_payload",
    "derive_key",
    "normalize_same_site",
    "save_cookies_to_file",
]
