"""
Symmetric encryption compatible with the CookieCloud browser extension.

The extension encrypts with CryptoJS passphrase mode, which is the OpenSSL
``enc -aes-256-cbc -md md5`` format: base64 of ``Salted__`` + 8 byte salt +
ciphertext, with key and IV derived by ``EVP_BytesToKey``.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import json
import os
from typing import Any

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from cookiesync.core.errors import DecryptionError

_SALT_HEADER = b"Salted__"
_SALT_SIZE = 8
_KEY_SIZE = 32
_IV_SIZE = 16


def derive_key(uuid: str, password: str) -> str:
    """Return the 16 character passphrase CookieCloud derives for a user."""
    digest = hashlib.md5(f"{uuid}-{password}".encode("utf-8")).hexdigest()
    return digest[:16]


def _evp_bytes_to_key(passphrase: bytes, salt: bytes) -> tuple[bytes, bytes]:
    derived = b""
    block = b""
    while len(derived) < _KEY_SIZE + _IV_SIZE:
        block = hashlib.md5(block + passphrase + salt).digest()
        derived += block
    return derived[:_KEY_SIZE], derived[_KEY_SIZE : _KEY_SIZE + _IV_SIZE]


class CookieCloudCipher:
    """Encrypt and decrypt CookieCloud payloads for one uuid/password pair."""

    def __init__(self, *, uuid: str, password: str) -> None:
        self.key = derive_key(uuid, password)
        self._passphrase = self.key.encode("utf-8")

    def _cipher(self, salt: bytes) -> Cipher:
        key, iv = _evp_bytes_to_key(self._passphrase, salt)
        return Cipher(algorithms.AES(key), modes.CBC(iv))

    def encrypt(self, payload: Any, *, salt: bytes | None = None) -> str:
        """Serialize ``payload`` to JSON and encrypt it the way the extension does."""
        salt = os.urandom(_SALT_SIZE) if salt is None else salt
        if len(salt) != _SALT_SIZE:
            raise ValueError(f"Salt must be exactly {_SALT_SIZE} bytes.")

        padder = padding.PKCS7(algorithms.AES.block_size).padder()
        plaintext = json.dumps(payload).encode("utf-8")
        padded = padder.update(plaintext) + padder.finalize()

        encryptor = self._cipher(salt).encryptor()
        body = encryptor.update(padded) + encryptor.finalize()
        return base64.b64encode(_SALT_HEADER + salt + body).decode("ascii")

    def decrypt(self, ciphertext: str) -> Any:
        """Decrypt ``ciphertext`` and return the parsed JSON document.

        Bad base64, a wrong key, a corrupted body and malformed plaintext all
        raise :class:`DecryptionError`.
        """
        try:
            raw = base64.b64decode(ciphertext, validate=True)
            if not raw.startswith(_SALT_HEADER):
                raise ValueError("ciphertext is missing the OpenSSL salt header")
            salt = raw[len(_SALT_HEADER) : len(_SALT_HEADER) + _SALT_SIZE]
            body = raw[len(_SALT_HEADER) + _SALT_SIZE :]
            if len(salt) != _SALT_SIZE or not body:
                raise ValueError("ciphertext is truncated")

            decryptor = self._cipher(salt).decryptor()
            padded = decryptor.update(body) + decryptor.finalize()
            unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
            plaintext = unpadder.update(padded) + unpadder.finalize()
            return json.loads(plaintext.decode("utf-8"))
        except (TypeError, ValueError, binascii.Error) as exc:
            raise DecryptionError(
                "Failed to decrypt cookie data; check the uuid and password."
            ) from exc


def decrypt_cookie_payload(uuid: str, encrypted: str, password: str) -> Any:
    """Decrypt a CookieCloud ``encrypted`` field into its JSON document."""
    return CookieCloudCipher(uuid=uuid, password=password).decrypt(encrypted)


__all__ = ["CookieCloudCipher", "decrypt_cookie_payload", "derive_key"]
