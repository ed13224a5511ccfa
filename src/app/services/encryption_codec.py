"""
Authenticated encryption of JSON payloads.

Uses the ``cryptography`` library's AESGCM primitive with a random 16-byte
IV per call. The envelope carries three lowercase hex fields::

    {"ciphertext": "<hex>", "iv": "<hex, 16 bytes>", "authTag": "<hex, 16 bytes>"}

AESGCM appends the 16-byte tag to the ciphertext; it is split off on encrypt
and re-attached on decrypt so the tag is checked before any plaintext is
returned.
"""

import json
import logging
import os
import re
from typing import Any

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

KEY_SIZE = 32
IV_SIZE = 16
TAG_SIZE = 16
KEY_FILLER = b"0"

SUPPORTED_ALGORITHMS = {"aes-256-gcm": AESGCM}
LOWER_HEX = re.compile(r"[0-9a-f]*")


class EncryptionFailed(Exception):
    """Encrypting a payload failed"""


class DecryptionFailed(Exception):
    """Envelope could not be decrypted; deliberately carries no detail"""

    def __init__(self):
        super().__init__("Decryption failed")


class EncryptedEnvelope(BaseModel):
    """One AEAD-encrypted message as sent on the wire"""

    model_config = ConfigDict(populate_by_name=True)

    ciphertext: str
    iv: str
    auth_tag: str = Field(alias="authTag")


def derive_key(key: str) -> bytes:
    """
    Turn the configured key string into 32 bytes of key material.

    A 64-char hex string is used as-is. Anything else falls back to the raw
    UTF-8 bytes right-padded with ``"0"`` and truncated to 32 bytes. The
    fallback only keeps older short or non-hex keys working; it adds no
    strength and production keys should be 64 hex chars.
    """
    try:
        key_bytes = bytes.fromhex(key)
    except ValueError:
        key_bytes = b""

    if len(key_bytes) == KEY_SIZE:
        return key_bytes

    logger.warning(
        "ENCRYPTION_KEY is not 64 hex chars, deriving key by padding; "
        "configure a 32-byte hex key for production"
    )
    return key.encode("utf-8").ljust(KEY_SIZE, KEY_FILLER)[:KEY_SIZE]


class EncryptionCodec:
    """
    Symmetric encrypt/decrypt of UTF-8 JSON strings.

    Holds only the key and cipher chosen at construction, so one instance
    can be shared by concurrent requests.
    """

    def __init__(self, key: str, algorithm: str = "aes-256-gcm"):
        cipher_cls = SUPPORTED_ALGORITHMS.get(algorithm.lower())
        if cipher_cls is None:
            raise ValueError(f"Unsupported encryption algorithm: {algorithm}")
        self.algorithm = algorithm.lower()
        self._cipher = cipher_cls(derive_key(key))

    def encrypt(self, plaintext: str) -> EncryptedEnvelope:
        try:
            iv = os.urandom(IV_SIZE)
            sealed = self._cipher.encrypt(iv, plaintext.encode("utf-8"), None)
        except Exception as e:
            logger.error(f"Encryption failed: {type(e).__name__}")
            raise EncryptionFailed("Encryption failed") from e

        return EncryptedEnvelope(
            ciphertext=sealed[:-TAG_SIZE].hex(),
            iv=iv.hex(),
            auth_tag=sealed[-TAG_SIZE:].hex(),
        )

    def decrypt(self, envelope: EncryptedEnvelope) -> str:
        try:
            fields = (envelope.ciphertext, envelope.iv, envelope.auth_tag)
            if not all(LOWER_HEX.fullmatch(field) for field in fields):
                raise ValueError("envelope fields must be lowercase hex")
            ciphertext = bytes.fromhex(envelope.ciphertext)
            iv = bytes.fromhex(envelope.iv)
            tag = bytes.fromhex(envelope.auth_tag)
            if len(iv) != IV_SIZE or len(tag) != TAG_SIZE:
                raise ValueError("bad iv or tag length")
            plaintext = self._cipher.decrypt(iv, ciphertext + tag, None)
            return plaintext.decode("utf-8")
        except (InvalidTag, ValueError, TypeError) as e:
            logger.warning(f"Decryption failed: {type(e).__name__}")
            raise DecryptionFailed() from None

    def encrypt_json(self, payload: Any) -> EncryptedEnvelope:
        """Serialize payload to JSON and encrypt it (client-side helper)"""
        return self.encrypt(json.dumps(payload))

    def decrypt_json(self, envelope: EncryptedEnvelope) -> Any:
        """Decrypt envelope and parse the JSON inside it"""
        plaintext = self.decrypt(envelope)
        try:
            return json.loads(plaintext)
        except ValueError:
            raise DecryptionFailed() from None
