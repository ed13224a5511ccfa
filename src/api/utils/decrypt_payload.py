"""
Decrypt gate

Second gate of the request pipeline, for POST/PUT/PATCH only. A body
carrying non-empty ciphertext/iv/authTag is decrypted and replaced by the JSON
inside it; any other body passes through untouched so plaintext and
encrypted endpoints can coexist.
"""

import json
import logging
from typing import Any

from fastapi import Depends, Request, status

from src.libs.result import Error
from src.api.error import ClientError
from src.app.services.encryption_codec import (
    DecryptionFailed,
    EncryptedEnvelope,
    EncryptionCodec,
)
from src.depends import get_encryption_codec

logger = logging.getLogger(__name__)

MUTATING_METHODS = {"POST", "PUT", "PATCH"}
ENVELOPE_FIELDS = ("ciphertext", "iv", "authTag")

MISSING_ENCRYPTED_PAYLOAD = Error("MISSING_ENCRYPTED_PAYLOAD", "Missing encrypted payload")
INVALID_ENCRYPTED_PAYLOAD = Error(
    "INVALID_ENCRYPTED_PAYLOAD", "Invalid encrypted payload format"
)


def is_envelope(body: Any) -> bool:
    """All three envelope fields present and non-empty"""
    return isinstance(body, dict) and all(body.get(field) for field in ENVELOPE_FIELDS)


async def decrypted_body(
    request: Request, codec: EncryptionCodec = Depends(get_encryption_codec)
) -> Any:
    if request.method not in MUTATING_METHODS:
        return None

    raw = await request.body()
    if not raw:
        raise ClientError(MISSING_ENCRYPTED_PAYLOAD, status_code=status.HTTP_400_BAD_REQUEST)

    try:
        body = json.loads(raw)
    except ValueError:
        raise ClientError(MISSING_ENCRYPTED_PAYLOAD, status_code=status.HTTP_400_BAD_REQUEST)

    if not is_envelope(body):
        return body

    try:
        envelope = EncryptedEnvelope.model_validate(body)
        decrypted = codec.decrypt_json(envelope)
    except (DecryptionFailed, ValueError) as e:
        # Cipher detail stays in the logs
        logger.error(f"Failed to decrypt payload: {type(e).__name__}")
        raise ClientError(INVALID_ENCRYPTED_PAYLOAD, status_code=status.HTTP_400_BAD_REQUEST)

    logger.info("Encrypted payload decrypted successfully")
    return decrypted
