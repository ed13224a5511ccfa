import asyncio
import base64
import hashlib

import bcrypt

from src.app.services.password_hasher import IPasswordHasher


def prehash(password: str) -> bytes:
    """
    SHA-256 then base64 of the UTF-8 password.

    bcrypt only accepts 72 input bytes; the 44-byte digest keeps every
    character of longer passwords significant.
    """
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


class BcryptPasswordHasher(IPasswordHasher):
    """
    IPasswordHasher using bcrypt with a configurable cost factor.

    Hashing and comparison run in a worker thread.
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    async def hash(self, password: str) -> str:
        password_hash = await asyncio.to_thread(
            bcrypt.hashpw, prehash(password), bcrypt.gensalt(self.rounds)
        )
        return password_hash.decode("utf-8")

    async def compare(self, password: str, password_hash: str) -> bool:
        try:
            return await asyncio.to_thread(
                bcrypt.checkpw, prehash(password), password_hash.encode("utf-8")
            )
        except ValueError:
            # Malformed stored hash
            return False
