"""
Password hashing with bcrypt.

Hashing is CPU-bound, so both operations run on a worker thread to keep the
event loop serving other requests.
"""

import asyncio
import logging

import bcrypt

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 10

# bcrypt only reads the first 72 bytes of its input.
MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


async def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a password for storage. Each call uses a fresh salt."""
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = await asyncio.to_thread(bcrypt.hashpw, _encode(password), salt)
    return hashed.decode("utf-8")


async def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a password against a stored hash.

    A malformed stored hash never matches.
    """
    try:
        return await asyncio.to_thread(
            bcrypt.checkpw, _encode(password), password_hash.encode("utf-8")
        )
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False
