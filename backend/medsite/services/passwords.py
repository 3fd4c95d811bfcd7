"""
Medsite Backend — Credential Codec
===================================

What:  One-way hashing of admin passwords and verification against the
       stored hash.
How:   passlib's CryptContext with the bcrypt scheme at a fixed cost factor
       of 10. bcrypt is CPU-bound, so both calls run in Starlette's
       threadpool to keep the event loop free.

Never log or return the plaintext or the hash.
"""

import logging

from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)


async def hash_password(plaintext: str) -> str:
    """Returns a salted bcrypt hash of `plaintext`."""
    return await run_in_threadpool(pwd_context.hash, plaintext)


async def verify_password(plaintext: str, hashed: str) -> bool:
    """
    Constant-time check of `plaintext` against a stored hash.

    A stored value that is not a recognizable hash verifies as False
    rather than raising.
    """
    try:
        return await run_in_threadpool(pwd_context.verify, plaintext, hashed)
    except (ValueError, TypeError):
        logger.warning("Stored password hash could not be parsed")
        return False
