"""
Password Hasher

One-way argon2 hashing of plaintext passwords via passlib.
"""

import logging
from functools import lru_cache

from passlib.context import CryptContext

logger = logging.getLogger(__name__)

_pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(plain: str) -> str:
    """Return an argon2 hash for ``plain``."""
    if not plain:
        raise ValueError("Password must be non-empty.")
    return _pwd_context.hash(plain)


def verify_password(plain: str, password_hash: str) -> bool:
    """
    Check ``plain`` against ``password_hash``.

    A malformed or unknown hash counts as a mismatch so callers cannot tell
    the two apart.
    """
    if not password_hash:
        return False
    try:
        return _pwd_context.verify(plain, password_hash)
    except (ValueError, TypeError):
        logger.debug("Password hash could not be verified", exc_info=True)
        return False


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return _pwd_context.hash("dummy_password")


def burn_verification(plain: str) -> None:
    """Spend the cost of one verification when there is no user to check."""
    verify_password(plain, _dummy_hash())
