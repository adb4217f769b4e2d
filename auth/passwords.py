"""
auth/passwords.py -- Password hashing and verification (bcrypt).

bcrypt salts every hash with fresh random bytes, so hashing the same password
twice yields two different digests. The cost factor comes from
Settings.bcrypt_rounds.

Using bcrypt directly rather than passlib[bcrypt]: passlib's wrap-bug
detection feeds bcrypt 4.x a >72-byte password, which it rejects.

bcrypt only looks at the first 72 bytes of a password. Newer bcrypt releases
raise instead of truncating, so both functions truncate explicitly.

Layer rule: no imports from api/. Import from core/ is allowed.
"""

from __future__ import annotations

import bcrypt

from auth.errors import DigestIntegrityError
from core.config import get_settings

_BCRYPT_MAX_BYTES = 72


def _encode(plain: str) -> bytes:
    return plain.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(plain: str) -> str:
    """Return a salted bcrypt hash of the given plaintext password."""
    rounds = get_settings().bcrypt_rounds
    return bcrypt.hashpw(_encode(plain), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """Return True if plain produced hashed, False on a mismatch.

    Raises DigestIntegrityError if hashed is not a bcrypt digest. A wrong
    password is never an exception.
    """
    if not isinstance(hashed, str) or not hashed:
        raise DigestIntegrityError("Password digest is missing or not text.")
    try:
        return bcrypt.checkpw(_encode(plain), hashed.encode("utf-8"))
    except ValueError as exc:
        raise DigestIntegrityError("Password digest is not a valid bcrypt hash.") from exc
