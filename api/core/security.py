"""Security helpers (password hashing and verification)."""

from __future__ import annotations

import bcrypt

from core.config import get_settings

# bcrypt only looks at the first 72 bytes of the input
BCRYPT_MAX_BYTES = 72


def hash_password(password: str, rounds: int | None = None) -> str:
    """Create a salted bcrypt hash; cost factor defaults to PASSWORD_HASH_ROUNDS."""
    encoded = password.encode("utf-8")
    if len(encoded) > BCRYPT_MAX_BYTES:
        raise ValueError(f"Senha excede o limite de {BCRYPT_MAX_BYTES} bytes.")
    cost = rounds if rounds is not None else get_settings().password_hash_rounds
    return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=cost)).decode("ascii")


def verify_password(password: str, stored_hash: str | None) -> bool:
    """Check a plaintext password against a stored bcrypt hash.

    Malformed or missing hashes never verify.
    """
    if not stored_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), stored_hash.encode("ascii"))
    except (ValueError, UnicodeEncodeError):
        return False
