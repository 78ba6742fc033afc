"""
Password hashing utilities for user credentials.

Responsibilities:
- Hash passwords with Argon2id; the plaintext is never stored
- Verify a submitted password against a stored hash
- Flag stored hashes whose parameters are outdated
"""
from __future__ import annotations

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError
from argon2.low_level import Type

_hasher = PasswordHasher(time_cost=2, memory_cost=102400, parallelism=8, hash_len=32, type=Type.ID)

# Verified against when the email is unknown, so both login failure paths do
# the same hashing work.
_DUMMY_HASH = _hasher.hash("crowdfund-dummy-password")


def hash_password(password: str) -> str:
    return _hasher.hash(password)


def verify_password(password: str, password_hash: str | None) -> bool:
    """Return True when the password matches the stored hash.

    A missing hash still performs one verification against a dummy hash and
    then reports False.
    """
    if not password_hash:
        _verify_quietly(password, _DUMMY_HASH)
        return False
    return _verify_quietly(password, password_hash)


def needs_rehash(password_hash: str) -> bool:
    return _hasher.check_needs_rehash(password_hash)


def _verify_quietly(password: str, password_hash: str) -> bool:
    try:
        return _hasher.verify(password_hash, password)
    except (VerifyMismatchError, VerificationError, InvalidHashError):
        return False
