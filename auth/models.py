"""
auth/models.py -- Domain dataclasses for authentication entities.

Pattern: Data class (pure data container, zero logic). The store and the
flows do the work.

Layer rule: no imports from api/.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Account:
    """One registrable identity.

    email is the login key and is unique across all accounts. It is compared
    literally (case-sensitive) -- "A@x.com" and "a@x.com" are two accounts.

    password_hash is a bcrypt digest. It never leaves the server: API models
    build the public view from id, name and email only.
    """

    name: str
    email: str
    password_hash: str
    id: int | None = None
    created_at: str | None = None
    updated_at: str | None = None


@dataclass
class Session:
    """Result of a successful login: the account and its bearer token."""

    account: Account
    token: str
