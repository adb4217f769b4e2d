"""
auth/accounts.py -- Account registration and self-service profile update.

Registration: validate -> email must be free -> hash -> insert.
Update:       validate -> new email must not belong to someone else ->
              oldPassword must verify before a password change -> one
              atomic store.update() with every change.

The store's UNIQUE(email) constraint is the real guard. The lookups done here
only produce a friendly error early; a concurrent request can still win the
race between lookup and write, and the resulting IntegrityError is translated
into the same error kind.

Layer rule: no imports from api/.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy.exc import IntegrityError

from auth.errors import AccountNotFound, DuplicateEmail, EmailInUse, PasswordMismatch
from auth.models import Account
from auth.passwords import hash_password, verify_password
from auth.validation import validate_registration, validate_update

if TYPE_CHECKING:
    from auth.store import AccountStore

logger = logging.getLogger("accountgate.auth")


def register_account(store: AccountStore, payload: Any) -> Account:
    """Create an account from {name, email, password, passwordConfirm}.

    Raises ValidationFailed or DuplicateEmail. Validation runs before any
    storage access.
    """
    submission = validate_registration(payload)

    if store.has_email(submission.email):
        logger.info("Registration rejected: email %s already registered", submission.email)
        raise DuplicateEmail()

    account = Account(
        name=submission.name,
        email=submission.email,
        password_hash=hash_password(submission.password),
    )
    try:
        created = store.insert(account)
    except IntegrityError as exc:
        logger.warning("Registration lost a race for email %s", submission.email)
        raise DuplicateEmail() from exc

    logger.info("Registered account %s", created.id)
    return created


def update_account(store: AccountStore, account_id: int, payload: Any) -> Account:
    """Apply a profile update for the already-authenticated account_id.

    Accepts any subset of {name, email, password, passwordConfirm,
    oldPassword}. Either every validated change is persisted or none is.

    Raises:
        ValidationFailed: payload breaks the update policy.
        AccountNotFound:  the token's account no longer exists.
        EmailInUse:       the new email belongs to another account.
        PasswordMismatch: oldPassword does not match the current password.
    """
    submission = validate_update(payload)

    account = store.find_by_id(account_id)
    if account is None:
        logger.warning("Update for missing account %s", account_id)
        raise AccountNotFound()

    changes: dict = {}
    if submission.name is not None:
        changes["name"] = submission.name

    if submission.email is not None and submission.email != account.email:
        owner = store.find_by_email(submission.email)
        if owner is not None and owner.id != account.id:
            logger.info("Update rejected: account %s asked for an email in use", account.id)
            raise EmailInUse()
        changes["email"] = submission.email

    if submission.password is not None:
        if not verify_password(submission.old_password, account.password_hash):
            logger.info("Update rejected: wrong current password for account %s", account.id)
            raise PasswordMismatch()
        changes["password_hash"] = hash_password(submission.password)

    if not changes:
        return account

    try:
        updated = store.update(account.id, changes)
    except IntegrityError as exc:
        logger.warning("Update for account %s lost an email race", account.id)
        raise EmailInUse() from exc
    if updated is None:
        raise AccountNotFound()

    logger.info("Updated account %s (%s)", account.id, ", ".join(sorted(changes)))
    return updated
