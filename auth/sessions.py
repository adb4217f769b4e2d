"""
auth/sessions.py -- Login: validate, look up, verify password, issue token.

Every failure is terminal for the request. Nothing is retried and nothing is
written -- login is read-only against the store.

Timing: an unknown email still costs one bcrypt comparison (against
_DUMMY_HASH), so AccountNotFound and PasswordMismatch take the same time.
The two kinds remain distinct in the response.

Layer rule: no imports from api/.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from auth.errors import AccountNotFound, PasswordMismatch
from auth.models import Session
from auth.passwords import hash_password, verify_password
from auth.tokens import create_access_token
from auth.validation import validate_login

if TYPE_CHECKING:
    from auth.store import AccountStore

logger = logging.getLogger("accountgate.auth")

# Computed once at import so the first login is not measurably slower.
_DUMMY_HASH: str = hash_password("accountgate_timing_dummy")


def create_session(store: AccountStore, payload: Any) -> Session:
    """Authenticate {email, password} and return the account with a fresh token.

    Raises:
        ValidationFailed: payload does not have the login shape.
        AccountNotFound:  no account owns the email.
        PasswordMismatch: the password does not match the stored digest.
    """
    submission = validate_login(payload)

    account = store.find_by_email(submission.email)
    if account is None:
        verify_password(submission.password, _DUMMY_HASH)
        logger.info("Login failed: unknown email %s", submission.email)
        raise AccountNotFound()

    if not verify_password(submission.password, account.password_hash):
        logger.info("Login failed: wrong password for account %s", account.id)
        raise PasswordMismatch()

    token = create_access_token(account.id)
    logger.info("Login: account %s", account.id)
    return Session(account=account, token=token)
