"""
auth/errors.py -- Error taxonomy for account and session operations.

Every expected, user-facing failure is an AuthError subclass carrying the
HTTP status and a stable machine code. Flows raise them at the step that
detects the problem; api/main.py renders them as {"error", "code"}.

Anything outside this taxonomy (storage unreachable, malformed digest in the
DB) is not an AuthError and propagates unchanged.

Layer rule: no imports from api/.
"""

from __future__ import annotations


class AuthError(Exception):
    """Base class for the expected failures of the auth core."""

    status_code: int = 400
    code: str = "auth_error"
    message: str = "Authentication error."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationFailed(AuthError):
    status_code = 400
    code = "validation_failed"
    message = "Validation fails"


class DuplicateEmail(AuthError):
    status_code = 400
    code = "duplicate_email"
    message = "User already exists."


class EmailInUse(AuthError):
    status_code = 400
    code = "email_in_use"
    message = "Email already in use."


class PasswordMismatch(AuthError):
    status_code = 401
    code = "password_mismatch"
    message = "Password does not match."


class AccountNotFound(AuthError):
    status_code = 401
    code = "account_not_found"
    message = "User not found."


class TokenMissing(AuthError):
    status_code = 401
    code = "token_missing"
    message = "Token not provided"


class TokenInvalid(AuthError):
    status_code = 401
    code = "token_invalid"
    message = "Token invalid"


class DigestIntegrityError(Exception):
    """A stored password digest is not a well-formed bcrypt hash.

    Deliberately not an AuthError: a corrupt digest is a data problem, not a
    client mistake, and must surface as a server error.
    """
