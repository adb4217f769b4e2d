"""
auth/validation.py -- Schema and business-rule checks for credential submissions.

Three policies, each a Pydantic v2 model:
  LoginSubmission         -- email (well-formed) and password present
  RegistrationSubmission  -- name, email, password (min length), passwordConfirm == password
  UpdateSubmission        -- every field optional; password requires
                             passwordConfirm (equal) and oldPassword

validate_login() / validate_registration() / validate_update() run a raw JSON
payload through the matching model. Any violation -- missing field, wrong
type, bad format, rule failure -- becomes a single ValidationFailed. There is
no per-field detail and no partial acceptance: one bad field rejects the whole
submission before any storage access.

Type policy: name and email must be JSON strings (StrictStr -- 1234 is
rejected, not coerced). Passwords accept a string or an integer; an integer is
treated as its decimal text. Booleans are never passwords.

Layer rule: no imports from api/. Import from core/ is allowed.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictStr,
    ValidationError,
    model_validator,
)

from auth.errors import ValidationFailed
from core.config import get_settings

logger = logging.getLogger("accountgate.auth")

# ---------------------------------------------------------------------------
# Field types
# ---------------------------------------------------------------------------


def _password_text(value: Any) -> Any:
    # bool is a subclass of int -- reject it before the int branch.
    if isinstance(value, bool):
        raise ValueError("password must be text")
    if isinstance(value, int):
        return str(value)
    return value


def _check_email(value: str) -> str:
    # Syntax only, no DNS lookup. The normalized form is discarded: emails are
    # stored and compared exactly as submitted.
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(str(exc)) from exc
    return value


PasswordText = Annotated[StrictStr, BeforeValidator(_password_text)]
Email = Annotated[StrictStr, Field(max_length=255), AfterValidator(_check_email)]
Name = Annotated[StrictStr, Field(min_length=1, max_length=255)]


# ---------------------------------------------------------------------------
# Policies
# ---------------------------------------------------------------------------


class _Submission(BaseModel):
    # Unknown keys are ignored; wire names (passwordConfirm, oldPassword) are
    # aliases of the snake_case attributes.
    model_config = ConfigDict(extra="ignore")


class LoginSubmission(_Submission):
    email: Email
    password: PasswordText = Field(min_length=1)


class RegistrationSubmission(_Submission):
    name: Name
    email: Email
    password: PasswordText
    password_confirm: PasswordText = Field(alias="passwordConfirm")

    @model_validator(mode="after")
    def check_password_rules(self) -> "RegistrationSubmission":
        if len(self.password) < get_settings().password_min_length:
            raise ValueError("password is too short")
        if self.password_confirm != self.password:
            raise ValueError("passwordConfirm does not match password")
        return self


class UpdateSubmission(_Submission):
    name: Optional[Name] = None
    email: Optional[Email] = None
    password: Optional[PasswordText] = None
    password_confirm: Optional[PasswordText] = Field(default=None, alias="passwordConfirm")
    old_password: Optional[PasswordText] = Field(default=None, alias="oldPassword")

    @model_validator(mode="after")
    def check_password_change(self) -> "UpdateSubmission":
        """A new password needs an exact confirmation and the current password."""
        if self.password is None:
            return self
        if self.password_confirm is None or self.password_confirm != self.password:
            raise ValueError("passwordConfirm must match password")
        if self.old_password is None:
            raise ValueError("oldPassword is required to change password")
        return self


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def _run(model: type[BaseModel], payload: Any) -> Any:
    if not isinstance(payload, dict):
        raise ValidationFailed()
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        # Field names only -- never echo submitted values, they may be passwords.
        fields = sorted({".".join(str(p) for p in err["loc"]) or "__root__" for err in exc.errors()})
        logger.info("%s rejected (fields: %s)", model.__name__, ", ".join(fields))
        raise ValidationFailed() from exc


def validate_login(payload: Any) -> LoginSubmission:
    return _run(LoginSubmission, payload)


def validate_registration(payload: Any) -> RegistrationSubmission:
    return _run(RegistrationSubmission, payload)


def validate_update(payload: Any) -> UpdateSubmission:
    return _run(UpdateSubmission, payload)
