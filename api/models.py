"""
API response models for AccountGate REST endpoints.

These Pydantic v2 models define the outbound HTTP contract. They are
intentionally separate from the dataclasses in auth/models.py, which own the
internal domain representation. Route handlers map between the two.

Request bodies are not modelled here: routes hand the raw JSON object to the
validation policies in auth/validation.py so every violation maps to one
ValidationFailed error rather than FastAPI's 422.
"""

from pydantic import BaseModel, ConfigDict

from auth.models import Account

# ---------------------------------------------------------------------------
# Account views
# ---------------------------------------------------------------------------


class AccountResponse(BaseModel):
    """Public view of an account. Never includes the password digest."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    email: str

    @classmethod
    def from_account(cls, account: Account) -> "AccountResponse":
        return cls(id=account.id, name=account.name, email=account.email)


class SessionResponse(BaseModel):
    """Response body for POST /api/v1/sessions."""

    model_config = ConfigDict(frozen=True)

    user: AccountResponse
    token: str


# ---------------------------------------------------------------------------
# Errors and health
# ---------------------------------------------------------------------------


class ErrorResponse(BaseModel):
    """Error envelope returned on 4xx/5xx responses.

    error is the human-readable message; code is the stable machine code.
    """

    model_config = ConfigDict(frozen=True)

    error: str
    code: str


class HealthResponse(BaseModel):
    """Response for GET /api/v1/health."""

    model_config = ConfigDict(frozen=True)

    status: str = "healthy"
    version: str
    components: dict[str, str]
