"""
api/routes/v1/users.py -- Account registration and self-service profile endpoints.

Routes:
  POST /api/v1/users     -- register; public
  PUT  /api/v1/users     -- update own name/email/password (requires bearer token)
  GET  /api/v1/users/me  -- own public view (requires bearer token)

Errors are raised as AuthError subclasses and rendered by the handler in
api/main.py.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Request

from api.models import AccountResponse
from auth.accounts import register_account, update_account
from auth.dependencies import get_current_account_id, read_json_body
from auth.errors import AccountNotFound
from auth.store import AccountStore

# Auth policy:
# - POST /api/v1/users:    public -- registration
# - PUT  /api/v1/users:    requires bearer token (get_current_account_id); the body
#                           is read only after the token is accepted
# - GET  /api/v1/users/me: requires bearer token (get_current_account_id)
router = APIRouter()


@router.post("/users", response_model=AccountResponse, status_code=201)
def register(request: Request, body: Any = Body(None)) -> AccountResponse:
    """Register a new account and return its public view."""
    store: AccountStore = request.app.state.account_store
    account = register_account(store, body)
    return AccountResponse.from_account(account)


@router.put("/users", response_model=AccountResponse)
def update(
    request: Request,
    account_id: int = Depends(get_current_account_id),
    body: Any = Depends(read_json_body),
) -> AccountResponse:
    """Update the authenticated account. A password change needs oldPassword."""
    store: AccountStore = request.app.state.account_store
    account = update_account(store, account_id, body)
    return AccountResponse.from_account(account)


@router.get("/users/me", response_model=AccountResponse)
def me(request: Request, account_id: int = Depends(get_current_account_id)) -> AccountResponse:
    """Return the public view of the authenticated account."""
    store: AccountStore = request.app.state.account_store
    account = store.find_by_id(account_id)
    if account is None:
        raise AccountNotFound()
    return AccountResponse.from_account(account)
