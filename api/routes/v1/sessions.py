"""
api/routes/v1/sessions.py -- Login endpoint.

Routes:
  POST /api/v1/sessions  -- {email, password} -> {user, token}

Security:
  Cache-Control: no-store on every login response, success or failure, so
  proxies and browsers never keep a token.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from api.models import AccountResponse, ErrorResponse, SessionResponse
from auth.errors import AuthError
from auth.sessions import create_session
from auth.store import AccountStore

# Auth policy:
# - POST /api/v1/sessions: public -- this is where tokens come from
router = APIRouter()


@router.post("/sessions", response_model=SessionResponse)
def login(request: Request, body: Any = Body(None)) -> JSONResponse:
    """Authenticate with email and password; return the public view and a bearer token."""
    store: AccountStore = request.app.state.account_store
    try:
        session = create_session(store, body)
    except AuthError as exc:
        resp = JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=exc.message, code=exc.code).model_dump(),
        )
        resp.headers["Cache-Control"] = "no-store"
        return resp

    resp = JSONResponse(
        status_code=200,
        content=SessionResponse(
            user=AccountResponse.from_account(session.account),
            token=session.token,
        ).model_dump(),
    )
    resp.headers["Cache-Control"] = "no-store"
    return resp
