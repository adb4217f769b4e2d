"""
auth/dependencies.py -- FastAPI Depends() helper for bearer authentication.

The inbound gate for protected routes: read the Authorization header, require
the "Bearer <token>" form, and verify the token. The result is the account id
the token was issued for -- the store is not consulted here.

  No header (or an empty one)        -> TokenMissing (401)
  Any other scheme, or a bad token   -> TokenInvalid (401)

read_json_body() parses the request body as a dependency of its own. Declared
after get_current_account_id, it only runs once the token has been accepted.

Layer rule: auth/dependencies.py may import from fastapi because it is part
of the FastAPI dependency injection system. No imports from api/.
"""

from __future__ import annotations

from typing import Any

from fastapi import Request

from auth.errors import TokenInvalid, TokenMissing, ValidationFailed
from auth.tokens import verify_access_token


def get_current_account_id(request: Request) -> int:
    """Require a valid bearer token and return its account id.

    Use as a FastAPI dependency:
        @router.put("/users")
        async def route(account_id: int = Depends(get_current_account_id)): ...
    """
    auth_header = request.headers.get("Authorization", "").strip()
    if not auth_header:
        raise TokenMissing()

    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() != "bearer":
        raise TokenInvalid()
    token = token.strip()
    if not token:
        raise TokenMissing()
    return verify_access_token(token)


async def read_json_body(request: Request) -> Any:
    """Return the decoded JSON body. Bytes that are not JSON are a ValidationFailed."""
    try:
        return await request.json()
    except ValueError as exc:
        raise ValidationFailed() from exc
