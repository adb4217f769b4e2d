"""
auth/tokens.py -- Bearer token issue and verification.

Security design decisions:
  JWT: python-jose with HS256 (Settings.token_algorithm). A token carries the
       account id as its "sub" claim plus "iat" and "exp". Nothing is stored
       server-side: verification recomputes validity from the signed content,
       the signing key and the current time. The account store is never
       consulted here, so a token stays valid until expiry even if its account
       disappears.

  SECRET_KEY: sourced from core.config.get_settings() once, at module load.
       The key is process-wide and never rotated mid-run.

  "sub" must be a string per RFC 7519 (python-jose enforces this), so the
       integer account id is stringified on issue and parsed back on verify.

Layer rule: no imports from api/. Import from core/ is allowed.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from auth.errors import TokenInvalid, TokenMissing
from core.config import get_settings

logger = logging.getLogger("accountgate.auth")

# ---------------------------------------------------------------------------
# Config -- read once at module load via the lru_cache singleton
# ---------------------------------------------------------------------------

_settings = get_settings()

_SECRET_KEY = _settings.secret_key
_ALGORITHM = _settings.token_algorithm


def create_access_token(account_id: int, expire_seconds: int = 0, issued_at: datetime | None = None) -> str:
    """Encode a signed JWT bound to account_id.

    Args:
        account_id:     Store-assigned account id, embedded as "sub".
        expire_seconds: Token lifetime. 0 (default) uses
                        Settings.token_expire_seconds (the expiresIn policy).
        issued_at:      Issue time; defaults to now. Only tests pass this.
    """
    duration = expire_seconds if expire_seconds > 0 else _settings.token_expire_seconds
    now = issued_at or datetime.now(timezone.utc)
    payload = {
        "sub": str(account_id),
        "iat": now,
        "exp": now + timedelta(seconds=duration),
    }
    return jwt.encode(payload, _SECRET_KEY, algorithm=_ALGORITHM)


def verify_access_token(token: str | None) -> int:
    """Verify a bearer token and return the account id it was issued for.

    Raises:
        TokenMissing: no token was presented.
        TokenInvalid: bad signature, malformed structure, missing or
                      non-numeric subject, or expired.
    """
    if not token:
        raise TokenMissing()
    try:
        payload = jwt.decode(token, _SECRET_KEY, algorithms=[_ALGORITHM])
    except JWTError as exc:
        logger.info("Rejected bearer token: %s", exc)
        raise TokenInvalid() from exc

    subject = payload.get("sub")
    if subject is None or "exp" not in payload:
        raise TokenInvalid()
    try:
        return int(subject)
    except (TypeError, ValueError) as exc:
        raise TokenInvalid() from exc
