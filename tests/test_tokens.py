"""Unit tests for auth/tokens.py -- bearer token issue and verification.

Covers:
- Round trip: a freshly issued token verifies to the same account id
- Expiry: a token whose lifetime has elapsed is TokenInvalid
- Default lifetime comes from Settings.token_expire_seconds
- Missing token -> TokenMissing; garbage, tampered, foreign-key, or
  subject-less tokens -> TokenInvalid
"""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from auth import tokens
from auth.errors import TokenInvalid, TokenMissing
from auth.tokens import create_access_token, verify_access_token
from core.config import get_settings


class TestRoundTrip:
    def test_issue_then_verify_returns_account_id(self) -> None:
        token = create_access_token(42)
        assert verify_access_token(token) == 42

    def test_subject_is_string_claim(self) -> None:
        claims = jwt.get_unverified_claims(create_access_token(7))
        assert claims["sub"] == "7"

    def test_default_lifetime_matches_settings(self) -> None:
        claims = jwt.get_unverified_claims(create_access_token(1))
        assert claims["exp"] - claims["iat"] == get_settings().token_expire_seconds

    def test_explicit_lifetime(self) -> None:
        claims = jwt.get_unverified_claims(create_access_token(1, expire_seconds=60))
        assert claims["exp"] - claims["iat"] == 60


class TestExpiry:
    def test_elapsed_token_is_invalid(self) -> None:
        issued = datetime.now(timezone.utc) - timedelta(hours=2)
        token = create_access_token(1, expire_seconds=3600, issued_at=issued)
        with pytest.raises(TokenInvalid):
            verify_access_token(token)

    def test_unexpired_backdated_token_is_valid(self) -> None:
        issued = datetime.now(timezone.utc) - timedelta(minutes=30)
        token = create_access_token(5, expire_seconds=3600, issued_at=issued)
        assert verify_access_token(token) == 5


class TestRejection:
    @pytest.mark.parametrize("missing", [None, ""])
    def test_no_token_is_missing(self, missing) -> None:
        with pytest.raises(TokenMissing):
            verify_access_token(missing)

    @pytest.mark.parametrize("garbage", ["garbage", "invalidToken", "a.b.c", "...."])
    def test_garbage_is_invalid(self, garbage: str) -> None:
        with pytest.raises(TokenInvalid):
            verify_access_token(garbage)

    def test_tampered_signature_is_invalid(self) -> None:
        token = create_access_token(1)
        header, payload, signature = token.split(".")
        flipped = "A" if signature[0] != "A" else "B"
        with pytest.raises(TokenInvalid):
            verify_access_token(f"{header}.{payload}.{flipped}{signature[1:]}")

    def test_token_signed_with_other_key_is_invalid(self) -> None:
        exp = datetime.now(timezone.utc) + timedelta(hours=1)
        forged = jwt.encode({"sub": "1", "exp": exp}, "x" * 64, algorithm="HS256")
        with pytest.raises(TokenInvalid):
            verify_access_token(forged)

    def test_non_numeric_subject_is_invalid(self) -> None:
        exp = datetime.now(timezone.utc) + timedelta(hours=1)
        token = jwt.encode({"sub": "admin", "exp": exp}, tokens._SECRET_KEY, algorithm="HS256")
        with pytest.raises(TokenInvalid):
            verify_access_token(token)

    def test_token_without_expiry_is_invalid(self) -> None:
        token = jwt.encode({"sub": "1"}, tokens._SECRET_KEY, algorithm="HS256")
        with pytest.raises(TokenInvalid):
            verify_access_token(token)
