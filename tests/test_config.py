"""Unit tests for core/config.py -- Settings validation.

Settings is instantiated directly with keyword arguments; init kwargs take
precedence over environment variables, so the DEBUG=true set by conftest does
not leak into these cases.
"""

import pytest

from core.config import Settings, get_settings


def test_debug_mode_generates_secret_key() -> None:
    settings = Settings(debug=True, secret_key="")
    assert len(settings.secret_key) == 64


def test_production_mode_requires_secret_key() -> None:
    with pytest.raises(ValueError, match="SECRET_KEY is required"):
        Settings(debug=False, secret_key="")


def test_short_secret_key_is_rejected() -> None:
    with pytest.raises(ValueError, match="at least 32 characters"):
        Settings(debug=False, secret_key="too-short")


def test_explicit_secret_key_is_kept() -> None:
    key = "k" * 40
    assert Settings(debug=False, secret_key=key).secret_key == key


def test_defaults() -> None:
    settings = Settings(debug=True)
    assert settings.token_expire_seconds == 604800
    assert settings.token_algorithm == "HS256"
    assert settings.password_min_length == 6


@pytest.mark.parametrize("rounds", [3, 32])
def test_bcrypt_rounds_bounds(rounds: int) -> None:
    with pytest.raises(ValueError):
        Settings(debug=True, bcrypt_rounds=rounds)


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
