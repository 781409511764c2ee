"""Tests for settings validation."""

import pytest
from pydantic import ValidationError

from src.projectbase.core.config import Settings

pytestmark = pytest.mark.unit

VALID_SECRET = "x" * 32


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **{"jwt_secret_key": VALID_SECRET, **overrides})


def test_defaults():
    settings = make_settings(database_url=None)

    assert settings.session_cookie_name == "app_session_id"
    assert settings.admin_session_cookie_name == "admin_session"
    assert settings.admin_session_expire_days == 7
    assert settings.rest_default_page_size == 100
    assert settings.rest_max_page_size == 1000


def test_short_jwt_secret_rejected():
    with pytest.raises(ValidationError, match="at least 32 characters"):
        make_settings(jwt_secret_key="short")


def test_placeholder_jwt_secret_rejected():
    with pytest.raises(ValidationError, match="must be changed"):
        make_settings(jwt_secret_key="change-this-to-a-secure-random-string")


def test_cors_wildcard_rejected():
    with pytest.raises(ValidationError, match="wildcard"):
        make_settings(cors_origins=["*"])


@pytest.mark.parametrize("value", ["", "   "])
def test_blank_database_url_is_unset(value):
    assert make_settings(database_url=value).database_url is None
