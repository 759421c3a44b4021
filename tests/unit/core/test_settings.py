"""
Tests for Settings validation and computed database URLs.
"""

import pytest
from pydantic import ValidationError

from voucher_order.config.settings import Settings, get_settings


def make_settings(**overrides) -> Settings:
    values = {"DB_HOST": "db", "DB_PORT": 5433, "DB_NAME": "voucher", "DB_USER": "app", "DB_PASSWORD": None}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.mark.unit
def test_database_urls():
    settings = make_settings(DB_PASSWORD="secret")

    assert settings.database_url == "postgresql+psycopg2://app:secret@db:5433/voucher"
    assert settings.async_database_url == "postgresql+asyncpg://app:secret@db:5433/voucher"


@pytest.mark.unit
def test_database_url_escapes_password():
    settings = make_settings(DB_PASSWORD="p@ss/word")

    assert "app:p%40ss%2Fword@db" in settings.async_database_url


@pytest.mark.unit
def test_database_url_without_password():
    assert make_settings().async_database_url == "postgresql+asyncpg://app@db:5433/voucher"


@pytest.mark.unit
@pytest.mark.parametrize("pool_size", [0, 101])
def test_pool_size_bounds(pool_size):
    with pytest.raises(ValidationError, match="DB_POOL_SIZE"):
        make_settings(DB_POOL_SIZE=pool_size)


@pytest.mark.unit
def test_negative_overflow_rejected():
    with pytest.raises(ValidationError, match="DB_MAX_OVERFLOW"):
        make_settings(DB_MAX_OVERFLOW=-1)


@pytest.mark.unit
def test_log_level_normalized():
    assert make_settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    with pytest.raises(ValidationError):
        make_settings(LOG_LEVEL="chatty")


@pytest.mark.unit
@pytest.mark.parametrize(
    ("environment", "debug", "expected"),
    [("development", False, True), ("local", False, True), ("production", False, False), ("production", True, True)],
)
def test_is_development(environment, debug, expected):
    assert make_settings(ENVIRONMENT=environment, DEBUG=debug).is_development is expected


@pytest.mark.unit
def test_get_settings_is_cached():
    assert get_settings() is get_settings()
