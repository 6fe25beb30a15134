"""
Tests for Settings validation and computed properties.
"""

import pytest
from pydantic import ValidationError

from app.shared.config.settings import Settings


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


def test_defaults(monkeypatch):
    monkeypatch.delenv("REPOSITORY_BACKEND", raising=False)
    monkeypatch.delenv("COLLABORATOR_TIMEOUT_SECONDS", raising=False)
    settings = make_settings()

    assert settings.REPOSITORY_BACKEND == "database"
    assert settings.COLLABORATOR_TIMEOUT_SECONDS == 10.0
    assert settings.uses_memory_backend is False


@pytest.mark.parametrize("timeout", [0, -1])
def test_non_positive_timeout_disables_bound(timeout):
    assert make_settings(COLLABORATOR_TIMEOUT_SECONDS=timeout).COLLABORATOR_TIMEOUT_SECONDS is None


def test_memory_backend_is_case_insensitive():
    settings = make_settings(REPOSITORY_BACKEND="MEMORY")

    assert settings.REPOSITORY_BACKEND == "memory"
    assert settings.uses_memory_backend is True


def test_unknown_backend_rejected():
    with pytest.raises(ValidationError):
        make_settings(REPOSITORY_BACKEND="redis")


def test_unknown_environment_rejected():
    with pytest.raises(ValidationError):
        make_settings(ENVIRONMENT="qa")


def test_database_url_built_from_parts():
    settings = make_settings(DB_USER="rent", DB_PASSWORD="secret", DB_HOST="db", DB_PORT=6543, DB_NAME="movies")

    assert settings.database_url == "postgresql+asyncpg://rent:secret@db:6543/movies"


def test_explicit_database_url_wins():
    url = "postgresql+asyncpg://u:p@elsewhere:5432/other"

    assert make_settings(DATABASE_URL=url, DB_HOST="db").database_url == url


def test_cors_origins_list():
    settings = make_settings(CORS_ORIGINS="http://a.test, https://b.test")

    assert settings.cors_origins_list == ["http://a.test", "https://b.test"]


def test_invalid_cors_origin_rejected():
    with pytest.raises(ValidationError):
        make_settings(CORS_ORIGINS="ftp://files.test")
