import pytest

from crm_etl.core.config import Settings, get_cors_origins, validate_settings


def _settings(**overrides) -> Settings:
    base = {"HUBSPOT_ACCESS_TOKEN": "tok", "DATABASE_URL": ""}
    base.update(overrides)
    return Settings(_env_file=None, **base)


def test_effective_database_url_from_components() -> None:
    config = _settings(DATABASE_HOST="db", DATABASE_PORT=5433, DATABASE_USER="u", DATABASE_PASSWORD="p", DATABASE_NAME="crm")

    assert config.effective_database_url == "postgresql+asyncpg://u:p@db:5433/crm"


def test_database_url_override_wins() -> None:
    config = _settings(DATABASE_URL="sqlite+aiosqlite:///./local.db")

    assert config.effective_database_url == "sqlite+aiosqlite:///./local.db"


def test_hubspot_defaults() -> None:
    config = _settings()

    assert config.HUBSPOT_API_BASE_URL == "https://api.hubapi.com"
    assert config.HUBSPOT_TIMEOUT_S == 30.0
    assert config.HUBSPOT_PAGE_SIZE == 100
    assert config.HUBSPOT_PAGE_DELAY_MS == 100
    assert config.SYNC_MAX_ERRORS == 1000


def test_missing_token_is_a_warning() -> None:
    warnings = validate_settings(_settings(HUBSPOT_ACCESS_TOKEN=""))

    assert len(warnings) == 1
    assert "HUBSPOT_ACCESS_TOKEN" in warnings[0]


@pytest.mark.parametrize(
    "overrides",
    [
        {"HUBSPOT_API_BASE_URL": "api.hubapi.com"},
        {"HUBSPOT_PAGE_SIZE": 0},
        {"HUBSPOT_PAGE_SIZE": 101},
        {"HUBSPOT_PAGE_DELAY_MS": -1},
        {"SYNC_MAX_ERRORS": 0},
        {"PORT": 70000},
    ],
)
def test_invalid_values_are_rejected(overrides) -> None:
    with pytest.raises(ValueError):
        validate_settings(_settings(**overrides))


def test_cors_origins_parsing() -> None:
    assert get_cors_origins("*") == ["*"]
    assert get_cors_origins('["http://a", "http://b"]') == ["http://a", "http://b"]
    assert get_cors_origins("http://a, http://b") == ["http://a", "http://b"]
