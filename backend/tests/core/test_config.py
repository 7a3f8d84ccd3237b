"""Settings - defaults and DATABASE_URL normalization."""

from coffee_valley.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.cors_origins == ["*"]
    assert settings.cors_allow_headers == [
        "Origin", "Content-Type", "Accept", "Authorization",
    ]
    assert settings.database_auto_create is True
    assert settings.database_url.startswith("postgresql+asyncpg://")
    assert settings.log_format == "json"


def test_plain_postgres_url_gets_asyncpg_driver(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/coffee")
    settings = Settings(_env_file=None)
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/coffee"


def test_other_urls_untouched(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    assert Settings(_env_file=None).database_url == "sqlite+aiosqlite:///:memory:"


def test_port_and_cors_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("CORS_ORIGINS", '["http://shop.example"]')
    settings = Settings(_env_file=None)
    assert settings.port == 9090
    assert settings.cors_origins == ["http://shop.example"]
