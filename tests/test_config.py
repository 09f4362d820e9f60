"""Settings parsing and engine construction."""

from __future__ import annotations

from chathistory.database import build_engine


def test_allowed_origins_list(settings):
    custom = settings.model_copy(update={"allowed_origins": "http://a.test, http://b.test,"})
    assert custom.allowed_origins_list == ["http://a.test", "http://b.test"]


def test_token_lifetimes_default_to_five(settings):
    assert settings.verify_token_minutes == 5
    assert settings.session_token_days == 5


async def test_database_name_overrides_url(settings):
    custom = settings.model_copy(
        update={
            "database_url": "postgresql+asyncpg://user:pw@db.internal:5432/postgres",
            "database_name": "ChatbotYoutube",
        }
    )
    engine = build_engine(custom)
    try:
        assert engine.url.database == "ChatbotYoutube"
        assert engine.url.host == "db.internal"
    finally:
        await engine.dispose()
