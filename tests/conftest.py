"""Shared fixtures: in-memory SQLite per test, fake mailer, ASGI client."""

from __future__ import annotations

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SENDER_EMAIL", "sender@example.com")
os.environ.setdefault("BREVO_API_KEY", "test-brevo-key")
os.environ.setdefault("ACTIVATION_SECRET", "test-activation-secret")
os.environ.setdefault("JWT_SECRET", "test-session-secret")
os.environ.setdefault("APP_ENV", "test")

import httpx
import pytest

from chathistory.config import get_settings
from chathistory.database import build_engine, build_sessionmaker, get_db
from chathistory.dependencies import get_mailer, get_token_service
from chathistory.exceptions import EmailDeliveryError
from chathistory.main import app
from chathistory.models import Base
from chathistory.services.tokens import TokenService


class FakeMailer:
    """Records every passcode instead of calling Brevo."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, str, int]] = []

    async def send_otp(self, email: str, subject: str, otp: int) -> None:
        self.sent.append((email, subject, otp))

    def last_otp_for(self, email: str) -> int:
        return [otp for to, _, otp in self.sent if to == email][-1]


class FailingMailer:
    async def send_otp(self, email: str, subject: str, otp: int) -> None:
        raise EmailDeliveryError()


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def tokens(settings) -> TokenService:
    return TokenService(settings)


@pytest.fixture
def mailer() -> FakeMailer:
    return FakeMailer()


@pytest.fixture
def failing_mailer() -> FailingMailer:
    return FailingMailer()


@pytest.fixture
async def engine(settings):
    test_engine = build_engine(settings)
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_sessionmaker(engine)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory, mailer, tokens):
    async def _get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_mailer] = lambda: mailer
    app.dependency_overrides[get_token_service] = lambda: tokens

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def login_as(client, mailer):
    """Run the full passcode flow and return (session token, user json)."""

    async def _login(email: str) -> tuple[str, dict]:
        resp = await client.post("/api/user/login", json={"email": email})
        assert resp.status_code == 200
        verify_token = resp.json()["verifyToken"]
        resp = await client.post(
            "/api/user/verify",
            json={"otp": mailer.last_otp_for(email), "verifyToken": verify_token},
        )
        assert resp.status_code == 200
        body = resp.json()
        return body["token"], body["user"]

    return _login
