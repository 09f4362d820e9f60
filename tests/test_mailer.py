"""Brevo mailer against a mocked HTTP transport."""

from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager

import httpx
import pytest

from chathistory.exceptions import EmailDeliveryError
from chathistory.services.mailer import BrevoMailer, render_otp_email


@asynccontextmanager
async def _mailer(settings, handler):
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        yield BrevoMailer(settings, client=client)


async def test_send_otp_posts_brevo_payload(settings):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"messageId": "<abc@brevo>"})

    async with _mailer(settings, handler) as mailer:
        await mailer.send_otp("a@x.com", "ChatBot", 4821)

    assert len(seen) == 1
    request = seen[0]
    assert str(request.url) == settings.brevo_api_url
    assert request.headers["api-key"] == settings.brevo_api_key
    body = json.loads(request.content)
    assert body["sender"] == {"email": settings.sender_email}
    assert body["to"] == [{"email": "a@x.com"}]
    assert body["subject"] == "ChatBot"
    assert '<p class="otp">4821</p>' in body["htmlContent"]


async def test_rejected_request_raises_generic_error_and_logs_detail(settings, caplog):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"code": "unauthorized", "message": "Key not found"})

    with caplog.at_level(logging.ERROR, logger="chathistory.services.mailer"):
        with pytest.raises(EmailDeliveryError) as exc_info:
            async with _mailer(settings, handler) as mailer:
                await mailer.send_otp("a@x.com", "ChatBot", 1)

    assert exc_info.value.message == "Failed to send email"
    assert "Key not found" not in exc_info.value.message
    assert "Key not found" in caplog.text


async def test_transport_error_raises_delivery_error(settings):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(EmailDeliveryError):
        async with _mailer(settings, handler) as mailer:
            await mailer.send_otp("a@x.com", "ChatBot", 1)


def test_short_codes_are_not_zero_padded():
    html = render_otp_email("a@x.com", 42)
    assert '<p class="otp">42</p>' in html
    assert "Hello a@x.com" in html
