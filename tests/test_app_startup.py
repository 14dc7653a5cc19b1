"""Tests for application startup wiring and the background SMTP check."""

from __future__ import annotations

import threading
from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from shikkha.main import check_email_server, create_app
from tests.fakes.fake_transport import RecordingTransport


class _VerifyingTransport(RecordingTransport):
    def __init__(self, *, block: threading.Event | None = None) -> None:
        super().__init__()
        self.block = block
        self.verified = threading.Event()

    def verify(self) -> bool:
        if self.block is not None:
            self.block.wait(timeout=5)
        self.verified.set()
        return True


@pytest.mark.asyncio
async def test_check_email_server_runs_verify() -> None:
    transport = _VerifyingTransport()

    await check_email_server(transport)

    assert transport.verified.is_set()


@pytest.mark.asyncio
async def test_check_email_server_skips_transports_without_verify() -> None:
    await check_email_server(RecordingTransport())


def test_startup_does_not_wait_for_smtp_check(mail_settings) -> None:
    release = threading.Event()
    transport = _VerifyingTransport(block=release)
    app = create_app(settings=replace(mail_settings, environment="production"), transport=transport)

    with TestClient(app) as client:
        # the check is still blocked, yet the app already serves requests
        assert client.get("/health").json() == {"status": "ok"}
        assert not transport.verified.is_set()

        release.set()
        assert transport.verified.wait(timeout=5)


def test_startup_skips_smtp_check_in_test_environment(mail_settings) -> None:
    transport = _VerifyingTransport()
    app = create_app(settings=mail_settings, transport=transport)

    with TestClient(app):
        assert app.state.email_check is None

    assert not transport.verified.is_set()
