"""Tests for the support request endpoint and app-level error handling."""

from __future__ import annotations

import smtplib

from fastapi.testclient import TestClient

from shikkha.main import create_app
from tests.fakes.fake_transport import RecordingTransport


def test_support_request_goes_to_operator_inbox(client, transport: RecordingTransport) -> None:
    response = client.post(
        "/support",
        json={"email": "student@example.com", "name": "Student", "message": "Quiz won't load"},
    )

    assert response.status_code == 200
    assert response.json() == {"code": 200, "message": "Support request sent", "data": None}
    assert len(transport.messages) == 1
    message = transport.messages[0]
    assert message.to == "support@shikkhapro.test"
    assert message.subject == "Support Request from Student"
    assert "student@example.com" in message.body


def test_support_request_succeeds_even_when_delivery_fails(mail_settings) -> None:
    failing = RecordingTransport(fail_with=smtplib.SMTPServerDisconnected("gone"))
    client = TestClient(create_app(settings=mail_settings, transport=failing))

    response = client.post(
        "/support",
        json={"email": "student@example.com", "name": "Student", "message": "Hello"},
    )

    assert response.status_code == 200
    assert len(failing.submissions) == 1


def test_support_request_requires_valid_email(client, transport: RecordingTransport) -> None:
    response = client.post(
        "/support", json={"email": "not-an-email", "name": "Student", "message": "Hello"}
    )

    assert response.status_code == 422
    assert transport.submissions == []


def test_unknown_route_uses_envelope(client) -> None:
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.json() == {"code": 404, "message": "Not Found", "data": None}
