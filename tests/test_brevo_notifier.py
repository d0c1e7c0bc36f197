from __future__ import annotations

import json

import httpx

from salon.application.utils.slot_rules import parse_start_hour
from salon.domain.entities.booking import Booking
from salon.infrastructure.notifications.brevo_notifier import BrevoNotifier


def _booking() -> Booking:
    return Booking(
        id="3",
        date="2025-06-01",
        services=("mehendi",),
        time="14:00",
        start_hour=parse_start_hour("14:00"),
        mehendi_hours=2,
        name="Sara <3",
        email="sara@example.com",
        cancel_token="tok-123",
    )


def _notifier(handler) -> BrevoNotifier:
    return BrevoNotifier(
        api_key="brevo-key",
        admin_email="owner@example.com",
        sender_email="bookings@example.com",
        site_url="https://salon.example/",
        client=httpx.Client(transport=httpx.MockTransport(handler)),
    )


def test_confirmation_mails_admin_and_customer():
    sent: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["api-key"] == "brevo-key"
        sent.append(json.loads(request.content))
        return httpx.Response(201, json={"messageId": "m"})

    _notifier(handler).booking_confirmed(_booking())

    assert [m["to"][0]["email"] for m in sent] == ["owner@example.com", "sara@example.com"]
    assert "https://salon.example/cancel?token=tok-123" in sent[1]["htmlContent"]
    assert "Sara &lt;3" in sent[1]["htmlContent"]


def test_send_failure_is_logged_not_raised():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"message": "down"})

    _notifier(handler).booking_cancelled(_booking())
