from __future__ import annotations

import logging
from html import escape
from typing import Any

import httpx

from salon.application.ports.notifier import NotifierPort
from salon.core.config import settings
from salon.domain.entities.booking import Booking


class BrevoNotifier(NotifierPort):
    """Transactional booking emails through the Brevo HTTP API."""

    def __init__(
        self,
        api_key: str | None = None,
        admin_email: str | None = None,
        sender_email: str | None = None,
        site_url: str | None = None,
        endpoint: str | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._api_key = api_key or settings.BREVO_API_KEY
        self._admin_email = admin_email or settings.ADMIN_EMAIL
        self._sender_email = sender_email or settings.EMAIL_FROM
        self._site_url = (site_url or settings.SITE_URL).rstrip("/")
        self._endpoint = endpoint or settings.BREVO_ENDPOINT
        self._client = client or httpx.Client(timeout=10.0)
        self._logger = logging.getLogger(__name__)

        if not self._api_key:
            raise ValueError("BREVO_API_KEY is required for Brevo notifications")

    def booking_confirmed(self, booking: Booking) -> None:
        details = _details_html(booking)
        self._send(
            to=self._admin_email,
            subject=f"New Booking from {booking.name}",
            html=f"<h3>New Booking Request</h3>{details}",
            booking=booking,
        )
        cancel_link = f"{self._site_url}/cancel?token={booking.cancel_token}"
        self._send(
            to=booking.email,
            subject="Booking Confirmation",
            html=(
                f"<h3>Hi {escape(booking.name)},</h3>"
                f"<p>Thank you for booking with {escape(settings.BUSINESS_NAME)}! "
                f"Here are your appointment details:</p>{details}"
                f'<p>Need to cancel? <a href="{escape(cancel_link)}">Cancel your booking</a>.</p>'
            ),
            booking=booking,
        )

    def booking_cancelled(self, booking: Booking) -> None:
        details = _details_html(booking)
        self._send(
            to=self._admin_email,
            subject=f"Booking Cancelled: {booking.name}",
            html=f"<h3>Booking Cancelled</h3>{details}",
            booking=booking,
        )
        self._send(
            to=booking.email,
            subject="Booking Cancellation Confirmed",
            html=f"<h3>Hi {escape(booking.name)},</h3><p>Your booking has been cancelled.</p>{details}",
            booking=booking,
        )

    def _send(self, to: str, subject: str, html: str, booking: Booking) -> None:
        payload: dict[str, Any] = {
            "sender": {"email": self._sender_email, "name": f"{settings.BUSINESS_NAME} Bookings"},
            "to": [{"email": to}],
            "subject": subject,
            "htmlContent": html,
        }
        headers = {"api-key": self._api_key, "Content-Type": "application/json"}
        try:
            response = self._client.post(self._endpoint, json=payload, headers=headers)
            response.raise_for_status()
            self._logger.info("Email sent", extra={"booking_id": booking.id, "email": to})
        except httpx.HTTPError as e:
            self._logger.error(
                "Email send failed", extra={"booking_id": booking.id, "email": to, "reason": str(e)}
            )


def _details_html(booking: Booking) -> str:
    rows = [
        ("Name", booking.name),
        ("Email", booking.email),
        ("Phone", booking.phone),
        ("Service", booking.service_label),
        ("Date", booking.date),
        ("Time", booking.time),
        ("Location", booking.location),
        ("Notes", booking.notes),
    ]
    if booking.mehendi_hours:
        rows.append(("Mehendi hours", str(booking.mehendi_hours)))
    items = "".join(
        f"<li><strong>{label}:</strong> {escape(str(value))}</li>" for label, value in rows if value
    )
    return f"<ul>{items}</ul>"
