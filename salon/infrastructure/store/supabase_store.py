from __future__ import annotations

import logging
from typing import Any

import httpx

from salon.application.exceptions import DependencyError, ValidationError
from salon.application.ports.booking_store import BookingStorePort
from salon.application.utils.slot_rules import parse_start_hour
from salon.core.config import settings
from salon.domain.entities.booking import Booking, BookingStatus


class SupabaseBookingStore(BookingStorePort):
    """Bookings table on a hosted Postgres, accessed through its PostgREST API."""

    def __init__(
        self,
        url: str | None = None,
        service_role_key: str | None = None,
        table: str | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = (url or settings.SUPABASE_URL or "").rstrip("/")
        self._key = service_role_key or settings.SUPABASE_SERVICE_ROLE
        self._table = table or settings.SUPABASE_BOOKINGS_TABLE
        self._client = client or httpx.Client(timeout=10.0)
        self._logger = logging.getLogger(__name__)

        if not self._url or not self._key:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE are required for the Supabase store")

    def fetch_bookings_by_date(self, date: str) -> list[Booking]:
        rows = self._request(
            "GET",
            params={
                "select": "*",
                "date": f"eq.{date}",
                # neq alone would drop rows whose status is NULL
                "or": "(status.is.null,status.neq.cancelled)",
                "order": "id.asc",
            },
        )
        return self._to_bookings(rows)

    def insert_booking(self, booking: Booking) -> str:
        rows = self._request(
            "POST",
            json=[_booking_to_row(booking)],
            headers={"Prefer": "return=representation"},
        )
        if not rows or rows[0].get("id") is None:
            raise DependencyError("Booking insert returned no id")
        booking_id = str(rows[0]["id"])
        self._logger.info("Booking saved", extra={"booking_id": booking_id, "date": booking.date})
        return booking_id

    def delete_booking(self, booking_id: str) -> None:
        self._request("DELETE", params={"id": f"eq.{booking_id}"})

    def get_booking(self, booking_id: str) -> Booking | None:
        rows = self._request("GET", params={"select": "*", "id": f"eq.{booking_id}"})
        bookings = self._to_bookings(rows)
        return bookings[0] if bookings else None

    def get_booking_by_token(self, cancel_token: str) -> Booking | None:
        rows = self._request("GET", params={"select": "*", "cancel_token": f"eq.{cancel_token}"})
        bookings = self._to_bookings(rows)
        return bookings[0] if bookings else None

    def list_bookings_by_user(self, user_id: str) -> list[Booking]:
        rows = self._request(
            "GET",
            params={"select": "*", "user_id": f"eq.{user_id}", "order": "date.desc"},
        )
        return self._to_bookings(rows)

    def list_bookings(self) -> list[Booking]:
        rows = self._request("GET", params={"select": "*", "order": "date.desc"})
        return self._to_bookings(rows)

    def update_booking_status(self, booking_id: str, status: BookingStatus) -> Booking | None:
        rows = self._request(
            "PATCH",
            params={"id": f"eq.{booking_id}"},
            json={"status": status.value},
            headers={"Prefer": "return=representation"},
        )
        bookings = self._to_bookings(rows)
        return bookings[0] if bookings else None

    def _request(
        self,
        method: str,
        params: dict[str, str] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> list[dict[str, Any]]:
        url = f"{self._url}/rest/v1/{self._table}"
        all_headers = {
            "apikey": self._key,
            "Authorization": f"Bearer {self._key}",
            "Content-Type": "application/json",
        }
        all_headers.update(headers or {})
        try:
            response = self._client.request(method, url, params=params, json=json, headers=all_headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self._logger.error(
                "Booking store rejected request",
                extra={"status": e.response.status_code, "reason": e.response.text[:200]},
            )
            raise DependencyError(f"Booking store error: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            self._logger.error("Booking store unreachable", extra={"reason": str(e)})
            raise DependencyError(f"Booking store unreachable: {e}") from e

        if not response.content:
            return []
        data = response.json()
        if isinstance(data, dict):
            return [data]
        return data

    def _to_bookings(self, rows: list[dict[str, Any]]) -> list[Booking]:
        bookings: list[Booking] = []
        for row in rows:
            booking = _row_to_booking(row)
            if booking.start_hour is None:
                # Still listed and cancellable, but blocks no hours.
                self._logger.warning(
                    "Booking row has an invalid time",
                    extra={"booking_id": booking.id, "reason": booking.time},
                )
            bookings.append(booking)
        return bookings


def _row_to_booking(row: dict[str, Any]) -> Booking:
    raw_services = row.get("service") or ""
    services = tuple(s.strip() for s in raw_services.split(",") if s.strip())
    status = _parse_status(row.get("status"))
    user_id = row.get("user_id")
    time = str(row.get("time") or "")
    try:
        start_hour = parse_start_hour(time)
    except ValidationError:
        start_hour = None
    return Booking(
        id=str(row["id"]) if row.get("id") is not None else None,
        date=str(row.get("date") or ""),
        services=services,
        time=time,
        start_hour=start_hour,
        mehendi_hours=int(row.get("mehendi_hours") or 0),
        name=row.get("name") or "",
        email=row.get("email") or "",
        phone=row.get("phone"),
        location=row.get("location"),
        address=row.get("address"),
        notes=row.get("notes"),
        total_price=row.get("total_price") or 0,
        service_pricing=row.get("service_pricing") or [],
        payment_method=row.get("payment_method") or "none",
        payment_status=row.get("payment_status") or "unpaid",
        status=status,
        cancel_token=row.get("cancel_token"),
        user_id=str(user_id) if user_id is not None else None,
        created_at=row.get("created_at"),
    )


def _booking_to_row(booking: Booking) -> dict[str, Any]:
    return {
        "name": booking.name,
        "email": booking.email,
        "phone": booking.phone,
        "service": booking.service_label,
        "date": booking.date,
        "time": booking.time,
        "location": booking.location,
        "address": booking.address,
        "notes": booking.notes,
        "cancel_token": booking.cancel_token,
        "total_price": booking.total_price,
        "service_pricing": booking.service_pricing,
        "mehendi_hours": booking.mehendi_hours,
        "payment_method": booking.payment_method,
        "payment_status": booking.payment_status,
        "status": booking.status.value,
        "user_id": booking.user_id,
    }


def _parse_status(raw: str | None) -> BookingStatus:
    try:
        return BookingStatus(raw or BookingStatus.PENDING.value)
    except ValueError:
        return BookingStatus.PENDING
