"""Locale-aware rendering of reservation timestamps.

``ja`` mirrors the browser's ``ja-JP`` output (``2024/1/1 10:00:00``) and ``en``
mirrors ``en-US`` (``1/1/2024, 10:00:00 AM``). Values that do not parse are
shown as received.
"""

from datetime import date, datetime

from reservation_frontend.app.services.models import Reservation


def _parse(value: str) -> datetime | None:
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def format_date(value: date, locale: str) -> str:
    if locale == "en":
        return f"{value.month}/{value.day}/{value.year}"
    return f"{value.year}/{value.month}/{value.day}"


def format_datetime(value: datetime, locale: str) -> str:
    if locale == "en":
        hour = value.hour % 12 or 12
        meridiem = "AM" if value.hour < 12 else "PM"
        return f"{format_date(value, locale)}, {hour}:{value.minute:02d}:{value.second:02d} {meridiem}"
    return f"{format_date(value, locale)} {value.hour}:{value.minute:02d}:{value.second:02d}"


def format_reservation_time(reservation: Reservation, locale: str) -> str:
    if reservation.datetime:
        parsed = _parse(reservation.datetime)
        return format_datetime(parsed, locale) if parsed else reservation.datetime

    parts = []
    if reservation.date:
        parsed = _parse(reservation.date)
        parts.append(format_date(parsed, locale) if parsed else reservation.date)
    if reservation.time:
        parts.append(reservation.time)
    return " ".join(parts)
