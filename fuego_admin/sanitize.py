"""Normalization of untrusted remote payloads into typed lists.

The remote store can hand back partial or corrupt payloads. Everything here
degrades to dropping the bad element or falling back to a default; nothing
raises.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from fuego_admin.constant import DEFAULT_CATEGORY
from fuego_admin.models import Announcement, MenuItem, Reservation


def clean_records(value: Any) -> list[Mapping[str, Any]]:
    """Keep only mapping elements with a non-empty ``id``, in original order."""
    if not isinstance(value, list):
        return []
    return [record for record in value if isinstance(record, Mapping) and record.get("id")]


def _first(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if record.get(key) is not None:
            return record[key]
    return None


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _number(value: Any, default: float = 0.0) -> float:
    if isinstance(value, bool) or value is None:
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def _integer(value: Any) -> int:
    return int(_number(value))


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"true", "1", "yes"}
    return bool(value)


def to_timestamp_ms(value: Any) -> float:
    """Convert a numeric or ISO-8601 ``created_at`` into epoch milliseconds."""
    if isinstance(value, str):
        raw = value.strip()
        if not raw:
            return 0
        try:
            return float(raw)
        except ValueError:
            pass
        try:
            parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
        except ValueError:
            return 0
        return parsed.timestamp() * 1000
    return _number(value, 0)


def reservation_from_record(record: Mapping[str, Any]) -> Reservation:
    return Reservation(
        id=str(record["id"]),
        client_name=_text(_first(record, "client_name", "clientName")),
        phone=_text(record.get("phone")),
        pax=_integer(record.get("pax")),
        date=_text(record.get("date")),
        time=_text(record.get("time")),
        table_type=_text(_first(record, "table_type", "tableType")),
        status=_text(record.get("status")),
        created_at=to_timestamp_ms(_first(record, "created_at", "createdAt")),
    )


def menu_item_from_record(record: Mapping[str, Any]) -> MenuItem:
    return MenuItem(
        id=str(record["id"]),
        name=_text(record.get("name")),
        description=_text(record.get("description")),
        price=max(0.0, _number(record.get("price"))),
        category=_text(record.get("category")) or DEFAULT_CATEGORY,
        image=_text(record.get("image")),
        highlight=_flag(_first(record, "highlight", "popular")),
    )


def announcement_from_record(record: Mapping[str, Any]) -> Announcement:
    return Announcement(
        id=str(record["id"]),
        message=_text(record.get("message")),
        is_active=_flag(_first(record, "is_active", "isActive")),
    )


def sanitize_reservations(value: Any) -> list[Reservation]:
    return [reservation_from_record(record) for record in clean_records(value)]


def sanitize_menu_items(value: Any) -> list[MenuItem]:
    return [menu_item_from_record(record) for record in clean_records(value)]


def sanitize_announcements(value: Any) -> list[Announcement]:
    return [announcement_from_record(record) for record in clean_records(value)]
