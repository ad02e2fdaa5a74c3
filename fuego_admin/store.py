"""Supabase (PostgREST) access for reservations, menu items and announcements."""

from __future__ import annotations

import asyncio
import logging
import re
import time
import unicodedata
from typing import Any, Callable
from uuid import uuid4

import requests

from fuego_admin.config import MAX_RETRIES, REQUEST_TIMEOUT_SECONDS, RETRY_DELAY_SECONDS, SUPABASE_KEY, SUPABASE_URL
from fuego_admin.constant import DEFAULT_MENU_ITEMS, STATUS_TRANSITIONS
from fuego_admin.models import Announcement, MenuItem, Reservation
from fuego_admin.sanitize import sanitize_announcements, sanitize_menu_items, sanitize_reservations

logger = logging.getLogger("fuego_admin.store")


class StoreError(Exception):
    """A remote operation failed after all retries."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation


def _is_transient(exc: requests.exceptions.RequestException) -> bool:
    if isinstance(exc, (requests.exceptions.ConnectionError, requests.exceptions.Timeout)):
        return True
    response = getattr(exc, "response", None)
    return response is not None and response.status_code >= 500


def menu_item_id(name: str) -> str:
    """Build a text primary key for a new menu row, e.g. ``picanha-na-brasa-3f9a1c``."""
    ascii_name = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    slug = re.sub(r"[^a-z0-9]+", "-", ascii_name.lower()).strip("-") or "item"
    return f"{slug}-{uuid4().hex[:6]}"


class SupabaseStore:
    """Blocking HTTP calls wrapped in async methods.

    Each public coroutine runs its request in a worker thread so the Textual
    event loop stays responsive while the network is slow.
    """

    def __init__(
        self,
        url: str = SUPABASE_URL,
        api_key: str = SUPABASE_KEY,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        retries: int = MAX_RETRIES,
        retry_delay: float = RETRY_DELAY_SECONDS,
        session: requests.Session | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.base_url = url.rstrip("/") + "/rest/v1"
        self.api_key = api_key
        self.timeout = timeout
        self.retries = max(1, retries)
        self.retry_delay = retry_delay
        self.session = session or requests.Session()
        self._sleep = sleep

    def _headers(self, prefer: str | None = None) -> dict[str, str]:
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        if prefer:
            headers["Prefer"] = prefer
        return headers

    def _request(
        self,
        operation: str,
        method: str,
        table: str,
        params: dict[str, str] | None = None,
        payload: Any = None,
        prefer: str | None = None,
    ) -> Any:
        url = f"{self.base_url}/{table}"
        for attempt in range(self.retries):
            try:
                response = self.session.request(
                    method=method,
                    url=url,
                    params=params,
                    json=payload,
                    headers=self._headers(prefer),
                    timeout=self.timeout,
                )
                response.raise_for_status()
            except requests.exceptions.RequestException as e:
                if _is_transient(e) and attempt < self.retries - 1:
                    wait_time = self.retry_delay * (2 ** attempt)
                    logger.warning(f"{operation} failed (attempt {attempt + 1}/{self.retries}): {e}. Retrying in {wait_time}s")
                    self._sleep(wait_time)
                    continue
                logger.error(f"{operation} failed after {attempt + 1} attempt(s): {e}")
                raise StoreError(operation, str(e)) from e

            if not response.content:
                return None
            try:
                return response.json()
            except ValueError as e:
                raise StoreError(operation, f"invalid JSON response: {e}") from e
        raise StoreError(operation, "no attempts made")

    async def _call(self, operation: str, method: str, table: str, **kwargs: Any) -> Any:
        logger.debug(f"{operation}: {method} {table}")
        return await asyncio.to_thread(self._request, operation, method, table, **kwargs)

    # ---------- Reads ----------

    async def fetch_reservations(self) -> list[Reservation]:
        rows = await self._call("fetch_reservations", "GET", "reservations", params={"select": "*", "order": "created_at.desc"})
        return sanitize_reservations(rows)

    async def fetch_menu_items(self) -> list[MenuItem]:
        rows = await self._call("fetch_menu_items", "GET", "menu_items", params={"select": "*", "order": "category.asc"})
        return sanitize_menu_items(rows)

    async def fetch_announcements(self) -> list[Announcement]:
        rows = await self._call("fetch_announcements", "GET", "announcements", params={"select": "*", "order": "created_at.desc"})
        return sanitize_announcements(rows)

    async def ping(self) -> bool:
        try:
            await self._call("ping", "GET", "announcements", params={"select": "id", "limit": "1"})
        except StoreError:
            return False
        return True

    # ---------- Announcements ----------

    async def create_announcement(self, message: str) -> Announcement | None:
        rows = await self._call(
            "create_announcement",
            "POST",
            "announcements",
            payload={"message": message, "is_active": True},
            prefer="return=representation",
        )
        created = sanitize_announcements(rows)
        return created[0] if created else None

    async def toggle_announcement(self, announcement_id: str, active: bool) -> None:
        await self._call(
            "toggle_announcement",
            "PATCH",
            "announcements",
            params={"id": f"eq.{announcement_id}"},
            payload={"is_active": active},
        )

    # ---------- Menu ----------

    async def update_menu_price(self, item_id: str, price: float) -> None:
        await self._call(
            "update_menu_price",
            "PATCH",
            "menu_items",
            params={"id": f"eq.{item_id}"},
            payload={"price": price},
        )

    async def add_menu_item(self, item: dict[str, Any]) -> MenuItem | None:
        row = {
            "id": item.get("id") or menu_item_id(str(item.get("name", ""))),
            "name": item.get("name"),
            "description": item.get("description"),
            "price": item.get("price"),
            "category": item.get("category"),
            "image": item.get("image"),
            "highlight": bool(item.get("popular", item.get("highlight", False))),
        }
        rows = await self._call("add_menu_item", "POST", "menu_items", payload=row, prefer="return=representation")
        created = sanitize_menu_items(rows)
        return created[0] if created else None

    async def reset_menu_to_defaults(self) -> None:
        await self._call("reset_menu_to_defaults", "DELETE", "menu_items", params={"id": "not.is.null"})
        await self._call("reset_menu_to_defaults", "POST", "menu_items", payload=[dict(item) for item in DEFAULT_MENU_ITEMS])
        logger.info(f"Menu reset to {len(DEFAULT_MENU_ITEMS)} default items")

    # ---------- Reservations ----------

    async def update_reservation_status(self, reservation_id: str, status: str) -> None:
        if status not in STATUS_TRANSITIONS:
            raise ValueError(f"status must be one of {STATUS_TRANSITIONS}, got {status!r}")
        await self._call(
            "update_reservation_status",
            "PATCH",
            "reservations",
            params={"id": f"eq.{reservation_id}"},
            payload={"status": status},
        )
