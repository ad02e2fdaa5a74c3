"""Add-item form state and its translation into a storable menu row."""

from __future__ import annotations

import logging
from dataclasses import fields, replace
from typing import Any, Awaitable, Callable

from fuego_admin.constant import DEFAULT_IMAGE_URL
from fuego_admin.models import NewItemDraft, Outcome
from fuego_admin.price_edit import parse_price

logger = logging.getLogger("fuego_admin.item_draft")

DRAFT_FIELDS = frozenset(f.name for f in fields(NewItemDraft))


class NewItemDraftBuilder:
    """Collects the new-item form and submits it through ``create_item``.

    The form says "highlight"; the menu table and the public site call the
    same flag "popular". ``build_payload`` is where one becomes the other.
    """

    def __init__(self, create_item: Callable[[dict[str, Any]], Awaitable[Any]]) -> None:
        self.create_item = create_item
        self.draft = NewItemDraft()
        self.show_form = False

    def open_form(self) -> None:
        self.show_form = True

    def toggle_form(self) -> None:
        self.show_form = not self.show_form

    def close_form(self) -> None:
        self.show_form = False

    def reset(self) -> None:
        self.draft = NewItemDraft()

    def set_field(self, field: str, value: Any) -> None:
        if field not in DRAFT_FIELDS:
            raise KeyError(field)
        self.draft = replace(self.draft, **{field: value})

    def is_complete(self) -> bool:
        return bool(self.draft.name) and bool(self.draft.price)

    def build_payload(self) -> dict[str, Any]:
        """Raises ValueError when the price is not a non-negative finite number."""
        draft = self.draft
        price = parse_price(str(draft.price))
        if price is None:
            raise ValueError(f"invalid price: {draft.price!r}")
        return {
            "name": draft.name,
            "description": draft.description,
            "price": price,
            "category": draft.category,
            "image": draft.image or DEFAULT_IMAGE_URL,
            "popular": draft.highlight,
        }

    async def submit(self) -> Outcome[dict[str, Any]]:
        """Create the item, then reset the draft and hide the form.

        A missing name or price makes no call. When the create call fails the
        form stays open with the draft intact.
        """
        if not self.is_complete():
            return Outcome.failure("name and price are required")

        try:
            payload = self.build_payload()
        except ValueError:
            logger.info(f"New item price is not a number: {self.draft.price!r}")
            return Outcome.failure(f"invalid price: {self.draft.price!r}")

        try:
            await self.create_item(payload)
        except Exception as e:
            logger.error(f"Creating menu item {payload['name']!r} failed: {e}")
            return Outcome.failure(str(e))

        logger.info(f"Menu item created: {payload['name']!r} ({payload['category']})")
        self.close_form()
        self.reset()
        return Outcome.success(payload)
