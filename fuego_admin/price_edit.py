"""Inline price editing for one menu item at a time."""

from __future__ import annotations

import logging
import math
from typing import Callable

from fuego_admin.models import MenuItem, PriceEdit

logger = logging.getLogger("fuego_admin.price_edit")


def plain_number(value: float | int | None) -> str:
    """Render a price the way it is typed: ``89`` rather than ``89.0``."""
    if value is None:
        return "0"
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def parse_price(text: str) -> float | None:
    """Parse a non-negative finite price, or return None."""
    try:
        price = float(text.strip())
    except (AttributeError, ValueError):
        return None
    if math.isnan(price) or math.isinf(price) or price < 0:
        return None
    return price


class PriceEditSession:
    """Two-state machine: Idle (``editing is None``) or Editing one item.

    Starting an edit on another item drops the previous unsaved draft.
    """

    def __init__(self, on_commit: Callable[[str, float], None]) -> None:
        self.on_commit = on_commit
        self.editing: PriceEdit | None = None

    @property
    def is_idle(self) -> bool:
        return self.editing is None

    def is_editing(self, item_id: str) -> bool:
        return self.editing is not None and self.editing.item_id == item_id

    @property
    def draft_text(self) -> str:
        return self.editing.draft_text if self.editing else ""

    def start_edit(self, item: MenuItem | None) -> None:
        if item is None:
            return
        if self.editing is not None and self.editing.item_id != item.id:
            logger.debug(f"Discarding unsaved price draft for {self.editing.item_id}")
        self.editing = PriceEdit(item_id=item.id, draft_text=plain_number(item.price))

    def update_draft(self, text: str) -> None:
        if self.editing is None:
            return
        self.editing = PriceEdit(item_id=self.editing.item_id, draft_text=text)

    def commit(self) -> bool:
        """Hand a valid price to ``on_commit`` and go Idle. Invalid input changes nothing."""
        if self.editing is None:
            return False

        price = parse_price(self.editing.draft_text)
        if price is None:
            logger.debug(f"Rejected price draft {self.editing.draft_text!r} for {self.editing.item_id}")
            return False

        item_id = self.editing.item_id
        self.on_commit(item_id, price)
        self.editing = None
        return True

    def cancel(self) -> None:
        self.editing = None
