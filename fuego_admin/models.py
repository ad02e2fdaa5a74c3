"""Domain models for the admin panel."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from fuego_admin.constant import DEFAULT_CATEGORY

T = TypeVar("T")


@dataclass(frozen=True)
class Reservation:
    """A table booking as stored remotely."""

    id: str
    client_name: str = ""
    phone: str = ""
    pax: int = 0
    date: str = ""
    time: str = ""
    table_type: str = ""
    status: str = "pending"
    created_at: float = 0


@dataclass(frozen=True)
class MenuItem:
    """A dish or drink in the menu catalog."""

    id: str
    name: str = ""
    description: str = ""
    price: float = 0.0
    category: str = DEFAULT_CATEGORY
    image: str = ""
    highlight: bool = False


@dataclass(frozen=True)
class Announcement:
    """A banner message shown on the public site while active."""

    id: str
    message: str = ""
    is_active: bool = False


@dataclass
class NewItemDraft:
    """Unsaved add-item form state. Price stays text until submit."""

    name: str = ""
    description: str = ""
    price: str = ""
    category: str = DEFAULT_CATEGORY
    image: str = ""
    highlight: bool = False


@dataclass(frozen=True)
class PriceEdit:
    """The single item currently being price-edited."""

    item_id: str
    draft_text: str


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of an action whose failure is reported, not raised."""

    ok: bool
    value: T | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: T | None = None) -> Outcome[T]:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> Outcome[T]:
        return cls(ok=False, error=error)


@dataclass
class DashboardData:
    """Canonical lists owned by the host view. Replaced, never mutated in place."""

    reservations: list[Reservation] = field(default_factory=list)
    menu_items: list[MenuItem] = field(default_factory=list)
