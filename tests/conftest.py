"""
Shared fixtures for the admin panel tests.

``FakeStore`` stands in for ``SupabaseStore``: same async methods, data kept
in memory, every call recorded in ``calls``. Put an operation name into
``fail`` to make it raise ``StoreError``.
"""
from dataclasses import replace

import pytest

from fuego_admin.models import Announcement, MenuItem, Reservation
from fuego_admin.store import StoreError


class FakeStore:
    def __init__(self, reservations=None, menu_items=None, announcements=None):
        self.reservations = list(reservations or [])
        self.menu_items = list(menu_items or [])
        self.announcements = list(announcements or [])
        self.calls = []
        self.fail = set()
        # When set, toggles are acknowledged but not applied, like a server
        # silently rejecting the update.
        self.ignore_toggles = False
        self.created_announcement_override = "unset"

    def _record(self, operation, *args):
        self.calls.append((operation, *args))
        if operation in self.fail:
            raise StoreError(operation, "simulated failure")

    def count(self, operation):
        return sum(1 for call in self.calls if call[0] == operation)

    async def ping(self):
        return "ping" not in self.fail

    async def fetch_reservations(self):
        self._record("fetch_reservations")
        return list(self.reservations)

    async def fetch_menu_items(self):
        self._record("fetch_menu_items")
        return list(self.menu_items)

    async def fetch_announcements(self):
        self._record("fetch_announcements")
        return list(self.announcements)

    async def create_announcement(self, message):
        self._record("create_announcement", message)
        if self.created_announcement_override != "unset":
            return self.created_announcement_override
        created = Announcement(id=f"a{len(self.announcements) + 1}", message=message, is_active=True)
        self.announcements = [created, *self.announcements]
        return created

    async def toggle_announcement(self, announcement_id, active):
        self._record("toggle_announcement", announcement_id, active)
        if self.ignore_toggles:
            return
        self.announcements = [
            replace(a, is_active=active) if a.id == announcement_id else a for a in self.announcements
        ]

    async def update_menu_price(self, item_id, price):
        self._record("update_menu_price", item_id, price)
        self.menu_items = [replace(i, price=price) if i.id == item_id else i for i in self.menu_items]

    async def add_menu_item(self, item):
        self._record("add_menu_item", item)
        created = MenuItem(
            id=f"item-{len(self.menu_items) + 1}",
            name=item["name"],
            description=item["description"],
            price=item["price"],
            category=item["category"],
            image=item["image"],
            highlight=item["popular"],
        )
        self.menu_items = [*self.menu_items, created]
        return created

    async def reset_menu_to_defaults(self):
        self._record("reset_menu_to_defaults")
        self.menu_items = [MenuItem(id="picanha-na-brasa", name="Picanha na Brasa", price=129.9)]

    async def update_reservation_status(self, reservation_id, status):
        self._record("update_reservation_status", reservation_id, status)
        self.reservations = [replace(r, status=status) if r.id == reservation_id else r for r in self.reservations]


# ============ DATA FIXTURES ============

@pytest.fixture
def reservations():
    return [
        Reservation(id="r1", client_name="Ana Souza", pax=2, date="2026-10-18", time="20:00", status="pending", created_at=100),
        Reservation(id="r2", client_name="Bruno Lima", pax=4, date="2026-10-19", time="21:00", status="confirmed", created_at=200),
        Reservation(id="r3", client_name="", pax=6, date="2026-10-18", time="19:30", status="cancelled", created_at=0),
    ]


@pytest.fixture
def menu_items():
    return [
        MenuItem(id="picanha", name="Picanha", price=129.9, category="carnes", highlight=True),
        MenuItem(id="provoleta", name="Provoleta", price=42.0, category="entradas"),
    ]


@pytest.fixture
def announcements():
    return [
        Announcement(id="a1", message="Fechado na segunda-feira", is_active=False),
        Announcement(id="a2", message="Música ao vivo sexta", is_active=True),
    ]


@pytest.fixture
def fake_store(reservations, menu_items, announcements):
    return FakeStore(reservations=reservations, menu_items=menu_items, announcements=announcements)
