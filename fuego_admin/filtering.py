"""Status filter and recency sort for the reservations list."""

from __future__ import annotations

from typing import Iterable

from fuego_admin.constant import FILTER_OPTIONS
from fuego_admin.models import Reservation


def filter_reservations(reservations: Iterable[Reservation], status: str = "all") -> list[Reservation]:
    """Return reservations matching ``status``, newest ``created_at`` first."""
    if status not in FILTER_OPTIONS:
        raise ValueError(f"Unknown status filter: {status!r}")

    matching = [r for r in reservations if status == "all" or r.status == status]
    return sorted(matching, key=lambda r: r.created_at or 0, reverse=True)
