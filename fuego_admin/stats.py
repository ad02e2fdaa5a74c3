"""Summary counts for the overview tab."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from fuego_admin.models import Reservation


@dataclass(frozen=True)
class ReservationStats:
    total: int = 0
    pending: int = 0
    confirmed: int = 0
    today: int = 0


def _is_on_day(reservation: Reservation, day_key: str) -> bool:
    try:
        if not reservation.date:
            return False
        return reservation.date == day_key
    except Exception:
        return False


def compute_stats(reservations: Iterable[Reservation], today: date) -> ReservationStats:
    """Count reservations by status and those booked for ``today``.

    ``today`` is passed in rather than read from the clock so callers decide
    which calendar day counts.
    """
    rows = list(reservations)
    day_key = today.isoformat()
    return ReservationStats(
        total=len(rows),
        pending=sum(1 for r in rows if r.status == "pending"),
        confirmed=sum(1 for r in rows if r.status == "confirmed"),
        today=sum(1 for r in rows if _is_on_day(r, day_key)),
    )
