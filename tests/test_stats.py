from datetime import date

from fuego_admin.models import Reservation
from fuego_admin.sanitize import sanitize_reservations
from fuego_admin.stats import ReservationStats, compute_stats

TODAY = date(2026, 10, 18)


def test_counts_by_status_and_day(reservations):
    stats = compute_stats(reservations, TODAY)

    assert stats == ReservationStats(total=3, pending=1, confirmed=1, today=2)


def test_status_counts_partition_the_list(reservations):
    stats = compute_stats(reservations, TODAY)
    others = sum(1 for r in reservations if r.status not in {"pending", "confirmed"})

    assert stats.pending + stats.confirmed + others == stats.total
    assert stats.today <= stats.total


def test_empty_list():
    assert compute_stats([], TODAY) == ReservationStats()


def test_missing_or_odd_dates_do_not_match_today():
    rows = [
        Reservation(id="r1", date=""),
        Reservation(id="r2", date="18/10/2026"),
        Reservation(id="r3", date=None),  # type: ignore[arg-type]
        Reservation(id="r4", date="2026-10-18"),
    ]

    assert compute_stats(rows, TODAY).today == 1


def test_today_is_injected_not_read_from_clock(reservations):
    assert compute_stats(reservations, date(2026, 10, 19)).today == 1
    assert compute_stats(reservations, date(2030, 1, 1)).today == 0


def test_rows_without_status_are_neither_pending_nor_confirmed():
    rows = sanitize_reservations([{"id": "r1", "status": "pending"}, {"id": "r9"}, {"id": "r8", "status": None}])

    stats = compute_stats(rows, TODAY)

    assert stats == ReservationStats(total=3, pending=1, confirmed=0, today=0)
