"""Rendering helpers for tabs, stat cards and list rows."""

from __future__ import annotations

from rich.text import Text

from fuego_admin.constant import CATEGORY_LABELS, FILTER_LABELS, FILTER_OPTIONS, TAB_LABELS
from fuego_admin.models import Announcement, MenuItem, Reservation
from fuego_admin.stats import ReservationStats

POINTER = "➤ "


def format_price(value: object) -> str:
    """Two-decimal price text; anything unparseable shows as ``0.00``."""
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return "0.00"
    if number != number or number in (float("inf"), float("-inf")):
        return "0.00"
    return f"{number:.2f}"


def status_style(status: str) -> str:
    if status == "confirmed":
        return "bold #10b981"
    if status == "pending":
        return "bold #f59e0b"
    return "bold #ef4444"


def format_tabs(active: str) -> Text:
    text = Text()
    for idx, (tab, label) in enumerate(TAB_LABELS.items(), start=1):
        if idx > 1:
            text.append("  ")
        style = "bold #ffffff on #ea580c" if tab == active else "#a8a29e"
        text.append(f" {idx} {label} ", style=style)
    return text


def connection_badge(is_connected: bool | None) -> Text:
    if is_connected is None:
        return Text("● ...", style="dim")
    if is_connected:
        return Text("● Online", style="bold #10b981")
    return Text("● Offline", style="bold #ef4444")


def format_stat_cards(stats: ReservationStats) -> Text:
    text = Text()
    cards = (("Hoje", stats.today), ("Pendentes", stats.pending), ("Confirmadas", stats.confirmed), ("Total", stats.total))
    for idx, (label, value) in enumerate(cards):
        if idx > 0:
            text.append("\n\n")
        text.append(f"{label}\n", style="#78716c")
        text.append(str(value), style="bold #ffffff")
    return text


def format_filter_bar(current: str) -> Text:
    text = Text()
    for idx, status in enumerate(FILTER_OPTIONS):
        if idx > 0:
            text.append(" ")
        style = "bold #ffffff on #ea580c" if status == current else "#a8a29e on #292524"
        text.append(f" {FILTER_LABELS[status].upper()} ", style=style)
    text.append("   f: next filter", style="dim")
    return text


def format_reservation_row(reservation: Reservation, selected: bool = False) -> Text:
    text = Text()
    text.append(POINTER if selected else "  ")
    text.append(reservation.client_name or "Cliente", style="bold #ffffff")
    text.append(f"\n    {reservation.date} • {reservation.time} • {reservation.pax}", style="#78716c")
    text.append("\n    ")
    text.append(reservation.status.upper(), style=status_style(reservation.status))
    if reservation.status == "pending" and selected:
        text.append("   c: confirmar  x: cancelar", style="dim")
    return text


def format_menu_row(item: MenuItem, selected: bool = False, draft_text: str | None = None) -> Text:
    """Render one menu line; ``draft_text`` is set while the item's price is being edited."""
    text = Text()
    text.append(POINTER if selected else "  ")
    if item.highlight:
        text.append("★ ", style="#f97316")
    text.append(item.name or item.id, style="bold #ffffff")
    text.append(f"  {CATEGORY_LABELS.get(item.category, item.category)}", style="#78716c")
    text.append("  ")
    if draft_text is not None:
        text.append(f"R$ [{draft_text}|]", style="bold #ffffff on #44403c")
    else:
        text.append(f"R$ {format_price(item.price)}", style="bold #34d399")
    return text


def format_announcement_row(announcement: Announcement, selected: bool = False) -> Text:
    text = Text()
    text.append(POINTER if selected else "  ")
    text.append(announcement.message, style="#ffffff" if announcement.is_active else "#78716c")
    text.append("  ")
    text.append("Desativar" if announcement.is_active else "Ativar", style="underline #f97316")
    return text


def join_rows(rows: list[Text], empty_message: str) -> Text:
    if not rows:
        return Text(empty_message, style="#78716c")
    text = Text()
    for idx, row in enumerate(rows):
        if idx > 0:
            text.append("\n")
        text.append_text(row)
    return text
