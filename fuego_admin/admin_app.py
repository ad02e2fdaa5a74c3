"""Main Textual app class."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Any, Awaitable, Callable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from fuego_admin.announcements import AnnouncementReconciler
from fuego_admin.constant import FILTER_OPTIONS, TAB_LABELS
from fuego_admin.filtering import filter_reservations
from fuego_admin.item_draft import NewItemDraftBuilder
from fuego_admin.modals import AlertModal, ConfirmModal, NewItemModal
from fuego_admin.models import DashboardData, Outcome, Reservation
from fuego_admin.price_edit import PriceEditSession
from fuego_admin.rendering import (
    connection_badge,
    format_announcement_row,
    format_filter_bar,
    format_menu_row,
    format_reservation_row,
    format_stat_cards,
    format_tabs,
    join_rows,
)
from fuego_admin.schema_sql import generate_schema_script
from fuego_admin.stats import compute_stats
from fuego_admin.store import StoreError, SupabaseStore

logger = logging.getLogger("fuego_admin.app")

_TAB_KEYS = {str(idx): tab for idx, tab in enumerate(TAB_LABELS, start=1)}

_HELP_BY_TAB = {
    "overview": "1-4 tabs. Ctrl+R reload. Ctrl+Q quit.",
    "reservations": "f filter, j/k move, c confirm, x cancel. Ctrl+R reload.",
    "menu": "j/k move, e edit price, n new item, r reset menu.",
    "settings": "a write announcement, j/k move, t toggle, y copy SQL.",
}


class FuegoAdminApp(App):
    """Restaurant admin panel: reservations, menu, announcements and schema."""

    TITLE = "FUEGO.OS"
    SUB_TITLE = "Admin Panel"
    # Keys go to the app, not to the scroll container.
    AUTO_FOCUS = None

    CSS = """
    Screen {
        layout: vertical;
        background: #0c0a09;
    }

    #top-bar {
        height: 1;
        padding: 0 1;
    }

    #tabs {
        width: 1fr;
    }

    #connection {
        width: 12;
        content-align: right middle;
    }

    #content-pane {
        height: 1fr;
        border: round $primary;
        padding: 1 2;
    }

    #status-bar {
        height: 2;
        border-top: solid $secondary;
        padding: 0 1;
        color: #a8a29e;
    }
    """

    active_tab = reactive("overview")
    filter_status = reactive("all")
    input_state = reactive("normal")
    selected_index = reactive(0)

    BINDINGS = [
        ("up", "move_selection(-1)", "Previous"),
        ("down", "move_selection(1)", "Next"),
        ("enter", "confirm_input", "Save"),
        ("escape", "cancel_input", "Cancel"),
        ("backspace", "backspace_input", "Delete char"),
        Binding("ctrl+r", "reload", "Reload", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, store: Any = None, today: Callable[[], date] = date.today) -> None:
        super().__init__()
        self.store = store if store is not None else SupabaseStore()
        self.today = today
        self.data = DashboardData()
        self.price_session = PriceEditSession(on_commit=self._commit_price)
        self.item_builder = NewItemDraftBuilder(create_item=self._create_menu_item)
        self.announcements = AnnouncementReconciler(self.store)
        self.is_connected: bool | None = None
        self.is_resetting_menu = False
        self.system_status = ""

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="top-bar"):
            yield Static(id="tabs")
            yield Static(id="connection")
        with VerticalScroll(id="content-pane"):
            yield Static(id="content")
        yield Static(id="status-bar")

    def on_mount(self) -> None:
        logger.info("Admin panel mounted")
        self._refresh_all()
        self.run_worker(self._load_all(), group="load", exit_on_error=False)

    # ---------- Data loading ----------

    async def _load_all(self) -> None:
        self.is_connected = await self.store.ping()
        try:
            reservations = await self.store.fetch_reservations()
            menu_items = await self.store.fetch_menu_items()
        except StoreError as e:
            logger.error(f"Loading dashboard data failed: {e}")
            self.system_status = "Falha ao carregar dados."
        else:
            self.data = DashboardData(reservations=reservations, menu_items=menu_items)
            self.system_status = f"{len(reservations)} reservas, {len(menu_items)} itens"
        if self.active_tab == "settings":
            await self.announcements.load()
        self._refresh_all()

    async def _load_announcements(self) -> None:
        await self.announcements.load()
        self._refresh_all()

    async def _reload_menu(self) -> None:
        try:
            menu_items = await self.store.fetch_menu_items()
        except StoreError as e:
            logger.error(f"Reloading menu failed: {e}")
            return
        self.data = DashboardData(reservations=self.data.reservations, menu_items=menu_items)
        self._refresh_all()

    def action_reload(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        self.run_worker(self._load_all(), group="load", exit_on_error=False)

    # ---------- Keyboard ----------

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if not event.is_printable or not event.character:
            return

        if self.input_state == "price":
            self.price_session.update_draft(self.price_session.draft_text + event.character)
            self._refresh_content()
            event.stop()
            return

        if self.input_state == "announcement":
            self.announcements.draft_text += event.character
            self._refresh_content()
            event.stop()
            return

        key = event.character.lower()
        if key in _TAB_KEYS:
            self.switch_tab(_TAB_KEYS[key])
            event.stop()
            return

        if key in {"j", "k"}:
            self.action_move_selection(1 if key == "j" else -1)
            event.stop()
            return

        handler = self._tab_commands().get(key)
        if handler is not None:
            handler()
            event.stop()

    def _tab_commands(self) -> dict[str, Callable[[], None]]:
        if self.active_tab == "reservations":
            return {
                "f": self.cycle_filter,
                "c": lambda: self.set_selected_reservation_status("confirmed"),
                "x": lambda: self.set_selected_reservation_status("cancelled"),
            }
        if self.active_tab == "menu":
            return {
                "e": self.start_price_edit,
                "n": self.open_new_item_form,
                "r": self.request_menu_reset,
            }
        if self.active_tab == "settings":
            return {
                "a": self.start_announcement_input,
                "t": self.toggle_selected_announcement,
                "y": self.copy_schema_script,
            }
        return {}

    def action_move_selection(self, delta: int) -> None:
        if isinstance(self.screen, ModalScreen) or self.input_state != "normal":
            return
        rows = self._selectable_rows()
        if not rows:
            self.selected_index = 0
        else:
            self.selected_index = (self.selected_index + delta) % len(rows)
        self._refresh_content()

    def action_confirm_input(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state == "price":
            if self.price_session.commit():
                self.input_state = "normal"
            self._refresh_all()
        elif self.input_state == "announcement":
            self.run_worker(self._post_announcement(), group="announcements", exit_on_error=False)

    def action_cancel_input(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state == "price":
            self.price_session.cancel()
        self.input_state = "normal"
        self._refresh_all()

    def action_backspace_input(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state == "price":
            self.price_session.update_draft(self.price_session.draft_text[:-1])
        elif self.input_state == "announcement":
            self.announcements.draft_text = self.announcements.draft_text[:-1]
        self._refresh_content()

    # ---------- Tabs and filters ----------

    def switch_tab(self, tab: str) -> None:
        if tab not in TAB_LABELS or tab == self.active_tab:
            return
        self.active_tab = tab
        self.selected_index = 0
        if tab == "settings":
            self.run_worker(self._load_announcements(), group="announcements", exit_on_error=False)
        self._refresh_all()

    def cycle_filter(self) -> None:
        idx = FILTER_OPTIONS.index(self.filter_status)
        self.filter_status = FILTER_OPTIONS[(idx + 1) % len(FILTER_OPTIONS)]
        self.selected_index = 0
        self._refresh_content()

    def visible_reservations(self) -> list[Reservation]:
        return filter_reservations(self.data.reservations, self.filter_status)

    def _selectable_rows(self) -> list[Any]:
        if self.active_tab == "reservations":
            return self.visible_reservations()
        if self.active_tab == "menu":
            return self.data.menu_items
        if self.active_tab == "settings":
            return self.announcements.announcements
        return []

    def _selected_row(self) -> Any:
        rows = self._selectable_rows()
        if not (0 <= self.selected_index < len(rows)):
            return None
        return rows[self.selected_index]

    # ---------- Reservations ----------

    def set_selected_reservation_status(self, status: str) -> None:
        reservation = self._selected_row()
        if reservation is None or reservation.status != "pending":
            return
        self.data = DashboardData(
            reservations=[
                replace(r, status=status) if r.id == reservation.id else r
                for r in self.data.reservations
            ],
            menu_items=self.data.menu_items,
        )
        self._refresh_all()
        self._run_remote(
            self.store.update_reservation_status(reservation.id, status),
            f"Reserva {status}",
            on_failure=self._load_all,
        )

    # ---------- Menu ----------

    def start_price_edit(self) -> None:
        item = self._selected_row()
        if item is None:
            return
        self.price_session.start_edit(item)
        self.input_state = "price"
        self._refresh_all()

    def _commit_price(self, item_id: str, price: float) -> None:
        self.data = DashboardData(
            reservations=self.data.reservations,
            menu_items=[
                replace(i, price=price) if i.id == item_id else i
                for i in self.data.menu_items
            ],
        )
        self._run_remote(self.store.update_menu_price(item_id, price), "Preço atualizado", on_failure=self._reload_menu)

    async def _create_menu_item(self, item: dict[str, Any]) -> None:
        created = await self.store.add_menu_item(item)
        if created is not None:
            self.data = DashboardData(
                reservations=self.data.reservations,
                menu_items=[*self.data.menu_items, created],
            )
        else:
            await self._reload_menu()

    async def _submit_new_item(self) -> Outcome:
        outcome = await self.item_builder.submit()
        if outcome.ok:
            self.system_status = f"Prato criado: {outcome.value['name']}"
        self._refresh_all()
        return outcome

    def open_new_item_form(self) -> None:
        self.item_builder.open_form()
        self.push_screen(NewItemModal(self.item_builder, self._submit_new_item), callback=lambda _: self._refresh_all())

    def request_menu_reset(self) -> None:
        if self.is_resetting_menu:
            return

        def _on_answer(confirmed: bool | None) -> None:
            if confirmed:
                self.run_worker(self._reset_menu(), group="reset", exclusive=True, exit_on_error=False)

        self.push_screen(ConfirmModal("Resetar cardápio para o padrão?"), callback=_on_answer)

    async def _reset_menu(self) -> None:
        self.is_resetting_menu = True
        self._refresh_status()
        try:
            await self.store.reset_menu_to_defaults()
        except StoreError as e:
            logger.error(f"Menu reset failed: {e}")
            self.push_screen(AlertModal("Erro ao resetar."))
        else:
            await self._load_all()
        finally:
            self.is_resetting_menu = False
            self._refresh_status()

    # ---------- Settings ----------

    def start_announcement_input(self) -> None:
        self.input_state = "announcement"
        self._refresh_all()

    async def _post_announcement(self) -> None:
        outcome = await self.announcements.post()
        if outcome.ok:
            self.input_state = "normal"
        self._refresh_all()

    def toggle_selected_announcement(self) -> None:
        announcement = self._selected_row()
        if announcement is None:
            return
        self.run_worker(self._toggle_announcement(announcement.id, announcement.is_active), group="announcements", exit_on_error=False)

    async def _toggle_announcement(self, announcement_id: str, current: bool) -> None:
        await self.announcements.toggle(announcement_id, current, on_applied=self._refresh_content)
        self._refresh_content()

    def copy_schema_script(self) -> None:
        self.copy_to_clipboard(generate_schema_script())
        self.notify("SQL copiado!")

    # ---------- Remote helpers ----------

    def _run_remote(
        self,
        call: Awaitable[Any],
        success_message: str,
        on_failure: Callable[[], Awaitable[None]] | None = None,
    ) -> None:
        async def _runner() -> None:
            try:
                await call
            except StoreError as e:
                logger.warning(f"{success_message} failed: {e}")
                if on_failure is not None:
                    await on_failure()
                return
            self.system_status = success_message
            self._refresh_status()

        self.run_worker(_runner(), group="remote", exit_on_error=False)

    # ---------- Rendering ----------

    def _refresh_all(self) -> None:
        self._refresh_tabs()
        self._refresh_content()
        self._refresh_status()

    def _refresh_tabs(self) -> None:
        try:
            self.query_one("#tabs", Static).update(format_tabs(self.active_tab))
            self.query_one("#connection", Static).update(connection_badge(self.is_connected))
        except NoMatches:
            return

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        if self.input_state == "price":
            help_text = "Type price. Enter save, Esc cancel."
        elif self.input_state == "announcement":
            help_text = "Type announcement. Enter post, Esc stop typing."
        else:
            help_text = _HELP_BY_TAB[self.active_tab]
        status = self.system_status or "Ready"
        if self.is_resetting_menu:
            status = "Resetando cardápio..."
        elif self.announcements.is_posting:
            status = "Publicando aviso..."
        bar.update(f"{help_text}\n{status}")

    def _refresh_content(self) -> None:
        try:
            content = self.query_one("#content", Static)
        except NoMatches:
            return
        render = {
            "overview": self._render_overview,
            "reservations": self._render_reservations,
            "menu": self._render_menu,
            "settings": self._render_settings,
        }[self.active_tab]
        content.update(render())

    def _render_overview(self) -> Text:
        return format_stat_cards(compute_stats(self.data.reservations, self.today()))

    def _render_reservations(self) -> Text:
        text = format_filter_bar(self.filter_status)
        text.append("\n\n")
        rows = [
            format_reservation_row(r, selected=idx == self.selected_index)
            for idx, r in enumerate(self.visible_reservations())
        ]
        text.append_text(join_rows(rows, "Nenhuma reserva encontrada."))
        return text

    def _render_menu(self) -> Text:
        text = Text("Gerenciar Cardápio\n\n", style="bold #ffffff")
        rows = []
        for idx, item in enumerate(self.data.menu_items):
            draft = self.price_session.draft_text if self.price_session.is_editing(item.id) else None
            rows.append(format_menu_row(item, selected=idx == self.selected_index, draft_text=draft))
        text.append_text(join_rows(rows, "Sem itens. Adicione um novo prato acima."))
        return text

    def _render_settings(self) -> Text:
        text = Text("Avisos do Site\n\n", style="bold #ffffff")
        draft = self.announcements.draft_text
        if self.input_state == "announcement":
            text.append(f"> {draft}|", style="bold #ffffff on #292524")
        else:
            text.append(f"> {draft or 'Novo aviso...'}", style="#a8a29e")
        text.append("\n\n")
        rows = [
            format_announcement_row(a, selected=idx == self.selected_index)
            for idx, a in enumerate(self.announcements.announcements)
        ]
        text.append_text(join_rows(rows, "Nenhum aviso."))
        text.append("\n\nBanco de Dados\n", style="bold #ffffff")
        text.append("Se não houver cardápio, copie (y) e rode o SQL abaixo no Supabase.\n\n", style="#78716c")
        text.append(generate_schema_script(), style="#34d399")
        return text
