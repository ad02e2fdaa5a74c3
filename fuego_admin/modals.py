"""Modal screens: new menu item form, confirm dialog and alert."""

from __future__ import annotations

from typing import Awaitable, Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from fuego_admin.constant import CATEGORY_LABELS
from fuego_admin.item_draft import NewItemDraftBuilder
from fuego_admin.models import Outcome

_DIALOG_CSS = """
    {name} {{
        align: center middle;
        background: $background 60%;
    }}

    {name} .dialog {{
        width: {width};
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }}

    {name} .dialog-title {{
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }}

    {name} .dialog-body {{
        margin-bottom: 1;
        color: white;
    }}

    {name} .dialog-error {{
        color: #ffb3b3;
    }}

    {name} .dialog-help {{
        margin-top: 1;
        color: #dddddd;
    }}
"""


class NewItemModal(ModalScreen[bool]):
    """Add-item form. Dismisses with True once the item was created."""

    BINDINGS = [
        ("escape", "close", "Cancel"),
        ("ctrl+c", "close", "Cancel"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "activate", "Edit/Select"),
    ]

    CSS = _DIALOG_CSS.format(name="NewItemModal", width=72)

    cursor_index = reactive(0)

    _TEXT_FIELDS = {
        "name": "Nome do Prato",
        "price": "Preço (R$)",
        "image": "URL da Imagem",
        "description": "Descrição",
    }
    _ROWS = ("name", "price", "category", "image", "description", "highlight", "save", "cancel")

    def __init__(self, builder: NewItemDraftBuilder, submit: Callable[[], Awaitable[Outcome]]) -> None:
        super().__init__()
        self.builder = builder
        self.submit = submit
        self.typing_field: str | None = None
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(classes="dialog"):
            yield Static("Novo Prato", classes="dialog-title")
            yield Static(id="item-form-body", classes="dialog-body")
            yield Static(id="item-form-error", classes="dialog-error")
            yield Static(id="item-form-help", classes="dialog-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if self.typing_field is None:
            return

        if event.key in {"escape", "enter"}:
            self.typing_field = None
            self._refresh_content()
            event.stop()
            return

        value = str(getattr(self.builder.draft, self.typing_field))
        if event.key == "backspace":
            if value:
                self.builder.set_field(self.typing_field, value[:-1])
            self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            self.builder.set_field(self.typing_field, value + event.character)
            self.error = ""
            self._refresh_content()
            event.stop()
            return

        # Ignore all non-text keys while typing.
        event.stop()

    def action_close(self) -> None:
        if self.typing_field is not None:
            self.typing_field = None
            self._refresh_content()
            return
        self.builder.close_form()
        self.dismiss(False)

    def action_move_cursor(self, delta: int) -> None:
        if self.typing_field is not None:
            return
        self.cursor_index = (self.cursor_index + delta) % len(self._ROWS)
        self._refresh_content()

    async def action_activate(self) -> None:
        if self.typing_field is not None:
            return
        row = self._ROWS[self.cursor_index]

        if row in self._TEXT_FIELDS:
            self.typing_field = row
        elif row == "category":
            categories = list(CATEGORY_LABELS)
            current = self.builder.draft.category
            next_idx = (categories.index(current) + 1) % len(categories) if current in categories else 0
            self.builder.set_field("category", categories[next_idx])
        elif row == "highlight":
            self.builder.set_field("highlight", not self.builder.draft.highlight)
        elif row == "save":
            await self._save()
            return
        else:
            self.action_close()
            return
        self._refresh_content()

    async def _save(self) -> None:
        if not self.builder.is_complete():
            self.error = "Nome e preço são obrigatórios."
            self._refresh_content()
            return

        outcome = await self.submit()
        if outcome.ok:
            self.dismiss(True)
            return
        self._refresh_content()

    def _refresh_content(self) -> None:
        body = self.query_one("#item-form-body", Static)
        error = self.query_one("#item-form-error", Static)
        help_text = self.query_one("#item-form-help", Static)
        draft = self.builder.draft

        content = Text(style="white")
        for idx, row in enumerate(self._ROWS):
            if idx > 0:
                content.append("\n")
            pointer = "➤ " if idx == self.cursor_index else "  "
            if row in self._TEXT_FIELDS:
                value = str(getattr(draft, row))
                cursor = "|" if self.typing_field == row else ""
                content.append(f"{pointer}{self._TEXT_FIELDS[row]}: ", style="bold white")
                content.append(f"{value}{cursor}")
            elif row == "category":
                content.append(f"{pointer}Categoria: ", style="bold white")
                content.append(CATEGORY_LABELS.get(draft.category, draft.category))
            elif row == "highlight":
                checked = "[x]" if draft.highlight else "[ ]"
                content.append(f"{pointer}{checked} Destacar este item (Aparecerá em \"Destaques\")")
            elif row == "save":
                content.append(f"\n{pointer}Salvar Prato", style="bold #10b981")
            else:
                content.append(f"{pointer}Cancelar", style="#dddddd")

        if self.typing_field is not None:
            help_text.update("Type text, Enter/Esc done")
        else:
            help_text.update("J/K/↑/↓ move, Enter edit/select, Esc cancel")
        error.update(self.error)
        body.update(content)


class ConfirmModal(ModalScreen[bool]):
    """Yes/no question. Dismisses with True only on an explicit yes."""

    CSS = _DIALOG_CSS.format(name="ConfirmModal", width=56)

    def __init__(self, message: str) -> None:
        super().__init__()
        self.message = message

    def compose(self) -> ComposeResult:
        with Container(classes="dialog"):
            yield Static("Confirmar", classes="dialog-title")
            yield Static(self.message, classes="dialog-body")
            yield Static("y/Enter confirm. n/Esc cancel.", classes="dialog-help")

    def on_key(self, event: Key) -> None:
        if event.key in {"y", "enter"}:
            self.dismiss(True)
            event.stop()
            return
        if event.key in {"n", "escape", "q", "ctrl+c"}:
            self.dismiss(False)
            event.stop()


class AlertModal(ModalScreen[None]):
    """Blocking message that must be acknowledged."""

    CSS = _DIALOG_CSS.format(name="AlertModal", width=56)

    def __init__(self, message: str) -> None:
        super().__init__()
        self.message = message

    def compose(self) -> ComposeResult:
        with Container(classes="dialog"):
            yield Static("Aviso", classes="dialog-title")
            yield Static(self.message, classes="dialog-body dialog-error")
            yield Static("Enter/Esc to close", classes="dialog-help")

    def on_key(self, event: Key) -> None:
        if event.key in {"enter", "escape", "q", "ctrl+c"}:
            self.dismiss()
            event.stop()
