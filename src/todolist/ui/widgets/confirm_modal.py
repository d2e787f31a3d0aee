"""Confirmation modal dialog."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label

from ...models import Task
from ..formatting import truncate


class ConfirmModal(ModalScreen[bool]):
    """Asks before a task is deleted. Dismisses with True to confirm."""

    DEFAULT_CSS = """
    ConfirmModal {
        align: center middle;
    }

    ConfirmModal > Vertical {
        width: 50;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: solid $error;
    }

    ConfirmModal Label {
        width: 100%;
        text-align: center;
        margin-bottom: 1;
    }

    ConfirmModal .buttons {
        width: 100%;
        height: auto;
        align: center middle;
    }

    ConfirmModal Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("y", "confirm", "Yes"),
        Binding("n", "cancel", "No"),
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, task_data: Task) -> None:
        super().__init__()
        self.message = f"Delete '{truncate(task_data.text, 36)}'?"

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(self.message)
            with Center(classes="buttons"):
                yield Button("Delete", id="yes", variant="error")
                yield Button("Keep", id="no", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#no", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "yes")

    def action_confirm(self) -> None:
        self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(False)
