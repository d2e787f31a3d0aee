"""Task row widget."""

from __future__ import annotations

from enum import Enum

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Static

from ...models import Task
from ..formatting import format_check, format_priority_badge, format_task_text


class RowAction(str, Enum):
    """Per-task controls."""

    TOGGLE = "toggle"
    RAISE = "raise"
    LOWER = "lower"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    DELETE = "delete"


class RowButton(Button, can_focus=False):
    """Compact button that leaves keyboard focus on the row."""


class TaskRow(Widget, can_focus=True):
    """One task in the list with its controls."""

    DEFAULT_CSS = """
    TaskRow {
        layout: horizontal;
        height: 3;
    }

    TaskRow > .task-main {
        width: 1fr;
    }

    TaskRow > .task-controls {
        width: auto;
    }
    """

    class ActionRequested(Message):
        """Posted when one of the row's buttons is pressed."""

        def __init__(self, task_id: str, action: RowAction) -> None:
            self.task_id = task_id
            self.action = action
            super().__init__()

    def __init__(
        self,
        task_data: Task,
        can_move_up: bool = True,
        can_move_down: bool = True,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._task_data = task_data
        self._can_move_up = can_move_up
        self._can_move_down = can_move_down
        if task_data.completed:
            self.add_class("-completed")

    @property
    def task(self) -> Task:  # pyrefly: ignore[bad-override]
        """Get the task for this row."""
        return self._task_data

    def compose(self) -> ComposeResult:
        with Horizontal(classes="task-main"):
            yield RowButton(
                format_check(self._task_data.completed),
                name=RowAction.TOGGLE.value,
                classes="row-button task-check",
            )
            yield Static(format_task_text(self._task_data, 60), classes="task-text")
            yield Static(format_priority_badge(self._task_data.priority), classes="task-priority")
        with Horizontal(classes="task-controls"):
            yield RowButton("▲", name=RowAction.RAISE.value, classes="row-button")
            yield RowButton("▼", name=RowAction.LOWER.value, classes="row-button")
            yield RowButton(
                "↑",
                name=RowAction.MOVE_UP.value,
                disabled=not self._can_move_up,
                classes="row-button",
            )
            yield RowButton(
                "↓",
                name=RowAction.MOVE_DOWN.value,
                disabled=not self._can_move_down,
                classes="row-button",
            )
            yield RowButton("✕", name=RowAction.DELETE.value, classes="row-button task-delete")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.name is None:
            return
        self.post_message(self.ActionRequested(self._task_data.id, RowAction(event.button.name)))
