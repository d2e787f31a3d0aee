"""todolist TUI Application."""

import logging

from textual.app import App
from textual.binding import Binding
from textual.screen import ModalScreen

from .config import Settings
from .models import Direction
from .services import TaskListService
from .ui.screens.help import HelpScreen
from .ui.screens.todo import TodoScreen
from .ui.widgets import ConfirmModal, DraftBar, RowAction, TaskRow

logger = logging.getLogger(__name__)


class TodoApp(App):
    """todolist - in-memory to-do list."""

    CSS_PATH = "ui/styles.tcss"

    BINDINGS = [
        # Core bindings
        Binding("q", "quit", "Quit", show=True),
        Binding("?", "help", "Help", show=True),
        Binding("n", "new_task", "New", show=True),
        Binding("i", "new_task", "New", show=False),
        # Navigation - vim style
        Binding("j", "nav_down", "↓ Task", show=False),
        Binding("k", "nav_up", "↑ Task", show=False),
        # Navigation - arrow keys
        Binding("down", "nav_down", "↓ Task", show=False),
        Binding("up", "nav_up", "↑ Task", show=False),
        # Jump navigation
        Binding("g", "nav_first", "First", show=False),
        Binding("G", "nav_last", "Last", show=False),
        Binding("home", "nav_first", "First", show=False),
        Binding("end", "nav_last", "Last", show=False),
        # Task actions
        Binding("space", "toggle_complete", "Done", show=True),
        Binding("plus", "raise_priority", "Priority +", show=True),
        Binding("equals_sign", "raise_priority", "Priority +", show=False),
        Binding("minus", "lower_priority", "Priority -", show=True),
        Binding("K", "move_task_up", "Move ↑", show=False),
        Binding("J", "move_task_down", "Move ↓", show=False),
        Binding("shift+up", "move_task_up", "Move ↑", show=False),
        Binding("shift+down", "move_task_down", "Move ↓", show=False),
        Binding("d", "delete_task", "Delete", show=True),
        Binding("delete", "delete_task", "Delete", show=False),
        Binding("escape", "escape", "Back", show=False, priority=True),
    ]

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self.task_service = TaskListService()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.title = self.settings.title
        self.push_screen(TodoScreen(self.settings.default_priority))

    def action_help(self) -> None:
        """Show help screen."""
        self.push_screen(HelpScreen())

    def action_new_task(self) -> None:
        """Focus the draft input."""
        screen = self.screen
        if isinstance(screen, TodoScreen):
            screen.focus_input()

    # Navigation actions
    def action_nav_up(self) -> None:
        """Navigate to previous task."""
        screen = self.screen
        if isinstance(screen, TodoScreen):
            screen.navigate_task(-1)

    def action_nav_down(self) -> None:
        """Navigate to next task."""
        screen = self.screen
        if isinstance(screen, TodoScreen):
            screen.navigate_task(1)

    def action_nav_first(self) -> None:
        """Navigate to first task."""
        screen = self.screen
        if isinstance(screen, TodoScreen):
            screen.navigate_to_task(0)

    def action_nav_last(self) -> None:
        """Navigate to last task."""
        screen = self.screen
        if isinstance(screen, TodoScreen):
            screen.navigate_to_task(-1)

    # Draft submission
    def on_draft_bar_submitted(self, event: DraftBar.Submitted) -> None:
        """Add the submitted draft as a new task."""
        task = self.task_service.add(event.text, event.priority)
        if task is None:
            return

        screen = self.screen
        if isinstance(screen, TodoScreen):
            screen.reset_draft()
            screen.refresh_list()

    # Row buttons
    def on_task_row_action_requested(self, event: TaskRow.ActionRequested) -> None:
        """Dispatch a row button press to the matching task operation."""
        handlers = {
            RowAction.TOGGLE: self._toggle_complete,
            RowAction.RAISE: lambda task_id: self._change_priority(task_id, Direction.UP),
            RowAction.LOWER: lambda task_id: self._change_priority(task_id, Direction.DOWN),
            RowAction.MOVE_UP: lambda task_id: self._move_task(task_id, Direction.UP),
            RowAction.MOVE_DOWN: lambda task_id: self._move_task(task_id, Direction.DOWN),
            RowAction.DELETE: self._request_delete,
        }
        handlers[event.action](event.task_id)

    # Task actions
    def action_toggle_complete(self) -> None:
        """Toggle completion of the current task."""
        task_id = self._current_task_id()
        if task_id is not None:
            self._toggle_complete(task_id)

    def action_raise_priority(self) -> None:
        """Raise the current task's priority."""
        task_id = self._current_task_id()
        if task_id is not None:
            self._change_priority(task_id, Direction.UP)

    def action_lower_priority(self) -> None:
        """Lower the current task's priority."""
        task_id = self._current_task_id()
        if task_id is not None:
            self._change_priority(task_id, Direction.DOWN)

    def action_move_task_up(self) -> None:
        """Move current task up in the list."""
        task_id = self._current_task_id()
        if task_id is not None:
            self._move_task(task_id, Direction.UP)

    def action_move_task_down(self) -> None:
        """Move current task down in the list."""
        task_id = self._current_task_id()
        if task_id is not None:
            self._move_task(task_id, Direction.DOWN)

    def action_delete_task(self) -> None:
        """Delete the current task."""
        task_id = self._current_task_id()
        if task_id is not None:
            self._request_delete(task_id)

    def action_escape(self) -> None:
        """Handle escape: dismiss modal or leave the draft input."""
        screen = self.screen

        if isinstance(screen, ModalScreen):
            screen.dismiss()
            return

        if isinstance(screen, TodoScreen) and screen.draft_bar.has_input_focus:
            screen.navigate_task(0)

    def _current_task_id(self) -> str | None:
        screen = self.screen
        if not isinstance(screen, TodoScreen):
            return None
        task = screen.get_current_task()
        return task.id if task else None

    def _refresh(self, focus_task_id: str | None = None) -> None:
        screen = self.screen
        if isinstance(screen, TodoScreen):
            screen.refresh_list(focus_task_id=focus_task_id)

    def _toggle_complete(self, task_id: str) -> None:
        if self.task_service.toggle_complete(task_id) is not None:
            self._refresh(focus_task_id=task_id)

    def _change_priority(self, task_id: str, direction: Direction) -> None:
        if self.task_service.change_priority(task_id, direction) is not None:
            self._refresh(focus_task_id=task_id)

    def _move_task(self, task_id: str, direction: Direction) -> None:
        position = self.task_service.index_of(task_id)
        if position is None:
            return
        # Focus follows the task to its new position
        if self.task_service.move(position, direction):
            self._refresh(focus_task_id=task_id)

    def _request_delete(self, task_id: str) -> None:
        task = self.task_service.get(task_id)
        if task is None:
            return

        if not self.settings.confirm_delete:
            self._delete_task(task_id)
            return

        def handle_confirm(confirmed: bool | None) -> None:
            if confirmed:
                self._delete_task(task_id)

        self.push_screen(ConfirmModal(task), callback=handle_confirm)

    def _delete_task(self, task_id: str) -> None:
        if self.task_service.remove(task_id) is not None:
            # Position is kept, so focus lands on the next task
            self._refresh()


def run(settings: Settings | None = None) -> None:
    """Run the todolist application."""
    app = TodoApp(settings)
    app.run()
