"""Main to-do list screen."""

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from ...models import Priority, Task
from ..formatting import remaining_label
from ..widgets.draft_bar import DraftBar
from ..widgets.task_list import TaskListView


class TodoScreen(Screen):
    """Draft input, task list and remaining-count footer."""

    def __init__(self, default_priority: Priority = Priority.DEFAULT, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._default_priority = default_priority
        self._current_task = 0
        # Pending focus state for deferred focus after refresh
        self._pending_focus_id: str | None = None
        self._pending_task = 0
        self._pending_row_focus = False

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="todo-container"):
            yield DraftBar(self._default_priority, id="draft-bar")
            yield TaskListView(id="task-list")
            yield Static(remaining_label(0), id="remaining")
        yield Footer()

    def on_mount(self) -> None:
        self.load_tasks()
        self.call_after_refresh(self.focus_input)

    @property
    def task_list(self) -> TaskListView:
        return self.query_one(TaskListView)

    @property
    def draft_bar(self) -> DraftBar:
        return self.query_one(DraftBar)

    @property
    def current_task_index(self) -> int:
        return self._current_task

    def load_tasks(self) -> None:
        """Populate the list and footer from the task service."""
        service = self.app.task_service  # pyrefly: ignore[missing-attribute]
        self.task_list.set_tasks(service.tasks)
        self.query_one("#remaining", Static).update(remaining_label(service.remaining_count))

    def refresh_list(self, focus_task_id: str | None = None) -> None:
        """
        Re-render the list from service state.

        Args:
            focus_task_id: If provided, focus this task after refresh.
                           Otherwise the current position is kept, but only
                           if a row had focus (the draft input keeps focus
                           after an add).
        """
        self._pending_focus_id = focus_task_id
        self._pending_task = self._current_task
        self._pending_row_focus = focus_task_id is not None or not self.draft_bar.has_input_focus

        self.load_tasks()

        # Double-defer so the row rebuild finishes first
        self.call_after_refresh(self._schedule_pending_focus)

    def _schedule_pending_focus(self) -> None:
        self.call_after_refresh(self._apply_pending_focus)

    def _apply_pending_focus(self) -> None:
        """Apply pending focus after refresh completes."""
        task_list = self.task_list
        if self._pending_focus_id:
            index = task_list.find_task(self._pending_focus_id)
            if index is not None:
                self._current_task = index
                self._update_focus()
                return

        # Fallback: restore previous position (clamped to valid range)
        if task_list.task_count > 0:
            self._current_task = min(self._pending_task, task_list.task_count - 1)
        else:
            self._current_task = 0

        if self._pending_row_focus:
            self._update_focus()

    def navigate_task(self, delta: int) -> None:
        """Move focus between tasks."""
        task_list = self.task_list
        if task_list.task_count == 0:
            return

        if self.draft_bar.has_input_focus:
            # Leaving the draft bar lands on the current task
            self._update_focus()
            return

        new_task = max(0, min(self._current_task + delta, task_list.task_count - 1))
        if new_task != self._current_task:
            self._current_task = new_task
            self._update_focus()

    def navigate_to_task(self, index: int) -> None:
        """Focus a specific task index (-1 for last)."""
        task_list = self.task_list
        if task_list.task_count == 0:
            return
        self._current_task = task_list.task_count - 1 if index < 0 else min(index, task_list.task_count - 1)
        self._update_focus()

    def _update_focus(self) -> None:
        self.task_list.focus_task(self._current_task)

    def get_current_task(self) -> Task | None:
        """Get the focused task, or None if focus is outside the list."""
        task_list = self.task_list
        focused = task_list.get_focused_task_index()
        if focused >= 0:
            self._current_task = focused
            return task_list.get_task(focused)
        return None

    def focus_input(self) -> None:
        """Focus the draft text field."""
        self.draft_bar.focus_input()

    def reset_draft(self) -> None:
        """Clear the draft after a successful add."""
        self.draft_bar.reset()
