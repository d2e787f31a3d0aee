"""Task list widget."""

from textual.actions import SkipAction
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widget import Widget
from textual.widgets import Static

from ...models import Task
from .task_row import TaskRow


class TaskListScroll(VerticalScroll, can_focus=False):
    """Scroll container for task rows.

    Raises SkipAction for navigation keys so they bubble up to the App
    for task navigation instead of being handled as scroll actions.
    """

    def action_scroll_up(self) -> None:
        raise SkipAction()

    def action_scroll_down(self) -> None:
        raise SkipAction()

    def action_scroll_home(self) -> None:
        raise SkipAction()

    def action_scroll_end(self) -> None:
        raise SkipAction()


class EmptyListMessage(Static):
    """Displayed when there are no tasks."""

    pass


class TaskListView(Widget):
    """Ordered list of task rows."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._tasks: list[Task] = []

    def compose(self) -> ComposeResult:
        yield TaskListScroll(id="task-list-content")

    def set_tasks(self, tasks: list[Task]) -> None:
        """Replace the displayed tasks."""
        self._tasks = tasks
        # Use call_after_refresh to ensure DOM is ready
        self.call_after_refresh(self._refresh_rows)

    async def _refresh_rows(self) -> None:
        """Rebuild the rows from the current task snapshot."""
        try:
            content = self.query_one("#task-list-content", TaskListScroll)
        except Exception as e:
            self.log.error(f"Cannot find task list content: {e}")
            return

        await content.remove_children()

        if not self._tasks:
            await content.mount(EmptyListMessage("No tasks yet"))
            return

        # Rows are keyed by position; task ids are opaque and may not be CSS-safe
        last = len(self._tasks) - 1
        rows = [
            TaskRow(
                task,
                can_move_up=index > 0,
                can_move_down=index < last,
                id=f"task-row-{index}",
            )
            for index, task in enumerate(self._tasks)
        ]
        await content.mount_all(rows)

    @property
    def tasks(self) -> list[Task]:
        """Get the displayed tasks."""
        return self._tasks

    @property
    def task_count(self) -> int:
        return len(self._tasks)

    def get_task(self, index: int) -> Task | None:
        """Get task at index."""
        if 0 <= index < len(self._tasks):
            return self._tasks[index]
        return None

    def find_task(self, task_id: str) -> int | None:
        """Index of a displayed task by id."""
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def get_row(self, index: int) -> TaskRow | None:
        """Get the mounted row for a task index."""
        if self.get_task(index) is None:
            return None
        try:
            return self.query_one(f"#task-row-{index}", TaskRow)
        except Exception:
            return None

    def focus_task(self, index: int) -> bool:
        """
        Focus the row at the given index.

        Returns:
            True if a row was focused, False otherwise
        """
        row = self.get_row(index)
        if row is None:
            return False
        row.focus()
        row.scroll_visible()
        return True

    def get_focused_task_index(self) -> int:
        """Get index of the focused row, or -1."""
        for i in range(len(self._tasks)):
            row = self.get_row(i)
            if row is not None and row.has_focus:
                return i
        return -1
