"""UI components."""

from .screens.todo import TodoScreen
from .widgets.task_list import TaskListView
from .widgets.task_row import TaskRow

__all__ = [
    "TaskListView",
    "TaskRow",
    "TodoScreen",
]
