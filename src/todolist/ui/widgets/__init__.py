"""Widget components."""

from .confirm_modal import ConfirmModal
from .draft_bar import DraftBar
from .task_list import EmptyListMessage, TaskListView
from .task_row import RowAction, TaskRow

__all__ = [
    "ConfirmModal",
    "DraftBar",
    "EmptyListMessage",
    "RowAction",
    "TaskListView",
    "TaskRow",
]
