"""Service layer for business logic."""

from .task_list_service import TaskListService

__all__ = [
    "TaskListService",
]
