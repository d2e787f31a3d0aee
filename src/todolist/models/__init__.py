"""Data models."""

from .draft import Draft
from .enums import Direction, Priority
from .task import Task

__all__ = [
    "Direction",
    "Draft",
    "Priority",
    "Task",
]
