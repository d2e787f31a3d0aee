"""Service for the in-memory task list."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterator

from ..models import Direction, Priority, Task

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


class TaskListService:
    """Owns the ordered task list and every mutation applied to it.

    Operations never raise for unknown ids or out-of-range positions. They
    return ``None``/``False`` instead so callers can tell a no-op apart.
    """

    def __init__(self, id_factory: Callable[[], str] | None = None) -> None:
        self._tasks: list[Task] = []
        self._id_factory = id_factory or _new_id

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    @property
    def tasks(self) -> list[Task]:
        """Snapshot of the tasks in display order."""
        return list(self._tasks)

    @property
    def remaining_count(self) -> int:
        """Number of tasks not yet completed."""
        return sum(1 for t in self._tasks if not t.completed)

    def get(self, task_id: str) -> Task | None:
        """Get task by ID."""
        index = self.index_of(task_id)
        return self._tasks[index] if index is not None else None

    def index_of(self, task_id: str) -> int | None:
        """Position of a task in the list, or None if not found."""
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def add(self, text: str, priority: Priority) -> Task | None:
        """
        Append a new task to the end of the list.

        Args:
            text: Task text; blank text is ignored
            priority: Initial priority

        Returns:
            The created task, or None if text was blank
        """
        if not text.strip():
            logger.debug("add: ignoring blank text")
            return None

        task = Task(id=self._generate_id(), text=text, priority=priority)
        self._tasks.append(task)
        logger.info("Task added: %s (%s)", task.id, task.priority.value)
        return task

    def remove(self, task_id: str) -> Task | None:
        """Remove a task, returning it, or None if it was not present."""
        index = self.index_of(task_id)
        if index is None:
            logger.debug("remove: task not found: %s", task_id)
            return None

        task = self._tasks.pop(index)
        logger.info("Task removed: %s", task_id)
        return task

    def toggle_complete(self, task_id: str) -> Task | None:
        """Flip the completed flag of a task."""
        index = self.index_of(task_id)
        if index is None:
            logger.debug("toggle_complete: task not found: %s", task_id)
            return None

        task = self._tasks[index].toggled()
        self._tasks[index] = task
        logger.debug("Task %s completed=%s", task_id, task.completed)
        return task

    def change_priority(self, task_id: str, direction: Direction) -> Task | None:
        """
        Step a task's priority up (toward high) or down (toward low).

        Clamped at the boundary: raising HIGH or lowering LOW leaves the
        task unchanged.
        """
        index = self.index_of(task_id)
        if index is None:
            logger.debug("change_priority: task not found: %s", task_id)
            return None

        task = self._tasks[index]
        new_priority = task.priority.step(direction)
        if new_priority == task.priority:
            logger.debug("change_priority: at boundary: %s (%s)", task_id, new_priority.value)
            return task

        task = task.with_priority(new_priority)
        self._tasks[index] = task
        logger.debug("Task %s priority -> %s", task_id, new_priority.value)
        return task

    def can_move(self, position: int, direction: Direction) -> bool:
        """Check whether the task at position has a neighbor in direction."""
        if position < 0 or position >= len(self._tasks):
            return False
        new_position = position + direction.delta
        return 0 <= new_position < len(self._tasks)

    def move(self, position: int, direction: Direction) -> bool:
        """
        Swap the task at position with its neighbor.

        Args:
            position: Index of the task to move
            direction: UP toward index 0, DOWN toward the end

        Returns:
            True if the task was moved
        """
        if not self.can_move(position, direction):
            logger.debug("move: at boundary, cannot move: pos %d %s", position, direction.value)
            return False

        new_position = position + direction.delta
        tasks = self._tasks
        tasks[position], tasks[new_position] = tasks[new_position], tasks[position]
        logger.debug(
            "Task moved %s: %s (pos %d -> %d)",
            direction.value,
            tasks[new_position].id,
            position,
            new_position,
        )
        return True

    def _generate_id(self) -> str:
        """Get a fresh id that is not already in the list."""
        task_id = self._id_factory()
        while self.index_of(task_id) is not None:
            logger.debug("Duplicate task id generated, retrying: %s", task_id)
            task_id = self._id_factory()
        return task_id
