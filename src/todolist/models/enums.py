"""Enums for task priority and movement direction."""

from enum import Enum


class Direction(str, Enum):
    """Direction for priority and position adjustments.

    For priority, UP means toward HIGH. For position, UP means toward the
    top of the list (index 0).
    """

    UP = "up"
    DOWN = "down"

    @property
    def delta(self) -> int:
        """Index offset for moving a task in this direction."""
        return -1 if self is Direction.UP else 1


class Priority(str, Enum):
    """Priority levels for tasks, ordered lowest first."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    # Alias of MEDIUM; aliases are skipped when iterating
    DEFAULT = "medium"

    @classmethod
    def ordered(cls) -> list["Priority"]:
        """All priorities from lowest to highest."""
        return list(cls)

    @property
    def rank(self) -> int:
        """Position in the ordering (0 = lowest)."""
        return Priority.ordered().index(self)

    @property
    def label(self) -> str:
        """Display label, e.g. "Medium"."""
        return self.value.capitalize()

    @property
    def color(self) -> str:
        """Fixed display color for this level."""
        return _PRIORITY_COLORS[self]

    def raised(self) -> "Priority":
        """Next level toward HIGH, clamped at HIGH."""
        levels = Priority.ordered()
        return levels[min(self.rank + 1, len(levels) - 1)]

    def lowered(self) -> "Priority":
        """Next level toward LOW, clamped at LOW."""
        return Priority.ordered()[max(self.rank - 1, 0)]

    def step(self, direction: Direction) -> "Priority":
        """Move one level in the given direction."""
        return self.raised() if direction is Direction.UP else self.lowered()


_PRIORITY_COLORS: dict[Priority, str] = {
    Priority.LOW: "green",
    Priority.MEDIUM: "yellow",
    Priority.HIGH: "red",
}
