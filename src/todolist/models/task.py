"""Task domain model."""

from pydantic import BaseModel, ConfigDict, field_validator

from .enums import Priority


class Task(BaseModel):
    """A single to-do entry.

    Tasks are immutable; updates go through ``model_copy`` so the id stays
    stable for the task's lifetime.
    """

    model_config = ConfigDict(frozen=True)

    id: str  # Opaque, used for lookup only (never for ordering)
    text: str
    priority: Priority = Priority.DEFAULT
    completed: bool = False

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Reject empty or whitespace-only text."""
        if not v.strip():
            raise ValueError("Task text cannot be empty")
        return v

    def toggled(self) -> "Task":
        """Copy of this task with ``completed`` flipped."""
        return self.model_copy(update={"completed": not self.completed})

    def with_priority(self, priority: Priority) -> "Task":
        """Copy of this task with a new priority."""
        return self.model_copy(update={"priority": priority})
