"""Draft input model."""

from pydantic import BaseModel, Field

from .enums import Priority


class Draft(BaseModel):
    """Uncommitted input for a task that has not been added yet."""

    text: str = ""
    priority: Priority = Priority.DEFAULT
    default_priority: Priority = Field(default=Priority.DEFAULT, exclude=True)

    @classmethod
    def empty(cls, default_priority: Priority = Priority.DEFAULT) -> "Draft":
        """New blank draft starting at ``default_priority``."""
        return cls(priority=default_priority, default_priority=default_priority)

    @property
    def is_blank(self) -> bool:
        """True if the text has nothing but whitespace."""
        return not self.text.strip()

    def reset(self) -> None:
        """Clear the text and restore the default priority."""
        self.text = ""
        self.priority = self.default_priority
