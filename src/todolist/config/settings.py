"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from ..models.enums import Priority


class Settings(BaseSettings):
    """Application settings."""

    title: str = Field(
        default="To-do",
        description="Title shown in the header",
    )

    default_priority: Priority = Field(
        default=Priority.DEFAULT,
        description="Priority preselected for new tasks",
    )

    confirm_delete: bool = Field(
        default=False,
        description="Ask for confirmation before deleting a task",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "TODOLIST_",
    }
