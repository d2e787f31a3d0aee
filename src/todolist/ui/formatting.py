"""Rich markup helpers for rendering task state."""

from rich.markup import escape

from ..models import Priority, Task


def truncate(text: str, max_len: int) -> str:
    """Truncate text with ellipsis."""
    if len(text) <= max_len:
        return text
    return text[: max_len - 1] + "…"


def format_check(completed: bool) -> str:
    """Completion indicator: green check when done, grey circle otherwise."""
    if completed:
        return "[green]✔[/]"
    return "[grey50]○[/]"


def format_task_text(task: Task, max_len: int | None = None) -> str:
    """Task text, struck through and dimmed when completed."""
    text = truncate(task.text, max_len) if max_len else task.text
    text = escape(text)
    if task.completed:
        return f"[strike dim]{text}[/]"
    return text


def format_priority_badge(priority: Priority) -> str:
    """Colored badge for a priority level."""
    return f"[bold white on {priority.color}] {priority.value} [/]"


def remaining_label(count: int) -> str:
    """Footer text for the number of incomplete tasks."""
    noun = "task" if count == 1 else "tasks"
    return f"{count} {noun} remaining"
