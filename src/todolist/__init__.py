"""todolist - in-memory to-do list TUI."""

__version__ = "0.1.0"
