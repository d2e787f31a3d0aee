"""Screen components."""

from .help import HelpScreen
from .todo import TodoScreen

__all__ = [
    "HelpScreen",
    "TodoScreen",
]
