"""Input bar for composing a new task."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button, Input, Select

from ...models import Draft, Priority


class DraftBar(Horizontal):
    """Text field, priority selector and add button.

    Holds the draft state. The task list never sees the draft until it is
    submitted, and the draft is only reset once the app accepts it.
    """

    class Submitted(Message):
        """Posted when the user submits the draft."""

        def __init__(self, text: str, priority: Priority) -> None:
            self.text = text
            self.priority = priority
            super().__init__()

    def __init__(self, default_priority: Priority = Priority.DEFAULT, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.draft = Draft.empty(default_priority)

    def compose(self) -> ComposeResult:
        yield Input(placeholder="Add a new task", id="draft-text")
        yield Select(
            [(p.label, p) for p in Priority.ordered()],
            value=self.draft.priority,
            allow_blank=False,
            id="draft-priority",
        )
        yield Button("+", id="draft-add", variant="primary")

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "draft-text":
            self.draft.text = event.value

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id == "draft-priority" and isinstance(event.value, Priority):
            self.draft.priority = event.value

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "draft-text":
            event.stop()
            self.submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "draft-add":
            event.stop()
            self.submit()

    def submit(self) -> None:
        """Post the current draft. Blank drafts are dropped silently."""
        self.draft.text = self.query_one("#draft-text", Input).value
        priority = self.query_one("#draft-priority", Select).value
        if isinstance(priority, Priority):
            self.draft.priority = priority
        if self.draft.is_blank:
            return
        self.post_message(self.Submitted(self.draft.text, self.draft.priority))

    def reset(self) -> None:
        """Clear the draft and the widgets that show it."""
        self.draft.reset()
        self.query_one("#draft-text", Input).value = ""
        self.query_one("#draft-priority", Select).value = self.draft.priority

    def focus_input(self) -> None:
        """Move focus to the text field."""
        self.query_one("#draft-text", Input).focus()

    @property
    def has_input_focus(self) -> bool:
        """True if one of the draft controls has focus."""
        return any(widget.has_focus for widget in self.query("*"))
