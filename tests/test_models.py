"""Unit tests for task, draft and enum models."""

import pytest
from pydantic import ValidationError

from todolist.models import Direction, Draft, Priority, Task


class TestPriority:
    """Tests for the Priority enum."""

    def test_ordered_lowest_first(self):
        """Priorities are ordered low, medium, high."""
        assert Priority.ordered() == [Priority.LOW, Priority.MEDIUM, Priority.HIGH]

    def test_rank(self):
        assert Priority.LOW.rank == 0
        assert Priority.HIGH.rank == 2

    @pytest.mark.parametrize(
        ("start", "expected"),
        [
            (Priority.LOW, Priority.MEDIUM),
            (Priority.MEDIUM, Priority.HIGH),
            (Priority.HIGH, Priority.HIGH),
        ],
    )
    def test_raised_clamps_at_high(self, start: Priority, expected: Priority):
        """raised() steps toward high and stops there."""
        assert start.raised() == expected

    @pytest.mark.parametrize(
        ("start", "expected"),
        [
            (Priority.HIGH, Priority.MEDIUM),
            (Priority.MEDIUM, Priority.LOW),
            (Priority.LOW, Priority.LOW),
        ],
    )
    def test_lowered_clamps_at_low(self, start: Priority, expected: Priority):
        """lowered() steps toward low and stops there."""
        assert start.lowered() == expected

    def test_step_uses_direction(self):
        assert Priority.MEDIUM.step(Direction.UP) == Priority.HIGH
        assert Priority.MEDIUM.step(Direction.DOWN) == Priority.LOW

    def test_each_level_has_distinct_color(self):
        """Every level gets its own fixed color."""
        colors = {p.color for p in Priority}
        assert len(colors) == 3
        assert Priority.LOW.color == "green"
        assert Priority.MEDIUM.color == "yellow"
        assert Priority.HIGH.color == "red"

    def test_label(self):
        assert Priority.MEDIUM.label == "Medium"

    def test_default_is_medium_alias(self):
        """DEFAULT is MEDIUM and does not add a fourth level."""
        assert Priority.DEFAULT is Priority.MEDIUM
        assert len(list(Priority)) == 3

    def test_parses_from_string(self):
        """String values convert to members (used by settings)."""
        assert Priority("high") is Priority.HIGH


class TestDirection:
    """Tests for the Direction enum."""

    def test_delta(self):
        """UP moves toward index 0, DOWN toward the end."""
        assert Direction.UP.delta == -1
        assert Direction.DOWN.delta == 1


class TestTask:
    """Tests for the Task model."""

    def test_defaults(self):
        """New tasks are incomplete with medium priority."""
        task = Task(id="a", text="Buy milk")
        assert task.completed is False
        assert task.priority == Priority.MEDIUM

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_blank_text_rejected(self, text: str):
        """Blank text fails validation."""
        with pytest.raises(ValidationError):
            Task(id="a", text=text)

    def test_text_kept_as_typed(self):
        """Only the emptiness check trims; stored text is untouched."""
        task = Task(id="a", text="  padded  ")
        assert task.text == "  padded  "

    def test_frozen(self):
        """Tasks cannot be mutated in place."""
        task = Task(id="a", text="Buy milk")
        with pytest.raises(ValidationError):
            task.text = "Something else"  # type: ignore[misc]

    def test_toggled_returns_copy(self):
        """toggled() flips completed and keeps the id."""
        task = Task(id="a", text="Buy milk")
        toggled = task.toggled()

        assert toggled.completed is True
        assert toggled.id == "a"
        assert task.completed is False

    def test_with_priority(self):
        task = Task(id="a", text="Buy milk", priority=Priority.LOW)
        updated = task.with_priority(Priority.HIGH)

        assert updated.priority == Priority.HIGH
        assert updated.text == "Buy milk"
        assert task.priority == Priority.LOW


class TestDraft:
    """Tests for the Draft model."""

    def test_empty_draft_is_blank(self):
        draft = Draft.empty()
        assert draft.is_blank
        assert draft.priority == Priority.MEDIUM

    def test_whitespace_is_blank(self):
        draft = Draft(text="   ")
        assert draft.is_blank

    def test_reset_restores_default_priority(self):
        """reset() clears the text and goes back to the draft's default."""
        draft = Draft.empty(Priority.LOW)
        draft.text = "Call bank"
        draft.priority = Priority.HIGH

        draft.reset()

        assert draft.text == ""
        assert draft.priority == Priority.LOW

    def test_default_priority_not_serialized(self):
        draft = Draft.empty(Priority.HIGH)
        assert draft.model_dump() == {"text": "", "priority": Priority.HIGH}
