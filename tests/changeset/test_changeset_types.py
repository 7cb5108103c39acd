"""Tests for change set data types."""

import dataclasses

import pytest

from changeset.changeset_exceptions import InvalidChangeError, InvalidRangeError
from changeset.changeset_types import (
    Change,
    ChangeKind,
    CleanupPolicy,
    LineChange,
    Selection,
    split_lines,
)


class TestChange:
    """Test Change dataclass."""

    def test_create_added_change(self):
        """Test creating an added change."""
        change = Change(4, ChangeKind.ADDED, 'abc')
        assert change.position == 4
        assert change.kind == ChangeKind.ADDED
        assert change.text == 'abc'
        assert change.length == 3

    def test_equality(self):
        """Test Change structural equality."""
        assert Change(1, ChangeKind.REMOVED, 'x') == Change(1, ChangeKind.REMOVED, 'x')
        assert Change(1, ChangeKind.REMOVED, 'x') != Change(1, ChangeKind.ADDED, 'x')
        assert Change(1, ChangeKind.REMOVED, 'x') != Change(2, ChangeKind.REMOVED, 'x')

    def test_is_immutable(self):
        """Test that a change cannot be modified in place."""
        change = Change(0, ChangeKind.ADDED, 'a')
        with pytest.raises(dataclasses.FrozenInstanceError):
            change.position = 3

    def test_empty_text_rejected(self):
        """Test that a change must carry text."""
        with pytest.raises(InvalidChangeError) as exc_info:
            Change(0, ChangeKind.ADDED, '')

        assert exc_info.value.error_details['kind'] == 'ADDED'

    def test_negative_position_rejected(self):
        """Test that a change position must not be negative."""
        with pytest.raises(InvalidChangeError):
            Change(-1, ChangeKind.REMOVED, 'a')

    def test_unknown_kind_rejected(self):
        """Test that a kind outside ChangeKind is rejected."""
        with pytest.raises(InvalidChangeError) as exc_info:
            Change(1, 3, 'b')

        assert exc_info.value.error_details['kind'] == '3'

    def test_non_enum_kind_rejected(self):
        """Test that a kind of the wrong type is rejected."""
        with pytest.raises(InvalidChangeError):
            Change(1, 'added', 'b')

    def test_int_kind_normalized(self):
        """Test that a raw int kind becomes a ChangeKind."""
        change = Change(1, int(ChangeKind.REMOVED), 'b')

        assert change.kind is ChangeKind.REMOVED
        assert change == Change(1, ChangeKind.REMOVED, 'b')

    def test_int_kind_with_negative_position(self):
        """Test that a raw int kind still reports a bad position as InvalidChangeError."""
        with pytest.raises(InvalidChangeError) as exc_info:
            Change(-1, int(ChangeKind.REMOVED), 'x')

        assert exc_info.value.error_details['kind'] == 'REMOVED'

    def test_tuple_form(self):
        """Test the undo-log tuple form."""
        change = Change(7, ChangeKind.REMOVED, 'xyz')
        assert change.as_tuple() == (7, ChangeKind.REMOVED.value, 'xyz')
        assert Change.from_tuple(change.as_tuple()) == change


class TestLineChange:
    """Test LineChange dataclass."""

    def test_length_counts_lines(self):
        """Test that a line change's length is its line count."""
        assert LineChange(0, ChangeKind.ADDED, 'one\n').length == 1
        assert LineChange(0, ChangeKind.ADDED, 'one\ntwo\n').length == 2
        assert LineChange(0, ChangeKind.ADDED, 'one\ntwo').length == 2

    def test_not_equal_to_character_change(self):
        """Test that line and character changes never compare equal."""
        assert LineChange(1, ChangeKind.ADDED, 'a\n') != Change(1, ChangeKind.ADDED, 'a\n')


class TestSelection:
    """Test Selection dataclass."""

    def test_caret(self):
        """Test creating a collapsed selection."""
        caret = Selection.caret(3)
        assert caret == Selection(3, 3)
        assert caret.is_collapsed
        assert caret.length == 0

    def test_expanded(self):
        """Test an expanded selection."""
        selection = Selection(3, 7)
        assert not selection.is_collapsed
        assert selection.length == 4

    def test_start_after_end_rejected(self):
        """Test that a reversed range is rejected."""
        with pytest.raises(InvalidRangeError) as exc_info:
            Selection(7, 3)

        assert exc_info.value.error_details == {'start': 7, 'end': 3}

    def test_negative_bound_rejected(self):
        """Test that negative bounds are rejected."""
        with pytest.raises(InvalidRangeError):
            Selection(-1, 3)

        with pytest.raises(InvalidRangeError):
            Selection.caret(-2)


class TestCleanupPolicy:
    """Test CleanupPolicy enum."""

    def test_members(self):
        """Test the available policies."""
        assert [policy.name for policy in CleanupPolicy] == ['NONE', 'SEMANTIC', 'EFFICIENCY']


class TestSplitLines:
    """Test the line splitter."""

    def test_keeps_terminators(self):
        """Test that line terminators are kept."""
        assert split_lines('a\nb\n') == ['a\n', 'b\n']

    def test_unterminated_last_line(self):
        """Test a text without a trailing newline."""
        assert split_lines('a\nb') == ['a\n', 'b']

    def test_empty_text(self):
        """Test that an empty text has no lines."""
        assert split_lines('') == []

    def test_blank_lines(self):
        """Test that blank lines are kept."""
        assert split_lines('\n\nx') == ['\n', '\n', 'x']

    def test_carriage_return_is_not_a_terminator(self):
        """Test that only newline splits lines."""
        assert split_lines('a\r\nb\rc') == ['a\r\n', 'b\rc']
