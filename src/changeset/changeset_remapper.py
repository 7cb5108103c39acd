"""
Track a caret or selection across a change set.

Rules, for a selection [start, end) and a change at position p:

Insertion of L characters:
- at or before start: the whole selection moves right by L
- strictly inside: the selection grows, end moves right by L
- at or after end: nothing changes

Removal of the span [p, p + L):
- ending at or before start: the whole selection moves left by L
- starting before start and ending inside: start moves to p, the
  selection keeps its undeleted tail
- starting before start and reaching end: the selection collapses at p
- starting at or after start and ending inside: end moves left by L
- starting at or after start and reaching end: end moves to p
- starting at or after end: nothing changes

A caret is the collapsed case of the same rules: it can shift or be pinned
at the start of a removal, but never grows.
"""

from enum import IntEnum, auto
import logging
from typing import Sequence, Tuple

from changeset.changeset_exceptions import CoordinateMismatchError
from changeset.changeset_types import Change, ChangeKind, Selection


class EditRelation(IntEnum):
    """Where a change lies relative to a selection."""
    BEFORE = auto()
    OVERLAPS_FRONT = auto()
    CONTAINS = auto()
    INSIDE = auto()
    OVERLAPS_BACK = auto()
    AFTER = auto()


class SelectionRemapper:
    """Moves selections from source-text coordinates to modified-text coordinates."""

    _logger = logging.getLogger("SelectionRemapper")

    def remap(self, selection: Selection, changes: Sequence[Change]) -> Selection:
        """
        Remap a selection across a whole change set.

        Change positions are source-text offsets. Before each change is
        compared with the selection, its position is moved into the frame of
        the text produced by the changes before it, so the comparison always
        happens in the same frame as the already-moved selection.

        Args:
            selection: Selection in source-text coordinates
            changes: Changes in source order, as built against the source text

        Returns:
            The selection in modified-text coordinates

        Raises:
            CoordinateMismatchError: If a change precedes or falls inside an earlier removal
        """
        start, end = selection.start, selection.end
        removed_count = 0
        added_count = 0
        cursor = 0

        for idx, change in enumerate(changes):
            if change.position < cursor:
                raise CoordinateMismatchError(
                    f'Change {idx + 1} at position {change.position} overlaps or precedes position {cursor}',
                    {
                        'change_index': idx,
                        'position': change.position,
                        'cursor': cursor,
                        'reason': 'Change positions must be non-decreasing and must not fall inside a removed span',
                    }
                )

            position = change.position - removed_count + added_count
            start, end = self._apply_rule(start, end, position, change)

            if change.kind == ChangeKind.REMOVED:
                cursor = change.position + change.length
                removed_count += change.length

            else:
                cursor = change.position
                added_count += change.length

        result = Selection(start, end)
        self._logger.debug("remapped %s to %s across %d change(s)", selection, result, len(changes))
        return result

    def remap_change(self, selection: Selection, change: Change) -> Selection:
        """
        Remap a selection across one change.

        The change position must be in the same frame as the selection.
        Callers chaining several edits re-derive each later position in the
        post-edit frame before the next call.

        Args:
            selection: Selection before the change
            change: The change

        Returns:
            The selection after the change
        """
        start, end = self._apply_rule(selection.start, selection.end, change.position, change)
        return Selection(start, end)

    def classify(self, selection: Selection, position: int, change: Change) -> EditRelation:
        """
        Classify where a change lies relative to a selection.

        Args:
            selection: The selection
            position: Change position, in the selection's frame
            change: The change, for its kind and length

        Returns:
            The relation the remapping rule is chosen by
        """
        return self._classify(selection.start, selection.end, position, change)

    def _classify(self, start: int, end: int, position: int, change: Change) -> EditRelation:
        if change.kind == ChangeKind.ADDED:
            # Text inserted at the caret lands before it, text at the trailing edge stays outside
            if position <= start:
                return EditRelation.BEFORE

            if position < end:
                return EditRelation.INSIDE

            return EditRelation.AFTER

        removal_end = position + change.length
        if removal_end <= start:
            return EditRelation.BEFORE

        if position < start:
            if removal_end >= end:
                return EditRelation.CONTAINS

            return EditRelation.OVERLAPS_FRONT

        if position >= end:
            return EditRelation.AFTER

        if removal_end >= end:
            return EditRelation.OVERLAPS_BACK

        return EditRelation.INSIDE

    def _apply_rule(self, start: int, end: int, position: int, change: Change) -> Tuple[int, int]:
        """
        Apply the rule for one change to a working selection.

        Args:
            start: Working selection start
            end: Working selection end
            position: Change position, in the working selection's frame
            change: The change

        Returns:
            New (start, end)
        """
        relation = self._classify(start, end, position, change)
        length = change.length

        if change.kind == ChangeKind.ADDED:
            if relation == EditRelation.BEFORE:
                return start + length, end + length

            if relation == EditRelation.INSIDE:
                return start, end + length

            return start, end

        if relation == EditRelation.BEFORE:
            return start - length, end - length

        if relation == EditRelation.OVERLAPS_FRONT:
            return position, end - length

        if relation == EditRelation.CONTAINS:
            return position, position

        if relation == EditRelation.INSIDE:
            return start, end - length

        if relation == EditRelation.OVERLAPS_BACK:
            return start, position

        return start, end
