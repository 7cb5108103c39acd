"""Invert change sets for undo."""

import dataclasses
import logging
from typing import List, Sequence, TypeVar

from changeset.changeset_types import Change, ChangeKind


ChangeT = TypeVar('ChangeT', bound=Change)


class ChangeSetReverser:
    """
    Produces the change set that undoes another one.

    Applying the reversed set to the modified text gives back the source
    text, and reversing twice gives back the original set.
    """

    _logger = logging.getLogger("ChangeSetReverser")

    def reverse(self, changes: Sequence[ChangeT]) -> List[ChangeT]:
        """
        Reverse a character or line change set.

        Each change is re-anchored in the modified text: units removed before
        it are absent there and units added before it are present.

        Args:
            changes: Changes in source order

        Returns:
            Changes in modified-text order, with added and removed swapped
        """
        reversed_changes: List[ChangeT] = []
        removed_count = 0
        added_count = 0

        for change in changes:
            position_in_modified = change.position - removed_count + added_count

            if change.kind == ChangeKind.REMOVED:
                reversed_changes.append(
                    dataclasses.replace(change, position=position_in_modified, kind=ChangeKind.ADDED)
                )
                removed_count += change.length

            else:
                reversed_changes.append(
                    dataclasses.replace(change, position=position_in_modified, kind=ChangeKind.REMOVED)
                )
                added_count += change.length

        self._logger.debug("reversed %d change(s)", len(reversed_changes))
        return reversed_changes
