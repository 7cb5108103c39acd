"""Replay change sets against their source text."""

import logging
from typing import List, Sequence

from changeset.changeset_exceptions import CoordinateMismatchError
from changeset.changeset_types import Change, ChangeKind, LineChange, split_lines


class ChangeSetApplier:
    """
    Materializes the modified text from a source text and a change set.

    The change set must have been built against this source text (or an
    equal one): unchanged spans are copied from it, added text is appended,
    removed spans are skipped.
    """

    def __init__(self, validate: bool = True) -> None:
        """
        Initialize the applier.

        Args:
            validate: If True, check that every removed span matches the source text
        """
        self._validate = validate
        self._logger = logging.getLogger("ChangeSetApplier")

    def apply(self, source_text: str, changes: Sequence[Change]) -> str:
        """
        Apply character changes to a source text.

        Args:
            source_text: Text the changes were built against
            changes: Character changes in source order

        Returns:
            The modified text

        Raises:
            CoordinateMismatchError: If the changes do not fit source_text
        """
        result = self._apply_units(source_text, changes)
        self._logger.debug("applied %d change(s) to %d character(s)", len(changes), len(source_text))
        return result

    def apply_lines(self, source_text: str, changes: Sequence[LineChange]) -> str:
        """
        Apply line changes to a source text.

        Args:
            source_text: Text the line changes were built against
            changes: Line changes in source order

        Returns:
            The modified text

        Raises:
            CoordinateMismatchError: If the changes do not fit source_text
        """
        lines = split_lines(source_text)
        result = self._apply_units(lines, changes)
        self._logger.debug("applied %d line change(s) to %d line(s)", len(changes), len(lines))
        return result

    def _apply_units(self, units: Sequence[str], changes: Sequence[Change]) -> str:
        """
        Apply changes over a sequence of units (characters or lines).

        Args:
            units: Source text units that change positions index into
            changes: Changes in source order

        Returns:
            The concatenated output
        """
        output: List[str] = []
        cursor = 0

        for idx, change in enumerate(changes):
            if change.position < cursor:
                raise CoordinateMismatchError(
                    f'Change {idx + 1} at position {change.position} overlaps or precedes position {cursor}',
                    {
                        'change_index': idx,
                        'position': change.position,
                        'cursor': cursor,
                        'reason': 'Change positions must be non-decreasing and must not fall inside a removed span'
                    }
                )

            if change.position > len(units):
                raise CoordinateMismatchError(
                    f'Change {idx + 1} at position {change.position} is beyond the end of the source',
                    {
                        'change_index': idx,
                        'position': change.position,
                        'source_length': len(units),
                    }
                )

            # Copy the untouched span before this change
            if change.position > cursor:
                output.append(''.join(units[cursor:change.position]))
                cursor = change.position

            if change.kind == ChangeKind.ADDED:
                output.append(change.text)
                continue

            end = cursor + change.length
            if end > len(units):
                raise CoordinateMismatchError(
                    f'Change {idx + 1} removes past the end of the source',
                    {
                        'change_index': idx,
                        'position': change.position,
                        'length': change.length,
                        'source_length': len(units),
                    }
                )

            if self._validate:
                actual = ''.join(units[cursor:end])
                if actual != change.text:
                    raise CoordinateMismatchError(
                        f'Change {idx + 1} removes text that does not match the source',
                        {
                            'change_index': idx,
                            'position': change.position,
                            'expected_text': change.text,
                            'actual_text': actual,
                            'suggestion': 'The change set was built against a different source text.'
                        }
                    )

            cursor = end

        output.append(''.join(units[cursor:]))
        return ''.join(output)
