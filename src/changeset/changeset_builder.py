"""Build change sets from the edit script between two texts."""

import logging
from typing import Any, List

from changeset.changeset_diff_engine import DiffEngine, SegmentKind
from changeset.changeset_types import Change, ChangeKind, LineChange


class ChangeSetBuilder:
    """
    Converts raw edit scripts into change sets.

    Change positions are absolute offsets into the source text. A cursor walks
    the source text: removed and unchanged segments advance it, added segments
    do not, so positions never decrease.
    """

    def __init__(self, engine: DiffEngine | None = None) -> None:
        """
        Initialize the builder.

        Args:
            engine: Diff engine to use; a default-tuned engine is created when omitted
        """
        self._engine = engine if engine is not None else DiffEngine()
        self._logger = logging.getLogger("ChangeSetBuilder")

    @property
    def engine(self) -> DiffEngine:
        """Diff engine backing this builder."""
        return self._engine

    def build_character_changes(
        self,
        source_text: str,
        modified_text: str,
        policy: Any = None
    ) -> List[Change]:
        """
        Compute the character changes that turn source_text into modified_text.

        Args:
            source_text: Text before the edit
            modified_text: Text after the edit
            policy: Cleanup policy; None selects the engine's default

        Returns:
            Changes in source order, empty if the texts are equal

        Raises:
            CleanupPolicyError: If the policy is not recognized
        """
        # Resolve first so a bad policy is rejected before any diff work
        resolved = self._engine.resolve_policy(policy)
        segments = self._engine.cleanup(self._engine.compare(source_text, modified_text), resolved)

        changes: List[Change] = []
        cursor = 0
        for segment in segments:
            if segment.kind == SegmentKind.INSERT:
                changes.append(Change(cursor, ChangeKind.ADDED, segment.text))

            elif segment.kind == SegmentKind.DELETE:
                changes.append(Change(cursor, ChangeKind.REMOVED, segment.text))
                cursor += len(segment.text)

            else:
                cursor += len(segment.text)

        self._logger.debug("built %d character change(s) using %s cleanup", len(changes), resolved.name)
        return changes

    def build_line_changes(self, source_text: str, modified_text: str) -> List[LineChange]:
        """
        Compute the whole-line changes that turn source_text into modified_text.

        Args:
            source_text: Text before the edit
            modified_text: Text after the edit

        Returns:
            Line changes whose positions are zero-based line indexes in source_text
        """
        tokens = self._engine.tokenize_lines(source_text, modified_text)
        segments = self._engine.compare_tokens(tokens.encoded_source, tokens.encoded_modified)

        changes: List[LineChange] = []
        cursor = 0
        for segment in segments:
            lines = tokens.decode(segment.text)
            if segment.kind == SegmentKind.INSERT:
                changes.append(LineChange(cursor, ChangeKind.ADDED, ''.join(lines)))

            elif segment.kind == SegmentKind.DELETE:
                changes.append(LineChange(cursor, ChangeKind.REMOVED, ''.join(lines)))
                cursor += len(lines)

            else:
                cursor += len(lines)

        self._logger.debug("built %d line change(s)", len(changes))
        return changes
