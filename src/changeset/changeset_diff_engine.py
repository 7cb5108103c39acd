"""
Edit script discovery, backed by google-diff-match-patch.

The engine owns its own diff_match_patch instance and carries its tuning as
explicit settings, so several engines with different tuning can coexist.
"""

from dataclasses import dataclass
from enum import IntEnum
import logging
from typing import Any, List, Tuple

from diff_match_patch import diff_match_patch

from changeset.changeset_exceptions import CleanupPolicyError
from changeset.changeset_settings import DiffEngineSettings
from changeset.changeset_types import CleanupPolicy


class SegmentKind(IntEnum):
    """Kind of an edit script segment, using diff_match_patch's operation codes."""
    DELETE = diff_match_patch.DIFF_DELETE
    EQUAL = diff_match_patch.DIFF_EQUAL
    INSERT = diff_match_patch.DIFF_INSERT


@dataclass(frozen=True)
class DiffSegment:
    """One segment of a raw edit script."""

    kind: SegmentKind
    text: str


@dataclass(frozen=True)
class LineTokens:
    """Two texts encoded as one symbol per line, plus the table to decode them."""

    encoded_source: str
    encoded_modified: str
    line_table: List[str]

    def decode(self, symbols: str) -> List[str]:
        """
        Map encoded line symbols back to their lines.

        Args:
            symbols: Encoded text, one character per line

        Returns:
            The decoded lines, terminators included
        """
        return [self.line_table[ord(symbol)] for symbol in symbols]


class DiffEngine:
    """Computes raw edit scripts between two texts."""

    def __init__(self, settings: DiffEngineSettings | None = None) -> None:
        """
        Initialize the engine.

        Args:
            settings: Engine tuning; defaults are used when omitted
        """
        self._settings = settings if settings is not None else DiffEngineSettings()
        self._dmp = diff_match_patch()
        self._dmp.Diff_Timeout = self._settings.timeout
        self._dmp.Diff_EditCost = self._settings.edit_cost
        self._logger = logging.getLogger("DiffEngine")

    @property
    def settings(self) -> DiffEngineSettings:
        """Tuning this engine was built with."""
        return self._settings

    def resolve_policy(self, policy: Any) -> CleanupPolicy:
        """
        Turn a caller-supplied policy into a CleanupPolicy.

        Accepts a CleanupPolicy, its integer value or its name (any case).
        None selects the configured default policy.

        Args:
            policy: Policy to resolve

        Returns:
            The resolved policy

        Raises:
            CleanupPolicyError: If the value does not name a policy
        """
        if policy is None:
            return self._settings.default_policy

        if isinstance(policy, CleanupPolicy):
            return policy

        if isinstance(policy, str):
            try:
                return CleanupPolicy[policy.upper()]

            except KeyError as e:
                raise CleanupPolicyError(
                    f"Unknown cleanup policy: {policy!r}",
                    {'policy': policy, 'valid_policies': [p.name for p in CleanupPolicy]}
                ) from e

        # bool is an int subclass but never a meaningful policy
        if isinstance(policy, int) and not isinstance(policy, bool):
            try:
                return CleanupPolicy(policy)

            except ValueError as e:
                raise CleanupPolicyError(
                    f"Unknown cleanup policy: {policy!r}",
                    {'policy': policy, 'valid_policies': [p.name for p in CleanupPolicy]}
                ) from e

        raise CleanupPolicyError(
            f"Unsupported cleanup policy type: {type(policy).__name__}",
            {'policy': repr(policy), 'valid_policies': [p.name for p in CleanupPolicy]}
        )

    def compare(self, source_text: str, modified_text: str) -> List[DiffSegment]:
        """
        Compute a character-level edit script.

        Args:
            source_text: Text before the edit
            modified_text: Text after the edit

        Returns:
            Segments describing how source_text becomes modified_text
        """
        return self._to_segments(self._dmp.diff_main(source_text, modified_text))

    def cleanup(self, segments: List[DiffSegment], policy: Any) -> List[DiffSegment]:
        """
        Consolidate an edit script according to a cleanup policy.

        Args:
            segments: Raw edit script
            policy: Cleanup policy to apply

        Returns:
            A new, consolidated list of segments

        Raises:
            CleanupPolicyError: If the policy is not recognized
        """
        resolved = self.resolve_policy(policy)
        if resolved == CleanupPolicy.NONE:
            return list(segments)

        diffs = self._to_diffs(segments)
        if resolved == CleanupPolicy.SEMANTIC:
            self._dmp.diff_cleanupSemantic(diffs)

        else:
            self._dmp.diff_cleanupEfficiency(diffs)

        return self._to_segments(diffs)

    def tokenize_lines(self, source_text: str, modified_text: str) -> LineTokens:
        """
        Encode both texts as one symbol per line.

        Args:
            source_text: Text before the edit
            modified_text: Text after the edit

        Returns:
            The encoded texts and the shared line table
        """
        encoded_source, encoded_modified, line_table = self._dmp.diff_linesToChars(source_text, modified_text)
        return LineTokens(encoded_source, encoded_modified, list(line_table))

    def compare_tokens(self, encoded_source: str, encoded_modified: str) -> List[DiffSegment]:
        """
        Compute an edit script between two line-encoded texts.

        Args:
            encoded_source: Encoded source text
            encoded_modified: Encoded modified text

        Returns:
            Segments over line symbols
        """
        return self._to_segments(self._dmp.diff_main(encoded_source, encoded_modified, False))

    def _to_segments(self, diffs: List[Tuple[int, str]]) -> List[DiffSegment]:
        segments = [DiffSegment(SegmentKind(op), text) for op, text in diffs]
        self._logger.debug("edit script has %d segment(s)", len(segments))
        return segments

    def _to_diffs(self, segments: List[DiffSegment]) -> List[Tuple[int, str]]:
        return [(int(segment.kind), segment.text) for segment in segments]
