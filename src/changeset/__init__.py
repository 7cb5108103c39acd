"""
Text change sets: build, apply, reverse, and track selections across them.

This package turns the edit script between two texts into position-tagged
changes, replays them, inverts them for undo, and moves carets and
selections to follow the edit.
"""

from changeset.changeset_api import (
    apply,
    apply_lines,
    build_character_changes,
    build_line_changes,
    remap,
    remap_change,
    reverse,
)
from changeset.changeset_applier import ChangeSetApplier
from changeset.changeset_builder import ChangeSetBuilder
from changeset.changeset_diff_engine import DiffEngine, DiffSegment, LineTokens, SegmentKind
from changeset.changeset_exceptions import (
    ChangeSetError,
    CleanupPolicyError,
    CoordinateMismatchError,
    InvalidChangeError,
    InvalidRangeError,
)
from changeset.changeset_remapper import EditRelation, SelectionRemapper
from changeset.changeset_reverser import ChangeSetReverser
from changeset.changeset_settings import DiffEngineSettings
from changeset.changeset_types import (
    Change,
    ChangeKind,
    CleanupPolicy,
    LineChange,
    Selection,
    split_lines,
)

__all__ = [
    # Exceptions
    'ChangeSetError',
    'InvalidRangeError',
    'InvalidChangeError',
    'CoordinateMismatchError',
    'CleanupPolicyError',
    # Types
    'ChangeKind',
    'CleanupPolicy',
    'Change',
    'LineChange',
    'Selection',
    'split_lines',
    'SegmentKind',
    'DiffSegment',
    'LineTokens',
    'EditRelation',
    # Configuration
    'DiffEngineSettings',
    # Core classes
    'DiffEngine',
    'ChangeSetBuilder',
    'ChangeSetApplier',
    'ChangeSetReverser',
    'SelectionRemapper',
    # Shortcuts
    'build_character_changes',
    'build_line_changes',
    'apply',
    'apply_lines',
    'reverse',
    'remap',
    'remap_change',
]
