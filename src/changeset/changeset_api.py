"""
Module-level shortcuts over default-configured change set components.

The shared instances here are never reconfigured. Callers that need their
own tuning build a ChangeSetBuilder(DiffEngine(settings)) instead.
"""

from typing import Any, List, Sequence

from changeset.changeset_applier import ChangeSetApplier
from changeset.changeset_builder import ChangeSetBuilder
from changeset.changeset_remapper import SelectionRemapper
from changeset.changeset_reverser import ChangeSetReverser, ChangeT
from changeset.changeset_types import Change, LineChange, Selection


_builder = ChangeSetBuilder()
_applier = ChangeSetApplier()
_reverser = ChangeSetReverser()
_remapper = SelectionRemapper()


def build_character_changes(source_text: str, modified_text: str, policy: Any = None) -> List[Change]:
    """Compute character changes with the default engine."""
    return _builder.build_character_changes(source_text, modified_text, policy)


def build_line_changes(source_text: str, modified_text: str) -> List[LineChange]:
    """Compute line changes with the default engine."""
    return _builder.build_line_changes(source_text, modified_text)


def apply(source_text: str, changes: Sequence[Change]) -> str:
    """Apply character changes, validating removed spans."""
    return _applier.apply(source_text, changes)


def apply_lines(source_text: str, changes: Sequence[LineChange]) -> str:
    """Apply line changes, validating removed lines."""
    return _applier.apply_lines(source_text, changes)


def reverse(changes: Sequence[ChangeT]) -> List[ChangeT]:
    """Reverse a change set for undo."""
    return _reverser.reverse(changes)


def remap(selection: Selection, changes: Sequence[Change]) -> Selection:
    """Remap a selection across a whole change set."""
    return _remapper.remap(selection, changes)


def remap_change(selection: Selection, change: Change) -> Selection:
    """Remap a selection across a single change."""
    return _remapper.remap_change(selection, change)
