"""Shared fixtures and utilities for change set tests."""

import pytest

from changeset.changeset_applier import ChangeSetApplier
from changeset.changeset_builder import ChangeSetBuilder
from changeset.changeset_diff_engine import DiffEngine
from changeset.changeset_remapper import SelectionRemapper
from changeset.changeset_reverser import ChangeSetReverser
from changeset.changeset_settings import DiffEngineSettings


@pytest.fixture
def engine():
    """Create a default-tuned diff engine."""
    return DiffEngine()


@pytest.fixture
def engine_custom():
    """Factory for diff engines with custom tuning."""
    def _create_engine(**kwargs):
        return DiffEngine(DiffEngineSettings(**kwargs))
    return _create_engine


@pytest.fixture
def builder(engine):
    """Create a change set builder over the default engine."""
    return ChangeSetBuilder(engine)


@pytest.fixture
def applier():
    """Create a validating applier."""
    return ChangeSetApplier()


@pytest.fixture
def lenient_applier():
    """Create an applier that does not check removed spans."""
    return ChangeSetApplier(validate=False)


@pytest.fixture
def reverser():
    """Create a change set reverser."""
    return ChangeSetReverser()


@pytest.fixture
def remapper():
    """Create a selection remapper."""
    return SelectionRemapper()


# Digits make offsets easy to read: the character at index i is str(i)
DIGITS = '0123456789'


@pytest.fixture
def digits():
    """Provide the ten-digit reference text."""
    return DIGITS
