"""Shared value types for change set operations."""

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import List, Tuple

from changeset.changeset_exceptions import InvalidChangeError, InvalidRangeError


class ChangeKind(IntEnum):
    """Kind of an atomic text change."""
    ADDED = auto()
    REMOVED = auto()


class CleanupPolicy(IntEnum):
    """How a raw edit script is consolidated before changes are built."""
    NONE = auto()
    SEMANTIC = auto()
    EFFICIENCY = auto()


def split_lines(text: str) -> List[str]:
    """
    Split text into lines, keeping the line terminators.

    Only '\\n' terminates a line, matching the diff engine's line tokenizer.
    The last line keeps no terminator if the text does not end with one.

    Args:
        text: Text to split

    Returns:
        List of lines
    """
    lines: List[str] = []
    start = 0
    while start < len(text):
        end = text.find('\n', start)
        if end == -1:
            end = len(text) - 1

        lines.append(text[start:end + 1])
        start = end + 1

    return lines


@dataclass(frozen=True)
class Change:
    """
    A single insertion or removal, anchored in the source text.

    The position of every change, added or removed, is an offset into the
    original source text the change set was built against.
    """

    position: int
    kind: ChangeKind
    text: str

    def __post_init__(self) -> None:
        # Only ADDED and REMOVED exist; raw values are normalized to the enum
        try:
            object.__setattr__(self, 'kind', ChangeKind(self.kind))

        except (ValueError, TypeError) as e:
            raise InvalidChangeError(
                f"Unknown change kind: {self.kind!r}",
                {'position': self.position, 'kind': repr(self.kind)}
            ) from e

        if self.position < 0:
            raise InvalidChangeError(
                f"Change position must not be negative: {self.position}",
                {'position': self.position, 'kind': self.kind.name}
            )

        if not self.text:
            raise InvalidChangeError(
                "Change text must not be empty",
                {'position': self.position, 'kind': self.kind.name}
            )

    @property
    def length(self) -> int:
        """Number of source units this change covers."""
        return len(self.text)

    def as_tuple(self) -> Tuple[int, int, str]:
        """Return the (position, kind, text) form used for undo logs."""
        return (self.position, self.kind.value, self.text)

    @classmethod
    def from_tuple(cls, value: Tuple[int, int, str]) -> "Change":
        """Rebuild a change from its (position, kind, text) form."""
        position, kind, text = value
        return cls(position, ChangeKind(kind), text)


@dataclass(frozen=True)
class LineChange(Change):
    """A change whose position is a zero-based line index and whose text is whole lines."""

    @property
    def length(self) -> int:
        """Number of lines in this change."""
        return len(split_lines(self.text))


@dataclass(frozen=True)
class Selection:
    """A half-open range [start, end); start == end is a collapsed caret."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < 0 or self.start > self.end:
            raise InvalidRangeError(
                f"Invalid selection range: ({self.start}, {self.end})",
                {'start': self.start, 'end': self.end}
            )

    @classmethod
    def caret(cls, position: int) -> "Selection":
        """Create a collapsed selection at the given position."""
        return cls(position, position)

    @property
    def is_collapsed(self) -> bool:
        """True if this selection is a caret."""
        return self.start == self.end

    @property
    def length(self) -> int:
        """Number of characters covered."""
        return self.end - self.start
