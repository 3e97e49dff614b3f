"""Data structures for copy and delete batches."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..listing import EntryKind


@dataclass
class FileEntry:
    """A path acted on by a batch.

    Attributes:
        path: Relative path (forward slashes).
        kind: :class:`~treemirror.listing.EntryKind` of the entry.
        size: Byte size of a regular file (0 for directories).
    """
    path: str
    kind: EntryKind
    size: int = 0


class ChangeActionKind(str, Enum):
    """Kind of change action: ``ADD`` or ``DELETE``."""
    ADD = "add"
    DELETE = "delete"

    def __str__(self) -> str:          # noqa: D105
        return self.value


@dataclass
class ChangeAction:
    """A single add/delete action in a :class:`ChangeReport`."""
    path: str
    action: ChangeActionKind


@dataclass
class ChangeError:
    """A path that failed or was skipped during a batch.

    Attributes:
        path: The relative path that caused the error.
        error: Human-readable error message.
    """
    path: str
    error: str


@dataclass
class ChangeReport:
    """Result of a copy or delete batch.

    In safe mode the report lists what *would* have been done.

    Attributes:
        add: Files copied and directories created.
        delete: Files and directories removed.
        errors: Per-file errors (existing destinations, and I/O failures
            when ``ignore_errors`` is set).
        warnings: Non-fatal warnings.
        total_files: Regular files the batch set out to process.
        total_bytes: Bytes the batch set out to process.
        processed_bytes: Bytes accounted for when the batch finished
            (for deletes, the bytes of the loose files removed).
        safe_mode: True if no filesystem changes were made.
    """
    add: list[FileEntry] = field(default_factory=list)
    delete: list[FileEntry] = field(default_factory=list)
    errors: list[ChangeError] = field(default_factory=list)
    warnings: list[ChangeError] = field(default_factory=list)
    total_files: int = 0
    total_bytes: int = 0
    processed_bytes: int = 0
    safe_mode: bool = False

    @property
    def in_sync(self) -> bool:
        """``True`` if there are no add or delete actions."""
        return not self.add and not self.delete

    @property
    def total(self) -> int:
        """Total number of add + delete actions."""
        return len(self.add) + len(self.delete)

    @property
    def files_done(self) -> int:
        """Regular files copied (or removed)."""
        return sum(
            1 for e in self.add + self.delete if e.kind is EntryKind.FILE
        )

    def actions(self) -> list[ChangeAction]:
        """Return all actions as a flat list sorted by path."""
        result: list[ChangeAction] = []
        for e in self.add:
            result.append(ChangeAction(path=e.path, action=ChangeActionKind.ADD))
        for e in self.delete:
            result.append(ChangeAction(path=e.path, action=ChangeActionKind.DELETE))
        result.sort(key=lambda a: a.path)
        return result
