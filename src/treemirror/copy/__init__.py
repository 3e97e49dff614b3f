"""Act on a comparison: copy unique-to-A entries into B, delete unique-to-B ones.

Both operations honor ``MirrorOptions.safe_mode`` (nothing is created,
written, or removed) and return a :class:`ChangeReport`.
"""

from ._types import (
    ChangeAction,
    ChangeActionKind,
    ChangeError,
    ChangeReport,
    FileEntry,
)
from ._copier import CopyStatus, FileCopier
from ._ops import copy_unique, delete_unique

__all__ = [
    "ChangeAction", "ChangeActionKind", "ChangeError", "ChangeReport", "FileEntry",
    "CopyStatus", "FileCopier",
    "copy_unique", "delete_unique",
]
