from ._exclude import ExcludeFilter
from .options import MirrorOptions
from .listing import DirTotals, EntryKind, list_dir
from .size import format_size
from .diff import DirectoryComparer, Group, TreeDiff, compare_level
from .copy import ChangeError, ChangeReport, FileCopier, FileEntry, copy_unique, delete_unique

__all__ = [
    "ExcludeFilter", "MirrorOptions",
    "DirTotals", "EntryKind", "list_dir",
    "format_size",
    "DirectoryComparer", "Group", "TreeDiff", "compare_level",
    "ChangeError", "ChangeReport", "FileCopier", "FileEntry",
    "copy_unique", "delete_unique",
]
