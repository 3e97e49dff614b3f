"""Tree-diff engine: buckets, the single-level merge, and recursive descent.

:func:`compare_level` classifies the children of one directory level;
:class:`DirectoryComparer` applies it across every shared directory to
produce a single :class:`TreeDiff` for two whole trees.
"""

from ._annotate import AnnotationCache
from ._types import (
    ConflictLists,
    DiffGroup,
    DirBucket,
    FileBucket,
    Group,
    TreeDiff,
)
from ._compare import compare_level
from ._comparer import SIDE_A, SIDE_B, DirectoryComparer

__all__ = [
    "AnnotationCache", "ConflictLists", "DiffGroup", "DirBucket", "FileBucket",
    "Group", "TreeDiff",
    "compare_level",
    "DirectoryComparer", "SIDE_A", "SIDE_B",
]
