"""Single-level merge comparison of two sorted directory listings."""

from __future__ import annotations

import os
from typing import Sequence

from ..listing import EntryKind, name_key, stat_entry
from ..paths import ground, join_rel
from ._types import DiffGroup, TreeDiff


def _add_unique(group: DiffGroup, diff: TreeDiff, rel: str, full: str) -> None:
    kind, size = stat_entry(full)
    if kind is EntryKind.FILE:
        group.f.add(rel, size)
    elif kind is EntryKind.DIRECTORY:
        group.d.add(rel)
    else:
        diff.conflicts.unsupported.append(rel)


def _add_matched(diff: TreeDiff, rel: str, full_a: str, full_b: str) -> None:
    kind_a, size_a = stat_entry(full_a)
    kind_b, size_b = stat_entry(full_b)
    if EntryKind.OTHER in (kind_a, kind_b):
        diff.conflicts.unsupported.append(rel)
    elif kind_a is EntryKind.FILE and kind_b is EntryKind.FILE:
        # Equal size is taken as equal content.
        if size_a == size_b:
            diff.shared.f.add(rel, size_a)
        else:
            diff.conflicts.size.append(rel)
    elif kind_a is EntryKind.DIRECTORY and kind_b is EntryKind.DIRECTORY:
        # Contents are compared when the controller descends into it.
        diff.shared.d.add(rel)
    else:
        diff.conflicts.type.append(rel)


def compare_level(
    names_a: Sequence[str],
    names_b: Sequence[str],
    root_a: str | os.PathLike[str],
    root_b: str | os.PathLike[str],
    extension: str = "",
) -> TreeDiff:
    """Classify the children of one directory level on both sides.

    *names_a* and *names_b* are the child names of ``root_a/extension``
    and ``root_b/extension``, each already sorted by
    :func:`~treemirror.listing.name_key`.  A single two-cursor merge pass
    places every name into exactly one bucket of the returned
    :class:`TreeDiff`, keyed by its path relative to the roots:

    - names on one side only go to that side's unique group (by kind);
    - same-named files of equal size go to ``shared.f``, of differing
      size to ``conflicts.size``;
    - same-named directories go to ``shared.d`` (their contents are not
      looked at here);
    - a file matched with a directory goes to ``conflicts.type``;
    - any name whose entry is neither a file nor a directory goes to
      ``conflicts.unsupported``.

    Only kinds and regular-file sizes are read from the filesystem.
    """
    diff = TreeDiff()
    i = j = 0
    len_a, len_b = len(names_a), len(names_b)
    while i < len_a or j < len_b:
        if j >= len_b:
            rel = join_rel(extension, names_a[i])
            _add_unique(diff.unique_a, diff, rel, ground(root_a, rel))
            i += 1
            continue
        if i >= len_a:
            rel = join_rel(extension, names_b[j])
            _add_unique(diff.unique_b, diff, rel, ground(root_b, rel))
            j += 1
            continue

        key_a, key_b = name_key(names_a[i]), name_key(names_b[j])
        if key_a == key_b:
            rel = join_rel(extension, names_a[i])
            _add_matched(diff, rel, ground(root_a, rel), ground(root_b, rel))
            i += 1
            j += 1
        elif key_a < key_b:
            rel = join_rel(extension, names_a[i])
            _add_unique(diff.unique_a, diff, rel, ground(root_a, rel))
            i += 1
        else:
            rel = join_rel(extension, names_b[j])
            _add_unique(diff.unique_b, diff, rel, ground(root_b, rel))
            j += 1
    return diff
