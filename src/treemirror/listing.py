"""Directory listing, entry classification, and subtree totals."""

from __future__ import annotations

import os
import stat
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple

from .paths import join_rel

if TYPE_CHECKING:
    from ._exclude import ExcludeFilter


HIDDEN_PREFIX = "."


class EntryKind(str, Enum):
    """Classification of a filesystem path at a point in time.

    Members: ``FILE``, ``DIRECTORY``, ``OTHER``.  ``OTHER`` covers broken
    symlinks, devices, sockets, and FIFOs.  Symlinks to files and
    directories are classified by their target.
    """
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"

    def __str__(self) -> str:          # noqa: D105
        return self.value


class DirTotals(NamedTuple):
    """Recursive regular-file count and byte total under some directories."""

    files: int
    bytes: int

    def __add__(self, other):
        return DirTotals(self.files + other.files, self.bytes + other.bytes)


EMPTY_TOTALS = DirTotals(0, 0)


def name_key(name: str) -> bytes:
    """Sort key giving byte-wise order of a file name.

    Both sides of a merge must be ordered with this same key.
    """
    return os.fsencode(name)


def stat_entry(path: str | os.PathLike[str]) -> tuple[EntryKind, int]:
    """Return ``(kind, size)`` for *path*, following symlinks.

    *size* is the byte size for regular files and 0 otherwise.  A
    dangling symlink is ``OTHER``; a path that does not exist at all
    raises :class:`FileNotFoundError`.
    """
    try:
        st = os.stat(path)
    except FileNotFoundError:
        if os.path.lexists(path):
            return EntryKind.OTHER, 0
        raise
    if stat.S_ISREG(st.st_mode):
        return EntryKind.FILE, st.st_size
    if stat.S_ISDIR(st.st_mode):
        return EntryKind.DIRECTORY, 0
    return EntryKind.OTHER, 0


def entry_kind(path: str | os.PathLike[str]) -> EntryKind:
    """Classify *path*; see :func:`stat_entry`."""
    return stat_entry(path)[0]


def _dirent_kind(entry: os.DirEntry) -> EntryKind:
    if entry.is_file():
        return EntryKind.FILE
    if entry.is_dir():
        return EntryKind.DIRECTORY
    return EntryKind.OTHER


def scan_dir(
    directory: str | os.PathLike[str],
    *,
    exclude: ExcludeFilter | None = None,
    rel_dir: str = "",
) -> list[tuple[str, EntryKind]]:
    """Return ``(name, kind)`` for every child of *directory*, byte-wise sorted.

    *rel_dir* is the location of *directory* relative to its comparison
    root; it is only used to match *exclude* patterns.  Hidden names are
    kept here; see :func:`list_dir`.
    """
    result: list[tuple[str, EntryKind]] = []
    with os.scandir(directory) as it:
        for entry in it:
            kind = _dirent_kind(entry)
            if exclude is not None and exclude.is_excluded(
                join_rel(rel_dir, entry.name),
                is_dir=kind is EntryKind.DIRECTORY,
            ):
                continue
            result.append((entry.name, kind))
    result.sort(key=lambda item: name_key(item[0]))
    return result


def list_dir(
    directory: str | os.PathLike[str],
    *,
    ignore_hidden: bool = True,
    exclude: ExcludeFilter | None = None,
    rel_dir: str = "",
) -> list[str]:
    """List the names of the regular files and directories in *directory*.

    Entries that are neither (``OTHER``) are dropped, as are names starting
    with ``.`` when *ignore_hidden* is set.  The result is sorted by
    :func:`name_key`, the order the merge comparer relies on.

    Raises :class:`OSError` if *directory* cannot be read.
    """
    return [
        name for name, kind in scan_dir(directory, exclude=exclude, rel_dir=rel_dir)
        if kind is not EntryKind.OTHER
        and not (ignore_hidden and name.startswith(HIDDEN_PREFIX))
    ]


def tree_totals(
    directory: str | os.PathLike[str],
    *,
    exclude: ExcludeFilter | None = None,
    rel_dir: str = "",
) -> DirTotals:
    """Count regular files and sum their sizes anywhere under *directory*.

    Symlinked subdirectories are not descended into; *directory* itself
    is always read, even if it is a symlink.
    """
    files = 0
    nbytes = 0
    pending = [(os.fspath(directory), rel_dir)]
    while pending:
        path, rel = pending.pop()
        with os.scandir(path) as it:
            for entry in it:
                child_rel = join_rel(rel, entry.name)
                kind = _dirent_kind(entry)
                if exclude is not None and exclude.is_excluded(
                    child_rel, is_dir=kind is EntryKind.DIRECTORY,
                ):
                    continue
                if kind is EntryKind.FILE:
                    files += 1
                    nbytes += entry.stat().st_size
                elif kind is EntryKind.DIRECTORY and not entry.is_symlink():
                    pending.append((entry.path, child_rel))
    return DirTotals(files, nbytes)
