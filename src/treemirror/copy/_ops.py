"""Copy unique-to-A entries into B, and delete unique-to-B entries."""

from __future__ import annotations

import os
import shutil
from typing import TYPE_CHECKING, Optional

from ..diff import SIDE_A, SIDE_B, Group
from ..listing import EntryKind, scan_dir
from ..paths import split_rel
from ..size import FIELD_WIDTH, format_size
from ._copier import Echo, FileCopier
from ._types import ChangeError, ChangeReport, FileEntry

if TYPE_CHECKING:
    from ..diff import DirectoryComparer


# ---------------------------------------------------------------------------
# Copy
# ---------------------------------------------------------------------------

def _create_dir(copier: FileCopier, comparer: DirectoryComparer,
                stack: list[str], report: ChangeReport) -> None:
    rel = "/".join(stack)
    copier.echo(f"{copier.status.prefix()}Creating directory {rel}.")
    if not comparer.options.safe_mode:
        os.makedirs(comparer.ground(rel, SIDE_B), exist_ok=True)
    report.add.append(FileEntry(rel, EntryKind.DIRECTORY))


def _copy_children(copier: FileCopier, comparer: DirectoryComparer,
                   src_dir: str, stack: list[str], report: ChangeReport) -> None:
    """Copy everything below *src_dir*, whose destination is ``B/<stack>``.

    *stack* holds the destination path segments; each child is pushed
    before it is handled and popped afterwards.
    """
    for name, kind in scan_dir(src_dir, exclude=comparer.options.exclude,
                               rel_dir="/".join(stack)):
        stack.append(name)
        rel = "/".join(stack)
        src = os.path.join(src_dir, name)
        if kind is EntryKind.FILE:
            if copier.copy(src, comparer.ground(rel, SIDE_B), rel):
                report.add.append(FileEntry(rel, EntryKind.FILE, copier.status.file_total))
        elif kind is EntryKind.DIRECTORY and not os.path.islink(src):
            _create_dir(copier, comparer, stack, report)
            _copy_children(copier, comparer, src, stack, report)
        stack.pop()


def copy_unique(
    comparer: DirectoryComparer,
    *,
    progress: Optional[Echo] = None,
    warn: Optional[Echo] = None,
) -> ChangeReport:
    """Copy every file and directory unique to A into B.

    Totals for the batch come from the annotated unique-to-A group.
    Loose files are copied first, then each directory is recreated and
    filled by a recursive walk.  A destination that already exists is
    never overwritten; it is reported in ``errors`` and the batch goes on.

    The unique-to-A group is drained afterwards, so its totals must be
    re-annotated (after a new comparison) before they are read again.
    """
    options = comparer.options
    group = comparer.diff.unique_a
    comparer.annotate(Group.UNIQUE_A)
    total_files, total_bytes = group.files, group.bytes

    report = ChangeReport(total_files=total_files, total_bytes=total_bytes,
                          safe_mode=options.safe_mode)
    copier = FileCopier(options, progress=progress, warn=warn)
    copier.start_batch(total_bytes)

    copier.echo("========== Copying Files from A to B ==========")
    copier.echo(f"Copying {total_files} files totaling {format_size(total_bytes)} "
                f"from {comparer.root_a} to {comparer.root_b}.")
    copier.echo("  Bytes Processed   |   Current File")

    for rel, size in group.f.items():
        if copier.copy(comparer.ground(rel, SIDE_A), comparer.ground(rel, SIDE_B), rel):
            report.add.append(FileEntry(rel, EntryKind.FILE, size))

    for rel in group.d:
        stack = split_rel(rel)
        _create_dir(copier, comparer, stack, report)
        _copy_children(copier, comparer, comparer.ground(rel, SIDE_A), stack, report)

    comparer.consume(Group.UNIQUE_A)

    report.errors.extend(copier.errors)
    report.warnings.extend(copier.warnings)
    report.processed_bytes = copier.status.bytes

    done = report.files_done
    total = format_size(total_bytes)
    copier.echo(f"{total:>{FIELD_WIDTH}}/{total:>{FIELD_WIDTH}} | "
                f"{done} of {total_files} files were copied.")
    if report.errors:
        copier.echo("The following files were not copied:")
        for e in report.errors:
            copier.echo(e.path)
    copier.echo("")
    return report


# ---------------------------------------------------------------------------
# Delete
# ---------------------------------------------------------------------------

def _remove(path: str, kind: EntryKind, rel: str, report: ChangeReport,
            ignore_errors: bool, warn: Optional[Echo]) -> bool:
    try:
        if kind is EntryKind.DIRECTORY:
            shutil.rmtree(path)
        else:
            os.remove(path)
    except OSError as exc:
        if not ignore_errors:
            raise
        report.errors.append(ChangeError(path=rel, error=str(exc)))
        if warn is not None:
            warn(f"ERROR: {rel}: {exc}")
        return False
    return True


def delete_unique(
    comparer: DirectoryComparer,
    *,
    progress: Optional[Echo] = None,
    warn: Optional[Echo] = None,
) -> ChangeReport:
    """Remove every file and directory unique to B.

    Directories are removed recursively.  In safe mode sizes are still
    looked up and every entry is reported, but nothing is removed.  The
    unique-to-B group is drained afterwards.
    """
    options = comparer.options
    group = comparer.diff.unique_b
    comparer.annotate(Group.UNIQUE_B)
    report = ChangeReport(total_files=group.files, total_bytes=group.bytes,
                          safe_mode=options.safe_mode)

    def echo(msg: str) -> None:
        if progress is not None:
            progress(msg)

    echo("========== Deleting Files from B ==========")
    echo(f"Removing {report.total_files} files totaling "
         f"{format_size(report.total_bytes)} from {comparer.root_b}.")

    for rel, _size in group.f.items():
        path = comparer.ground(rel, SIDE_B)
        size = os.path.getsize(path)
        echo(f"Removing {rel} ({format_size(size)}).")
        if options.safe_mode or _remove(path, EntryKind.FILE, rel, report,
                                        options.ignore_errors, warn):
            report.delete.append(FileEntry(rel, EntryKind.FILE, size))
            report.processed_bytes += size

    for rel in group.d:
        path = comparer.ground(rel, SIDE_B)
        echo(f"Removing {rel}.")
        if options.safe_mode or _remove(path, EntryKind.DIRECTORY, rel, report,
                                        options.ignore_errors, warn):
            report.delete.append(FileEntry(rel, EntryKind.DIRECTORY))

    comparer.consume(Group.UNIQUE_B)
    echo("")
    return report
