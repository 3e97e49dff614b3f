"""Human-readable comparison reports."""

from __future__ import annotations

import os

import click

from ..diff import SIDE_A, SIDE_B, DiffGroup, DirectoryComparer, Group
from ..listing import EntryKind, entry_kind
from ..size import FIELD_WIDTH, format_size


def _print_files(group: DiffGroup) -> None:
    click.echo(f"{group.f.files} files totaling {format_size(group.f.bytes)}.")
    for p in group.f:
        click.echo(f"  * {p}")
    click.echo("")


def _print_dirs(group: DiffGroup) -> None:
    totals = group.d.totals
    click.echo(f"{len(group.d)} directories, containing {totals.files} files "
               f"({format_size(totals.bytes)}).")
    for p in group.d:
        click.echo(f"  * {p}")
    click.echo("")


def print_group(comparer: DirectoryComparer, which: Group) -> None:
    """Annotate *which* group and list its files and directories."""
    comparer.annotate(which)
    if which is Group.UNIQUE_A:
        click.echo(f"========== Unique to {comparer.root_a} ==========")
    elif which is Group.UNIQUE_B:
        click.echo(f"========== Unique to {comparer.root_b} ==========")
    else:
        click.echo(f"========== Common to {comparer.root_a} and {comparer.root_b} ==========")
    group = comparer.diff.group(which)
    _print_files(group)
    _print_dirs(group)


def print_issues(comparer: DirectoryComparer) -> None:
    """List size, type, and unsupported-kind conflicts."""
    conflicts = comparer.diff.conflicts
    click.echo("========== Issues ==========")
    if not conflicts.total:
        click.echo("No issues detected. Backup should run smoothly.")
        click.echo("")
        return
    for p in conflicts.size:
        size_a = os.path.getsize(comparer.ground(p, SIDE_A))
        size_b = os.path.getsize(comparer.ground(p, SIDE_B))
        click.echo(f"  * {p} is {format_size(size_a)} in {comparer.root_a} "
                   f"but {format_size(size_b)} in {comparer.root_b}.")
    for p in conflicts.type:
        if entry_kind(comparer.ground(p, SIDE_A)) is EntryKind.FILE:
            click.echo(f"  * {p} is a file in {comparer.root_a} "
                       f"but a directory in {comparer.root_b}.")
        else:
            click.echo(f"  * {p} is a directory in {comparer.root_a} "
                       f"but a file in {comparer.root_b}.")
    for p in conflicts.unsupported:
        click.echo(f"  * {p} is neither a regular file nor a directory "
                   f"in at least one tree; it is left alone.")
    click.echo("")


def print_outline(comparer: DirectoryComparer) -> None:
    """Four-line summary: to copy, to delete, already backed up, in conflict.

    Shared directories are not counted separately; their contents are
    already classified at deeper levels.
    """
    comparer.annotate_all()
    diff = comparer.diff
    shared = diff.shared
    click.echo("========== Outline ==========")
    click.echo(f"Directory A: {comparer.root_a}")
    click.echo(f"Directory B: {comparer.root_b}")
    click.echo(f"{diff.unique_a.files:>5} files ({format_size(diff.unique_a.bytes):>{FIELD_WIDTH}}) "
               f"are to be copied.")
    click.echo(f"{diff.unique_b.files:>5} files ({format_size(diff.unique_b.bytes):>{FIELD_WIDTH}}) "
               f"are to be deleted.")
    click.echo(f"{shared.files:>5} files ({format_size(shared.bytes):>{FIELD_WIDTH}}) "
               f"are already backed up.")
    click.echo(f"{diff.conflicts.total:>5} files are in conflict and must be manually resolved.")
    click.echo("")
