"""The treemirror command."""

from __future__ import annotations

import click

from ..copy import copy_unique, delete_unique
from ..diff import DirectoryComparer, Group
from ..options import MirrorOptions
from ._helpers import (
    _build_exclude,
    _echo_err,
    _report_actions,
    _require_directory,
    _status,
)
from ._report import print_group, print_issues, print_outline


@click.command()
@click.argument("dir_a", type=click.Path())
@click.argument("dir_b", type=click.Path())
@click.option("-o", "--outline", "--summary", "outline", is_flag=True,
              help="Print a four line outline of -abmi.")
@click.option("-a", "--show-a", is_flag=True,
              help="Print files unique to directory A. These will be copied if invoked with -c.")
@click.option("-b", "--show-b", is_flag=True,
              help="Print files unique to directory B. These will be deleted if invoked with -d.")
@click.option("-m", "--show-mutual", is_flag=True,
              help="Print files that are in both directories.")
@click.option("-i", "--show-issues", is_flag=True,
              help="Print file conflicts that must be manually resolved.")
@click.option("-c", "--copy", "do_copy", is_flag=True,
              help="Copy directory A's unique files to directory B.")
@click.option("-d", "--delete", "do_delete", is_flag=True,
              help="Delete directory B's unique files.")
@click.option("-s", "--safe", is_flag=True,
              help="Run in Safe Mode: no files are created, modified, or removed.")
@click.option("--include-hidden", is_flag=True, default=False,
              help="Compare names starting with '.' too (skipped by default).")
@click.option("--exclude", multiple=True,
              help="Exclude paths matching pattern (gitignore syntax, repeatable).")
@click.option("--exclude-from", "exclude_from", type=click.Path(exists=True, dir_okay=False),
              help="Read exclude patterns from file.")
@click.option("--ignore-errors", is_flag=True, default=False,
              help="Record failed copies/removals and continue instead of aborting.")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output on stderr.")
@click.pass_context
def main(ctx, dir_a, dir_b, outline, show_a, show_b, show_mutual, show_issues,
         do_copy, do_delete, safe, include_hidden, exclude, exclude_from,
         ignore_errors, verbose):
    """Compare directory A (the original) with directory B (the backup).

    Reports what must happen for B to mirror A: files unique to A are
    copied into B (-c), files unique to B are deleted (-d), and files
    whose size or kind differ are reported as conflicts (-i) and never
    touched.  Files are considered equal when their sizes match.

    \b
    Examples:
      treemirror photos/ /mnt/backup/photos/          # outline
      treemirror -abi photos/ /mnt/backup/photos/     # detailed listings
      treemirror -cd --safe photos/ /mnt/backup/photos/
      treemirror -cd photos/ /mnt/backup/photos/

    With no action flags the outline is printed.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    _require_directory(dir_a)
    _require_directory(dir_b)

    options = MirrorOptions(
        safe_mode=safe,
        ignore_hidden=not include_hidden,
        exclude=_build_exclude(exclude, exclude_from),
        ignore_errors=ignore_errors,
    )
    if not (outline or show_a or show_b or show_mutual or show_issues
            or do_copy or do_delete):
        outline = True
    if safe:
        _status(ctx, "Safe mode: no files will be created, modified, or removed.")

    failed = False
    try:
        comparer = DirectoryComparer(dir_a, dir_b, options)
        _status(ctx, f"Comparing {dir_a} against {dir_b}")
        comparer.compare()
        _status(ctx, f"Compared {comparer.levels} directory level(s)")

        if outline:
            print_outline(comparer)
        if show_a:
            print_group(comparer, Group.UNIQUE_A)
        if show_b:
            print_group(comparer, Group.UNIQUE_B)
        if show_mutual:
            print_group(comparer, Group.SHARED)
        if show_issues:
            print_issues(comparer)

        if do_copy:
            report = copy_unique(comparer, progress=click.echo, warn=_echo_err)
            _report_actions(ctx, report)
            failed = failed or bool(report.errors)
        if do_delete:
            report = delete_unique(comparer, progress=click.echo, warn=_echo_err)
            _report_actions(ctx, report)
            failed = failed or bool(report.errors)
    except OSError as exc:
        raise click.ClickException(
            f"An unexpected error occurred ({exc}). "
            "Were any files in either directory modified during execution?"
        )
    if failed:
        ctx.exit(1)
