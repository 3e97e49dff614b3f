"""Shared helpers for the CLI: status output, option building, reports."""

from __future__ import annotations

import os

import click

from .._exclude import ExcludeFilter
from ..copy import ChangeReport


def _status(ctx, msg):
    """Emit a status message to stderr when verbose mode (-v) is on."""
    if ctx.obj.get("verbose"):
        click.echo(msg, err=True)


def _echo_err(msg: str) -> None:
    click.echo(msg, err=True)


def _require_directory(path: str) -> str:
    """Return *path* if it is a directory, else fail before any comparison."""
    if not os.path.isdir(path):
        raise click.ClickException(f"{path} is not a reachable directory!")
    return path


def _build_exclude(patterns, exclude_from) -> ExcludeFilter | None:
    """Build an :class:`ExcludeFilter` from --exclude/--exclude-from, or None."""
    if not patterns and not exclude_from:
        return None
    try:
        excl = ExcludeFilter(patterns=patterns, exclude_from=exclude_from)
    except OSError as exc:
        raise click.ClickException(f"Cannot read exclude file: {exc}")
    return excl if excl.active else None


def _report_actions(ctx, report: ChangeReport) -> None:
    """List a batch's actions on stderr in verbose mode (``+``/``-`` prefixed)."""
    prefix = {"add": "+", "delete": "-"}
    for action in report.actions():
        _status(ctx, f"{prefix[action.action]} {action.path}")
    for e in report.errors:
        _status(ctx, f"ERROR: {e.path}: {e.error}")
