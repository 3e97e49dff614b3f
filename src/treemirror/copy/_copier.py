"""Streaming single-file copier with sampled progress reporting."""

from __future__ import annotations

import contextlib
import os
from dataclasses import dataclass
from typing import Callable, Optional

from ..options import MirrorOptions
from ..size import FIELD_WIDTH, format_size
from ._types import ChangeError

Echo = Callable[[str], None]


@dataclass
class CopyStatus:
    """Running counters for a copy batch.

    ``bytes`` is the overall number of bytes processed in the batch,
    ``file_bytes`` the bytes copied so far of the current file.
    """
    bytes: int = 0
    total_bytes: int = 0
    file_bytes: int = 0
    file_total: int = 0

    def prefix(self) -> str:
        """Progress column: ``processed/total | ``."""
        return (f"{format_size(self.bytes):>{FIELD_WIDTH}}/"
                f"{format_size(self.total_bytes):>{FIELD_WIDTH}} | ")


class FileCopier:
    """Copy files one at a time through a fixed-size buffer.

    Call :meth:`start_batch` once before the first :meth:`copy` of a
    batch.  Progress lines go to *progress*, warnings to *warn* (both
    optional ``str -> None`` callables).  With ``options.safe_mode`` the
    source is still read in full but nothing is written.
    """

    def __init__(
        self,
        options: MirrorOptions | None = None,
        *,
        progress: Optional[Echo] = None,
        warn: Optional[Echo] = None,
    ) -> None:
        self.options = options if options is not None else MirrorOptions()
        self._progress = progress
        self._warn = warn
        self.status = CopyStatus()
        self.errors: list[ChangeError] = []
        self.warnings: list[ChangeError] = []

    def echo(self, msg: str) -> None:
        if self._progress is not None:
            self._progress(msg)

    def warn(self, msg: str) -> None:
        if self._warn is not None:
            self._warn(msg)

    def start_batch(self, total_bytes: int) -> None:
        """Reset the running counters and the error lists for a new batch."""
        self.status = CopyStatus(total_bytes=total_bytes)
        self.errors = []
        self.warnings = []

    def copy(self, source: str, destination: str, display: str | None = None) -> bool:
        """Copy *source* to *destination*; return True if the file was copied.

        An existing *destination* (including a dangling symlink) is never
        opened: the file is recorded in :attr:`errors`, a warning is
        emitted, and its size still counts as processed.

        If reading or writing fails part way, the partial destination is
        removed.  The failure is then recorded when
        ``options.ignore_errors`` is set and re-raised otherwise.
        """
        display = display if display is not None else source
        size = os.path.getsize(source)
        status = self.status
        initial = status.bytes

        if os.path.lexists(destination):
            self.errors.append(ChangeError(
                path=display, error=f"destination already exists: {destination}",
            ))
            self.warnings.append(ChangeError(
                path=display, error="not copied: destination already exists",
            ))
            self.warn(f"{status.prefix()}Warning: Cannot copy {source} to "
                      f"{destination} because the latter already exists.")
            status.bytes = initial + size
            return False

        status.file_bytes = 0
        status.file_total = size
        self.echo(f"{status.prefix()}Copying {display} ({format_size(size)})")

        try:
            self._stream(source, destination, initial)
        except OSError as exc:
            status.bytes = initial + size
            if not self.options.ignore_errors:
                raise
            self.errors.append(ChangeError(path=display, error=str(exc)))
            self.warn(f"ERROR: {display}: {exc}")
            return False

        status.bytes = initial + size
        return True

    def _stream(self, source: str, destination: str, initial: int) -> None:
        chunk_size = self.options.chunk_size
        every = self.options.chunks_per_update
        status = self.status
        chunks = 0
        dst = None
        try:
            with open(source, "rb") as src:
                if not self.options.safe_mode:
                    dst = open(destination, "xb")
                while True:
                    buf = src.read(chunk_size)
                    if not buf:
                        break
                    if dst is not None:
                        dst.write(buf)
                    chunks += 1
                    status.file_bytes += len(buf)
                    if chunks % every == 0:
                        status.bytes = initial + status.file_bytes
                        self.echo(f"{status.prefix()}... "
                                  f"{format_size(status.file_bytes)}/"
                                  f"{format_size(status.file_total)}")
                if dst is not None:
                    dst.close()
        except OSError:
            # Only a destination this call created is removed.
            if dst is not None:
                with contextlib.suppress(OSError):
                    dst.close()
                with contextlib.suppress(OSError):
                    os.remove(destination)
            raise
