"""Run configuration threaded through the comparer and executors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._exclude import ExcludeFilter


DEFAULT_CHUNK_SIZE = 65536
DEFAULT_CHUNKS_PER_UPDATE = 256


@dataclass(frozen=True)
class MirrorOptions:
    """Options for one comparison / mirror run.

    Attributes:
        safe_mode: Dry-run gate.  When set, no directory is created, no
            file is written, and nothing is removed; every read-only step
            (listing, stat, reading source files, reporting) still runs.
        ignore_hidden: Skip names starting with ``.`` when listing a
            directory level.
        exclude: Optional :class:`~treemirror.ExcludeFilter` applied to
            listings and subtree walks.
        ignore_errors: Record mid-stream copy failures and failed removals
            as per-file errors instead of aborting the run.
        chunk_size: Streaming copy buffer size in bytes.
        chunks_per_update: Emit one progress line every this many chunks.
    """
    safe_mode: bool = False
    ignore_hidden: bool = True
    exclude: ExcludeFilter | None = None
    ignore_errors: bool = False
    chunk_size: int = DEFAULT_CHUNK_SIZE
    chunks_per_update: int = DEFAULT_CHUNKS_PER_UPDATE

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if self.chunks_per_update <= 0:
            raise ValueError("chunks_per_update must be positive")
