"""Exclude-filter support for listings and subtree walks.

Combines ``--exclude`` patterns and ``--exclude-from`` files into a
single predicate consulted by :func:`~treemirror.listing.scan_dir`.
Paths are checked relative to the comparison roots, so a pattern means
the same thing on side A and side B.

Pattern syntax follows gitignore rules (implemented by
``dulwich.ignore.IgnoreFilter``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from dulwich.ignore import IgnoreFilter


class ExcludeFilter:
    """Combines --exclude patterns and --exclude-from files."""

    def __init__(
        self,
        *,
        patterns: Sequence[str] | None = None,
        exclude_from: str | None = None,
    ) -> None:
        lines: list[bytes] = []
        for p in patterns or ():
            lines.append(p.encode("utf-8"))
        if exclude_from is not None:
            for raw in Path(exclude_from).read_bytes().splitlines():
                line = raw.strip()
                if line and not line.startswith(b"#"):
                    lines.append(line)
        self._patterns = lines
        self._filter: IgnoreFilter | None = IgnoreFilter(lines) if lines else None

    @property
    def active(self) -> bool:
        """True if any pattern is configured."""
        return self._filter is not None

    def __repr__(self) -> str:
        pats = [p.decode("utf-8", "replace") for p in self._patterns]
        return f"ExcludeFilter(patterns={pats!r})"

    def is_excluded(self, rel_path: str, *, is_dir: bool = False) -> bool:
        """Return True if *rel_path* matches the configured patterns.

        Directory patterns (``build/``) only match when *is_dir* is set.
        Negations (``!keep.log``) are honored by dulwich.
        """
        if self._filter is None or not rel_path:
            return False
        check = rel_path + "/" if is_dir else rel_path
        return self._filter.is_ignored(check) is True
