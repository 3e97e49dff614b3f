"""Recursive tree comparison driven one directory level at a time."""

from __future__ import annotations

import os

from ..listing import DirTotals, list_dir
from ..options import MirrorOptions
from ..paths import ground, normalize_rel
from ._annotate import totals_below
from ._compare import compare_level
from ._types import Group, TreeDiff

SIDE_A = 0
SIDE_B = 1

_GROUND_SIDE = {
    Group.UNIQUE_A: SIDE_A,
    Group.UNIQUE_B: SIDE_B,
}


class DirectoryComparer:
    """Compare directory *dir_a* against *dir_b*.

    The comparison runs lazily on first access to :attr:`diff` and can be
    rebuilt from scratch with :meth:`compare`.  Starting at the roots,
    every directory classified as shared is queued and compared in turn,
    so the resulting :class:`TreeDiff` covers the whole tree with every
    entry keyed by its full relative path.

    Directory totals are not part of the comparison; call
    :meth:`annotate` for the group(s) whose totals you need.

    Raises :class:`NotADirectoryError` if either root is not a directory.
    """

    def __init__(
        self,
        dir_a: str | os.PathLike[str],
        dir_b: str | os.PathLike[str],
        options: MirrorOptions | None = None,
    ) -> None:
        roots = (os.fspath(dir_a), os.fspath(dir_b))
        for root in roots:
            if not os.path.isdir(root):
                raise NotADirectoryError(f"{root} is not a reachable directory")
        self._roots = roots
        self.options = options if options is not None else MirrorOptions()
        self._diff: TreeDiff | None = None
        self.levels = 0

    def __repr__(self) -> str:
        return f"DirectoryComparer({self._roots[0]!r}, {self._roots[1]!r})"

    @property
    def root_a(self) -> str:
        return self._roots[SIDE_A]

    @property
    def root_b(self) -> str:
        return self._roots[SIDE_B]

    def ground(self, rel: str, side: int) -> str:
        """Absolute path of relative path *rel* under root *side* (0 = A, 1 = B)."""
        return ground(self._roots[side], normalize_rel(rel))

    def list_level(self, extension: str, side: int) -> list[str]:
        return list_dir(
            self.ground(extension, side),
            ignore_hidden=self.options.ignore_hidden,
            exclude=self.options.exclude,
            rel_dir=extension,
        )

    # ------------------------------------------------------------------
    def compare(self) -> TreeDiff:
        """Rebuild the full recursive diff from the current filesystem state."""
        result = TreeDiff()
        pending = [""]
        levels = 0
        while pending:
            extension = pending.pop()
            level = compare_level(
                self.list_level(extension, SIDE_A),
                self.list_level(extension, SIDE_B),
                self.root_a,
                self.root_b,
                extension,
            )
            # Popped in listing order.
            pending.extend(reversed(level.shared.d.paths))
            result.fold(level)
            levels += 1
        self._diff = result
        self.levels = levels
        return result

    @property
    def diff(self) -> TreeDiff:
        """The current diff, comparing first if no comparison has run."""
        if self._diff is None:
            return self.compare()
        return self._diff

    @property
    def compared(self) -> bool:
        return self._diff is not None

    # ------------------------------------------------------------------
    def annotate(self, which: Group) -> DirTotals:
        """Return recursive totals for *which* group's directories.

        Unique directories are walked on their own side, at most once per
        group until that group's contents change.  Shared directories are
        not walked: every entry below them was classified during descent,
        so their totals are the shared files they contain.
        """
        group = self.diff.group(which)
        if which is Group.SHARED:
            return group.d.annotate_with(
                lambda: totals_below(group.f.items(), group.d),
            )
        side = _GROUND_SIDE[which]
        return group.d.annotate(
            lambda rel: self.ground(rel, side),
            exclude=self.options.exclude,
        )

    def annotate_all(self) -> None:
        for which in Group:
            self.annotate(which)

    def annotation_state(self) -> set[Group]:
        """Groups whose directory totals are currently valid."""
        if self._diff is None:
            return set()
        return {g for g in Group if self._diff.group(g).d.annotated}

    def consume(self, which: Group) -> None:
        """Drain *which* group after its contents were acted on."""
        self.diff.group(which).clear()
