"""Buckets and result types for tree comparisons."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Iterator

from ..listing import DirTotals
from ._annotate import AnnotationCache, sum_tree_totals

if TYPE_CHECKING:
    from .._exclude import ExcludeFilter


class Group(str, Enum):
    """One of the three diff groups: ``UNIQUE_A``, ``UNIQUE_B``, ``SHARED``."""
    UNIQUE_A = "unique_a"
    UNIQUE_B = "unique_b"
    SHARED = "shared"

    def __str__(self) -> str:          # noqa: D105
        return self.value


class FileBucket:
    """Relative paths of regular files plus their cumulative byte total.

    The total is accumulated on insertion from the size observed at
    collection time; it is never recomputed from the paths.
    """

    __slots__ = ("_paths", "_sizes", "_bytes")

    def __init__(self) -> None:
        self._paths: list[str] = []
        self._sizes: list[int] = []
        self._bytes = 0

    def add(self, path: str, size: int) -> None:
        self._paths.append(path)
        self._sizes.append(size)
        self._bytes += size

    def extend(self, other: FileBucket) -> None:
        """Append every entry of *other*, keeping its order."""
        for path, size in other.items():
            self.add(path, size)

    def clear(self) -> None:
        self._paths.clear()
        self._sizes.clear()
        self._bytes = 0

    def items(self) -> Iterator[tuple[str, int]]:
        """Yield ``(path, size)`` pairs in insertion order."""
        return zip(self._paths, self._sizes)

    @property
    def paths(self) -> list[str]:
        return list(self._paths)

    @property
    def files(self) -> int:
        return len(self._paths)

    @property
    def bytes(self) -> int:
        return self._bytes

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __repr__(self) -> str:
        return f"FileBucket({self._paths!r}, bytes={self._bytes})"


class DirBucket:
    """Relative paths of directories plus lazily annotated recursive totals.

    Reading :attr:`totals` never triggers a walk; :meth:`annotate` does,
    once, until the bucket is mutated.
    """

    __slots__ = ("_paths", "_cache")

    def __init__(self) -> None:
        self._paths: list[str] = []
        self._cache = AnnotationCache()

    def add(self, path: str) -> None:
        self._paths.append(path)
        self._cache.invalidate()

    def extend(self, other: DirBucket) -> None:
        self._paths.extend(other._paths)
        self._cache.invalidate()

    def clear(self) -> None:
        self._paths.clear()
        self._cache.invalidate()

    def invalidate(self) -> None:
        self._cache.invalidate()

    @property
    def annotated(self) -> bool:
        return self._cache.valid

    def annotate(
        self,
        ground: Callable[[str], str],
        *,
        exclude: ExcludeFilter | None = None,
    ) -> DirTotals:
        """Walk every directory (grounded with *ground*) unless already annotated."""
        return self.annotate_with(
            lambda: sum_tree_totals(
                ((ground(p), p) for p in self._paths), exclude=exclude,
            )
        )

    def annotate_with(self, compute: Callable[[], DirTotals]) -> DirTotals:
        """Cache the result of *compute* as the totals unless already annotated."""
        return self._cache.ensure_computed(compute)

    @property
    def totals(self) -> DirTotals:
        """Annotated totals; raises ``LookupError`` before :meth:`annotate`."""
        return self._cache.value

    @property
    def paths(self) -> list[str]:
        return list(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __repr__(self) -> str:
        return f"DirBucket({self._paths!r})"


@dataclass
class DiffGroup:
    """A :class:`FileBucket` and :class:`DirBucket` for one diff group.

    :attr:`files` and :attr:`bytes` include the directory totals, so
    the group's directories must be annotated first.  A *descended*
    group (the shared group) has had its directories compared entry by
    entry: their files already sit in ``f``, so only ``f`` is counted.
    """
    f: FileBucket = field(default_factory=FileBucket)
    d: DirBucket = field(default_factory=DirBucket)
    descended: bool = False

    @property
    def files(self) -> int:
        if self.descended:
            return self.f.files
        return self.f.files + self.d.totals.files

    @property
    def bytes(self) -> int:
        if self.descended:
            return self.f.bytes
        return self.f.bytes + self.d.totals.bytes

    @property
    def empty(self) -> bool:
        return not self.f and not self.d

    def extend(self, other: DiffGroup) -> None:
        self.f.extend(other.f)
        self.d.extend(other.d)

    def clear(self) -> None:
        self.f.clear()
        self.d.clear()


@dataclass
class ConflictLists:
    """Same-named entries that cannot be classified as unique or shared.

    Attributes:
        size: Regular files on both sides with differing sizes.
        type: A regular file on one side and a directory on the other.
        unsupported: Names whose entry on either side is neither a
            regular file nor a directory.
    """
    size: list[str] = field(default_factory=list)
    type: list[str] = field(default_factory=list)
    unsupported: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.size) + len(self.type) + len(self.unsupported)

    def extend(self, other: ConflictLists) -> None:
        self.size.extend(other.size)
        self.type.extend(other.type)
        self.unsupported.extend(other.unsupported)


@dataclass
class TreeDiff:
    """The three diff groups and the conflict lists of a comparison.

    Produced per directory level by :func:`~treemirror.diff.compare_level`
    and folded together by :class:`~treemirror.diff.DirectoryComparer`.
    """
    unique_a: DiffGroup = field(default_factory=DiffGroup)
    unique_b: DiffGroup = field(default_factory=DiffGroup)
    shared: DiffGroup = field(default_factory=lambda: DiffGroup(descended=True))
    conflicts: ConflictLists = field(default_factory=ConflictLists)

    def group(self, which: Group) -> DiffGroup:
        return getattr(self, which.value)

    def fold(self, other: TreeDiff) -> None:
        """Accumulate *other* (typically one deeper level) into this diff."""
        self.unique_a.extend(other.unique_a)
        self.unique_b.extend(other.unique_b)
        self.shared.extend(other.shared)
        self.conflicts.extend(other.conflicts)

    def classified(self) -> list[str]:
        """Every classified relative path, in bucket order."""
        out: list[str] = []
        for g in (self.unique_a, self.unique_b, self.shared):
            out.extend(g.f)
            out.extend(g.d)
        out.extend(self.conflicts.size)
        out.extend(self.conflicts.type)
        out.extend(self.conflicts.unsupported)
        return out
