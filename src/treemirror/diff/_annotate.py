"""Lazily computed recursive totals for directory buckets."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable

from ..listing import EMPTY_TOTALS, DirTotals, tree_totals

if TYPE_CHECKING:
    from .._exclude import ExcludeFilter


def sum_tree_totals(
    locations: Iterable[tuple[str, str]],
    *,
    exclude: ExcludeFilter | None = None,
) -> DirTotals:
    """Sum :func:`~treemirror.listing.tree_totals` over ``(abs_path, rel_path)`` pairs."""
    total = EMPTY_TOTALS
    for abs_path, rel_path in locations:
        total = total + tree_totals(abs_path, exclude=exclude, rel_dir=rel_path)
    return total


def totals_below(files: Iterable[tuple[str, int]], dirs: Iterable[str]) -> DirTotals:
    """Total the ``(path, size)`` *files* lying anywhere below one of *dirs*.

    Each file counts once, however many of its ancestors are in *dirs*.
    Nothing is read from the filesystem.
    """
    roots = set(dirs)
    if not roots:
        return EMPTY_TOTALS
    count = nbytes = 0
    for path, size in files:
        parts = path.split("/")[:-1]
        if any("/".join(parts[:i]) in roots for i in range(1, len(parts) + 1)):
            count += 1
            nbytes += size
    return DirTotals(count, nbytes)


class AnnotationCache:
    """A cached :class:`DirTotals` value with explicit invalidation.

    The value is absent until :meth:`ensure_computed` runs the walk; it
    stays cached until :meth:`invalidate` is called, which the owning
    bucket does whenever its contents change.
    """

    __slots__ = ("_value",)

    def __init__(self) -> None:
        self._value: DirTotals | None = None

    @property
    def valid(self) -> bool:
        """True if a computed value is cached."""
        return self._value is not None

    @property
    def value(self) -> DirTotals:
        """The cached totals; raises ``LookupError`` if not annotated."""
        if self._value is None:
            raise LookupError("directory totals have not been annotated")
        return self._value

    def ensure_computed(self, compute: Callable[[], DirTotals]) -> DirTotals:
        """Return the cached totals, running *compute* only if none are cached."""
        if self._value is None:
            self._value = compute()
        return self._value

    def invalidate(self) -> None:
        self._value = None
