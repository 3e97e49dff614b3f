"""Tests for lazily annotated directory totals."""

import pytest

import treemirror.diff._annotate as annotate_mod
from treemirror import DirectoryComparer, DirTotals, Group
from treemirror.diff import AnnotationCache, DirBucket, FileBucket

from conftest import build_tree


@pytest.fixture
def walk_counter(monkeypatch):
    """Count calls to the recursive subtree walk."""
    calls = []
    real = annotate_mod.tree_totals

    def counting(path, **kwargs):
        calls.append(str(path))
        return real(path, **kwargs)

    monkeypatch.setattr(annotate_mod, "tree_totals", counting)
    return calls


class TestAnnotationCache:
    def test_starts_invalid(self):
        cache = AnnotationCache()
        assert cache.valid is False
        with pytest.raises(LookupError):
            cache.value

    def test_computes_once(self):
        cache = AnnotationCache()
        calls = []

        def compute():
            calls.append(1)
            return DirTotals(2, 20)

        assert cache.ensure_computed(compute) == DirTotals(2, 20)
        assert cache.ensure_computed(compute) == DirTotals(2, 20)
        assert len(calls) == 1

    def test_invalidate_forces_recompute(self):
        cache = AnnotationCache()
        cache.ensure_computed(lambda: DirTotals(1, 1))
        cache.invalidate()
        assert cache.valid is False
        assert cache.ensure_computed(lambda: DirTotals(3, 3)) == DirTotals(3, 3)


class TestBuckets:
    def test_file_bucket_accumulates(self):
        fb = FileBucket()
        fb.add("a", 3)
        fb.add("b", 4)
        assert fb.files == 2
        assert fb.bytes == 7
        assert list(fb.items()) == [("a", 3), ("b", 4)]
        fb.clear()
        assert fb.bytes == 0 and len(fb) == 0

    def test_dir_bucket_mutation_invalidates(self, tmp_path):
        build_tree(tmp_path, {"one": {"f": "123"}, "two": {"g": "45"}})
        db = DirBucket()
        db.add("one")
        ground = lambda p: str(tmp_path / p)
        assert db.annotate(ground) == DirTotals(1, 3)
        assert db.annotated
        db.add("two")
        assert not db.annotated
        assert db.annotate(ground) == DirTotals(2, 5)


class TestComparerAnnotation:
    def test_idempotent(self, backup_pair, walk_counter):
        c = DirectoryComparer(*backup_pair)
        first = c.annotate(Group.UNIQUE_A)
        n = len(walk_counter)
        assert n == 1  # one directory unique to A
        second = c.annotate(Group.UNIQUE_A)
        assert second == first
        assert len(walk_counter) == n

    def test_totals(self, backup_pair):
        c = DirectoryComparer(*backup_pair)
        assert c.annotate(Group.UNIQUE_A) == DirTotals(2, 12)
        assert c.annotate(Group.UNIQUE_B) == DirTotals(1, 4)
        group = c.diff.unique_a
        assert group.files == 4
        assert group.bytes == len("alpha") + len("from a") + 12

    def test_totals_unavailable_before_annotation(self, backup_pair):
        c = DirectoryComparer(*backup_pair)
        with pytest.raises(LookupError):
            c.diff.unique_a.files

    def test_state_flags(self, backup_pair):
        c = DirectoryComparer(*backup_pair)
        assert c.annotation_state() == set()
        c.annotate(Group.UNIQUE_B)
        assert c.annotation_state() == {Group.UNIQUE_B}
        c.annotate_all()
        assert c.annotation_state() == set(Group)

    def test_consume_invalidates(self, backup_pair):
        c = DirectoryComparer(*backup_pair)
        c.annotate(Group.UNIQUE_A)
        c.consume(Group.UNIQUE_A)
        assert Group.UNIQUE_A not in c.annotation_state()
        assert c.annotate(Group.UNIQUE_A) == DirTotals(0, 0)

    def test_new_comparison_resets_state(self, backup_pair):
        c = DirectoryComparer(*backup_pair)
        c.annotate_all()
        c.compare()
        assert c.annotation_state() == set()

    def test_shared_counts_only_shared_files(self, backup_pair, walk_counter):
        c = DirectoryComparer(*backup_pair)
        # shared/onlyInA.txt is unique to A and not counted
        assert c.annotate(Group.SHARED) == DirTotals(1, 4)
        assert walk_counter == []
        # c.txt at the root plus shared/same.txt
        assert c.diff.shared.files == 2
        assert c.diff.shared.bytes == 9

    def test_nested_shared_dirs_counted_once(self, tmp_path, walk_counter):
        a = build_tree(tmp_path / "A", {
            "x": {"y": {"f.txt": "fffff"}},
            "s": {"only_a.txt": "0123456789"},
        })
        b = build_tree(tmp_path / "B", {
            "x": {"y": {"f.txt": "fffff"}},
            "s": {},
        })
        c = DirectoryComparer(a, b)
        assert sorted(c.diff.shared.d) == ["s", "x", "x/y"]
        assert c.diff.shared.f.paths == ["x/y/f.txt"]
        assert c.annotate(Group.SHARED) == DirTotals(1, 5)
        assert c.diff.shared.files == 1
        assert walk_counter == []
        assert c.annotate(Group.UNIQUE_A) == DirTotals(0, 0)
        assert c.diff.unique_a.f.paths == ["s/only_a.txt"]

    def test_shared_conflicts_not_counted(self, tmp_path):
        a = build_tree(tmp_path / "A", {"x": {"big.txt": "aaaa", "same.txt": "s"}})
        b = build_tree(tmp_path / "B", {"x": {"big.txt": "bbbbbbbb", "same.txt": "s"}})
        c = DirectoryComparer(a, b)
        assert c.annotate(Group.SHARED) == DirTotals(1, 1)
        assert c.diff.conflicts.size == ["x/big.txt"]


class TestTotalsBelow:
    def test_counts_each_file_once(self):
        files = [("x/y/f", 5), ("x/g", 2), ("top", 100), ("xy/h", 7)]
        assert annotate_mod.totals_below(files, ["x", "x/y"]) == DirTotals(2, 7)

    def test_no_dirs(self):
        assert annotate_mod.totals_below([("a/b", 1)], []) == DirTotals(0, 0)
