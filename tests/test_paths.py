"""Tests for relative path helpers."""

import os

import pytest

from treemirror.paths import ground, join_rel, normalize_rel, split_rel


class TestRelativePaths:
    def test_join_root(self):
        assert join_rel("", "a") == "a"

    def test_join_nested(self):
        assert join_rel("a/b", "c") == "a/b/c"

    def test_split(self):
        assert split_rel("") == []
        assert split_rel("a/b/c") == ["a", "b", "c"]

    def test_normalize(self):
        assert normalize_rel("/a/b/") == "a/b"
        assert normalize_rel("") == ""

    @pytest.mark.parametrize("bad", ["a//b", "a/../b", "./a"])
    def test_normalize_rejects(self, bad):
        with pytest.raises(ValueError):
            normalize_rel(bad)

    def test_ground(self, tmp_path):
        assert ground(tmp_path, "") == str(tmp_path)
        assert ground(tmp_path, "a/b") == os.path.join(str(tmp_path), "a", "b")
