"""Shared fixtures for treemirror tests."""

import os

import pytest
from click.testing import CliRunner


def build_tree(root, layout):
    """Create *layout* under *root*.

    *layout* maps names to ``str``/``bytes`` (file content) or ``dict``
    (a subdirectory, built recursively).
    """
    root.mkdir(parents=True, exist_ok=True)
    for name, value in layout.items():
        p = root / name
        if isinstance(value, dict):
            build_tree(p, value)
        elif isinstance(value, bytes):
            p.write_bytes(value)
        else:
            p.write_text(value)
    return root


def snapshot(root):
    """Return ``{rel_path: content-or-None}`` for everything under *root*."""
    out = {}
    for dirpath, dirnames, filenames in os.walk(root):
        for d in dirnames:
            full = os.path.join(dirpath, d)
            out[os.path.relpath(full, root).replace(os.sep, "/")] = None
        for f in filenames:
            full = os.path.join(dirpath, f)
            with open(full, "rb") as fh:
                out[os.path.relpath(full, root).replace(os.sep, "/")] = fh.read()
    return out


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def backup_pair(tmp_path):
    """A and B trees exercising every classification.

    A:                          B:
      a.txt      (5 B)            b.txt
      c.txt      (5 B)            c.txt      (5 B)
      y.txt      (5 B)            y.txt      (7 B)
      d/         (dir)            d          (file)
      only_a/x.bin, only_a/sub/z  only_b/q.txt
      shared/same.txt             shared/same.txt
      shared/onlyInA.txt          shared/onlyInB.txt
      .hidden                     .hidden2
    """
    a = build_tree(tmp_path / "A", {
        "a.txt": "alpha",
        "c.txt": "ccccc",
        "y.txt": "yyyyy",
        "d": {"inner.txt": "inner"},
        "only_a": {"x.bin": b"\x00" * 10, "sub": {"z.txt": "zz"}},
        "shared": {"same.txt": "same", "onlyInA.txt": "from a"},
        ".hidden": "h",
    })
    b = build_tree(tmp_path / "B", {
        "b.txt": "beta",
        "c.txt": "CCCCC",
        "y.txt": "yyyyyyy",
        "d": "now a file",
        "only_b": {"q.txt": "quux"},
        "shared": {"same.txt": "same", "onlyInB.txt": "from b"},
        ".hidden2": "h2",
    })
    return a, b
