"""Relative path helpers.

Every bucket in a comparison is keyed by a *relative path*: a
forward-slash separated string relative to one of the two roots, with
``""`` naming the root itself.  Two relative paths are equal iff their
component sequences are equal, which holds for normalized strings.
"""

from __future__ import annotations

import os


def normalize_rel(path: str | os.PathLike[str]) -> str:
    """Normalize a relative path: forward slashes, no empty/dot segments.

    The root is returned as ``""``.
    """
    path = os.fspath(path)
    if os.name == "nt":
        path = path.replace("\\", "/")
    path = path.strip("/")
    if not path:
        return ""
    segments = path.split("/")
    for seg in segments:
        if not seg:
            raise ValueError(f"Empty segment in path: {path!r}")
        if seg in (".", ".."):
            raise ValueError(f"Invalid path segment: {seg!r}")
    return "/".join(segments)


def join_rel(extension: str, name: str) -> str:
    """Append *name* to the relative directory *extension*."""
    return f"{extension}/{name}" if extension else name


def split_rel(path: str) -> list[str]:
    """Return the components of a relative path (``[]`` for the root)."""
    return path.split("/") if path else []


def ground(root: str | os.PathLike[str], rel: str) -> str:
    """Return the absolute location of *rel* under *root*."""
    root = os.fspath(root)
    if not rel:
        return root
    return os.path.join(root, *split_rel(rel))
