"""treemirror CLI: compare two directory trees and mirror A into B."""

from ._main import main  # noqa: F401
