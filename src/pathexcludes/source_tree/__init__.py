"""Source tree representation built from a flat set of relative file paths.

This module provides classes for turning the file listing of a source tree into a
tree of files and directories, either from memory or by scanning a directory.
"""

from .path_node import PathNode
from .source_tree import SourceTree, normalize_path

__all__ = ["PathNode", "SourceTree", "normalize_path"]
