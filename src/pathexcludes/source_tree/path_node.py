"""Node representation for paths in a source tree."""

from typing import Any, Optional

from anytree import Node


class PathNode(Node):  # type: ignore
    """Node class representing a file or directory of a source tree.

    Extends anytree.Node with the full relative path of the element and a flag telling
    directories from files. Inherits tree traversal and manipulation capabilities from
    anytree.Node.

    Attributes:
        name (str): The basename of the file or directory.
        rel_path (str): The path relative to the root of the source tree, "" for the root.
        parent (Optional[PathNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory, False for files.

    Example:
        >>> root = PathNode("", rel_path="", is_dir=True)
        >>> test_dir = PathNode("test", rel_path="test", parent=root, is_dir=True)
        >>> test_file = PathNode("FooTest.kt", rel_path="test/FooTest.kt", parent=test_dir)
        >>> test_file.parent.rel_path
        'test'
        >>> test_file.is_dir
        False
    """

    def __init__(
        self,
        name: str,
        rel_path: str,
        parent: Optional["PathNode"] = None,
        is_dir: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.rel_path = rel_path
        self.is_dir = is_dir
