"""Tree representation of the flat set of file paths making up a source tree.

This module provides the SourceTree class, which turns a set of relative file paths
into a tree of files and the directories implied by them. The tree can be built from
an in-memory path set or by scanning a directory on disk, optionally skipping paths
matched by exclusion rules.
"""

import os
from pathlib import Path, PurePosixPath
from typing import Dict, FrozenSet, Iterable, Iterator, Optional, Set

from anytree import PreOrderIter

from pathexcludes.exclusion_rules.base_rules import BaseExclusionRules
from pathexcludes.source_tree.path_node import PathNode
from pathexcludes.types import PathType


# Version control metadata is never part of a source tree listing.
VCS_DIRECTORY_NAMES = frozenset({".git", ".hg", ".svn"})


def normalize_path(path: PathType) -> str:
    """Convert a path-like object into a relative POSIX path string.

    Redundant separators and "." segments are removed; ".." segments and leading
    slashes are kept as given.

    Example:
        >>> normalize_path("./src//main/Main.kt")
        'src/main/Main.kt'
        >>> normalize_path(PurePosixPath("docs") / "index.md")
        'docs/index.md'
    """
    return PurePosixPath(os.fspath(path)).as_posix()


class SourceTree:
    """A tree of files and the directories implied by their paths.

    The tree is built lazily on first access. Every ancestor directory of every file
    is represented by exactly one node, no matter how many files it contains, so
    iterating the directory nodes yields each distinct directory once. The root of the
    tree stands for the root of the source tree itself and is not a directory of the
    listing.

    Attributes:
        file_paths (FrozenSet[str]): The normalized relative file paths.

    Example:
        >>> tree = SourceTree(["src/Main.kt", "test/FooTest.kt", "test/unit/BarTest.kt", "README.md"])
        >>> sorted(tree.get_directories())
        ['src', 'test', 'test/unit']
        >>> len(tree.file_paths)
        4
    """

    def __init__(self, file_paths: Iterable[PathType]) -> None:
        """Initialize a SourceTree.

        Args:
            file_paths: Paths of files relative to the root of the source tree. Can be
                strings or any path-like objects.
        """
        self.file_paths: FrozenSet[str] = frozenset(normalize_path(path) for path in file_paths)
        self._tree: Optional[PathNode] = None

    @classmethod
    def from_directory(
        cls, root_path: PathType, exclusion_rules: Optional[BaseExclusionRules] = None
    ) -> "SourceTree":
        """Create a SourceTree from the files found beneath a directory on disk.

        Version control metadata directories are always skipped. Directories matched by
        the exclusion rules are not descended into and matched files are left out.

        Args:
            root_path: The directory to scan. Paths in the tree are relative to it.
            exclusion_rules: Rules for leaving files and directories out. Defaults to None.

        Returns:
            A SourceTree of all remaining files.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
        """
        root = Path(root_path)
        if not root.exists():
            raise FileNotFoundError(f"Root path does not exist: {root}")
        if not root.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {root}")

        return cls(_scan_directory(root, exclusion_rules))

    def get_tree(self) -> PathNode:
        """Get the root node of the tree, building the tree on first access."""
        if self._tree is None:
            self._tree = self._build_tree()
        return self._tree

    def _build_tree(self) -> PathNode:
        root = PathNode("", rel_path="", is_dir=True)
        directories: Dict[str, PathNode] = {"": root}

        for file_path in sorted(self.file_paths):
            pure_path = PurePosixPath(file_path)
            parent = root

            for directory in reversed(pure_path.parents):
                dir_path = directory.as_posix()
                if dir_path == ".":
                    continue

                node = directories.get(dir_path)
                if node is None:
                    node = PathNode(directory.name or dir_path, rel_path=dir_path, parent=parent, is_dir=True)
                    directories[dir_path] = node
                parent = node

            PathNode(pure_path.name, rel_path=file_path, parent=parent)

        return root

    def iter_directories(self) -> Iterator[PathNode]:
        """Yield every distinct directory node in pre-order, excluding the root."""
        root = self.get_tree()
        return PreOrderIter(root, filter_=lambda node: node.is_dir and node is not root)

    def get_directories(self) -> Set[str]:
        """Return the relative paths of all directories implied by the file paths."""
        return {node.rel_path for node in self.iter_directories()}


def _scan_directory(root: Path, exclusion_rules: Optional[BaseExclusionRules]) -> Iterator[str]:
    for dirpath, dirnames, filenames in os.walk(root):
        relative_dir = Path(dirpath).relative_to(root).as_posix()
        prefix = "" if relative_dir == "." else relative_dir + "/"

        # Prune in place so os.walk doesn't descend into skipped directories
        kept_dirnames = []
        for dirname in sorted(dirnames):
            if dirname in VCS_DIRECTORY_NAMES:
                continue
            if exclusion_rules and exclusion_rules.exclude(f"{prefix}{dirname}/"):
                continue
            kept_dirnames.append(dirname)
        dirnames[:] = kept_dirnames

        for filename in sorted(filenames):
            relative_path = f"{prefix}{filename}"
            if exclusion_rules and exclusion_rules.exclude(relative_path):
                continue
            yield relative_path
