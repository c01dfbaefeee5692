"""Candidate path excludes derived from well-known directory names."""

from types import MappingProxyType
from typing import Iterable, Mapping, Set

from pathexcludes.exclusion_rules.path_exclude import PathExclude
from pathexcludes.source_tree.source_tree import SourceTree
from pathexcludes.types import ExcludeReason, PathType

# Directory basenames that conventionally hold non-production code, matched exactly.
DIR_NAME_REASONS: Mapping[str, ExcludeReason] = MappingProxyType(
    {
        "bench": ExcludeReason.TEST_OF,
        "benchmark": ExcludeReason.TEST_OF,
        "benchmarks": ExcludeReason.TEST_OF,
        "build": ExcludeReason.BUILD_TOOL_OF,
        "docs": ExcludeReason.DOCUMENTATION_OF,
        "m4": ExcludeReason.BUILD_TOOL_OF,
        "test": ExcludeReason.TEST_OF,
        "tests": ExcludeReason.TEST_OF,
        "tools": ExcludeReason.BUILD_TOOL_OF,
    }
)


def get_all_dirs(file_paths: Iterable[PathType]) -> Set[str]:
    """Return every ancestor directory of the given files, each exactly once.

    Example:
        >>> sorted(get_all_dirs(["a/b/c.txt", "a/d.txt", "e.txt"]))
        ['a', 'a/b']
    """
    return SourceTree(file_paths).get_directories()


def generate_candidates(file_paths: Iterable[PathType]) -> Set[PathExclude]:
    """Propose a path exclude for every directory whose name is in DIR_NAME_REASONS.

    Each ancestor directory of the given files is looked at once. If its basename is a
    key of DIR_NAME_REASONS (case-sensitive, exact match) an exclude for the directory
    and everything beneath it is proposed, tagged with the mapped reason.

    Args:
        file_paths: Paths of files relative to the root of the source tree.

    Returns:
        The set of candidate path excludes. Empty if no directory name matches.

    Example:
        >>> sorted(exclude.pattern for exclude in generate_candidates(["project/test/build/cache.tmp"]))
        ['project/test/**', 'project/test/build/**']
        >>> generate_candidates(["README.md"])
        set()
    """
    candidates: Set[PathExclude] = set()

    for directory in SourceTree(file_paths).iter_directories():
        reason = DIR_NAME_REASONS.get(directory.name)
        if reason is not None:
            candidates.add(PathExclude.for_directory(directory.rel_path, reason))

    return candidates
