"""Compute which files each candidate path exclude would exclude."""

from typing import AbstractSet, Dict, FrozenSet, Iterable

from pathexcludes.exclusion_rules.path_exclude import PathExclude


def compute_coverage(
    excludes: Iterable[PathExclude], file_paths: AbstractSet[str]
) -> Dict[PathExclude, FrozenSet[str]]:
    """Map every path exclude to the subset of files it matches.

    A file can be covered by no exclude, by one, or by several, e.g. when nested
    directories both have well-known names.

    Args:
        excludes: The path excludes to evaluate.
        file_paths: Normalized relative file paths of the source tree.

    Returns:
        A mapping from each exclude to the files it matches.

    Example:
        >>> from pathexcludes.types import ExcludeReason
        >>> test_exclude = PathExclude("test/**", ExcludeReason.TEST_OF)
        >>> coverage = compute_coverage([test_exclude], {"test/FooTest.kt", "src/Main.kt"})
        >>> sorted(coverage[test_exclude])
        ['test/FooTest.kt']
    """
    return {exclude: frozenset(path for path in file_paths if exclude.matches(path)) for exclude in excludes}
