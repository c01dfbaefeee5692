"""Composite exclusion rules for combining multiple rule types."""

from typing import Iterable, List, Sequence, Set

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rules.

    A path is excluded if ANY of the constituent rules excludes it. This is how a set of
    generated path excludes is applied to a source tree as a whole, and it also allows
    mixing generated excludes with gitignore-style rules.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from pathexcludes.exclusion_rules.path_exclude import PathExclude
        >>> from pathexcludes.types import ExcludeReason
        >>> composite = CompositeExclusionRules(
        ...     [PathExclude("docs/**", ExcludeReason.DOCUMENTATION_OF), PathExclude("test/**", ExcludeReason.TEST_OF)]
        ... )
        >>> composite.exclude("test/FooTest.kt")
        True
        >>> composite.exclude("src/Main.kt")
        False
        >>> sorted(composite.excluded_paths(["docs/index.md", "src/Main.kt"]))
        ['docs/index.md']
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine.

        Raises:
            ValueError: If rules list is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, " f"got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        """Check if a path is excluded by any constituent rule.

        Uses short-circuit evaluation: stops checking as soon as any rule returns True.
        """
        return any(rule.exclude(path) for rule in self.rules)

    def excluded_paths(self, paths: Iterable[str]) -> Set[str]:
        """Return the subset of the given paths excluded by any constituent rule."""
        return {path for path in paths if self.exclude(path)}
