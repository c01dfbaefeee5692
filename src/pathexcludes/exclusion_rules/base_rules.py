from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for path exclusion rules.

    This class serves as a contract for the different kinds of rules used in this
    package: gitignore-style rules that keep files out of the scanned path set, single
    generated path excludes, and composites of those. All implementations answer
    whether a given relative path is excluded.

    Example:
        >>> class SuffixExclusionRules(BaseExclusionRules):
        ...     def __init__(self, suffix: str):
        ...         self.suffix = suffix
        ...     def exclude(self, path: str) -> bool:
        ...         return path.endswith(self.suffix)
        >>> rules = SuffixExclusionRules(".tmp")
        >>> rules.exclude("build/cache.tmp")
        True
        >>> rules.exclude("src/main.py")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): The path to check, relative to the root of the source tree and
                using forward slashes as separators.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Rule types that are fixed at construction time use this default implementation.

        Args:
            rule (str): The exclusion rule to add, e.g. a gitignore pattern like "*.pyc".

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
