"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from pathexcludes.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore pattern syntax.

    These rules decide which files are left out of the path set when a source tree is
    scanned from disk, before any path excludes are generated. Matching is done by the
    pathspec library in the same way Git does it, so all standard .gitignore syntax is
    supported: globs, directory patterns ending in "/", negations starting with "!",
    "**" and comments.

    Rules from several files and individually added patterns are combined in the order
    they are added, with later rules potentially overriding earlier ones.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.log")
        >>> rules.exclude("logs/app.log")
        True
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("keep.log")
        False
        >>> rules.has_rules()
        True

    Note:
        The paths provided to exclude() should use forward slashes (/) as path separators,
        even on Windows systems, to match Git's behavior.
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreExclusionRules with patterns from specified files.

        Args:
            rules_files: Path(s) to the file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.spec = PathSpec.from_lines(GitWildMatchPattern, [])

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check if a path is excluded by the loaded patterns.

        The path is matched exactly as provided; no normalization is performed.
        """
        return self.spec.match_file(path)

    def has_rules(self) -> bool:
        """Return True if at least one pattern has been loaded."""
        return len(self.spec.patterns) > 0

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                gitignore_content = f.read().splitlines()

            new_patterns = PathSpec.from_lines(GitWildMatchPattern, gitignore_content).patterns
            self.spec = PathSpec([*self.spec.patterns, *new_patterns])

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern, e.g. "*.pyc", "vendor/" or "!keep.txt"."""
        self.spec = PathSpec([*self.spec.patterns, GitWildMatchPattern(rule)])
