"""JSON output strategy for path excludes.

This module provides a strategy rendering path excludes as a JSON array of objects.
"""

import json

from pathexcludes.exclusion_rules.path_exclude import PathExclude

from .base_strategy import OutputStrategy


class JSONOutputStrategy(OutputStrategy):
    """Output strategy that formats path excludes as a JSON array.

    Each path exclude is formatted as an object with the following structure:
    {"pattern": "test/**", "reason": "TEST_OF"}

    The array is written with one object per line so that the output stays readable
    and diffs well when it is stored next to the source tree.

    Attributes:
        encoder: JSON encoder instance used for consistent escaping.

    Example:
        >>> from pathexcludes.types import ExcludeReason
        >>> strategy = JSONOutputStrategy()
        >>> excludes = [
        ...     PathExclude("build/**", ExcludeReason.BUILD_TOOL_OF),
        ...     PathExclude("docs/**", ExcludeReason.DOCUMENTATION_OF),
        ... ]
        >>> print(strategy.format_excludes(excludes), end="")
        [
          {"pattern": "build/**", "reason": "BUILD_TOOL_OF"},
          {"pattern": "docs/**", "reason": "DOCUMENTATION_OF"}
        ]
        >>> strategy.format_excludes([])
        '[]\\n'
    """

    def __init__(self) -> None:
        self.encoder = json.JSONEncoder()

    def format_header(self) -> str:
        return "["

    def format_exclude(self, exclude: PathExclude, index: int) -> str:
        separator = "\n" if index == 0 else ",\n"
        return f"{separator}  {self.encoder.encode(exclude.to_dict())}"

    def format_footer(self, count: int) -> str:
        return "\n]\n" if count else "]\n"
