"""Output strategy base class defining the interface for path exclude formatting.

This module provides the abstract base class that defines how a list of generated path
excludes is rendered for output.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from pathexcludes.exclusion_rules.path_exclude import PathExclude


class OutputStrategy(ABC):
    """Abstract base class defining the interface for path exclude output formatting.

    This class implements the Strategy pattern for rendering path excludes in different
    formats (e.g., JSON, plain text). The output is split into a header, one entry per
    path exclude, and a footer, so that formats with an enclosing structure can open and
    close it around the entries.

    Example:
        >>> from pathexcludes.types import ExcludeReason
        >>> class CsvStrategy(OutputStrategy):
        ...     def format_header(self) -> str:
        ...         return "pattern,reason\\n"
        ...
        ...     def format_exclude(self, exclude: PathExclude, index: int) -> str:
        ...         return f"{exclude.pattern},{exclude.reason.value}\\n"
        ...
        ...     def format_footer(self, count: int) -> str:
        ...         return ""
        ...
        >>> print(CsvStrategy().format_excludes([PathExclude("docs/**", ExcludeReason.DOCUMENTATION_OF)]), end="")
        pattern,reason
        docs/**,DOCUMENTATION_OF
    """

    @abstractmethod
    def format_header(self) -> str:
        """Format the opening part of the output, written before any entries."""
        pass

    @abstractmethod
    def format_exclude(self, exclude: PathExclude, index: int) -> str:
        """Format a single path exclude.

        Args:
            exclude: The path exclude to format.
            index: Zero-based position of the exclude in the output.

        Returns:
            The formatted entry.
        """
        pass

    @abstractmethod
    def format_footer(self, count: int) -> str:
        """Format the closing part of the output.

        Args:
            count: The number of path excludes that were formatted.
        """
        pass

    def format_excludes(self, excludes: Sequence[PathExclude]) -> str:
        """Render a complete list of path excludes."""
        parts = [self.format_header()]
        parts.extend(self.format_exclude(exclude, index) for index, exclude in enumerate(excludes))
        parts.append(self.format_footer(len(excludes)))
        return "".join(parts)
