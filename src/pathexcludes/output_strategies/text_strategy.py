"""Plain text output strategy for path excludes."""

from pathexcludes.exclusion_rules.path_exclude import PathExclude

from .base_strategy import OutputStrategy


class TextOutputStrategy(OutputStrategy):
    """Output strategy writing one "<pattern> -> <reason>" line per path exclude.

    Example:
        >>> from pathexcludes.types import ExcludeReason
        >>> strategy = TextOutputStrategy()
        >>> print(strategy.format_excludes([PathExclude("test/**", ExcludeReason.TEST_OF)]), end="")
        test/** -> TEST_OF
        >>> strategy.format_excludes([])
        ''
    """

    def format_header(self) -> str:
        return ""

    def format_exclude(self, exclude: PathExclude, index: int) -> str:
        return f"{exclude.pattern} -> {exclude.reason.value}\n"

    def format_footer(self, count: int) -> str:
        return ""
