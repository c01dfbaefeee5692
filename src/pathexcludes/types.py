from enum import Enum
from os import PathLike
from typing import Union

from pathexcludes.exceptions import UnknownExcludeReasonError

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class ExcludeReason(Enum):
    """Enumeration of the reasons a directory is excluded from review.

    The names read as "this path is the build tool / documentation / tests OF the
    surrounding project", i.e. the excluded directory is infrastructure for the
    reviewable code rather than part of it. Each member's value is its serialized
    form.

    Attributes:
        BUILD_TOOL_OF: Build system files and tooling
        DOCUMENTATION_OF: Documentation sources
        TEST_OF: Tests and benchmarks

    Example:
        >>> ExcludeReason.TEST_OF.value
        'TEST_OF'
        >>> ExcludeReason.parse("DOCUMENTATION_OF")
        <ExcludeReason.DOCUMENTATION_OF: 'DOCUMENTATION_OF'>
    """

    BUILD_TOOL_OF = "BUILD_TOOL_OF"
    DOCUMENTATION_OF = "DOCUMENTATION_OF"
    TEST_OF = "TEST_OF"

    @classmethod
    def parse(cls, name: str) -> "ExcludeReason":
        """Convert a serialized reason name back into an ExcludeReason.

        Args:
            name: One of "BUILD_TOOL_OF", "DOCUMENTATION_OF" or "TEST_OF".

        Returns:
            The matching enum member.

        Raises:
            UnknownExcludeReasonError: If the name is not a known reason.
        """
        try:
            return cls(name)
        except ValueError:
            raise UnknownExcludeReasonError(name) from None
