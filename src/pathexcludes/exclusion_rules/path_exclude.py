"""Path exclude value object matching a directory and everything beneath it."""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from pathexcludes.exceptions import InvalidPatternError
from pathexcludes.types import ExcludeReason

from .base_rules import BaseExclusionRules

RECURSIVE_SUFFIX = "/**"

_GLOB_SPECIAL_CHARS = re.compile(r"([\\*?\[\]])")


def escape_glob(directory: str) -> str:
    """Escape a literal directory path for use inside a glob pattern.

    Glob metacharacters are backslash-escaped, as are a leading "#" or "!" which
    would otherwise turn the pattern into a comment or a negation.

    Example:
        >>> escape_glob("project/test")
        'project/test'
        >>> escape_glob("data[1]/tests")
        'data\\\\[1\\\\]/tests'
        >>> escape_glob("!tools")
        '\\\\!tools'
    """
    escaped = _GLOB_SPECIAL_CHARS.sub(r"\\\1", directory)
    if escaped.startswith(("#", "!")):
        escaped = "\\" + escaped
    return escaped


@dataclass(frozen=True)
class PathExclude(BaseExclusionRules):
    """A rule excluding all files matching a glob pattern, tagged with a reason.

    Path excludes have value semantics: two excludes are equal if and only if their
    pattern and reason are equal, so they can be collected in sets and used as
    dictionary keys. The pattern is matched with git wildmatch semantics through the
    pathspec library, which gives "<dir>/**" the meaning "every path beneath <dir>, at
    any depth".

    Attributes:
        pattern (str): Glob pattern relative to the root of the source tree.
        reason (ExcludeReason): Why the matching paths are excluded.

    Example:
        >>> exclude = PathExclude.for_directory("project/test", ExcludeReason.TEST_OF)
        >>> exclude.pattern
        'project/test/**'
        >>> exclude.exclude("project/test/unit/FooTest.kt")
        True
        >>> exclude.exclude("project/testing/Foo.kt")
        False
        >>> exclude == PathExclude("project/test/**", ExcludeReason.TEST_OF)
        True
    """

    pattern: str
    reason: ExcludeReason
    _spec: PathSpec = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        if not self.pattern:
            raise InvalidPatternError("Path exclude pattern must not be empty")
        if not isinstance(self.reason, ExcludeReason):
            raise TypeError(f"Reason must be an ExcludeReason, got {type(self.reason)}")

        object.__setattr__(self, "_spec", PathSpec.from_lines(GitWildMatchPattern, [self.pattern]))

    @classmethod
    def for_directory(cls, directory: str, reason: ExcludeReason) -> "PathExclude":
        """Create a path exclude covering a directory and all of its descendants.

        Args:
            directory: Directory path relative to the root of the source tree.
            reason: Why the directory is excluded.

        Returns:
            A path exclude with the pattern "<directory>/**".
        """
        return cls(pattern=escape_glob(directory) + RECURSIVE_SUFFIX, reason=reason)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PathExclude":
        """Create a path exclude from its serialized form.

        Args:
            data: Mapping with a "pattern" string and a "reason" name.

        Returns:
            The deserialized path exclude.

        Raises:
            KeyError: If "pattern" or "reason" is missing.
            UnknownExcludeReasonError: If the reason name is not recognized.

        Example:
            >>> PathExclude.from_dict({"pattern": "docs/**", "reason": "DOCUMENTATION_OF"})
            PathExclude(pattern='docs/**', reason=<ExcludeReason.DOCUMENTATION_OF: 'DOCUMENTATION_OF'>)
        """
        return cls(pattern=str(data["pattern"]), reason=ExcludeReason.parse(str(data["reason"])))

    def to_dict(self) -> Dict[str, str]:
        """Serialize this path exclude.

        Example:
            >>> PathExclude("build/**", ExcludeReason.BUILD_TOOL_OF).to_dict()
            {'pattern': 'build/**', 'reason': 'BUILD_TOOL_OF'}
        """
        return {"pattern": self.pattern, "reason": self.reason.value}

    def matches(self, path: str) -> bool:
        """Return True if the given relative path matches this exclude's pattern."""
        return bool(self._spec.match_file(path))

    def exclude(self, path: str) -> bool:
        return self.matches(path)

    def sort_key(self) -> Tuple[str, str]:
        """Key giving path excludes a stable order by pattern, then reason."""
        return (self.pattern, self.reason.value)
