"""Generate path excludes from the set of file paths present in a source tree."""

from typing import Iterable, List

from pathexcludes.exclusion_rules.path_exclude import PathExclude
from pathexcludes.source_tree.source_tree import normalize_path
from pathexcludes.types import PathType

from .coverage import compute_coverage
from .dir_names import generate_candidates
from .set_cover import select_cover


def generate_path_excludes(file_paths: Iterable[PathType]) -> List[PathExclude]:
    """Return path excludes which likely, but not necessarily, apply to a source tree.

    Candidate excludes are proposed for directories with well-known names such as
    "test" or "docs". Each candidate is evaluated against all files, and a greedy set
    cover keeps only as many candidates as are needed to exclude every file that any
    candidate would exclude.

    Args:
        file_paths: All file paths of the source tree, relative to its root directory.

    Returns:
        The selected path excludes, sorted by pattern. Empty if no directory matches.

    Example:
        >>> for exclude in generate_path_excludes(["docs/readme.md", "docs/api/index.md", "build/out.bin"]):
        ...     print(exclude.pattern, exclude.reason.value)
        build/** BUILD_TOOL_OF
        docs/** DOCUMENTATION_OF
    """
    files = {normalize_path(path) for path in file_paths}
    candidates = generate_candidates(files)
    coverage = compute_coverage(candidates, files)

    return select_cover(coverage)
