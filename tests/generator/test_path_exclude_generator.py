"""Tests for generating path excludes from a file listing."""

from pathlib import PurePosixPath

import pytest

from pathexcludes.exclusion_rules.path_exclude import PathExclude
from pathexcludes.generator.coverage import compute_coverage
from pathexcludes.generator.dir_names import generate_candidates
from pathexcludes.generator.path_exclude_generator import generate_path_excludes
from pathexcludes.types import ExcludeReason


def as_pairs(excludes):
    return [(exclude.pattern, exclude.reason) for exclude in excludes]


@pytest.mark.parametrize(
    "file_paths,expected",
    [
        # Single test directory
        (
            {"src/Main.kt", "test/FooTest.kt", "test/BarTest.kt"},
            [("test/**", ExcludeReason.TEST_OF)],
        ),
        # Two disjoint directories
        (
            {"docs/readme.md", "docs/api/index.md", "build/out.bin"},
            [("build/**", ExcludeReason.BUILD_TOOL_OF), ("docs/**", ExcludeReason.DOCUMENTATION_OF)],
        ),
        # Nested matching directories with equal coverage
        (
            {"project/test/build/cache.tmp"},
            [("project/test/build/**", ExcludeReason.BUILD_TOOL_OF)],
        ),
        # No matching directory names
        ({"src/main/Main.kt", "lib/util.kt"}, []),
        # Root level file only
        ({"README.md"}, []),
        # Empty listing
        (set(), []),
    ],
)
def test_generate_path_excludes(file_paths, expected):
    assert as_pairs(generate_path_excludes(file_paths)) == expected


def test_outer_directory_covering_more_files_wins():
    """The outer test directory covers everything the nested build directory does, and more."""
    file_paths = {"test/build/a.tmp", "test/FooTest.kt"}

    assert as_pairs(generate_path_excludes(file_paths)) == [("test/**", ExcludeReason.TEST_OF)]


def test_project_listing(project_paths):
    excludes = generate_path_excludes(project_paths)

    assert as_pairs(excludes) == [
        ("benchmarks/**", ExcludeReason.TEST_OF),
        ("docs/**", ExcludeReason.DOCUMENTATION_OF),
        ("lib/m4/**", ExcludeReason.BUILD_TOOL_OF),
        ("src/test/**", ExcludeReason.TEST_OF),
        ("tools/**", ExcludeReason.BUILD_TOOL_OF),
    ]


def test_path_like_input():
    excludes = generate_path_excludes([PurePosixPath("docs") / "index.md", "./docs//guide.md"])

    assert as_pairs(excludes) == [("docs/**", ExcludeReason.DOCUMENTATION_OF)]


def test_selected_excludes_cover_all_candidate_files(project_paths):
    coverage = compute_coverage(generate_candidates(project_paths), project_paths)
    all_covered = set().union(*coverage.values())

    excludes = generate_path_excludes(project_paths)
    selected_covered = {path for path in project_paths if any(exclude.matches(path) for exclude in excludes)}

    assert selected_covered == all_covered


def test_no_duplicate_excludes(project_paths):
    excludes = generate_path_excludes(project_paths)

    assert len(set(excludes)) == len(excludes)


def test_every_pattern_is_an_ancestor_directory(project_paths):
    for exclude in generate_path_excludes(project_paths):
        directory = exclude.pattern[: -len("/**")]
        assert any(path.startswith(directory + "/") for path in project_paths)


def test_output_is_deterministic(project_paths):
    first = generate_path_excludes(project_paths)
    second = generate_path_excludes(sorted(project_paths, reverse=True))

    assert first == second
    assert first == sorted(first, key=PathExclude.sort_key)
