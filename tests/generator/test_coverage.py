"""Tests for computing the files covered by path excludes."""

from pathexcludes.exclusion_rules.path_exclude import PathExclude
from pathexcludes.generator.coverage import compute_coverage
from pathexcludes.types import ExcludeReason

TEST_EXCLUDE = PathExclude("project/test/**", ExcludeReason.TEST_OF)
BUILD_EXCLUDE = PathExclude("project/test/build/**", ExcludeReason.BUILD_TOOL_OF)
DOCS_EXCLUDE = PathExclude("docs/**", ExcludeReason.DOCUMENTATION_OF)

FILES = {
    "project/test/FooTest.kt",
    "project/test/build/cache.tmp",
    "project/test/build/deep/nested/out.bin",
    "project/testing/Helper.kt",
    "project/src/Main.kt",
    "docs/index.md",
}


def test_coverage_includes_all_descendants():
    coverage = compute_coverage([TEST_EXCLUDE], FILES)

    assert coverage[TEST_EXCLUDE] == {
        "project/test/FooTest.kt",
        "project/test/build/cache.tmp",
        "project/test/build/deep/nested/out.bin",
    }


def test_file_can_be_covered_by_multiple_excludes():
    coverage = compute_coverage([TEST_EXCLUDE, BUILD_EXCLUDE, DOCS_EXCLUDE], FILES)

    assert "project/test/build/cache.tmp" in coverage[TEST_EXCLUDE]
    assert "project/test/build/cache.tmp" in coverage[BUILD_EXCLUDE]
    assert coverage[DOCS_EXCLUDE] == {"docs/index.md"}


def test_sibling_with_common_prefix_is_not_covered():
    coverage = compute_coverage([TEST_EXCLUDE], FILES)

    assert "project/testing/Helper.kt" not in coverage[TEST_EXCLUDE]


def test_pattern_is_anchored_at_root():
    nested_docs = {"project/docs/index.md"}

    assert compute_coverage([DOCS_EXCLUDE], nested_docs)[DOCS_EXCLUDE] == frozenset()


def test_exclude_without_matches_has_empty_coverage():
    coverage = compute_coverage([PathExclude("bench/**", ExcludeReason.TEST_OF)], FILES)

    assert list(coverage.values()) == [frozenset()]


def test_escaped_directory_name_is_matched_literally():
    exclude = PathExclude.for_directory("data[1]/tests", ExcludeReason.TEST_OF)
    files = {"data[1]/tests/test_a.py", "data1/tests/test_b.py"}

    assert compute_coverage([exclude], files)[exclude] == {"data[1]/tests/test_a.py"}


def test_no_excludes():
    assert compute_coverage([], FILES) == {}
