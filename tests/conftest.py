"""Test configuration and fixtures for pathexcludes."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def project_paths():
    """File listing of a typical project with tests, docs and build tooling."""
    return {
        "README.md",
        "build.gradle.kts",
        "src/main/kotlin/Main.kt",
        "src/main/kotlin/util/Strings.kt",
        "src/test/kotlin/MainTest.kt",
        "src/test/kotlin/util/StringsTest.kt",
        "src/test/resources/build/expected.txt",
        "docs/index.md",
        "docs/api/reference.md",
        "tools/release.sh",
        "benchmarks/ParserBenchmark.kt",
        "lib/m4/ax_check.m4",
    }
