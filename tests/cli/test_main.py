"""Unit tests for the CLI main module."""

import io
import json
from unittest.mock import patch

import pytest

from pathexcludes.cli.main import format_summary, load_file_paths, main, read_path_list
from pathexcludes.exclusion_rules.git_rules import GitIgnoreExclusionRules
from pathexcludes.exclusion_rules.path_exclude import PathExclude
from pathexcludes.types import ExcludeReason


@pytest.fixture
def project_dir(tmp_path):
    """Create a small project on disk."""
    for relative_path in [
        "src/Main.kt",
        "test/FooTest.kt",
        "test/BarTest.kt",
        "docs/index.md",
        "out/Main.class",
    ]:
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("content\n")
    return tmp_path


@pytest.fixture
def path_list(tmp_path):
    path = tmp_path / "paths.txt"
    path.write_text("src/Main.kt\ntest/FooTest.kt\n\nbuild/out.bin\n")
    return path


def run_main(argv):
    """Run main() with the given arguments and return the exit code, 0 if it didn't exit."""
    with patch("sys.argv", ["pathexcludes", *argv]):
        try:
            main()
        except SystemExit as e:
            return e.code
    return 0


def test_read_path_list():
    assert read_path_list(io.StringIO("a.txt\n\n b/c.txt \n")) == ["a.txt", "b/c.txt"]


def test_load_file_paths_applies_rules(path_list):
    rules = GitIgnoreExclusionRules()
    rules.add_rule("*.bin")

    assert load_file_paths(str(path_list), rules) == {"src/Main.kt", "test/FooTest.kt"}


def test_load_file_paths_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_file_paths(str(tmp_path / "missing.txt"), GitIgnoreExclusionRules())


def test_format_summary_without_excludes():
    assert format_summary([], ["a.txt"]) == "Files: 1\nPath excludes: 0\nExcluded files: 0"


def test_format_summary_with_excludes():
    excludes = [PathExclude("docs/**", ExcludeReason.DOCUMENTATION_OF)]

    summary = format_summary(excludes, ["docs/a.md", "docs/b.md", "src/Main.kt"])

    assert summary == "Files: 3\nPath excludes: 1\nExcluded files: 2"


def test_main_scans_directory(project_dir, capsys):
    assert run_main([str(project_dir)]) == 0

    assert json.loads(capsys.readouterr().out) == [
        {"pattern": "docs/**", "reason": "DOCUMENTATION_OF"},
        {"pattern": "test/**", "reason": "TEST_OF"},
    ]


def test_main_text_format(project_dir, capsys):
    assert run_main(["-f", "text", str(project_dir)]) == 0

    assert capsys.readouterr().out == "docs/** -> DOCUMENTATION_OF\ntest/** -> TEST_OF\n"


def test_main_ignore_pattern(project_dir, capsys):
    assert run_main(["-i", "docs/", str(project_dir)]) == 0

    assert json.loads(capsys.readouterr().out) == [{"pattern": "test/**", "reason": "TEST_OF"}]


def test_main_paths_from_file(path_list, capsys):
    assert run_main(["-l", str(path_list)]) == 0

    assert json.loads(capsys.readouterr().out) == [
        {"pattern": "build/**", "reason": "BUILD_TOOL_OF"},
        {"pattern": "test/**", "reason": "TEST_OF"},
    ]


def test_main_paths_from_stdin(capsys):
    with patch("sys.stdin", io.StringIO("project/test/build/cache.tmp\n")):
        assert run_main(["-l", "-"]) == 0

    assert json.loads(capsys.readouterr().out) == [{"pattern": "project/test/build/**", "reason": "BUILD_TOOL_OF"}]


def test_main_output_file(project_dir, tmp_path, capsys):
    output = tmp_path / "excludes.json"

    assert run_main(["-o", str(output), str(project_dir)]) == 0

    assert capsys.readouterr().out == ""
    assert [item["pattern"] for item in json.loads(output.read_text())] == ["docs/**", "test/**"]


def test_main_summary(project_dir, capsys):
    assert run_main(["-s", str(project_dir)]) == 0

    assert "Files: 5\nPath excludes: 2\nExcluded files: 3" in capsys.readouterr().err


def test_main_empty_listing_warns(tmp_path, capsys):
    empty = tmp_path / "empty.txt"
    empty.write_text("")

    assert run_main(["-l", str(empty)]) == 0

    captured = capsys.readouterr()
    assert captured.out == "[]\n"
    assert "Warning: The file listing is empty" in captured.err


def test_main_missing_directory(tmp_path, capsys):
    assert run_main([str(tmp_path / "missing")]) == 1

    assert "Error: Root path does not exist" in capsys.readouterr().err


def test_main_without_input(capsys):
    assert run_main([]) == 1

    assert "Error: Either a directory or -l/--paths-from must be specified" in capsys.readouterr().err


def test_main_invalid_option(capsys):
    assert run_main(["--no-such-option", "."]) == 2
