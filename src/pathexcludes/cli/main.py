"""Command-line interface for pathexcludes.

This module provides the command-line interface for pathexcludes, allowing users to get
path exclude suggestions for a source tree. It obtains the file listing, runs the
generator and writes the result in the requested format.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error

Example:
    # Suggest path excludes for a checked out project
    $ pathexcludes /path/to/project

    # Use the listing of tracked files
    $ git ls-files | pathexcludes -l -
"""

import sys
from pathlib import Path
from typing import AbstractSet, Iterable, List, Sequence, Set, TextIO

from pathexcludes.cli.argparser import create_parser, validate_args
from pathexcludes.exclusion_rules.composite_rules import CompositeExclusionRules
from pathexcludes.exclusion_rules.git_rules import GitIgnoreExclusionRules
from pathexcludes.exclusion_rules.path_exclude import PathExclude
from pathexcludes.generator.path_exclude_generator import generate_path_excludes
from pathexcludes.output_strategies import create_output_strategy
from pathexcludes.source_tree.source_tree import SourceTree, normalize_path


def read_path_list(stream: TextIO) -> List[str]:
    """Read one path per line, skipping blank lines.

    Example:
        >>> import io
        >>> read_path_list(io.StringIO("src/Main.kt\\n\\n  test/FooTest.kt  \\n"))
        ['src/Main.kt', 'test/FooTest.kt']
    """
    return [line.strip() for line in stream if line.strip()]


def load_file_paths(paths_from: str, exclusion_rules: GitIgnoreExclusionRules) -> Set[str]:
    """Load the file listing given with -l/--paths-from, applying the scan exclusion rules."""
    if paths_from == "-":
        paths = read_path_list(sys.stdin)
    else:
        path_list = Path(paths_from)
        if not path_list.exists():
            raise FileNotFoundError(f"Path list not found: {path_list}")
        with open(path_list, "r") as f:
            paths = read_path_list(f)

    files = {normalize_path(path) for path in paths}
    if exclusion_rules.has_rules():
        files = {path for path in files if not exclusion_rules.exclude(path)}
    return files


def format_summary(excludes: Sequence[PathExclude], file_paths: Iterable[str]) -> str:
    """Format a human-readable summary of what the path excludes cover.

    Example:
        >>> from pathexcludes.types import ExcludeReason
        >>> print(format_summary([PathExclude("test/**", ExcludeReason.TEST_OF)], ["src/Main.kt", "test/FooTest.kt"]))
        Files: 2
        Path excludes: 1
        Excluded files: 1
    """
    files = set(file_paths)
    excluded = CompositeExclusionRules(excludes).excluded_paths(files) if excludes else set()

    return "\n".join(
        [
            f"Files: {len(files)}",
            f"Path excludes: {len(excludes)}",
            f"Excluded files: {len(excluded)}",
        ]
    )


def main() -> None:
    """Main entry point for the pathexcludes command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
    """
    try:
        # Create the exclusion rules object that will be populated during parsing
        exclusion_rules = GitIgnoreExclusionRules()

        parser = create_parser(exclusion_rules)
        args = parser.parse_args()

        validate_args(args)

        file_paths: AbstractSet[str]
        if args.paths_from is not None:
            file_paths = load_file_paths(args.paths_from, exclusion_rules)
        else:
            file_paths = SourceTree.from_directory(args.directory, exclusion_rules).file_paths

        excludes = generate_path_excludes(file_paths)
        output = create_output_strategy(args.format).format_excludes(excludes)

        if args.output:
            with open(args.output, "w") as f:
                f.write(output)
        else:
            sys.stdout.write(output)

        if args.summary:
            print(format_summary(excludes, file_paths), file=sys.stderr)

        if not file_paths:
            print("Warning: The file listing is empty. No path excludes generated.", file=sys.stderr)

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
