"""Command-line argument parsing for pathexcludes.

This module defines the command-line interface for pathexcludes,
handling argument parsing and validation.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from pathexcludes import __version__
from pathexcludes.exclusion_rules.base_rules import BaseExclusionRules
from pathexcludes.output_strategies import OUTPUT_STRATEGIES


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class for handling scan exclusion rules.

    The returned action updates the provided exclusion rules object as arguments are
    processed, which preserves the order of -e/--exclude and -i/--ignore options as they
    appear on the command line.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action to update exclusion rules as arguments are processed."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                if isinstance(values, (str, os.PathLike)):
                    exclusion_rules.load_rules(values)  # type: ignore[attr-defined]
                else:
                    exclusion_rules.load_rules(Path(str(values)))  # type: ignore[attr-defined]
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(values)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with pathexcludes' options.
    """
    description = """
    pathexcludes: Suggest path excludes for the non-production parts of a source tree.

    Directories with conventional names for build tooling, tests, benchmarks and
    documentation (build, m4, tools, test, tests, bench, benchmark, benchmarks, docs)
    are proposed as path excludes. A greedy set cover then keeps only as many of them
    as are needed to exclude every matched file, so nested matches don't produce
    redundant excludes.

    The file listing is either scanned from a directory or read from a file containing
    one relative path per line.
    """

    epilog = """
    Examples:
      # Scan a directory
      pathexcludes /path/to/project

      # Read the file listing from git
      git ls-files | pathexcludes -l -

      # Leave files out of the scan using gitignore-style rules
      pathexcludes -e .gitignore -i "vendor/" /path/to/project

      # Human-readable output written to a file
      pathexcludes -f text -o excludes.txt /path/to/project

      # Report how many files the suggested excludes cover
      pathexcludes -s /path/to/project

      # Display version information and exit
      pathexcludes -V
    """

    parser = argparse.ArgumentParser(
        prog="pathexcludes",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"pathexcludes {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        help="The directory to scan. Paths in the output are relative to this directory.",
    )
    parser.add_argument(
        "-l",
        "--paths-from",
        metavar="FILE",
        help="Read relative file paths, one per line, from FILE instead of scanning a directory ('-' for stdin).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help=(
            "Path to exclusion file (e.g., .gitignore) for leaving files out of the listing "
            "(can be specified multiple times)."
        ),
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Individual gitignore-style pattern for leaving files out of the listing. Can be specified "
            "multiple times, and patterns are processed in the order they appear, mixed with -e/--exclude options."
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=sorted(OUTPUT_STRATEGIES),
        default="json",
        help="Output format for the path excludes (default: json).",
    )
    parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Print to stderr how many of the listed files the suggested path excludes cover.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.directory is None and args.paths_from is None:
        raise ValueError("Either a directory or -l/--paths-from must be specified")
    if args.directory is not None and args.paths_from is not None:
        raise ValueError("A directory and -l/--paths-from cannot be combined")
