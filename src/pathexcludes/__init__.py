"""Heuristic path exclude generation for source trees.

This package infers which subdirectories of a source tree are likely not part of
the production code (build tooling, tests, benchmarks, documentation) and emits a
minimal set of path exclusion rules covering them.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("pathexcludes")
except PackageNotFoundError:
    __version__ = "unknown"
