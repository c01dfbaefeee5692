"""Heuristic generation of path excludes for a source tree."""

from .coverage import compute_coverage
from .dir_names import DIR_NAME_REASONS, generate_candidates, get_all_dirs
from .path_exclude_generator import generate_path_excludes
from .set_cover import greedy_set_cover, select_cover

__all__ = [
    "DIR_NAME_REASONS",
    "compute_coverage",
    "generate_candidates",
    "generate_path_excludes",
    "get_all_dirs",
    "greedy_set_cover",
    "select_cover",
]
