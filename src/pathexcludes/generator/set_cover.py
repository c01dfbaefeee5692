"""Greedy approximation of the set cover problem.

Finding a minimum number of sets whose union equals the union of all sets is NP-hard.
The classic greedy strategy repeatedly picks the set covering the most elements that
are not yet covered, which is within a factor of ln(n) of the optimum.
"""

import heapq
from typing import AbstractSet, Any, Callable, List, Mapping, Optional, Set, Tuple, TypeVar

from pathexcludes.exclusion_rules.path_exclude import PathExclude

K = TypeVar("K")
V = TypeVar("V")


def greedy_set_cover(sets: Mapping[K, AbstractSet[V]], sort_key: Optional[Callable[[K], Any]] = None) -> List[K]:
    """Select keys whose sets together cover the union of all sets.

    In every step the key with the largest marginal coverage, i.e. the most elements
    not covered by the keys selected so far, is picked. Keys that would not cover any
    additional element are never selected. Ties are broken by the order of the keys
    under sort_key, so the result is reproducible for identical input.

    The marginal coverage of a key can only shrink as more keys are selected, which
    allows a lazily updated priority queue: a popped entry whose recomputed coverage is
    unchanged is the best choice, otherwise it is pushed back with its new coverage.

    Args:
        sets: Mapping from keys to the elements they cover.
        sort_key: Key function defining the tie-break order. Defaults to the natural
            order of the keys.

    Returns:
        The selected keys in the order they were picked.

    Example:
        >>> greedy_set_cover({"a": {1, 2}, "b": {2, 3, 4}, "c": {1, 4}, "d": {3}})
        ['b', 'a']
        >>> greedy_set_cover({})
        []
    """
    ordered_keys = sorted(sets, key=sort_key)  # type: ignore[arg-type]
    uncovered: Set[V] = set()
    for elements in sets.values():
        uncovered.update(elements)

    # Entries are (-marginal coverage, tie-break rank), so the heap yields the best key first
    queue: List[Tuple[int, int]] = [(-len(sets[key]), rank) for rank, key in enumerate(ordered_keys)]
    heapq.heapify(queue)

    selected: List[K] = []
    while queue and uncovered:
        negative_gain, rank = heapq.heappop(queue)
        key = ordered_keys[rank]
        gain = len(uncovered.intersection(sets[key]))

        if gain == 0:
            continue
        if gain < -negative_gain:
            heapq.heappush(queue, (-gain, rank))
            continue

        selected.append(key)
        uncovered.difference_update(sets[key])

    return selected


def tie_break_key(exclude: PathExclude) -> Tuple[int, str, str]:
    """Order path excludes from the most specific to the least specific.

    Deeper directories come first, then patterns in lexicographic order, then reasons
    by name.

    Example:
        >>> from pathexcludes.types import ExcludeReason
        >>> tie_break_key(PathExclude("project/test/build/**", ExcludeReason.BUILD_TOOL_OF))
        (-3, 'project/test/build/**', 'BUILD_TOOL_OF')
    """
    return (-exclude.pattern.count("/"), exclude.pattern, exclude.reason.value)


def select_cover(coverage: Mapping[PathExclude, AbstractSet[str]]) -> List[PathExclude]:
    """Reduce candidate path excludes to a small subset covering the same files.

    Args:
        coverage: Mapping from each candidate exclude to the files it matches.

    Returns:
        The selected path excludes, sorted by pattern and reason.
    """
    selected = greedy_set_cover(coverage, sort_key=tie_break_key)
    return sorted(selected, key=PathExclude.sort_key)
