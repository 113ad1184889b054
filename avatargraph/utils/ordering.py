"""Ordering helpers for node sequences."""

from typing import Iterable, List


def distinct_in_order(nodes: Iterable[int]) -> List[int]:
    """Drop repeated entries while keeping first-seen order.

    Examples:
        >>> distinct_in_order([3, 1, 3, 2, 1])
        [3, 1, 2]
    """
    seen = set()
    result = []
    for node in nodes:
        if node in seen:
            continue
        seen.add(node)
        result.append(node)
    return result
