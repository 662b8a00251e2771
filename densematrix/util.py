from bisect import bisect_left
from typing import Iterable, List


def unit_sequence(element: float, length: int) -> List[float]:
    """Return a list holding ``element`` exactly ``length`` times."""
    return [element for _ in range(length)]


def contains(values: Iterable[int], target: int, presorted: bool = False) -> bool:
    """Sorted membership test for a collection of integers.

    Unless ``presorted`` is set, a sorted copy of ``values`` is searched and
    the caller's sequence is left untouched. With ``presorted`` the values
    must already be an ascending list.
    """
    ordered = values if presorted else sorted(values)
    i = bisect_left(ordered, target)
    return i < len(ordered) and ordered[i] == target
