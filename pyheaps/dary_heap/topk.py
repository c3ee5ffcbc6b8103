from typing import Any

from pyheaps.dary_heap.dary_heap import DaryHeap


def get_topk(heap: DaryHeap, k: int) -> list[Any]:
    """
    Function to get the top-K elements from a heap.

    In case of a max heap, the top K elements with the highest priority will
    be retrieved; for a min heap the top K elements with the lowest priority
    will be retrieved. The heap itself is left untouched.

    Parameters
    ----------
    heap : DaryHeap
        A DaryHeap object
    k : int
        The number of 'top-K' elements to retrieve.

    Returns
    -------
    list[Any]
        The 'top-K' elements, best first.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    candidates = heap.copy()
    return [candidates.pop() for _ in range(min(k, len(candidates)))]
