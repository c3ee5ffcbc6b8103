"""
Serialization of heaps as plain sequences.

A heap is stored as the list of its elements in storage order, which is an
implementation detail of the heap shape rather than a meaningful order. A
stored sequence may have been reordered or produced elsewhere, so loading
always re-heapifies it.
"""
import json
from typing import Any

from pyheaps.dary_heap.dary_heap import DaryHeap


def serialize(heap: DaryHeap) -> list[Any]:
    """Return the elements of ``heap`` in storage order."""
    return heap.to_list()


def deserialize(items, cls=DaryHeap, **options) -> DaryHeap:
    """
    Build a heap of type ``cls`` from a sequence in any order.

    Parameters
    ----------
    items : iterable
        The stored elements.
    cls : type
        `DaryHeap` or one of its fixed-arity subclasses.
    **options
        Passed on to the heap constructor (``arity``, ``key``,
        ``is_max_heap``, ``capacity``).

    Returns
    -------
    DaryHeap
        A heap satisfying the heap order invariant.
    """
    return cls.from_sequence(items, **options)


def dumps(heap: DaryHeap, **json_kwargs) -> str:
    return json.dumps(serialize(heap), **json_kwargs)


def loads(text, cls=DaryHeap, **options) -> DaryHeap:
    items = json.loads(text)
    if not isinstance(items, list):
        raise ValueError(
            f"Expected a JSON array of heap elements, got {type(items).__name__}"
        )
    return deserialize(items, cls, **options)
