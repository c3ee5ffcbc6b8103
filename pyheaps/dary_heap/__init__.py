from pyheaps.dary_heap.dary_heap import (
    BinaryHeap,
    DaryHeap,
    OctonaryHeap,
    PeekMut,
    QuaternaryHeap,
    QuinaryHeap,
    SenaryHeap,
    SeptenaryHeap,
    TernaryHeap,
    UnaryHeap,
    first_child,
    is_leaf,
    parent,
    rebuild_is_cheaper,
)
from pyheaps.dary_heap.topk import get_topk
