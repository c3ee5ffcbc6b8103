from pyheaps.dary_heap import (
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
    get_topk,
)
from pyheaps.errors import (
    AllocationError,
    HeapError,
    HeapStateError,
    InvalidArityError,
)

__version__ = "0.3.1"
