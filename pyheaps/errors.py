class HeapError(Exception):
    """Base class for all heap errors."""


class InvalidArityError(HeapError, ValueError):
    """Raised when a heap is configured with an arity below one."""


class HeapStateError(HeapError, RuntimeError):
    """
    Raised when a heap is accessed while one of its own operations is still
    running (for example from inside a comparison), or when a retired
    `PeekMut` guard is used.
    """


class AllocationError(HeapError, MemoryError):
    """
    Raised by the fallible reservation methods when the backing storage
    cannot grow.

    Parameters
    ----------
    kind : str
        Either ``"capacity_overflow"`` when the requested capacity exceeds
        the largest possible storage, or ``"alloc_failure"`` when the
        allocation itself failed.
    requested : int
        The capacity that was requested.
    """

    CAPACITY_OVERFLOW = "capacity_overflow"
    ALLOC_FAILURE = "alloc_failure"

    def __init__(self, kind, requested):
        super().__init__(f"{kind}: cannot reserve capacity for {requested} elements")
        self.kind = kind
        self.requested = requested
