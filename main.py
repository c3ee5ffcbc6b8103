from pyheaps import DaryHeap, QuaternaryHeap, get_topk


priorities = [10.5, 3.2, 15.0, 7.8, 20.1, 1.5]
elements = ["low", "very_low", "medium", "low_med", "high", "lowest"]

# Create a binary heap of (priority, element) pairs
print("Creating binary heap...")
heap = DaryHeap(zip(priorities, elements), arity=2)

# Test basic properties
print(f"Heap size: {len(heap)}")
print(f"Is empty: {heap.is_empty()}")
print(f"Top-3: {get_topk(heap, 3)}")

# Same elements in a 4-ary heap, popped smallest first
quaternary = QuaternaryHeap.min_heap(elements, key=len)
print(f"Shortest names first: {quaternary.into_sorted_vec()}")
