"""Classic data-structure and recursion drills: trees, graphs, heaps, stacks and queues."""

__version__ = "0.1.0"
__all__ = ["bst", "graph", "heap", "kheap", "recursion", "sequences"]