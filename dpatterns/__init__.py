"""Dynamic-programming patterns and simple stack, queue and deque containers."""

__version__ = "0.1.0"
__all__ = [
    "knapsack",
    "sequences",
    "intervals",
    "catalan",
    "paths",
    "bitmask",
    "decisions",
    "stack",
    "fifo",
    "deque",
]