"""Heaps, stacks, queues and classic recursive, greedy, interval and sliding-window algorithms."""

__version__ = "0.1.0"
__all__ = [
    "containers",
    "greedy",
    "heaps",
    "intervals",
    "recursion",
    "sliding_window",
    "stack_problems",
]