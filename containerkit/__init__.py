"""Container data structures (deque, linked list, vector) and comparison sorts in pure Python."""

__version__ = "0.1.0"
__all__ = ["sorting", "deque", "linked_list", "vector"]