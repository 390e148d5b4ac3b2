"""Node-based data structures: linked lists, a queue, a stack and a binary search tree."""

__version__ = "0.1.0"
__all__ = ["singly_linked_list", "doubly_linked_list", "linked_queue", "stack", "bst"]