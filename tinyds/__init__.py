"""Small classic data structures: linked list, bounded queue and bounded stack."""

__version__ = "0.1.0"
__all__ = ["linked_list", "array_queue", "array_stack"]