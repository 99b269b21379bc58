"""Node-based containers: linked lists, a stack, a queue and an ordered linked map."""

__version__ = "0.1.0"