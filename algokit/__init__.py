"""Classic array, hashing, linked-list and dynamic-programming algorithms."""

__version__ = "0.1.0"