"""Classic data structures, consistent hashing, MD5 and string helpers, and a rotating logger."""

__version__ = "0.1.0"