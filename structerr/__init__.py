"""Structured, serializable error types with kinds, codes, messages and details."""

__version__ = "0.1.6"
__all__ = ["builder", "convert", "error", "kind", "macros"]