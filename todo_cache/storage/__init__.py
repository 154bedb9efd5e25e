"""Filesystem helpers for cache files."""

from .paths import DocumentDirectoryResolver, atomic_write_text

__all__ = [
    "DocumentDirectoryResolver",
    "atomic_write_text",
]
