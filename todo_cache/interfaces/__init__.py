"""
Core interface abstractions.

These interfaces define contracts that concrete implementations must follow,
so records, caches and storage locations can be swapped independently.
"""

from .cachable import FileCachable
from .file_cache import IFileCache
from .path_resolver import IPathResolver

__all__ = [
    "FileCachable",
    "IFileCache",
    "IPathResolver",
]
