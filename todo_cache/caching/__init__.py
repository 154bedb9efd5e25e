"""
Keyed file cache and its wire formats.
"""

from .file_cache import FileCache
from .formats import Format

__all__ = [
    "FileCache",
    "Format",
]
