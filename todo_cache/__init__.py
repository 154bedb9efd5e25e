"""
Keyed file cache for to-do list records.

Stores uniquely identified records in memory and persists them to a
single JSON or CSV file.
"""

from .caching import FileCache, Format
from .errors import (
    CannotLoadData,
    CannotSaveData,
    DirectoryUnresolvable,
    FileCacheError,
    IncorrectData,
)
from .interfaces import FileCachable, IFileCache, IPathResolver
from .models import Importance, TodoItem
from .storage import DocumentDirectoryResolver

__version__ = "1.0.0"

__all__ = [
    "FileCache",
    "Format",
    "FileCachable",
    "IFileCache",
    "IPathResolver",
    "DocumentDirectoryResolver",
    "TodoItem",
    "Importance",
    "FileCacheError",
    "DirectoryUnresolvable",
    "IncorrectData",
    "CannotSaveData",
    "CannotLoadData",
]
