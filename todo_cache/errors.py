"""
Error taxonomy for the keyed file cache.

All save/load failures surface as a FileCacheError subclass so callers can
catch the whole family or a single failure mode.
"""

from pathlib import Path
from typing import Optional


class FileCacheError(Exception):
    """Base class for every file cache failure"""

    default_message = "File cache operation failed"

    def __init__(self, message: Optional[str] = None, path: Optional[Path] = None):
        self.path = path
        self.message = message or self.default_message
        super().__init__(self.message if path is None else f"{self.message}: {path}")


class DirectoryUnresolvable(FileCacheError):
    """The storage location for the cache file cannot be determined"""

    default_message = "Cannot resolve storage directory"


class IncorrectData(FileCacheError):
    """File content does not have the top-level shape the format requires"""

    default_message = "Incorrect data"


class CannotSaveData(FileCacheError):
    """Serialization or writing of the cache file failed"""

    default_message = "Cannot save data"


class CannotLoadData(FileCacheError):
    """Reading or decoding of the cache file failed"""

    default_message = "Cannot load data"
