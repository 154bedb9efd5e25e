"""
File cache interface - unified contract for keyed, file-backed record stores.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, Mapping, Optional, Union

from .cachable import T


class IFileCache(ABC, Generic[T]):
    """
    Keyed in-memory record store that persists to a single file.

    Records are keyed by their own id; the key is never supplied by
    the caller.
    """

    @abstractmethod
    def add(self, item: T) -> None:
        """
        Insert or overwrite a record under item.id.

        Args:
            item: Record to store
        """
        pass

    @abstractmethod
    def remove(self, id: str) -> None:
        """
        Remove a record if present.

        Args:
            id: Record identifier
        """
        pass

    @property
    @abstractmethod
    def items(self) -> Mapping[str, T]:
        """Read-only view of id -> record"""
        pass

    @abstractmethod
    def save(self, file: Union[str, Path], format: Optional[str] = None) -> None:
        """
        Write all records to a file, replacing its content.

        Args:
            file: Logical file name or absolute path
            format: "json" or "csv" (defaults to settings.default_format)
        """
        pass

    @abstractmethod
    def load(self, file: Union[str, Path], format: Optional[str] = None) -> None:
        """
        Replace all records with the content of a file.

        Args:
            file: Logical file name or absolute path
            format: "json" or "csv" (defaults to settings.default_format)
        """
        pass
