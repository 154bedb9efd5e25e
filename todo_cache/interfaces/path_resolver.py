"""
Path resolver interface - turns a logical file name into a concrete path.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union


class IPathResolver(ABC):
    """
    Resolves the location of cache files.

    Implementations raise DirectoryUnresolvable when no storage
    location can be determined.
    """

    @abstractmethod
    def resolve(self, name: Union[str, Path]) -> Path:
        """
        Resolve a logical file name.

        Args:
            name: File name relative to the storage directory, or an absolute path

        Returns:
            Concrete path of the file
        """
        pass
