"""
Keyed file cache implementation.

Holds records in a dict keyed by their own id and persists the whole
collection to one file in JSON or CSV format.
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Type, Union

from ..config import settings
from ..errors import CannotLoadData, CannotSaveData, IncorrectData
from ..interfaces.cachable import T
from ..interfaces.file_cache import IFileCache
from ..interfaces.path_resolver import IPathResolver
from ..storage.paths import DocumentDirectoryResolver, atomic_write_text
from .formats import Format, decode_csv, decode_json, encode_csv, encode_json

logger = logging.getLogger(__name__)


class FileCache(IFileCache[T]):
    """
    In-memory record store persisted to a single file.

    Features:
    - O(1) add/remove keyed by record id
    - Read-only view of the stored records
    - Atomic saves (write temp file, then rename)
    - Loads replace the mapping only on success

    Not thread-safe: callers sharing an instance across threads must
    guard it themselves.
    """

    def __init__(
        self,
        record_type: Optional[Type[T]] = None,
        resolver: Optional[IPathResolver] = None
    ):
        """
        Initialize an empty cache.

        Args:
            record_type: Record class used to parse files and emit the CSV header
                (inferred from stored items if None)
            resolver: Path resolver (DocumentDirectoryResolver if None)
        """
        self._items: Dict[str, T] = {}
        self._record_type = record_type
        self.resolver = resolver or DocumentDirectoryResolver()

    def add(self, item: T) -> None:
        self._items[item.id] = item

    def remove(self, id: str) -> None:
        self._items.pop(id, None)

    @property
    def items(self) -> Mapping[str, T]:
        return MappingProxyType(self._items)

    def get(self, id: str) -> Optional[T]:
        """Look up a record by id"""
        return self._items.get(id)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, id: object) -> bool:
        return id in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items.values()))

    def save(self, file: Union[str, Path], format: Optional[Union[Format, str]] = None) -> None:
        """
        Write all records to a file, replacing its content.

        Records are written sorted by id. CSV output always starts
        with the record type's header line.

        Args:
            file: Logical file name or absolute path
            format: Format.JSON or Format.CSV (defaults to settings.default_format)

        Raises:
            DirectoryUnresolvable: if the storage directory cannot be determined
            CannotSaveData: if serialization or writing fails
        """
        fmt = self._format(format)
        path = self.resolver.resolve(file)
        records = [self._items[key] for key in sorted(self._items)]

        try:
            if fmt is Format.JSON:
                content = encode_json(records, indent=settings.json_indent)
            else:
                content = encode_csv(records, self._resolve_record_type())
            atomic_write_text(path, content)
        except (OSError, TypeError, ValueError) as exc:
            raise CannotSaveData(path=path) from exc

        logger.info(f"Saved {len(records)} records to {path} ({fmt.value})")

    def load(self, file: Union[str, Path], format: Optional[Union[Format, str]] = None) -> None:
        """
        Replace all records with the content of a file.

        Malformed individual records are skipped. On any error the
        current records are left untouched.

        Args:
            file: Logical file name or absolute path
            format: Format.JSON or Format.CSV (defaults to settings.default_format)

        Raises:
            DirectoryUnresolvable: if the storage directory cannot be determined
            IncorrectData: if the file has the wrong top-level shape
            CannotLoadData: if reading or decoding fails
        """
        fmt = self._format(format)
        path = self.resolver.resolve(file)
        record_type = self._resolve_record_type()
        if record_type is None:
            raise CannotLoadData("Record type unknown; pass record_type to FileCache", path=path)

        try:
            # No newline translation: rows are split on "\n" only
            text = path.read_bytes().decode("utf-8")
            if fmt is Format.JSON:
                items = decode_json(text, record_type)
            else:
                items = decode_csv(text, record_type)
        except IncorrectData as exc:
            raise IncorrectData(exc.message, path=path) from None
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
            raise CannotLoadData(path=path) from exc

        self._items.clear()
        self._items.update(items)
        logger.info(f"Loaded {len(items)} records from {path} ({fmt.value})")

    def _resolve_record_type(self) -> Optional[Type[T]]:
        """Explicit record type, or the class of any stored item"""
        if self._record_type is None and self._items:
            self._record_type = type(next(iter(self._items.values())))
        return self._record_type

    def _format(self, format: Optional[Union[Format, str]]) -> Format:
        return Format(format or settings.default_format)
