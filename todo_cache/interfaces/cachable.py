"""
Record capability contract - what a type must provide to live in a FileCache.
"""

from typing import Any, Optional, Protocol, Type, TypeVar, runtime_checkable


T = TypeVar("T", bound="FileCachable")


@runtime_checkable
class FileCachable(Protocol):
    """
    Capability set for records stored in a keyed file cache.

    Structural contract: any class exposing these members qualifies,
    no base class is required. Parsers report malformed input by
    returning None instead of raising.
    """

    @property
    def id(self) -> str:
        """Stable identifier, unique within one cache"""
        ...

    def to_json(self) -> Any:
        """
        Structured representation of the record.

        Returns:
            JSON-compatible value (dict, list or scalar), not a string
        """
        ...

    def to_csv_row(self) -> str:
        """
        Delimited-text representation of the record.

        Returns:
            Single line without a trailing or embedded newline
        """
        ...

    @classmethod
    def csv_header_line(cls) -> str:
        """Header line written once at the top of a CSV file"""
        ...

    @classmethod
    def parse_json(cls: Type[T], value: Any) -> Optional[T]:
        """
        Build a record from its structured representation.

        Args:
            value: Decoded JSON value

        Returns:
            Record instance, or None if the value is malformed
        """
        ...

    @classmethod
    def parse_csv_row(cls: Type[T], line: str) -> Optional[T]:
        """
        Build a record from one CSV line.

        Args:
            line: Single line without newline

        Returns:
            Record instance, or None if the line is malformed
        """
        ...
