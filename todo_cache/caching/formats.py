"""
Wire formats for the keyed file cache.

Both codecs work on whole-file text. Individual records that fail to
parse are dropped; only a wrong top-level shape is an error.
"""

import json
import logging
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Type

from ..errors import IncorrectData
from ..interfaces.cachable import T

logger = logging.getLogger(__name__)


class Format(str, Enum):
    JSON = "json"
    CSV = "csv"


def encode_json(records: Iterable[T], indent: Optional[int] = None) -> str:
    """
    Serialize records as a JSON array of their structured representations.

    Raises:
        TypeError, ValueError: if a representation is not JSON-serializable
    """
    return json.dumps([record.to_json() for record in records], ensure_ascii=False, indent=indent)


def decode_json(text: str, record_type: Type[T]) -> Dict[str, T]:
    """
    Parse a JSON array into records keyed by id.

    Args:
        text: File content
        record_type: Class providing parse_json

    Returns:
        Mapping of id to record; duplicate ids keep the last record

    Raises:
        json.JSONDecodeError: if text is not valid JSON
        IncorrectData: if the top-level value is not an array
    """
    value = json.loads(text)
    if not isinstance(value, list):
        raise IncorrectData(f"Expected a JSON array, got {type(value).__name__}")

    records: Dict[str, T] = {}
    for index, element in enumerate(value):
        record = record_type.parse_json(element)
        if record is None:
            logger.debug(f"Skipping malformed JSON record at index {index}")
            continue
        records[record.id] = record
    return records


def encode_csv(records: Iterable[T], record_type: Optional[Type[Any]] = None) -> str:
    """
    Serialize records as a header line followed by one row per record.

    Args:
        records: Records to write
        record_type: Class providing csv_header_line (empty header if None)
    """
    header = record_type.csv_header_line() if record_type is not None else ""
    return "\n".join([header] + [record.to_csv_row() for record in records])


def decode_csv(text: str, record_type: Type[T]) -> Dict[str, T]:
    """
    Parse CSV text into records keyed by id.

    The first line is always treated as the header and discarded,
    whatever it contains.

    Args:
        text: File content
        record_type: Class providing parse_csv_row

    Returns:
        Mapping of id to record; duplicate ids keep the last record

    Raises:
        IncorrectData: if the text has no lines at all
    """
    lines = text.split("\n") if text else []
    if not lines:
        raise IncorrectData("CSV file is empty")

    records: Dict[str, T] = {}
    for number, line in enumerate(lines[1:], start=2):
        record = record_type.parse_csv_row(line)
        if record is None:
            logger.debug(f"Skipping malformed CSV row on line {number}")
            continue
        records[record.id] = record
    return records
