"""
To-do item record.

Implements the FileCachable capability set so items can be stored in a
FileCache and written as JSON or CSV.
"""

import csv
import io
import re
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, ValidationError, field_validator


class Importance(str, Enum):
    LOW = "low"
    BASIC = "basic"
    IMPORTANT = "important"


CSV_COLUMNS = [
    "id",
    "text",
    "importance",
    "deadline",
    "is_done",
    "created_at",
    "changed_at",
    "color",
]

_ESCAPES = {"n": "\n", "r": "\r", "\\": "\\"}
_ESCAPE_RE = re.compile(r"\\(.)")


def _now() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


def _escape_text(text: str) -> str:
    return text.replace("\\", "\\\\").replace("\n", "\\n").replace("\r", "\\r")


def _unescape_text(text: str) -> str:
    return _ESCAPE_RE.sub(lambda match: _ESCAPES.get(match.group(1), match.group(0)), text)


def _timestamp(value: Optional[datetime]) -> Optional[int]:
    return int(value.timestamp()) if value is not None else None


def _from_timestamp(value: Any) -> Optional[datetime]:
    """Unix seconds to an aware UTC datetime, None if out of range"""
    try:
        return datetime.fromtimestamp(int(value), tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        return None


class TodoItem(BaseModel):
    """A single to-do list entry"""
    id: str = Field(default_factory=lambda: uuid4().hex, min_length=1, description="Unique item identifier")
    text: str = Field(..., description="Task description")
    importance: Importance = Field(Importance.BASIC)
    deadline: Optional[datetime] = Field(None, description="Due date")
    is_done: bool = False
    created_at: datetime = Field(default_factory=_now)
    changed_at: Optional[datetime] = None
    color: Optional[str] = Field(None, pattern=r"^#[0-9A-Fa-f]{6}$", description="Hex colour, e.g. '#FF0000'")

    @field_validator("deadline", "created_at", "changed_at")
    @classmethod
    def _whole_seconds_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # Files store Unix seconds; keep in-memory values identical to what round-trips
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).replace(microsecond=0)

    def to_json(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "text": self.text,
            "is_done": self.is_done,
            "created_at": _timestamp(self.created_at),
        }
        if self.importance != Importance.BASIC:
            data["importance"] = self.importance.value
        if self.deadline is not None:
            data["deadline"] = _timestamp(self.deadline)
        if self.changed_at is not None:
            data["changed_at"] = _timestamp(self.changed_at)
        if self.color is not None:
            data["color"] = self.color
        return data

    def to_csv_row(self) -> str:
        cells = [
            self.id,
            _escape_text(self.text),
            self.importance.value,
            _timestamp(self.deadline),
            "true" if self.is_done else "false",
            _timestamp(self.created_at),
            _timestamp(self.changed_at),
            self.color,
        ]
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="")
        writer.writerow(["" if cell is None else cell for cell in cells])
        return buffer.getvalue()

    @classmethod
    def csv_header_line(cls) -> str:
        return ",".join(CSV_COLUMNS)

    @classmethod
    def parse_json(cls, value: Any) -> Optional["TodoItem"]:
        if not isinstance(value, dict) or "created_at" not in value:
            return None
        if not isinstance(value.get("is_done", False), bool):
            return None

        data = dict(value)
        for column in ("deadline", "created_at", "changed_at"):
            if data.get(column) is None:
                continue
            # Seconds only; pydantic would read large numbers as milliseconds
            if isinstance(data[column], bool) or not isinstance(data[column], int):
                return None
            data[column] = _from_timestamp(data[column])
            if data[column] is None:
                return None

        try:
            return cls.model_validate(data)
        except ValidationError:
            return None

    @classmethod
    def parse_csv_row(cls, line: str) -> Optional["TodoItem"]:
        try:
            cells: List[str] = next(csv.reader([line]), [])
        except csv.Error:
            return None
        if len(cells) != len(CSV_COLUMNS):
            return None

        row = dict(zip(CSV_COLUMNS, cells))
        if row["is_done"] not in ("true", "false"):
            return None

        data: Dict[str, Any] = {
            "id": row["id"],
            "text": _unescape_text(row["text"]),
            "importance": row["importance"] or Importance.BASIC.value,
            "is_done": row["is_done"] == "true",
        }
        for column in ("deadline", "created_at", "changed_at"):
            if row[column]:
                data[column] = _from_timestamp(row[column])
                if data[column] is None:
                    return None
        if "created_at" not in data:
            return None
        if row["color"]:
            data["color"] = row["color"]

        try:
            return cls.model_validate(data)
        except ValidationError:
            return None
