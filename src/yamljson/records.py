"""Intermediate records — one typed record per input line."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class RecordType(str, Enum):
    COMMENT = "comment"
    EMPTY = "empty"
    DOCUMENT_BOUNDARY = "document_boundary"
    KEY_VALUE = "key_value"
    KEY_ONLY = "key_only"
    LIST_ITEM = "list_item"
    BLOCK_SCALAR = "block_scalar"
    BLOCK_SCALAR_LINE = "block_scalar_line"
    UNKNOWN = "unknown"


# ---------------------------------------------------------------------------
# Layout records (never contribute to the JSON value)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Comment:
    indentation: int
    type: ClassVar[RecordType] = RecordType.COMMENT


@dataclass(frozen=True, slots=True)
class EmptyLine:
    indentation: int
    type: ClassVar[RecordType] = RecordType.EMPTY


@dataclass(frozen=True, slots=True)
class DocumentBoundary:
    indentation: int
    type: ClassVar[RecordType] = RecordType.DOCUMENT_BOUNDARY


@dataclass(frozen=True, slots=True)
class Unknown:
    """A line no rule recognised; ``raw`` is the line verbatim."""

    indentation: int
    raw: str
    type: ClassVar[RecordType] = RecordType.UNKNOWN


# ---------------------------------------------------------------------------
# Structural records
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class KeyValue:
    indentation: int
    key: str
    value: str
    type: ClassVar[RecordType] = RecordType.KEY_VALUE


@dataclass(frozen=True, slots=True)
class KeyOnly:
    """``key:`` with nothing after it; opens an object or an array."""

    indentation: int
    key: str
    type: ClassVar[RecordType] = RecordType.KEY_ONLY


@dataclass(frozen=True, slots=True)
class ListItem:
    indentation: int
    value: str
    type: ClassVar[RecordType] = RecordType.LIST_ITEM


@dataclass(frozen=True, slots=True)
class BlockScalarHeader:
    """``key: |`` or ``key: >``; the value follows on deeper lines."""

    indentation: int
    key: str
    type: ClassVar[RecordType] = RecordType.BLOCK_SCALAR


@dataclass(frozen=True, slots=True)
class BlockScalarLine:
    indentation: int
    content: str
    type: ClassVar[RecordType] = RecordType.BLOCK_SCALAR_LINE


Record = Union[
    Comment,
    EmptyLine,
    DocumentBoundary,
    KeyValue,
    KeyOnly,
    ListItem,
    BlockScalarHeader,
    BlockScalarLine,
    Unknown,
]

# Records that may own nested content.
KeyRecord = Union[KeyValue, KeyOnly, BlockScalarHeader]

# Records that never reach the JSON value.
LAYOUT_RECORDS = (Comment, EmptyLine, DocumentBoundary, Unknown)
