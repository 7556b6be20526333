"""Line classifier: one raw line → one typed record. Stateless."""

from __future__ import annotations

import re

from .records import (
    BlockScalarHeader,
    Comment,
    DocumentBoundary,
    EmptyLine,
    KeyOnly,
    KeyValue,
    ListItem,
    Record,
    RecordType,
    Unknown,
)


_INDENT_RE = re.compile(r"^[ \t]*")

# Rules only look past spaces and tabs, the characters indentation counts.
_COMMENT_RE = re.compile(r"^[ \t]*#.*$")
_EMPTY_RE = re.compile(r"^\s*$")
_DOCUMENT_BOUNDARY_RE = re.compile(r"^[ \t]*(---|\.\.\.)\s*$")
_BLOCK_SCALAR_RE = re.compile(r"^[ \t]*([^:\s][^:]*):\s*[|>]\s*$")
_KEY_VALUE_RE = re.compile(r"^[ \t]*([^:\s][^:]*):\s+(\S.*)$")
_KEY_ONLY_RE = re.compile(r"^[ \t]*([^:\s][^:]*):\s*$")
_LIST_ITEM_RE = re.compile(r"^[ \t]*-(?:\s+(.*))?$")


def indentation_of(line: str) -> int:
    """Number of leading space/tab characters."""
    return _INDENT_RE.match(line).end()


def parse_line(line: str) -> Record:
    """Classify *line* and extract its fields.

    Rules are tried in a fixed order and the first match wins::

        comment → empty → document boundary → block scalar header
        → key-value → key-only → list item → unknown

    The first colon delimits the key; keys and values are trimmed.
    """
    indent = indentation_of(line)

    if _COMMENT_RE.match(line):
        return Comment(indent)
    if _EMPTY_RE.match(line):
        return EmptyLine(indent)
    if _DOCUMENT_BOUNDARY_RE.match(line):
        return DocumentBoundary(indent)

    m = _BLOCK_SCALAR_RE.match(line)
    if m:
        return BlockScalarHeader(indent, m.group(1).strip())

    m = _KEY_VALUE_RE.match(line)
    if m:
        return KeyValue(indent, m.group(1).strip(), m.group(2).strip())

    m = _KEY_ONLY_RE.match(line)
    if m:
        return KeyOnly(indent, m.group(1).strip())

    m = _LIST_ITEM_RE.match(line)
    if m:
        return ListItem(indent, (m.group(1) or "").strip())

    return Unknown(indent, line)


def classify_line(line: str) -> RecordType:
    return parse_line(line).type
