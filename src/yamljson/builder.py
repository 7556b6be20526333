"""Intermediate builder: YAML text → Document of typed records.

The builder is a two-state machine::

    Normal ──(block scalar header)──▶ InBlockScalar(header_indent)
       ▲                                   │
       └──(line indented <= header_indent)─┘

While a block scalar is open, deeper lines are captured verbatim as
``BlockScalarLine`` records and are never reclassified, so content such
as ``# not a comment`` or ``url: not-a-key`` stays part of the block.
"""

from __future__ import annotations

import logging
import re

from .classifier import indentation_of, parse_line
from .document import Document
from .errors import UnclassifiableLine
from .records import BlockScalarHeader, BlockScalarLine, EmptyLine, Record, Unknown


LOGGER = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"\r?\n")


class IntermediateBuilder:
    """Single-use builder; call :meth:`build` once per text."""

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict
        self._records: list[Record] = []
        # Indentation of the open block scalar header, None in Normal state
        self._header_indent: int | None = None
        # Indentation of the block's first content line
        self._base_indent: int | None = None
        # Blank lines seen inside an open block, not yet assigned
        self._pending_blank: list[str] = []

    def build(self, lines: list[str]) -> Document:
        for line_no, line in enumerate(lines):
            self.feed(line_no, line)
        self._flush_blank_as_empty()
        self._header_indent = None
        return Document(records=list(self._records))

    # -- State machine -------------------------------------------------

    def feed(self, line_no: int, line: str) -> None:
        if self._header_indent is not None:
            if not line.strip():
                self._pending_blank.append(line)
                return
            indent = indentation_of(line)
            if indent > self._header_indent:
                self._capture(line, indent)
                return
            self._close_block()

        record = parse_line(line)
        if isinstance(record, Unknown):
            self._report_unknown(line_no, line)
        elif isinstance(record, BlockScalarHeader):
            self._header_indent = record.indentation
            self._base_indent = None
        self._records.append(record)

    def _capture(self, line: str, indent: int) -> None:
        if self._base_indent is None:
            self._base_indent = indent
        for blank in self._pending_blank:
            self._records.append(BlockScalarLine(indentation_of(blank), ""))
        self._pending_blank = []
        strip = min(indent, self._base_indent)
        self._records.append(BlockScalarLine(indent, line[strip:]))

    def _close_block(self) -> None:
        self._flush_blank_as_empty()
        self._header_indent = None
        self._base_indent = None

    def _flush_blank_as_empty(self) -> None:
        for blank in self._pending_blank:
            self._records.append(EmptyLine(indentation_of(blank)))
        self._pending_blank = []

    def _report_unknown(self, line_no: int, line: str) -> None:
        if self.strict:
            raise UnclassifiableLine(line_no, line)
        LOGGER.error("Skipping unsupported line %d: %r", line_no, line)


def split_lines(text: str) -> list[str]:
    """Split *text* on ``\\n`` or ``\\r\\n`` only.

    Other line separators (``\\u2028``, form feed, ...) stay inside the
    line. A final line break does not open an extra empty line.
    """
    if not text:
        return []
    lines = _LINE_BREAK_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def build_document(text: str, strict: bool = False) -> Document:
    """Split *text* into lines and build its Document."""
    return IntermediateBuilder(strict=strict).build(split_lines(text))
