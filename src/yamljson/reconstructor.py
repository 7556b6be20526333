"""Tree reconstructor: Document → nested JSON value.

Nesting is inferred from indentation alone. The structural parent of a
record is the nearest preceding key record (``KeyValue``, ``KeyOnly`` or
``BlockScalarHeader``) whose indentation is strictly smaller; equal
indentation never makes a parent.
"""

from __future__ import annotations

import logging
from typing import Union

from .document import Document
from .errors import ConflictingKeyRole, DetachedContent, OrphanListItem
from .records import (
    LAYOUT_RECORDS,
    BlockScalarLine,
    KeyOnly,
    KeyRecord,
    KeyValue,
    ListItem,
)


LOGGER = logging.getLogger(__name__)

JsonValue = Union[str, "list[JsonValue]", "dict[str, JsonValue]"]


def _describe(value: JsonValue) -> str:
    if isinstance(value, str):
        return "a scalar value"
    if isinstance(value, list):
        return "an array"
    return "an object"


class TreeReconstructor:
    """Folds one Document into a JSON object. Use once per Document."""

    def __init__(self, document: Document, strict: bool = False) -> None:
        self.document = document
        self.strict = strict
        self.root: dict[str, JsonValue] = {}
        # record index → the object its key was written into
        self._owners: dict[int, dict[str, JsonValue]] = {}
        # (indentation, record index) of key records; indentation strictly
        # increasing from bottom to top
        self._ancestors: list[tuple[int, int]] = []
        # objects no longer reachable from root, keyed by id()
        self._detached: dict[int, dict[str, JsonValue]] = {}

    def run(self) -> dict[str, JsonValue]:
        records = self.document.records
        i = 0
        while i < len(records):
            record = records[i]

            if isinstance(record, LAYOUT_RECORDS):
                i += 1
                continue

            if isinstance(record, BlockScalarLine):
                LOGGER.debug("Ignoring block scalar line %d outside a block", i)
                i += 1
                continue

            parent = self._find_parent(record.indentation)

            if isinstance(record, ListItem):
                self._append_item(i, record, parent)
                i += 1
                continue

            target = self._object_for(i, parent)
            if isinstance(record, KeyValue):
                target[record.key] = record.value
                end = i + 1
            elif isinstance(record, KeyOnly):
                target[record.key] = {}
                end = i + 1
            else:
                text, end = self._collect_block(i)
                target[record.key] = text

            self._owners[i] = target
            self._push(record.indentation, i)
            i = end

        return self.root

    # -- Parent resolution ----------------------------------------------

    def _push(self, indentation: int, index: int) -> None:
        while self._ancestors and self._ancestors[-1][0] >= indentation:
            self._ancestors.pop()
        self._ancestors.append((indentation, index))

    def _find_parent(self, indentation: int) -> int | None:
        for indent, index in reversed(self._ancestors):
            if indent < indentation:
                return index
        return None

    def _object_for(self, index: int, parent: int | None) -> dict[str, JsonValue]:
        """Return the object a record at *index* writes into."""
        if parent is None:
            return self.root

        parent_record: KeyRecord = self.document.records[parent]
        owner = self._owners[parent]
        if id(owner) in self._detached:
            self._drop(index, parent_record.key)
            scratch: dict[str, JsonValue] = {}
            self._detach(scratch)
            return scratch

        current = owner.get(parent_record.key)
        if isinstance(current, dict):
            return current

        if current is not None:
            self._conflict(index, parent_record.key, current, "an object")
        fresh: dict[str, JsonValue] = {}
        owner[parent_record.key] = fresh
        return fresh

    # -- Record handlers ------------------------------------------------

    def _append_item(self, index: int, record: ListItem, parent: int | None) -> None:
        if parent is None:
            if self.strict:
                raise OrphanListItem(index, record.value)
            LOGGER.error(
                "No valid parent key found for index %d while handling list_item",
                index,
            )
            return

        key = self.document.records[parent].key
        owner = self._owners[parent]
        if id(owner) in self._detached:
            self._drop(index, key)
            return

        current = owner.get(key)
        if not isinstance(current, list):
            if isinstance(current, str) or current:
                self._conflict(index, key, current, "an array")
            if isinstance(current, dict):
                self._detach(current)
            current = []
            owner[key] = current
        current.append(record.value)

    def _collect_block(self, index: int) -> tuple[str, int]:
        """Join the block lines after the header at *index*.

        Returns the text and the index of the first record past the block.
        """
        records = self.document.records
        lines: list[str] = []
        end = index + 1
        while end < len(records) and isinstance(records[end], BlockScalarLine):
            lines.append(records[end].content)
            end += 1
        if not lines:
            return "", end
        return "\n".join(lines) + "\n", end

    def _conflict(self, index: int, key: str, current: JsonValue, replacement: str) -> None:
        error = ConflictingKeyRole(index, key, _describe(current), replacement)
        if self.strict:
            raise error
        LOGGER.warning("%s", error)

    # -- Replaced objects -----------------------------------------------

    def _detach(self, obj: dict[str, JsonValue]) -> None:
        """Mark *obj* and every object nested in it as unreachable."""
        self._detached[id(obj)] = obj
        for value in obj.values():
            if isinstance(value, dict):
                self._detach(value)

    def _drop(self, index: int, key: str) -> None:
        error = DetachedContent(index, key)
        if self.strict:
            raise error
        LOGGER.warning("%s", error)


def reconstruct(document: Document, strict: bool = False) -> dict[str, JsonValue]:
    """Fold *document* into a JSON object (the implicit document root).

    A block scalar header with no content lines yields ``""``; any content
    yields its lines joined by ``\\n`` plus one trailing ``\\n``.
    """
    return TreeReconstructor(document, strict=strict).run()
