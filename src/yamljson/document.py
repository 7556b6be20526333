"""Document — the ordered record sequence produced by the builder."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Iterator

from .records import Record, Unknown


def record_to_dict(record: Record) -> dict[str, object]:
    """``{"type": ..., "indentation": ..., <variant fields>}``"""
    return {"type": record.type.value, **asdict(record)}


@dataclass
class Document:
    """Holds one record per input line, in line order.

    Order is the only carrier of nesting: there are no parent pointers.
    """

    records: list[Record] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __getitem__(self, index: int) -> Record:
        return self.records[index]

    # -- Diagnostics ----------------------------------------------------

    @property
    def unknown(self) -> list[tuple[int, Unknown]]:
        """``(line_no, record)`` for every unclassified line."""
        return [(i, r) for i, r in enumerate(self.records) if isinstance(r, Unknown)]

    def to_list(self) -> list[dict[str, object]]:
        return [record_to_dict(r) for r in self.records]

    def to_json(self, indent: int | None = None) -> str:
        """Render the records as JSON (compact unless *indent* is given)."""
        if indent is None:
            return json.dumps(self.to_list(), ensure_ascii=False, separators=(",", ":"))
        return json.dumps(self.to_list(), ensure_ascii=False, indent=indent)
