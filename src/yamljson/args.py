"""ArgumentStore — an ordered key/value list for command-line wrappers.

Every operation returns a new store; stores are never changed in place::

    store = init_args()
    store = add_arg(store, "input", "config.yaml")
    get_arg(store, "input")             # → "config.yaml"
    check_args(store, ["input", "out"])  # → False, logs the missing key
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Iterable


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArgEntry:
    key: str
    value: str


@dataclass(frozen=True)
class ArgumentStore:
    entries: tuple[ArgEntry, ...] = field(default_factory=tuple)

    def keys(self) -> list[str]:
        return [e.key for e in self.entries]

    def to_json(self, pretty: bool = False) -> str:
        """``{"args":[{"key":...,"value":...}, ...]}``"""
        data = {"args": [{"key": e.key, "value": e.value} for e in self.entries]}
        if pretty:
            return json.dumps(data, ensure_ascii=False, indent=2)
        return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


def init_args() -> ArgumentStore:
    return ArgumentStore()


def add_arg(store: ArgumentStore, key: str, value: str) -> ArgumentStore:
    """Append *key*=*value*; an existing entry with the same key is kept."""
    return ArgumentStore(store.entries + (ArgEntry(key, str(value)),))


def get_arg(store: ArgumentStore, key: str) -> str | None:
    """Value of the first entry named *key*, or ``None``."""
    for entry in store.entries:
        if entry.key == key:
            return entry.value
    return None


def set_arg(store: ArgumentStore, key: str, value: str) -> ArgumentStore:
    """Rewrite every entry named *key*; append one if there is none."""
    if get_arg(store, key) is None:
        return add_arg(store, key, value)
    return ArgumentStore(
        tuple(ArgEntry(e.key, str(value)) if e.key == key else e for e in store.entries)
    )


def delete_arg(store: ArgumentStore, key: str) -> ArgumentStore:
    return ArgumentStore(tuple(e for e in store.entries if e.key != key))


def check_args(store: ArgumentStore, keys: Iterable[str]) -> bool:
    """True if every key in *keys* is present with a non-empty value."""
    missing = [k for k in keys if not get_arg(store, k)]
    if missing:
        LOGGER.error("Missing mandatory arguments: %s", " ".join(missing))
        return False
    return True
