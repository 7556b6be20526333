"""Conversion facade: YAML text → Document → JSON value."""

from __future__ import annotations

import json
import logging

from .builder import build_document
from .document import Document
from .errors import InvalidInput
from .reconstructor import JsonValue, reconstruct


LOGGER = logging.getLogger(__name__)


def _as_text(text: str | bytes) -> str:
    if isinstance(text, bytes):
        try:
            return text.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidInput(f"YAML bytes are not valid UTF-8: {exc}") from exc
    if not isinstance(text, str):
        raise InvalidInput(f"Expected YAML text, got {type(text).__name__}")
    return text


def yaml_to_intermediate(text: str | bytes, strict: bool = False) -> Document:
    """Stage one: classify every line into a typed record."""
    return build_document(_as_text(text), strict=strict)


def intermediate_to_json(document: Document, strict: bool = False) -> JsonValue:
    """Stage two: fold the records into a nested JSON value."""
    if not isinstance(document, Document):
        raise InvalidInput(f"Expected a Document, got {type(document).__name__}")
    return reconstruct(document, strict=strict)


def convert(text: str | bytes, strict: bool = False) -> JsonValue:
    """Convert YAML *text* into a JSON value (nested dicts, lists and strings).

    Non-fatal problems (unknown lines, orphan list items, keys used both as
    scalars and as parents) are logged and skipped. With ``strict=True``
    they raise a :class:`~yamljson.errors.YamlJsonError` instead.
    """
    document = yaml_to_intermediate(text, strict=strict)
    LOGGER.debug("Built %d intermediate records", len(document))
    return intermediate_to_json(document, strict=strict)


def dumps(value: JsonValue, indent: int | None = None) -> str:
    """Serialise *value*; compact unless *indent* is given. Key order is kept."""
    if indent is None:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(value, ensure_ascii=False, indent=indent)


def yaml_to_json(text: str | bytes, strict: bool = False, indent: int | None = None) -> str:
    """Convert YAML *text* straight to JSON text."""
    return dumps(convert(text, strict=strict), indent=indent)
