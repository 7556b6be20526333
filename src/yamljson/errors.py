"""Exceptions raised by the YAML-to-JSON pipeline."""

from __future__ import annotations


class YamlJsonError(Exception):
    """Base class for every conversion diagnostic."""

    def __init__(self, message: str, line_no: int | None = None) -> None:
        super().__init__(message)
        self.line_no = line_no


class InvalidInput(YamlJsonError, TypeError):
    """The top-level call received something that is not text."""


class UnclassifiableLine(YamlJsonError):
    """A line matches none of the supported shapes."""

    def __init__(self, line_no: int, line: str) -> None:
        super().__init__(f"Skipping unsupported line {line_no}: {line!r}", line_no)
        self.line = line


class OrphanListItem(YamlJsonError):
    """A list item has no key above it to attach to."""

    def __init__(self, line_no: int, value: str) -> None:
        super().__init__(
            f"No valid parent key found for list item {value!r} on line {line_no}",
            line_no,
        )
        self.value = value


class ConflictingKeyRole(YamlJsonError):
    """A key already holding a value is reused as a container of another kind."""

    def __init__(
        self, line_no: int, key: str, previous: str, replacement: str = "an object"
    ) -> None:
        super().__init__(
            f"Key {key!r} already holds {previous}; "
            f"replacing it with {replacement} for line {line_no}",
            line_no,
        )
        self.key = key
        self.previous = previous
        self.replacement = replacement


class DetachedContent(ConflictingKeyRole):
    """Content nested under a key whose enclosing object was replaced earlier."""

    def __init__(self, line_no: int, key: str) -> None:
        YamlJsonError.__init__(
            self,
            f"Key {key!r} sits in an object that was replaced earlier; "
            f"dropping line {line_no}",
            line_no,
        )
        self.key = key
        self.previous = "a replaced object"
        self.replacement = "nothing"
