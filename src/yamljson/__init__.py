"""yamljson — convert configuration-style YAML into JSON."""

from .args import (
    ArgumentStore,
    add_arg,
    check_args,
    delete_arg,
    get_arg,
    init_args,
    set_arg,
)
from .builder import IntermediateBuilder, build_document
from .classifier import classify_line, indentation_of, parse_line
from .converter import convert, dumps, intermediate_to_json, yaml_to_intermediate, yaml_to_json
from .document import Document
from .errors import (
    ConflictingKeyRole,
    DetachedContent,
    InvalidInput,
    OrphanListItem,
    UnclassifiableLine,
    YamlJsonError,
)
from .reconstructor import TreeReconstructor, reconstruct
from .records import (
    BlockScalarHeader,
    BlockScalarLine,
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

__all__ = [
    "convert",
    "yaml_to_json",
    "yaml_to_intermediate",
    "intermediate_to_json",
    "dumps",
    "Document",
    "IntermediateBuilder",
    "build_document",
    "TreeReconstructor",
    "reconstruct",
    "classify_line",
    "parse_line",
    "indentation_of",
    "Record",
    "RecordType",
    "Comment",
    "EmptyLine",
    "DocumentBoundary",
    "KeyValue",
    "KeyOnly",
    "ListItem",
    "BlockScalarHeader",
    "BlockScalarLine",
    "Unknown",
    "YamlJsonError",
    "InvalidInput",
    "UnclassifiableLine",
    "OrphanListItem",
    "ConflictingKeyRole",
    "DetachedContent",
    "ArgumentStore",
    "init_args",
    "add_arg",
    "get_arg",
    "set_arg",
    "delete_arg",
    "check_args",
]
