"""Command-line entry point: ``yamljson [FILE]`` / ``python -m yamljson``.

Reads YAML from FILE (or stdin) and prints the JSON value, or the
intermediate records with ``--intermediate``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO, Sequence

from .args import ArgumentStore, add_arg, check_args, get_arg, init_args
from .config import get_settings
from .converter import dumps, intermediate_to_json, yaml_to_intermediate
from .errors import YamlJsonError
from .log import log_success, resolve_level, setup_logging


LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONVERSION_ERROR = 1
EXIT_IO_ERROR = 2
# argparse exits with 2 on bad options
EXIT_USAGE_ERROR = 2


# ---------------------------------------------------------------------------
# Argument handling
# ---------------------------------------------------------------------------

def _log_level(value: str) -> str:
    try:
        resolve_level(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yamljson",
        description="Convert simple configuration-style YAML to JSON",
    )
    parser.add_argument("input", nargs="?", default="-", help="YAML file, or - for stdin")
    parser.add_argument(
        "--intermediate", action="store_true", help="Print the intermediate records instead"
    )
    parser.add_argument("--indent", type=int, default=None, help="Indent the JSON output")
    parser.add_argument("--strict", action="store_true", help="Fail on malformed lines")
    parser.add_argument(
        "--log-level", type=_log_level, default=None, help="DEBUG/INFO/WARNING/ERROR or 0-3"
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress all log output")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> ArgumentStore:
    """Parse *argv* into an ArgumentStore, filling gaps from the environment."""
    settings = get_settings()
    ns = _build_parser().parse_args(argv)

    store = init_args()
    store = add_arg(store, "input", ns.input)
    store = add_arg(store, "mode", "intermediate" if ns.intermediate else "json")
    if ns.indent is not None:
        store = add_arg(store, "indent", str(ns.indent))
    store = add_arg(store, "strict", "1" if ns.strict or settings.strict else "")
    store = add_arg(store, "log_level", ns.log_level or settings.log_level)
    store = add_arg(store, "quiet", "1" if ns.quiet or settings.silent else "")
    return store


# ---------------------------------------------------------------------------
# I/O helpers
# ---------------------------------------------------------------------------

def _read_input(source: str, stdin: IO[str]) -> str:
    if source == "-":
        return stdin.read()
    with open(source, encoding="utf-8") as fh:
        return fh.read()


def run(store: ArgumentStore, stdin: IO[str], dest: IO[str]) -> int:
    """Convert according to *store* and print to *dest*. Returns an exit code."""
    if not check_args(store, ["input", "mode"]):
        return EXIT_CONVERSION_ERROR

    source = get_arg(store, "input")
    strict = bool(get_arg(store, "strict"))
    indent_arg = get_arg(store, "indent")
    indent = int(indent_arg) if indent_arg is not None else None

    try:
        text = _read_input(source, stdin)
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.error("Error reading '%s': %s", source, exc)
        return EXIT_IO_ERROR

    try:
        document = yaml_to_intermediate(text, strict=strict)
        if get_arg(store, "mode") == "intermediate":
            output = document.to_json(indent=indent)
        else:
            output = dumps(intermediate_to_json(document, strict=strict), indent=indent)
    except YamlJsonError as exc:
        LOGGER.error("Conversion failed: %s", exc)
        return EXIT_CONVERSION_ERROR

    print(output, file=dest)
    log_success(
        LOGGER, "Converted %s (%d lines)", "stdin" if source == "-" else source, len(document)
    )
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """``yamljson`` console script."""
    store = parse_args(argv)
    try:
        setup_logging(
            level=get_arg(store, "log_level") or "INFO",
            silent=bool(get_arg(store, "quiet")),
        )
    except ValueError as exc:
        # YAMLJSON_LOG_LEVEL bypasses argparse validation
        print(f"yamljson: error: {exc}", file=sys.stderr)
        return EXIT_USAGE_ERROR
    return run(store, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
