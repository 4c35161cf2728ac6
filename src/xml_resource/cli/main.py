"""Main CLI entry point for the xml-resource command-line tool.

Provides the load / list / find / insert / erase / save flow over a single
XML file, reporting each step on the console.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from xml_resource import __version__
from xml_resource.buffer import XMLBuffer
from xml_resource.cursor import TagCursor
from xml_resource.editing import add, erase, find
from xml_resource.shared.config import ConfigError, ResourceConfig
from xml_resource.shared.logging import get_logger

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def load_config(args: argparse.Namespace) -> ResourceConfig:
    """Build the session configuration from an optional file and CLI flags."""
    config = ResourceConfig()
    config_path: Optional[Path] = getattr(args, "config", None)
    if config_path is not None:
        try:
            config = ResourceConfig.from_file(config_path)
        except ConfigError as e:
            print(f"Warning: Could not load config file: {e}", file=sys.stderr)

    if getattr(args, "strict", False):
        config = config.override(io__errors="strict")
    if not (getattr(args, "verbose", False) or getattr(args, "quiet", False)):
        logging.getLogger("xml_resource").setLevel(config.logging_level)
    return config


def _open_buffer(path: Path, config: ResourceConfig) -> Optional[XMLBuffer]:
    buffer = XMLBuffer(config=config.io, correlation_id=config.correlation_id)
    result = buffer.load(path)
    if not result:
        print(f"Error while loading XML: {result.message}", file=sys.stderr)
        return None
    return buffer


def cmd_run(args: argparse.Namespace) -> int:
    """Handle run command: load, list spans, insert and erase, save."""
    config = load_config(args)
    input_path = args.input or Path(config.input_path)
    output_path = args.output or Path(config.output_path)
    name = args.name or config.edit.target_name
    new_element = args.element if args.element is not None else config.edit.new_element

    buffer = _open_buffer(input_path, config)
    if buffer is None:
        return EXIT_FAILURE
    print("XML loaded successfully")

    for span in TagCursor(buffer):
        print(f"Current Element: {span}")

    found = find(name, buffer)
    if found.current_span:
        print(f"Element found: {found.current_span}")

        if add(new_element, found):
            print("New element added successfully.")
        else:
            print("Error adding the new element.")

        if erase(found):
            print("Element erased successfully.")
        else:
            print("Error erasing the element.")
    else:
        print("Element not found.")

    result = buffer.save(output_path)
    if not result:
        print(f"Error while saving XML: {result.message}", file=sys.stderr)
        return EXIT_FAILURE
    print(f"XML saved in {output_path}.")
    return EXIT_SUCCESS


def cmd_spans(args: argparse.Namespace) -> int:
    """Handle spans command: print every tag span in document order."""
    config = load_config(args)
    buffer = _open_buffer(args.input, config)
    if buffer is None:
        return EXIT_FAILURE

    cursor = TagCursor(buffer)
    if args.format == "json":
        spans = []
        for span in cursor:
            spans.append({"span": span, "start": cursor.position - len(span), "end": cursor.position})
        print(json.dumps(spans, indent=2))
    else:
        for span in cursor:
            print(span)
    return EXIT_SUCCESS


def cmd_find(args: argparse.Namespace) -> int:
    """Handle find command: report the first span matching a name."""
    config = load_config(args)
    buffer = _open_buffer(args.input, config)
    if buffer is None:
        return EXIT_FAILURE

    cursor = find(args.name, buffer)
    if not cursor.current_span:
        print(f"Element not found: {args.name}")
        return EXIT_FAILURE

    start = cursor.position - len(cursor.current_span)
    print(f"Element found: {cursor.current_span} at offset {start}")
    return EXIT_SUCCESS


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="xml-resource",
        description="Locate, insert and erase XML tags in raw text files",
    )

    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config", "-c",
        type=Path,
        help="Configuration file path (JSON)"
    )
    common.add_argument(
        "--strict",
        action="store_true",
        help="Fail on bytes that are not valid in the configured encoding"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Run command
    run_parser = subparsers.add_parser(
        "run", parents=[common], help="Load, edit and save an XML file"
    )
    run_parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="XML file to edit (default: tree.xml)"
    )
    run_parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Output file (default: new_tree.xml)"
    )
    run_parser.add_argument(
        "--name", "-n",
        help="Element name to locate (default: li)"
    )
    run_parser.add_argument(
        "--element", "-e",
        help="Literal text inserted before the located element"
    )

    # Spans command
    spans_parser = subparsers.add_parser(
        "spans", parents=[common], help="List tag spans of an XML file"
    )
    spans_parser.add_argument("input", type=Path, help="XML file to scan")
    spans_parser.add_argument(
        "--format", "-f",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)"
    )

    # Find command
    find_parser = subparsers.add_parser(
        "find", parents=[common], help="Locate the first span matching a name"
    )
    find_parser.add_argument("input", type=Path, help="XML file to search")
    find_parser.add_argument("name", help="Element name (matched as '<name' prefix)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_FAILURE

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    elif args.quiet:
        logging.basicConfig(level=logging.ERROR)

    logger = get_logger(__name__, component="cli")
    logger.debug("Dispatching command", extra={"command": args.command})

    handlers = {
        "run": cmd_run,
        "spans": cmd_spans,
        "find": cmd_find,
    }
    try:
        return handlers[args.command](args)
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
