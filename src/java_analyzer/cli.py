"""
Command line entry point - Java Analyzer.

Batch mode runs one query over a directory:
    java-analyzer --dir src/ --query mc --threshold 3

Interactive mode loads a codebase once and answers repeated commands:
    java-analyzer --interactive

Environment variables: see java_analyzer.config.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from .config import get_config, parse_log_level
from .errors import ConfigurationError
from .interactive import Loader, run_interactive
from .java_parser import load_directory
from .tools import QUERIES, QUERY_DESCRIPTIONS, get_query

LOG_FORMAT = "[Java Analyzer] %(levelname)s %(name)s: %(message)s"


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message: str):
        raise ConfigurationError(message)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="java-analyzer",
        description="Static analysis queries over a directory of Java sources",
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="store_true",
        help="Show help",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Launch interactive mode (ignores --dir and --query)",
    )
    parser.add_argument(
        "-d",
        "--dir",
        metavar="DIRNAME",
        default=None,
        help="REQUIRED: Directory containing the code to check",
    )
    query_help = ", ".join(f"{name}={desc}" for name, desc in QUERY_DESCRIPTIONS.items())
    parser.add_argument(
        "-q",
        "--query",
        metavar="QUERYNAME",
        default=None,
        help=f"REQUIRED: Query to perform: {query_help}",
    )
    parser.add_argument(
        "-t",
        "--threshold",
        metavar="VALUE",
        default="0",
        help="Threshold to be used in the query (default: 0)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: JAVA_ANALYZER_LOG_LEVEL or WARNING)",
    )

    return parser


def _parse_threshold(value: str) -> int:
    """Optional sign followed by ASCII digits only."""
    digits = value[1:] if value[:1] in ("+", "-") else value
    if not (digits.isascii() and digits.isdigit()):
        raise ConfigurationError(f"Invalid threshold: {value!r}")
    threshold = int(value)
    if threshold < 0:
        raise ConfigurationError("Threshold must be a number equal or greater to 0")
    return threshold


def _validate_batch_args(args: argparse.Namespace) -> int:
    """
    Check the batch-mode arguments.

    Returns:
        The parsed threshold

    Raises:
        ConfigurationError: Carrying every problem found
    """
    errors = []
    if not args.dir:
        errors.append("Missing required option --dir")
    if not args.query:
        errors.append("Missing required option --query")
    elif get_query(args.query) is None:
        errors.append(f"Unknown query {args.query!r}, expected one of: {', '.join(QUERIES)}")

    threshold = 0
    try:
        threshold = _parse_threshold(args.threshold)
    except ConfigurationError as e:
        errors.append(str(e))

    if errors:
        raise ConfigurationError("Incorrect usage", errors)
    return threshold


def _configure_logging(level_name: str | None) -> None:
    level = parse_log_level(level_name, get_config().log_level)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _incorrect_usage(parser: argparse.ArgumentParser, errors: list[str], stdout: TextIO) -> int:
    print("Incorrect usage", file=stdout)
    for e in errors:
        print(f" * {e}", file=stdout)
    print(parser.format_help(), file=stdout)
    return 1


def run_batch(
    directory: str,
    query_name: str,
    threshold: int = 0,
    loader: Loader | None = None,
    stdout: TextIO | None = None,
) -> None:
    """
    Run one query over a directory and print its report.

    Args:
        directory: Directory containing the Java sources
        query_name: Short query name (mc, mcp, st)
        threshold: Threshold passed to the query
        loader: AST provider (defaults to the global parser)
        stdout: Output stream (default: sys.stdout)
    """
    stdout = stdout or sys.stdout
    query = get_query(query_name)
    if query is None:
        raise ConfigurationError(f"Unknown query {query_name!r}")

    loaded = (loader or load_directory)(directory)
    cus = [cu for cu in loaded if cu is not None]
    print(f"Considering {len(cus)} Java files", file=stdout)
    for line in query(cus, threshold):
        print(line, file=stdout)


def main(argv: list[str] | None = None) -> int:
    """Run the command line front end; returns the process exit code."""
    parser = _build_arg_parser()
    stdout = sys.stdout
    try:
        args = parser.parse_args(sys.argv[1:] if argv is None else argv)
        _configure_logging(args.log_level)
    except ConfigurationError as e:
        return _incorrect_usage(parser, e.errors, stdout)

    if args.interactive:
        run_interactive()
        return 0

    if args.help:
        print(parser.format_help(), file=stdout)
        return 0

    try:
        threshold = _validate_batch_args(args)
    except ConfigurationError as e:
        return _incorrect_usage(parser, e.errors, stdout)

    run_batch(args.dir, args.query, threshold, stdout=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
