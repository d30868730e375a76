"""
MCP Server entry point - Java Analyzer.

Exposes the batch queries as MCP tools. Each tool loads the requested
directory from scratch; nothing is kept between calls.

Environment variables: see java_analyzer.config.
"""

from __future__ import annotations

import argparse
import logging
import sys

from fastmcp import FastMCP

from . import __version__
from .cli import LOG_FORMAT
from .config import get_config
from .java_parser import CompilationUnit, load_directory, types_of
from .tools import get_query

logger = logging.getLogger(__name__)

# Initialize MCP server
mcp = FastMCP(
    name="JavaAnalyzer",
    version=__version__,
)


def _load(directory: str) -> list[CompilationUnit]:
    return [cu for cu in load_directory(directory) if cu is not None]


def _run_query(name: str, directory: str, threshold: int) -> dict:
    if threshold < 0:
        raise ValueError("threshold must be a number equal or greater to 0")
    cus = _load(directory)
    lines = [str(line) for line in get_query(name)(cus, threshold)]
    return {"directory": directory, "files": len(cus), "lines": lines, "count": len(lines)}


# ============================================================================
# Tools
# ============================================================================


def many_constructors(directory: str, threshold: int = 0) -> dict:
    """
    Find classes with `threshold` or more non-private constructors.

    Args:
        directory: Directory containing the Java sources.
        threshold: Minimum number of non-private constructors (>= 0).

    Returns:
        A dict with:
        - directory: str
        - files: number of Java files parsed
        - lines: list of "<qualifiedName> : <count>"
        - count: number of lines
    """
    return _run_query("mc", directory, threshold)


def many_constructor_parameters(directory: str, threshold: int = 0) -> dict:
    """
    Find non-private constructors taking `threshold` or more parameters.

    Args:
        directory: Directory containing the Java sources.
        threshold: Minimum number of parameters (>= 0).

    Returns:
        Same shape as many_constructors; lines are
        "<qualifiedName>.<Name(Type, ...)> : <count>".
    """
    return _run_query("mcp", directory, threshold)


def singleton_types(directory: str) -> dict:
    """
    Classify singleton classes and enums.

    Args:
        directory: Directory containing the Java sources.

    Returns:
        Same shape as many_constructors; lines are
        "<qualifiedName> : publicField|staticFactory|singletonEnum".
    """
    return _run_query("st", directory, 0)


def list_types(directory: str) -> dict:
    """
    List the classes and enums declared in a directory.

    Args:
        directory: Directory containing the Java sources.

    Returns:
        A dict with:
        - directory: str
        - files: number of Java files parsed
        - types: list of type details (name, kind, constructors, fields, methods, enum_entries)
        - count: number of types
    """
    cus = _load(directory)
    types = [t.to_dict() for cu in cus for t in types_of(cu)]
    return {"directory": directory, "files": len(cus), "types": types, "count": len(types)}


def register_tools():
    """Register MCP tools."""
    mcp.tool(description="Classes with N or more non-private constructors")(many_constructors)
    mcp.tool(description="Non-private constructors with N or more parameters")(
        many_constructor_parameters
    )
    mcp.tool(description="Singleton classes and enums")(singleton_types)
    mcp.tool(description="Classes and enums declared in a directory")(list_types)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="java-analyzer-mcp",
        description="Java Analyzer MCP Server",
    )

    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="MCP transport (default: stdio)",
    )
    parser.add_argument(
        "--mcp-host",
        default="127.0.0.1",
        help="Host for http/sse transport (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--mcp-port",
        type=int,
        default=8000,
        help="Port for http/sse transport (default: 8000)",
    )
    parser.add_argument(
        "--mcp-path",
        default="/mcp",
        help="Path prefix for http transport (default: /mcp)",
    )

    return parser


def main():
    """Run the MCP server."""
    args = _build_arg_parser().parse_args(sys.argv[1:])
    logging.basicConfig(
        level=get_config().log_level,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    register_tools()

    if args.transport == "stdio":
        mcp.run()
    elif args.transport == "http":
        mcp.run(transport="http", host=args.mcp_host, port=args.mcp_port, path=args.mcp_path)
    else:
        mcp.run(transport="sse", host=args.mcp_host, port=args.mcp_port)


if __name__ == "__main__":
    main()
