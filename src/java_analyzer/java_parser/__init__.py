"""
Java Source Parser.

Uses tree-sitter to parse Java source files into compilation units.

Key Components:
- JavaParser: Main parser class
- get_parser(): Get the global parser instance
- load_directory(): Parse every Java file under a directory
"""

from .model import (
    CompilationUnit,
    ConstructorInfo,
    EnumEntryInfo,
    FieldInfo,
    MethodInfo,
    ParameterInfo,
    TypeInfo,
    TypeKind,
    Visibility,
    types_of,
)
from .parser import (
    JavaParser,
    discover_java_files,
    get_parser,
    load_directory,
    set_parser,
)
from .queries import QUERY_PATTERNS

__all__ = [
    # Parser
    "JavaParser",
    "discover_java_files",
    "get_parser",
    "set_parser",
    "load_directory",
    # Data classes
    "CompilationUnit",
    "TypeInfo",
    "TypeKind",
    "Visibility",
    "ConstructorInfo",
    "FieldInfo",
    "MethodInfo",
    "ParameterInfo",
    "EnumEntryInfo",
    "types_of",
    # Queries
    "QUERY_PATTERNS",
]
