"""
Java Parser - AST provider built on tree-sitter.

Turns a directory of Java sources into CompilationUnit objects holding
the top-level classes and enums with their constructors, fields,
methods and enum entries.
"""

import logging
from pathlib import Path
from typing import Any, Iterator

import tree_sitter_java as tsjava
from tree_sitter import Language, Parser, Query as TSQuery, QueryCursor

from ..config import Config, get_config
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
)
from .queries import QUERY_PATTERNS

logger = logging.getLogger(__name__)

_VISIBILITY_KEYWORDS = {
    "public": Visibility.PUBLIC,
    "protected": Visibility.PROTECTED,
    "private": Visibility.PRIVATE,
}

_TYPE_KINDS = {
    "class_declaration": TypeKind.CLASS,
    "enum_declaration": TypeKind.ENUM,
}


def discover_java_files(directory: str | Path, suffixes: tuple[str, ...] = (".java",)) -> list[Path]:
    """
    Recursively list the source files under a directory.

    Args:
        directory: Root directory to walk
        suffixes: File name suffixes to accept

    Returns:
        Sorted list of matching regular files; empty if the directory
        does not exist or cannot be scanned.
    """
    base = Path(directory)
    try:
        if not base.is_dir():
            logger.warning("Not a directory, nothing to load: %s", directory)
            return []
        files = sorted(p for p in base.rglob("*") if p.is_file() and p.name.endswith(suffixes))
    except OSError as e:
        logger.warning("Cannot scan %s: %s", directory, e)
        return []

    logger.debug("Found %d source files under %s", len(files), directory)
    return files


# ============================================================================
# Node helpers
# ============================================================================

def _text(node: Any) -> str:
    return node.text.decode(errors="ignore") if node is not None else ""


def _line(node: Any) -> int:
    return node.start_point[0] + 1


def _modifier_keywords(node: Any) -> set[str]:
    """Collect the keyword modifiers (public, static, ...) of a declaration."""
    for child in node.children:
        if child.type == "modifiers":
            return {m.type for m in child.children if not m.is_named}
    return set()


def _visibility(keywords: set[str]) -> Visibility:
    for keyword, visibility in _VISIBILITY_KEYWORDS.items():
        if keyword in keywords:
            return visibility
    return Visibility.PACKAGE


class JavaParser:
    """
    Java source parser using tree-sitter.

    Produces immutable CompilationUnit objects. Files that cannot be
    read, or whose syntax tree contains errors while strict parsing is
    enabled, yield ``None``.
    """

    def __init__(self, config: Config | None = None):
        """Initialize the parser."""
        self._config = config or get_config()
        self._language = Language(tsjava.language())
        self._parser = Parser(self._language)
        self._query_cache: dict[str, TSQuery] = {}

        # Pre-compile common queries
        self._init_queries()

    def _init_queries(self) -> None:
        """Initialize commonly used queries."""
        for name, pattern in QUERY_PATTERNS.items():
            try:
                self._query_cache[name] = TSQuery(self._language, pattern)
            except Exception as e:
                logger.warning("Failed to compile query '%s': %s", name, e)

    def _captures(self, name: str, root: Any) -> list[dict[str, list[Any]]]:
        query = self._query_cache.get(name)
        if not query:
            return []
        # py-tree-sitter >= 0.25: Query execution is done via QueryCursor
        cursor = QueryCursor(query)
        return [captured for _, captured in cursor.matches(root)]

    # ========================================================================
    # Public API
    # ========================================================================

    def parse_source(self, source: str, path: str = "<string>") -> CompilationUnit | None:
        """
        Parse Java source text.

        Args:
            source: Java source code
            path: Path recorded on the resulting unit

        Returns:
            The compilation unit, or None if the source has syntax errors
            and strict parsing is enabled.
        """
        tree = self._parser.parse(source.encode("utf-8"))
        root = tree.root_node
        if root.has_error and self._config.strict_parse:
            logger.info("Skipping %s: syntax errors", path)
            return None

        package = self._extract_package(root)
        return CompilationUnit(
            path=path,
            package=package,
            types=self._extract_types(root, package),
        )

    def parse_file(self, file_path: str | Path) -> CompilationUnit | None:
        """Parse one Java file; None if it cannot be read or parsed."""
        path = Path(file_path)
        try:
            content = path.read_text(encoding=self._config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Skipping %s: %s", path, e)
            return None
        return self.parse_source(content, str(path))

    def load_directory(self, directory: str | Path) -> list[CompilationUnit | None]:
        """
        Parse every source file under a directory.

        Returns one entry per discovered file, in discovery order; entries
        for files that failed to parse are None and are left for the
        caller to filter.
        """
        files = discover_java_files(directory, self._config.source_suffixes)
        return [self.parse_file(f) for f in files]

    # ========================================================================
    # Type Extraction
    # ========================================================================

    def _extract_package(self, root: Any) -> str:
        for captured in self._captures("PACKAGE", root):
            names = captured.get("package_name") or []
            if names:
                return _text(names[0])
        return ""

    def _extract_types(self, root: Any, package: str) -> tuple[TypeInfo, ...]:
        type_nodes = []
        for captured in self._captures("TYPE", root):
            nodes = captured.get("type") or []
            if nodes:
                type_nodes.append(nodes[0])
        type_nodes.sort(key=lambda n: n.start_byte)
        return tuple(self._extract_type_info(node, package) for node in type_nodes)

    def _extract_type_info(self, node: Any, package: str) -> TypeInfo:
        kind = _TYPE_KINDS[node.type]
        body = node.child_by_field_name("body")

        constructors: list[ConstructorInfo] = []
        fields: list[FieldInfo] = []
        methods: list[MethodInfo] = []
        entries: list[EnumEntryInfo] = []

        for member in self._iter_members(body):
            if member.type == "constructor_declaration":
                constructors.append(self._extract_constructor(member))
            elif member.type == "field_declaration":
                fields.extend(self._extract_fields(member))
            elif member.type == "method_declaration":
                methods.append(self._extract_method(member))
            elif member.type == "enum_constant":
                entries.append(
                    EnumEntryInfo(name=_text(member.child_by_field_name("name")), line=_line(member))
                )

        return TypeInfo(
            name=_text(node.child_by_field_name("name")),
            kind=kind,
            package=package,
            visibility=_visibility(_modifier_keywords(node)),
            constructors=tuple(constructors),
            fields=tuple(fields),
            methods=tuple(methods),
            enum_entries=tuple(entries),
            line=_line(node),
        )

    def _iter_members(self, body: Any) -> Iterator[Any]:
        """
        Yield the member declarations of a class_body or enum_body.

        Enum bodies list their constants first and keep the remaining
        members inside an enum_body_declarations node.
        """
        if body is None:
            return
        for child in body.named_children:
            if child.type == "enum_body_declarations":
                yield from child.named_children
            else:
                yield child

    def _extract_constructor(self, node: Any) -> ConstructorInfo:
        return ConstructorInfo(
            name=_text(node.child_by_field_name("name")),
            visibility=_visibility(_modifier_keywords(node)),
            parameters=self._extract_parameters(node.child_by_field_name("parameters")),
            line=_line(node),
        )

    def _extract_fields(self, node: Any) -> list[FieldInfo]:
        """One FieldInfo per declarator: ``int a, b;`` declares two fields."""
        keywords = _modifier_keywords(node)
        field_type = _text(node.child_by_field_name("type"))
        return [
            FieldInfo(
                name=_text(declarator.child_by_field_name("name")),
                type=field_type,
                visibility=_visibility(keywords),
                is_static="static" in keywords,
                line=_line(declarator),
            )
            for declarator in node.children_by_field_name("declarator")
        ]

    def _extract_method(self, node: Any) -> MethodInfo:
        keywords = _modifier_keywords(node)
        return MethodInfo(
            name=_text(node.child_by_field_name("name")),
            return_type=_text(node.child_by_field_name("type")),
            visibility=_visibility(keywords),
            is_static="static" in keywords,
            parameters=self._extract_parameters(node.child_by_field_name("parameters")),
            line=_line(node),
        )

    def _extract_parameters(self, param_list: Any) -> tuple[ParameterInfo, ...]:
        """Extract parameters from formal_parameters, skipping a receiver parameter."""
        if param_list is None:
            return ()

        params = []
        for child in param_list.named_children:
            if child.type == "formal_parameter":
                param_type = _text(child.child_by_field_name("type"))
                dimensions = child.child_by_field_name("dimensions")
                if dimensions is not None:
                    param_type += _text(dimensions)
                params.append(
                    ParameterInfo(name=_text(child.child_by_field_name("name")), type=param_type)
                )
            elif child.type == "spread_parameter":
                params.append(self._extract_spread_parameter(child))
        return tuple(params)

    def _extract_spread_parameter(self, node: Any) -> ParameterInfo:
        """``String... args``: the type is the first named child after any modifiers."""
        param_type = ""
        param_name = ""
        for child in node.named_children:
            if child.type == "modifiers":
                continue
            if child.type == "variable_declarator":
                param_name = _text(child.child_by_field_name("name"))
            elif not param_type:
                param_type = _text(child)
        return ParameterInfo(name=param_name or "unnamed", type=param_type or "unknown", is_varargs=True)


# ============================================================================
# Global Instance
# ============================================================================

_parser: JavaParser | None = None


def get_parser() -> JavaParser:
    """Get the global parser instance."""
    global _parser
    if _parser is None:
        _parser = JavaParser()
    return _parser


def set_parser(parser: JavaParser | None) -> None:
    """Set the global parser instance (useful for testing)."""
    global _parser
    _parser = parser


def load_directory(directory: str | Path) -> list[CompilationUnit | None]:
    """Load a directory with the global parser."""
    return get_parser().load_directory(directory)
