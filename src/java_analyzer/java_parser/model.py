"""
Data classes describing parsed Java sources.

Everything here is frozen: a CompilationUnit never changes once the
parser has produced it.
"""

from dataclasses import dataclass, field
from enum import Enum


class TypeKind(str, Enum):
    """Kind of a top-level type declaration."""

    CLASS = "class"
    ENUM = "enum"


class Visibility(str, Enum):
    """Java access level of a member."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PACKAGE = "package"  # no modifier
    PRIVATE = "private"

    @property
    def is_private(self) -> bool:
        return self is Visibility.PRIVATE

    @property
    def is_public_or_package(self) -> bool:
        return self in (Visibility.PUBLIC, Visibility.PACKAGE)


@dataclass(frozen=True)
class ParameterInfo:
    """A formal parameter of a constructor or method."""
    name: str
    type: str
    is_varargs: bool = False

    def signature(self) -> str:
        return f"{self.type}..." if self.is_varargs else self.type


@dataclass(frozen=True)
class ConstructorInfo:
    """Information about a constructor declaration."""
    name: str
    visibility: Visibility = Visibility.PACKAGE
    parameters: tuple[ParameterInfo, ...] = ()
    line: int = 0

    def signature(self) -> str:
        """Render as ``Name(Type1, Type2)``."""
        params = ", ".join(p.signature() for p in self.parameters)
        return f"{self.name}({params})"


@dataclass(frozen=True)
class FieldInfo:
    """Information about a single field declarator."""
    name: str
    type: str
    visibility: Visibility = Visibility.PACKAGE
    is_static: bool = False
    line: int = 0


@dataclass(frozen=True)
class MethodInfo:
    """Information about a method declaration."""
    name: str
    return_type: str
    visibility: Visibility = Visibility.PACKAGE
    is_static: bool = False
    parameters: tuple[ParameterInfo, ...] = ()
    line: int = 0


@dataclass(frozen=True)
class EnumEntryInfo:
    """An enum constant."""
    name: str
    line: int = 0


@dataclass(frozen=True)
class TypeInfo:
    """
    A class or enum declared at the top level of a compilation unit.

    ``kind`` tags the variant: ``enum_entries`` is only ever populated
    for enums, and queries check ``kind`` rather than the members present.
    """
    name: str
    kind: TypeKind
    package: str = ""
    visibility: Visibility = Visibility.PACKAGE
    constructors: tuple[ConstructorInfo, ...] = ()
    fields: tuple[FieldInfo, ...] = ()
    methods: tuple[MethodInfo, ...] = ()
    enum_entries: tuple[EnumEntryInfo, ...] = ()
    line: int = 0

    @property
    def qualified_name(self) -> str:
        return f"{self.package}.{self.name}" if self.package else self.name

    @property
    def is_class(self) -> bool:
        return self.kind is TypeKind.CLASS

    @property
    def is_enum(self) -> bool:
        return self.kind is TypeKind.ENUM

    def non_private_constructors(self) -> tuple[ConstructorInfo, ...]:
        return tuple(c for c in self.constructors if not c.visibility.is_private)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.qualified_name,
            "kind": self.kind.value,
            "line": self.line,
            "constructors": [
                {
                    "signature": c.signature(),
                    "visibility": c.visibility.value,
                    "line": c.line,
                }
                for c in self.constructors
            ],
            "fields": [
                {
                    "name": f.name,
                    "type": f.type,
                    "visibility": f.visibility.value,
                    "is_static": f.is_static,
                }
                for f in self.fields
            ],
            "methods": [
                {
                    "name": m.name,
                    "return_type": m.return_type,
                    "visibility": m.visibility.value,
                    "is_static": m.is_static,
                }
                for m in self.methods
            ],
            "enum_entries": [e.name for e in self.enum_entries],
        }


@dataclass(frozen=True)
class CompilationUnit:
    """The parsed form of one Java source file."""
    path: str
    package: str = ""
    types: tuple[TypeInfo, ...] = field(default_factory=tuple)


def types_of(unit: CompilationUnit) -> tuple[TypeInfo, ...]:
    """Return the types declared in a unit, in declaration order."""
    return unit.types
