"""
Singleton detection.

Recognized forms, checked in this order:
- publicField: class with a public or package-level static field INSTANCE
- staticFactory: class with a public or package-level static method getInstance
- singletonEnum: enum whose only entry is INSTANCE
"""

from typing import Sequence

from ..java_parser import CompilationUnit, TypeInfo
from .report import ReportLine, iter_types

PUBLIC_FIELD = "publicField"
STATIC_FACTORY = "staticFactory"
SINGLETON_ENUM = "singletonEnum"


def is_public_field_singleton(cl: TypeInfo) -> bool:
    return any(
        f.visibility.is_public_or_package and f.is_static and f.name == "INSTANCE"
        for f in cl.fields
    )


def is_static_factory_singleton(cl: TypeInfo) -> bool:
    return any(
        m.visibility.is_public_or_package and m.is_static and m.name == "getInstance"
        for m in cl.methods
    )


def is_singleton_enum(en: TypeInfo) -> bool:
    return len(en.enum_entries) == 1 and en.enum_entries[0].name == "INSTANCE"


def singleton_kind(t: TypeInfo) -> str | None:
    """Return the singleton classification of a type, or None."""
    if t.is_class and is_public_field_singleton(t):
        return PUBLIC_FIELD
    if t.is_class and is_static_factory_singleton(t):
        return STATIC_FACTORY
    if t.is_enum and is_singleton_enum(t):
        return SINGLETON_ENUM
    return None


def singleton_types(cus: Sequence[CompilationUnit], threshold: int = 0) -> list[ReportLine]:
    """
    Classify the singleton types of a codebase.

    ``threshold`` is accepted so the function fits the query registry;
    it does not affect the result.

    Returns:
        One line per classified type: ``<qualifiedName> : <classification>``
    """
    lines = []
    for t in iter_types(cus):
        kind = singleton_kind(t)
        if kind is not None:
            lines.append(ReportLine(t.qualified_name, kind))
    return lines
