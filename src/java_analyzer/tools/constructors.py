"""
Constructor analysis queries.

Both queries only look at class types and ignore private constructors.
"""

from typing import Sequence

from ..java_parser import CompilationUnit
from .report import ReportLine, iter_classes


def many_constructors(cus: Sequence[CompilationUnit], threshold: int) -> list[ReportLine]:
    """
    Find classes with threshold or more non-private constructors.

    Args:
        cus: Compilation units, in load order
        threshold: Minimum number of non-private constructors

    Returns:
        One line per matching class: ``<qualifiedName> : <count>``
    """
    lines = []
    for cl in iter_classes(cus):
        count = len(cl.non_private_constructors())
        if count >= threshold:
            lines.append(ReportLine(cl.qualified_name, count))
    return lines


def many_constructor_parameters(cus: Sequence[CompilationUnit], threshold: int) -> list[ReportLine]:
    """
    Find non-private constructors taking threshold or more parameters.

    Args:
        cus: Compilation units, in load order
        threshold: Minimum number of parameters

    Returns:
        One line per matching constructor:
        ``<qualifiedName>.<Name(Type, ...)> : <count>``
    """
    lines = []
    for cl in iter_classes(cus):
        for ctor in cl.non_private_constructors():
            count = len(ctor.parameters)
            if count >= threshold:
                lines.append(ReportLine(f"{cl.qualified_name}.{ctor.signature()}", count))
    return lines
