"""Report lines produced by the analysis queries."""

from dataclasses import dataclass
from typing import Callable, Iterator, Sequence

from ..java_parser import CompilationUnit, TypeInfo, types_of


@dataclass(frozen=True)
class ReportLine:
    """A qualified name paired with a count or a classification label."""
    name: str
    value: int | str

    def __str__(self) -> str:
        return f"{self.name} : {self.value}"


# (units, threshold) -> report lines
QueryFunction = Callable[[Sequence[CompilationUnit], int], list[ReportLine]]


def iter_types(cus: Sequence[CompilationUnit]) -> Iterator[TypeInfo]:
    """Yield every type of every unit, in encounter order."""
    for cu in cus:
        yield from types_of(cu)


def iter_classes(cus: Sequence[CompilationUnit]) -> Iterator[TypeInfo]:
    """Yield every class type of every unit, in encounter order."""
    return (t for t in iter_types(cus) if t.is_class)
