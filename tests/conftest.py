"""Shared fixtures for Java Analyzer tests."""

import textwrap
from pathlib import Path

import pytest

from java_analyzer.config import reset_config
from java_analyzer.java_parser import (
    CompilationUnit,
    ConstructorInfo,
    EnumEntryInfo,
    FieldInfo,
    MethodInfo,
    ParameterInfo,
    TypeInfo,
    TypeKind,
    Visibility,
    set_parser,
)


@pytest.fixture(autouse=True)
def reset_globals():
    """Give every test a fresh config and parser."""
    reset_config()
    set_parser(None)
    yield
    reset_config()
    set_parser(None)


def make_class(
    name: str,
    package: str = "",
    ctors: int = 0,
    private_ctors: int = 0,
    fields: tuple[FieldInfo, ...] = (),
    methods: tuple[MethodInfo, ...] = (),
) -> TypeInfo:
    """Build a class with ``ctors`` public no-arg constructors plus private ones."""
    constructors = tuple(ConstructorInfo(name, Visibility.PUBLIC) for _ in range(ctors))
    constructors += tuple(ConstructorInfo(name, Visibility.PRIVATE) for _ in range(private_ctors))
    return TypeInfo(
        name=name,
        kind=TypeKind.CLASS,
        package=package,
        constructors=constructors,
        fields=fields,
        methods=methods,
    )


def make_enum(name: str, *entries: str, package: str = "") -> TypeInfo:
    return TypeInfo(
        name=name,
        kind=TypeKind.ENUM,
        package=package,
        enum_entries=tuple(EnumEntryInfo(e) for e in entries),
    )


def make_unit(*types: TypeInfo, path: str = "Unit.java") -> CompilationUnit:
    package = types[0].package if types else ""
    return CompilationUnit(path=path, package=package, types=tuple(types))


def param(type_: str, name: str = "p", varargs: bool = False) -> ParameterInfo:
    return ParameterInfo(name=name, type=type_, is_varargs=varargs)


FOO_SOURCE = """
package com.example;

public class Foo {
    public static final Foo INSTANCE = new Foo();
    private int a, b;

    public Foo() {}
    protected Foo(int x, String y) {}
    Foo(String... names) {}
    private Foo(long z) {}

    public static Foo getInstance() { return INSTANCE; }
    void helper() {}
}
"""

REGISTRY_SOURCE = """
package com.example;

public enum Registry {
    INSTANCE;

    private final int x = 0;

    Registry() {}

    public int get() { return x; }
}
"""

DEFAULT_PACKAGE_SOURCE = """
interface Shape {}

class Bar {
    Bar(int a) {}
}
"""

BROKEN_SOURCE = "public class Broken { void x( }"


def write_java(root: Path, relative: str, source: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(source), encoding="utf-8")
    return path


@pytest.fixture
def java_project(tmp_path: Path) -> Path:
    """A small project: two valid packages, a default-package file, a broken file."""
    write_java(tmp_path, "com/example/Foo.java", FOO_SOURCE)
    write_java(tmp_path, "com/example/Registry.java", REGISTRY_SOURCE)
    write_java(tmp_path, "Bar.java", DEFAULT_PACKAGE_SOURCE)
    write_java(tmp_path, "Broken.java", BROKEN_SOURCE)
    (tmp_path / "README.txt").write_text("not java", encoding="utf-8")
    return tmp_path
