"""Tests for the analysis queries."""

from conftest import make_class, make_enum, make_unit, param
from java_analyzer.java_parser import (
    ConstructorInfo,
    FieldInfo,
    MethodInfo,
    TypeInfo,
    TypeKind,
    Visibility,
)
from java_analyzer.tools import (
    QUERIES,
    get_query,
    many_constructor_parameters,
    many_constructors,
    singleton_kind,
    singleton_types,
)


def _lines(report):
    return [str(line) for line in report]


class TestManyConstructors:
    """Test the many-constructors query."""

    def test_counts_only_non_private(self):
        """Test private constructors are not counted."""
        cus = [make_unit(make_class("Foo", ctors=3, private_ctors=4))]
        assert _lines(many_constructors(cus, 3)) == ["Foo : 3"]
        assert _lines(many_constructors(cus, 4)) == []

    def test_protected_and_package_count(self):
        """Test protected and package constructors are non-private."""
        cl = TypeInfo(
            name="Foo",
            kind=TypeKind.CLASS,
            constructors=(
                ConstructorInfo("Foo", Visibility.PROTECTED),
                ConstructorInfo("Foo", Visibility.PACKAGE),
            ),
        )
        assert _lines(many_constructors([make_unit(cl)], 2)) == ["Foo : 2"]

    def test_zero_threshold_includes_classes_without_constructors(self):
        """Test th=0 reports every class, enums excluded."""
        cus = [make_unit(make_class("Empty"), make_enum("Color", "RED"))]
        assert _lines(many_constructors(cus, 0)) == ["Empty : 0"]

    def test_encounter_order_and_qualified_names(self):
        """Test units and types are reported in order."""
        cus = [
            make_unit(make_class("B", package="x.y", ctors=1), make_class("A", package="x.y", ctors=2)),
            make_unit(make_class("C", ctors=5)),
        ]
        assert _lines(many_constructors(cus, 1)) == ["x.y.B : 1", "x.y.A : 2", "C : 5"]

    def test_does_not_mutate_input(self):
        """Test the input sequence is left as it was."""
        cus = [make_unit(make_class("Foo", ctors=1))]
        snapshot = list(cus)
        many_constructors(cus, 0)
        assert cus == snapshot


class TestManyConstructorParameters:
    """Test the many-constructor-parameters query."""

    def _foo(self):
        return TypeInfo(
            name="Foo",
            kind=TypeKind.CLASS,
            package="p",
            constructors=(
                ConstructorInfo("Foo", Visibility.PUBLIC),
                ConstructorInfo("Foo", Visibility.PUBLIC, (param("int"), param("String"))),
                ConstructorInfo("Foo", Visibility.PACKAGE, (param("String", varargs=True),)),
                ConstructorInfo("Foo", Visibility.PRIVATE, (param("a"), param("b"), param("c"))),
            ),
        )

    def test_signature_and_count(self):
        """Test each matching constructor gets its own line."""
        cus = [make_unit(self._foo())]
        assert _lines(many_constructor_parameters(cus, 2)) == ["p.Foo.Foo(int, String) : 2"]

    def test_varargs_signature(self):
        """Test varargs parameters render with dots."""
        cus = [make_unit(self._foo())]
        assert _lines(many_constructor_parameters(cus, 1)) == [
            "p.Foo.Foo(int, String) : 2",
            "p.Foo.Foo(String...) : 1",
        ]

    def test_zero_threshold_includes_no_arg(self):
        """Test th=0 includes parameterless constructors but never private ones."""
        lines = _lines(many_constructor_parameters([make_unit(self._foo())], 0))
        assert lines[0] == "p.Foo.Foo() : 0"
        assert len(lines) == 3


class TestSingletonTypes:
    """Test singleton classification."""

    def _field(self, name="INSTANCE", visibility=Visibility.PUBLIC, is_static=True):
        return FieldInfo(name=name, type="Foo", visibility=visibility, is_static=is_static)

    def _method(self, name="getInstance", visibility=Visibility.PUBLIC, is_static=True):
        return MethodInfo(name=name, return_type="Foo", visibility=visibility, is_static=is_static)

    def test_public_field(self):
        """Test a static INSTANCE field."""
        cl = make_class("Foo", fields=(self._field(),))
        assert singleton_kind(cl) == "publicField"

    def test_package_field(self):
        """Test package-level access also counts."""
        cl = make_class("Foo", fields=(self._field(visibility=Visibility.PACKAGE),))
        assert singleton_kind(cl) == "publicField"

    def test_field_wins_over_factory(self):
        """Test first-match-wins when both forms are present."""
        cl = make_class("Foo", fields=(self._field(),), methods=(self._method(),))
        assert _lines(singleton_types([make_unit(cl)], 0)) == ["Foo : publicField"]

    def test_static_factory(self):
        """Test a static getInstance method."""
        cl = make_class("Foo", methods=(self._method(),))
        assert singleton_kind(cl) == "staticFactory"

    def test_rejected_members(self):
        """Test private, protected, non-static and misnamed members."""
        candidates = [
            make_class("A", fields=(self._field(visibility=Visibility.PRIVATE),)),
            make_class("B", fields=(self._field(visibility=Visibility.PROTECTED),)),
            make_class("C", fields=(self._field(is_static=False),)),
            make_class("D", fields=(self._field(name="instance"),)),
            make_class("E", methods=(self._method(visibility=Visibility.PRIVATE),)),
            make_class("F", methods=(self._method(is_static=False),)),
            make_class("G", methods=(self._method(name="instance"),)),
        ]
        assert [singleton_kind(c) for c in candidates] == [None] * len(candidates)

    def test_singleton_enum(self):
        """Test an enum with exactly one INSTANCE entry."""
        assert singleton_kind(make_enum("Reg", "INSTANCE")) == "singletonEnum"
        assert singleton_kind(make_enum("Two", "INSTANCE", "OTHER")) is None
        assert singleton_kind(make_enum("Other", "ONLY")) is None
        assert singleton_kind(make_enum("Empty")) is None

    def test_enum_fields_are_not_checked(self):
        """Test an enum is never publicField even with a static INSTANCE field."""
        en = TypeInfo(name="E", kind=TypeKind.ENUM, fields=(self._field(),))
        assert singleton_kind(en) is None

    def test_threshold_is_ignored(self):
        """Test the threshold has no effect."""
        cus = [make_unit(make_class("Foo", methods=(self._method(),)), make_enum("Reg", "INSTANCE"))]
        expected = ["Foo : staticFactory", "Reg : singletonEnum"]
        assert _lines(singleton_types(cus, 0)) == expected
        assert _lines(singleton_types(cus, 100)) == expected


class TestRegistry:
    """Test the query name registry."""

    def test_names(self):
        """Test the three short names."""
        assert QUERIES == {
            "mc": many_constructors,
            "mcp": many_constructor_parameters,
            "st": singleton_types,
        }

    def test_unknown(self):
        """Test unknown names map to None."""
        assert get_query("xx") is None
        assert get_query(None) is None
