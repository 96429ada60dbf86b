#!/usr/bin/env python3

"""Unit tests for attached Get/Set pair resolution."""

import pytest

from standardui_codegen.domain.errors import StructuralError
from standardui_codegen.domain.models.declaration import DeclarationInfo, MethodInfo, ParameterInfo
from standardui_codegen.domain.services.parsing import AttachedPairResolver, make_declaration_unit

ELEMENT = ParameterInfo("element", "IUIElement")
VALUE = ParameterInfo("value", "double")


def _attached(*methods: MethodInfo) -> DeclarationInfo:
    return DeclarationInfo(name="ICanvasAttached", namespace="Microsoft.StandardUI.Controls", methods=methods)


def _getter(name: str, *parameters: ParameterInfo) -> MethodInfo:
    return MethodInfo(name, "double", parameters or (ELEMENT,))


def _setter(name: str, *parameters: ParameterInfo) -> MethodInfo:
    return MethodInfo(name, "void", parameters or (ELEMENT, VALUE))


@pytest.fixture
def resolver() -> AttachedPairResolver:
    return AttachedPairResolver()


class TestAttachedPairResolver:
    """Tests for AttachedPairResolver.resolve."""

    @pytest.mark.unit
    def test_pairs_getters_with_setters(self, resolver: AttachedPairResolver) -> None:
        pairs = resolver.resolve(
            _attached(_getter("GetLeft"), _setter("SetLeft"), _getter("GetTop"), _setter("SetTop"))
        )

        assert [pair.property_name for pair in pairs] == ["Left", "Top"]
        assert all(not pair.is_read_only for pair in pairs)
        assert pairs[0].setter is not None
        assert pairs[0].setter.name == "SetLeft"
        assert pairs[0].value_type == "double"
        assert pairs[0].element_type == "IUIElement"

    @pytest.mark.unit
    def test_pairs_follow_getter_order(self, resolver: AttachedPairResolver) -> None:
        pairs = resolver.resolve(
            _attached(_setter("SetTop"), _getter("GetLeft"), _getter("GetTop"), _setter("SetLeft"))
        )
        assert [pair.property_name for pair in pairs] == ["Left", "Top"]

    @pytest.mark.unit
    def test_getter_without_setter_is_read_only(self, resolver: AttachedPairResolver) -> None:
        pairs = resolver.resolve(_attached(_getter("GetZIndex")))
        assert len(pairs) == 1
        assert pairs[0].is_read_only

    @pytest.mark.unit
    def test_empty_declaration(self, resolver: AttachedPairResolver) -> None:
        assert resolver.resolve(_attached()) == ()

    @pytest.mark.unit
    def test_method_without_prefix(self, resolver: AttachedPairResolver) -> None:
        with pytest.raises(StructuralError) as exc_info:
            resolver.resolve(_attached(_getter("GetLeft"), MethodInfo("ClearLeft", "void", (ELEMENT,))))

        assert exc_info.value.subject == "ICanvasAttached.ClearLeft"
        assert "doesn't start with Get or Set" in str(exc_info.value)

    @pytest.mark.unit
    def test_orphaned_setter(self, resolver: AttachedPairResolver) -> None:
        with pytest.raises(StructuralError, match="SetTop has no matching GetTop method"):
            resolver.resolve(_attached(_getter("GetLeft"), _setter("SetTop")))

    @pytest.mark.unit
    def test_setter_value_type_must_match_getter(self, resolver: AttachedPairResolver) -> None:
        setter = _setter("SetLeft", ELEMENT, ParameterInfo("value", "int"))
        with pytest.raises(StructuralError) as exc_info:
            resolver.resolve(_attached(_getter("GetLeft"), setter))
        assert exc_info.value.subject == "ICanvasAttached.SetLeft"
        assert "value type int doesn't match GetLeft return type double" in str(exc_info.value)

    @pytest.mark.unit
    def test_setter_value_type_ignores_spacing(self, resolver: AttachedPairResolver) -> None:
        getter = MethodInfo("GetTags", "IList<string>", (ELEMENT,))
        setter = _setter("SetTags", ELEMENT, ParameterInfo("value", "IList< string >"))
        pairs = resolver.resolve(_attached(getter, setter))
        assert pairs[0].setter is setter

    @pytest.mark.unit
    def test_getter_parameter_count(self, resolver: AttachedPairResolver) -> None:
        with pytest.raises(StructuralError, match="should take 1 parameter"):
            resolver.resolve(_attached(_getter("GetLeft", ELEMENT, VALUE)))

    @pytest.mark.unit
    def test_setter_parameter_count(self, resolver: AttachedPairResolver) -> None:
        with pytest.raises(StructuralError, match="should take 2 parameter"):
            resolver.resolve(_attached(_getter("GetLeft"), _setter("SetLeft", ELEMENT)))

    @pytest.mark.unit
    def test_accessor_must_name_property(self, resolver: AttachedPairResolver) -> None:
        with pytest.raises(StructuralError, match="doesn't name a property"):
            resolver.resolve(_attached(_getter("Get")))


class TestMakeDeclarationUnit:
    """Tests for make_declaration_unit."""

    @pytest.mark.unit
    def test_without_companion(self) -> None:
        declaration = DeclarationInfo(name="ILine", namespace="Microsoft.StandardUI.Shapes")
        unit = make_declaration_unit(declaration)
        assert unit.declaration is declaration
        assert unit.attached_declaration is None
        assert unit.attached_pairs == ()

    @pytest.mark.unit
    def test_with_companion(self) -> None:
        declaration = DeclarationInfo(name="ICanvas", namespace="Microsoft.StandardUI.Controls")
        unit = make_declaration_unit(declaration, _attached(_getter("GetLeft"), _setter("SetLeft")))
        assert [pair.property_name for pair in unit.attached_pairs] == ["Left"]

    @pytest.mark.unit
    def test_orphan_fails_at_load_time(self) -> None:
        declaration = DeclarationInfo(name="ICanvas", namespace="Microsoft.StandardUI.Controls")
        with pytest.raises(StructuralError):
            make_declaration_unit(declaration, _attached(_setter("SetLeft")))
