#!/usr/bin/env python3

"""Unit tests for the tree-sitter based declaration parser."""

from pathlib import Path

import pytest

from standardui_codegen.domain.errors import StructuralError
from standardui_codegen.domain.models.declaration import MethodInfo, ParameterInfo, PropertyInfo
from standardui_codegen.domain.services.parsing import DeclarationParser


@pytest.fixture(scope="module")
def parser() -> DeclarationParser:
    return DeclarationParser()


class TestParseSource:
    """Tests for well-formed declaration sources."""

    @pytest.mark.unit
    def test_plain_declaration(self, parser: DeclarationParser, line_source: str) -> None:
        units = parser.parse_source(line_source)

        assert len(units) == 1
        declaration = units[0].declaration
        assert declaration.name == "ILine"
        assert declaration.namespace == "Microsoft.StandardUI.Shapes"
        assert declaration.base_types == ("IShape",)
        assert declaration.base_type == "IShape"
        assert declaration.properties == tuple(
            PropertyInfo(name, "double") for name in ("X1", "Y1", "X2", "Y2")
        )
        assert units[0].attached_declaration is None

    @pytest.mark.unit
    def test_companion_attached_declaration(self, parser: DeclarationParser, canvas_source: str) -> None:
        units = parser.parse_source(canvas_source)

        assert len(units) == 1
        unit = units[0]
        assert unit.declaration.name == "ICanvas"
        assert unit.declaration.usings == ("Microsoft.StandardUI.Controls",)
        assert unit.attached_declaration is not None
        assert unit.attached_declaration.name == "ICanvasAttached"
        assert unit.attached_declaration.methods[1] == MethodInfo(
            "SetLeft",
            "void",
            (ParameterInfo("element", "IUIElement"), ParameterInfo("value", "double")),
        )
        assert [pair.property_name for pair in unit.attached_pairs] == ["Left", "Top"]

    @pytest.mark.unit
    def test_property_attributes(self, parser: DeclarationParser) -> None:
        source = """\
using System.ComponentModel;

namespace Microsoft.StandardUI.Shapes
{
    public interface IShape : IUIElement
    {
        [DefaultValue(1.0)]
        double StrokeThickness { get; set; }

        [Fluent]
        IBrush? Fill { get; set; }

        [DefaultValueAttribute(PenLineCap.Flat)]
        PenLineCap StrokeLineCap { get; set; }

        IPathFigure[] Figures { get; set; }
    }
}
"""
        properties = parser.parse_source(source)[0].declaration.properties

        assert properties[0].default_value == "1.0"
        assert not properties[0].is_fluent
        assert properties[1].is_fluent
        assert properties[1].type_name == "IBrush?"
        assert properties[1].default_value is None
        assert properties[2].default_value == "PenLineCap.Flat"
        assert properties[2].attributes == ("DefaultValue",)
        assert properties[3].type_name == "IPathFigure[]"

    @pytest.mark.unit
    def test_multiple_declarations_keep_source_order(self, parser: DeclarationParser) -> None:
        source = """\
namespace Microsoft.StandardUI.Media
{
    // Brushes
    public interface IBrush
    {
    }

    public interface ISolidColorBrush : IBrush
    {
        Color Color { get; set; }
    }
}
"""
        units = parser.parse_source(source)
        assert [unit.declaration.name for unit in units] == ["IBrush", "ISolidColorBrush"]

    @pytest.mark.unit
    def test_parse_file_handles_bom(self, parser: DeclarationParser, tmp_path: Path, line_source: str) -> None:
        path = tmp_path / "ILine.cs"
        path.write_text(line_source, encoding="utf-8-sig")

        units = parser.parse_file(path)

        assert units[0].declaration.name == "ILine"
        assert units[0].declaration.source_file == path

    @pytest.mark.unit
    def test_parse_file_rejects_undecodable_bytes(self, parser: DeclarationParser, tmp_path: Path) -> None:
        path = tmp_path / "IBad.cs"
        path.write_bytes(b"namespace Microsoft.StandardUI { \xff\xfe }")

        with pytest.raises(StructuralError, match="Cannot read") as exc_info:
            parser.parse_file(path)

        assert exc_info.value.subject == str(path)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    @pytest.mark.unit
    def test_parse_file_missing_file(self, parser: DeclarationParser, tmp_path: Path) -> None:
        path = tmp_path / "IMissing.cs"
        with pytest.raises(StructuralError) as exc_info:
            parser.parse_file(path)
        assert exc_info.value.subject == str(path)

    @pytest.mark.unit
    def test_is_supported_file(self) -> None:
        assert DeclarationParser.is_supported_file(Path("ILine.cs"))
        assert not DeclarationParser.is_supported_file(Path("ILine.txt"))


class TestStructuralErrors:
    """Sources violating the nesting rules."""

    @pytest.mark.unit
    def test_two_namespaces(self, parser: DeclarationParser) -> None:
        source = """\
namespace Microsoft.StandardUI.A
{
    public interface IA { }
}

namespace Microsoft.StandardUI.B
{
    public interface IB { }
}
"""
        with pytest.raises(StructuralError, match="exactly one namespace"):
            parser.parse_source(source)

    @pytest.mark.unit
    def test_no_namespace(self, parser: DeclarationParser) -> None:
        with pytest.raises(StructuralError):
            parser.parse_source("using System;\n")

    @pytest.mark.unit
    def test_top_level_declaration_outside_namespace(self, parser: DeclarationParser) -> None:
        source = """\
public interface IStray { }

namespace Microsoft.StandardUI
{
    public interface IA { }
}
"""
        with pytest.raises(StructuralError, match="only a namespace declaration"):
            parser.parse_source(source)

    @pytest.mark.unit
    def test_interface_nested_in_class(self, parser: DeclarationParser) -> None:
        source = """\
namespace Microsoft.StandardUI
{
    public class Holder
    {
        public interface INested { }
    }
}
"""
        with pytest.raises(StructuralError) as exc_info:
            parser.parse_source(source)
        assert exc_info.value.subject == "INested"

    @pytest.mark.unit
    def test_syntax_error(self, parser: DeclarationParser) -> None:
        with pytest.raises(StructuralError, match="Syntax errors"):
            parser.parse_source("namespace Microsoft.StandardUI { public interface IA { double X { get; set; }")

    @pytest.mark.unit
    def test_attached_declaration_without_owner(self, parser: DeclarationParser) -> None:
        source = """\
namespace Microsoft.StandardUI.Controls
{
    public interface IGridAttached
    {
        int GetRow(IUIElement element);
    }
}
"""
        with pytest.raises(StructuralError, match="has no IGrid interface"):
            parser.parse_source(source)

    @pytest.mark.unit
    def test_orphaned_setter(self, parser: DeclarationParser) -> None:
        source = """\
namespace Microsoft.StandardUI.Controls
{
    public interface IGrid
    {
    }

    public interface IGridAttached
    {
        void SetRow(IUIElement element, int value);
    }
}
"""
        with pytest.raises(StructuralError, match="SetRow has no matching GetRow"):
            parser.parse_source(source)
