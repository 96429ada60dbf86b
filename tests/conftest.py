"""Pytest configuration and shared fixtures."""

import sys
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from standardui_codegen.domain.models.declaration import (
    DeclarationInfo,
    DeclarationUnit,
    MethodInfo,
    ParameterInfo,
    PropertyInfo,
)
from standardui_codegen.domain.models.platform import get_output_strategy
from standardui_codegen.domain.services.generation import Context
from standardui_codegen.domain.services.parsing import make_declaration_unit
from standardui_codegen.infrastructure.logging import LoggerSetup

COLLECTION_TYPES = {
    "UIElementCollection": "UIElement",
    "GradientStopCollection": "GradientStop",
}

LINE_SOURCE = """\
namespace Microsoft.StandardUI.Shapes
{
    public interface ILine : IShape
    {
        double X1 { get; set; }
        double Y1 { get; set; }
        double X2 { get; set; }
        double Y2 { get; set; }
    }
}
"""

CANVAS_SOURCE = """\
using Microsoft.StandardUI.Controls;

namespace Microsoft.StandardUI.Controls
{
    public interface ICanvas : IPanel
    {
    }

    public interface ICanvasAttached
    {
        double GetLeft(IUIElement element);
        void SetLeft(IUIElement element, double value);

        double GetTop(IUIElement element);
        void SetTop(IUIElement element, double value);
    }
}
"""


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    """Output root for generated files."""
    return tmp_path / "out"


@pytest.fixture
def make_context(output_root: Path) -> Callable[..., Context]:
    """Factory for contexts with test defaults."""

    def factory(platform: str = "wpf", **overrides) -> Context:
        settings = {
            "output_strategy": get_output_strategy(platform),
            "output_root": output_root,
            "collection_types": COLLECTION_TYPES,
        }
        settings.update(overrides)
        return Context(**settings)

    return factory


@pytest.fixture
def wpf_context(make_context: Callable[..., Context]) -> Context:
    """WPF context writing below the test's output root."""
    return make_context("wpf")


@pytest.fixture
def line_declaration() -> DeclarationInfo:
    """ILine : IShape with four double coordinates."""
    return DeclarationInfo(
        name="ILine",
        namespace="Microsoft.StandardUI.Shapes",
        properties=tuple(PropertyInfo(name, "double") for name in ("X1", "Y1", "X2", "Y2")),
        base_types=("IShape",),
    )


@pytest.fixture
def canvas_unit() -> DeclarationUnit:
    """ICanvas with its companion ICanvasAttached (Left and Top)."""
    element = ParameterInfo("element", "IUIElement")
    value = ParameterInfo("value", "double")
    attached = DeclarationInfo(
        name="ICanvasAttached",
        namespace="Microsoft.StandardUI.Controls",
        usings=("Microsoft.StandardUI.Controls",),
        methods=(
            MethodInfo("GetLeft", "double", (element,)),
            MethodInfo("SetLeft", "void", (element, value)),
            MethodInfo("GetTop", "double", (element,)),
            MethodInfo("SetTop", "void", (element, value)),
        ),
    )
    canvas = DeclarationInfo(
        name="ICanvas",
        namespace="Microsoft.StandardUI.Controls",
        usings=("Microsoft.StandardUI.Controls",),
        base_types=("IPanel",),
    )
    return make_declaration_unit(canvas, attached)


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a declaration source file below tmp_path/model and return its path."""

    def writer(relative_path: str, content: str) -> Path:
        path = tmp_path / "model" / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return writer


@pytest.fixture
def clean_logging() -> Generator[None, None, None]:
    """Reset global logging configuration around a test."""
    LoggerSetup.reset()
    yield
    LoggerSetup.reset()


@pytest.fixture
def line_source() -> str:
    """ILine declaration source text."""
    return LINE_SOURCE


@pytest.fixture
def canvas_source() -> str:
    """ICanvas declaration with its ICanvasAttached companion."""
    return CANVAS_SOURCE
