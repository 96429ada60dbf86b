"""Tests for generated source file path helpers."""

import pytest

from standardui_codegen.utils import create_source_filename


@pytest.mark.unit
def test_create_source_filename() -> None:
    assert create_source_filename("CanvasAttached") == "CanvasAttached.cs"
    assert create_source_filename("Line", extension=".g.cs") == "Line.g.cs"


@pytest.mark.unit
@pytest.mark.parametrize("name", ["Foo_", "_Foo", "Äb", "@event"])
def test_class_name_is_kept_verbatim(name: str) -> None:
    assert create_source_filename(name) == f"{name}.cs"


@pytest.mark.unit
def test_distinct_names_give_distinct_files() -> None:
    names = ["Foo", "Foo_", "Äb", "Öb"]
    assert len({create_source_filename(name) for name in names}) == len(names)
