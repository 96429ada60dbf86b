#!/usr/bin/env python3

"""Unit tests for the indentation-aware SourceBuffer."""

from pathlib import Path

import pytest

from standardui_codegen.domain.services.generation import SourceBuffer


class TestSourceBufferLines:
    """Tests for adding lines and rendering text."""

    @pytest.mark.unit
    def test_new_buffer_is_empty(self) -> None:
        buffer = SourceBuffer()
        assert buffer.is_empty
        assert buffer.text() == ""

    @pytest.mark.unit
    def test_every_line_is_newline_terminated(self) -> None:
        buffer = SourceBuffer()
        buffer.add_lines("namespace Foo", "{", "}")
        assert buffer.text() == "namespace Foo\n{\n}\n"
        assert not buffer.is_empty

    @pytest.mark.unit
    def test_indent_uses_configured_size(self) -> None:
        buffer = SourceBuffer(indent_size=2)
        buffer.add_line("a")
        with buffer.indent():
            buffer.add_line("b")
            with buffer.indent():
                buffer.add_line("c")
        buffer.add_line("d")
        assert buffer.text() == "a\n  b\n    c\nd\n"

    @pytest.mark.unit
    def test_blank_lines_carry_no_indentation(self) -> None:
        buffer = SourceBuffer()
        with buffer.indent():
            buffer.add_line("a")
            buffer.add_blank_line()
            buffer.add_line("")
            buffer.add_line("b")
        assert buffer.text() == "    a\n\n\n    b\n"

    @pytest.mark.unit
    def test_indent_restored_when_block_raises(self) -> None:
        """Depth returns to its entry value even on exceptional exit."""
        buffer = SourceBuffer()
        with pytest.raises(RuntimeError):
            with buffer.indent():
                with buffer.indent():
                    raise RuntimeError("boom")
        assert buffer.depth == 0

        buffer.add_line("after")
        assert buffer.text() == "after\n"

    @pytest.mark.unit
    def test_indent_yields_buffer(self) -> None:
        buffer = SourceBuffer()
        with buffer.indent() as inner:
            assert inner is buffer


class TestSourceBufferSplicing:
    """Tests for add_source."""

    @pytest.mark.unit
    def test_splice_keeps_relative_indentation(self) -> None:
        inner = SourceBuffer()
        inner.add_lines("public double X1", "{")
        with inner.indent():
            inner.add_line("get => 0;")
        inner.add_line("}")

        outer = SourceBuffer()
        outer.add_line("class Line")
        with outer.indent():
            outer.add_source(inner)

        assert outer.text() == (
            "class Line\n"
            "    public double X1\n"
            "    {\n"
            "        get => 0;\n"
            "    }\n"
        )

    @pytest.mark.unit
    def test_splice_keeps_blank_lines_unindented(self) -> None:
        inner = SourceBuffer()
        inner.add_line("a")
        inner.add_blank_line()
        inner.add_line("b")

        outer = SourceBuffer()
        with outer.indent():
            outer.add_source(inner)
        assert outer.text() == "    a\n\n    b\n"

    @pytest.mark.unit
    def test_splicing_empty_buffer_adds_nothing(self) -> None:
        outer = SourceBuffer()
        outer.add_source(SourceBuffer())
        assert outer.is_empty


class TestSourceBufferWrite:
    """Tests for writing buffers to disk."""

    @pytest.mark.unit
    def test_write_creates_directories(self, tmp_path: Path) -> None:
        buffer = SourceBuffer()
        buffer.add_line("// generated")

        path = buffer.write_to_file(tmp_path / "a" / "b", "Line.cs")

        assert path == tmp_path / "a" / "b" / "Line.cs"
        assert path.read_bytes() == b"// generated\n"

    @pytest.mark.unit
    def test_write_uses_lf_line_endings(self, tmp_path: Path) -> None:
        buffer = SourceBuffer()
        buffer.add_lines("a", "b")

        path = buffer.write_to_file(tmp_path, "X.cs")

        assert b"\r\n" not in path.read_bytes()
