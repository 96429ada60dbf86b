#!/usr/bin/env python3

"""Indentation-aware text accumulator used by every emitter."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from ....infrastructure.logging import get_logger

logger = get_logger(__name__)

DEFAULT_INDENT_SIZE = 4


class SourceBuffer:
    """Accumulates the lines of one generated source file.

    Lines are stored without indentation together with their depth, so a
    buffer can be spliced into another at a deeper level while keeping each
    line's relative indentation.
    """

    def __init__(self, indent_size: int = DEFAULT_INDENT_SIZE) -> None:
        self.indent_size = indent_size
        self.depth = 0
        self._lines: list[tuple[int, str]] = []

    @contextmanager
    def indent(self) -> Iterator["SourceBuffer"]:
        """Increase the indent depth for the duration of a with-block.

        The previous depth is restored on every exit path, including
        exceptions raised inside the block.
        """
        entry_depth = self.depth
        self.depth += 1
        try:
            yield self
        finally:
            self.depth = entry_depth

    def add_line(self, line: str) -> None:
        if line:
            self._lines.append((self.depth, line))
        else:
            self.add_blank_line()

    def add_lines(self, *lines: str) -> None:
        for line in lines:
            self.add_line(line)

    def add_blank_line(self) -> None:
        self._lines.append((0, ""))

    def add_source(self, other: "SourceBuffer") -> None:
        """Splice another buffer's lines in at the current depth."""
        for depth, line in other._lines:
            if line:
                self._lines.append((self.depth + depth, line))
            else:
                self._lines.append((0, ""))

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def text(self) -> str:
        """Render the buffer, one newline-terminated line per entry."""
        return "".join(
            f"{' ' * (depth * self.indent_size)}{line}\n" for depth, line in self._lines
        )

    def write_to_file(self, directory: Path, filename: str) -> Path:
        """Write the rendered buffer to ``directory / filename``.

        Args:
            directory: Output directory, created if missing
            filename: File name within the directory

        Returns:
            Path of the written file
        """
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        # newline="\n" keeps output byte-identical across operating systems
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(self.text())
        logger.debug(f"Wrote {len(self._lines)} lines to {path}")
        return path
