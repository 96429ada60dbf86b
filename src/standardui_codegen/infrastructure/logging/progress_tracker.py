#!/usr/bin/env python3

"""Progress tracking for generation runs."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from time import time

import psutil


class ProgressTracker:
    """
    Track and report generation progress.

    Counts declarations processed and files written, and times each
    declaration so slow inputs show up in the debug log.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize progress tracker.

        Args:
            logger: Logger instance for progress reporting
        """
        self.logger = logger
        self.start_time = time()
        self.declaration_count = 0
        self.file_count = 0
        self.operation_stack: list[tuple[str, float]] = []

    @contextmanager
    def track_operation(self, operation_name: str) -> Iterator[None]:
        """
        Track a high-level operation with timing.

        Args:
            operation_name: Name of the operation being tracked

        Yields:
            None
        """
        start_time = time()
        self.operation_stack.append((operation_name, start_time))

        self.logger.debug(f"Starting operation: {operation_name}")

        try:
            yield
            elapsed = time() - start_time
            self.logger.debug(f"Completed operation: {operation_name} in {elapsed:.3f}s")
        except Exception as e:
            elapsed = time() - start_time
            self.logger.debug(f"Failed operation: {operation_name} after {elapsed:.3f}s: {e}")
            raise
        finally:
            self.operation_stack.pop()

    @contextmanager
    def track_declaration(self, declaration_name: str) -> Iterator[None]:
        """
        Track generation for one declaration.

        Args:
            declaration_name: Name of the declaration being generated

        Yields:
            None
        """
        self.declaration_count += 1
        with self.track_operation(f"generate {declaration_name}"):
            yield

    def count_file(self) -> None:
        """Increment the written-file counter."""
        self.file_count += 1

    def report_summary(self) -> None:
        """Report final generation statistics."""
        total_time = time() - self.start_time
        self.logger.info(
            f"Generation complete: {self.declaration_count} declaration(s), "
            f"{self.file_count} file(s) in {total_time:.2f}s"
        )

    def get_current_context(self) -> str:
        """
        Get current operation context for logging.

        Returns:
            String describing current operation stack
        """
        if not self.operation_stack:
            return "idle"

        return " > ".join(operation for operation, _ in self.operation_stack)

    def log_memory_usage(self) -> None:
        """Log current resident memory of the generator process."""
        memory_mb = psutil.Process().memory_info().rss / 1024 / 1024
        self.logger.debug(f"Memory usage: {memory_mb:.1f} MB")
