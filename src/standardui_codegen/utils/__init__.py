"""Utilities module initialization."""

from .path_utils import SOURCE_FILE_EXTENSION, create_source_filename

__all__ = [
    "SOURCE_FILE_EXTENSION",
    "create_source_filename",
]
