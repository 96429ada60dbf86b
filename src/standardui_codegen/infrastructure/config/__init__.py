"""Infrastructure configuration module."""

from .application_config import Config
from .codegen_config import get_config, parse_collection_types

__all__ = ["Config", "get_config", "parse_collection_types"]
