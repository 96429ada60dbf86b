#!/usr/bin/env python3

"""Tunable generation settings with environment overrides."""

import os

# Default configuration values
DEFAULT_CONFIG = {
    # Source model layout
    "ROOT_NAMESPACE": "Microsoft.StandardUI",
    "ROOT_ELEMENT_DECLARATION": "IFrameworkElement",
    "SHARED_PROJECT_DIRECTORY": "StandardUI",
    "GENERATED_DIRECTORY": "generated",

    # Output formatting
    "INDENT_SIZE": 4,
    "FILE_EXTENSION": ".cs",

    # Collection types: destination class name=element type, comma separated
    "COLLECTION_TYPES": (
        "UIElementCollection=UIElement,"
        "GradientStopCollection=GradientStop,"
        "PathFigureCollection=PathFigure,"
        "PathSegmentCollection=PathSegment,"
        "TransformCollection=Transform"
    ),

    # Logging
    "LOG_DIR": "logs",
    "ENABLE_FILE_LOG": True,
}


def get_config() -> dict:
    """Get configuration with environment variable overrides.

    Every key can be overridden with a ``CODEGEN_``-prefixed variable, e.g.
    ``CODEGEN_INDENT_SIZE=2``. Values that don't convert to the default's
    type are ignored.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    for key in config:
        env_value = os.getenv(f"CODEGEN_{key}")
        if env_value is None:
            continue
        if isinstance(config[key], bool):
            config[key] = env_value.lower() in ("true", "1", "yes", "on")
        elif isinstance(config[key], int):
            try:
                config[key] = int(env_value)
            except ValueError:
                continue
        else:
            config[key] = env_value

    return config


def parse_collection_types(registry_text: str) -> dict[str, str]:
    """Parse a ``Name=Element,Name=Element`` collection registry string.

    Args:
        registry_text: Registry in text form

    Returns:
        Mapping of collection class name to element type, in text order

    Raises:
        ValueError: If an entry is not of the form Name=Element
    """
    registry: dict[str, str] = {}
    for entry in registry_text.split(","):
        entry = entry.strip()
        if not entry:
            continue
        name, separator, element_type = entry.partition("=")
        if not separator or not name.strip() or not element_type.strip():
            raise ValueError(f"Invalid collection type entry '{entry}', expected Name=ElementType")
        registry[name.strip()] = element_type.strip()
    return registry
