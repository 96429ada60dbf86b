#!/usr/bin/env python3

"""Property information model for interface declarations."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PropertyInfo:
    """Information about an interface property."""

    name: str
    type_name: str
    default_value: str | None = None  # from [DefaultValue(...)]
    is_fluent: bool = False  # from [Fluent], requests an extension method
    attributes: tuple[str, ...] = field(default_factory=tuple)
