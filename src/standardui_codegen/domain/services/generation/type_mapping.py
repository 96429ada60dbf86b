#!/usr/bin/env python3

"""Mapping of one declared type to its platform backing type.

A property declared as ``Point`` is stored as ``PointWpf`` on WPF, and one
declared as ``IBrush`` is stored as ``Brush``. Whenever the two differ the
generated class must convert between them; this module knows how.
"""

from dataclasses import dataclass

from ..parsing.type_name import TypeName, parse_type_name
from .context import Context

# Defaults for C# built-in types without an explicit [DefaultValue]
_BUILTIN_DEFAULTS = {
    "double": "0.0",
    "float": "0.0f",
    "decimal": "0m",
    "int": "0",
    "uint": "0u",
    "long": "0L",
    "ulong": "0UL",
    "short": "0",
    "ushort": "0",
    "byte": "0",
    "sbyte": "0",
    "bool": "false",
    "char": "'\\0'",
    "string": '""',
}


@dataclass(frozen=True)
class TypeMapping:
    """Declared (abstract) type and the platform type backing it."""

    source_type: str
    backing_type: str
    destination: TypeName
    native_wrapper: str | None = None
    """Wrapper struct for abstract value types, e.g. PointWpf for Point."""

    @classmethod
    def resolve(cls, context: Context, source_type: str) -> "TypeMapping":
        """Resolve the backing type of ``source_type`` under ``context``.

        Raises:
            ConfigurationError: If the type reference is malformed
        """
        parsed = parse_type_name(source_type)
        destination = context.map_type_name(parsed)

        native_wrapper = None
        if not parsed.arguments and not parsed.is_array and not parsed.nullable:
            native_wrapper = context.output_strategy.native_type(parsed.name)

        backing_type = native_wrapper or str(destination)
        return cls(str(parsed), backing_type, destination, native_wrapper)

    @property
    def differs(self) -> bool:
        """Whether the abstract contract needs an explicit, converting implementation."""
        return self.backing_type != self.source_type

    @property
    def is_array(self) -> bool:
        return self.destination.is_array

    def default_value(self, explicit: str | None = None) -> str:
        """C# expression for the property's default value."""
        if explicit is not None:
            if self.native_wrapper:
                return f"new {self.native_wrapper}({explicit})"
            return explicit
        if self.native_wrapper:
            return f"{self.native_wrapper}.Default"
        if self.destination.is_array:
            return f"Array.Empty<{self.destination.element_type}>()"
        if not self.destination.nullable and not self.destination.arguments:
            builtin = _BUILTIN_DEFAULTS.get(self.destination.name)
            if builtin is not None:
                return builtin
        return f"default({self.backing_type})"

    def to_abstract(self, expression: str) -> str:
        """Convert a backing-typed expression to the abstract type."""
        if self.native_wrapper:
            return f"{expression}.{self.source_type}"
        return expression

    def to_backing(self, expression: str) -> str:
        """Convert an abstract-typed expression to the backing type."""
        if self.native_wrapper:
            return f"new {self.native_wrapper}({expression})"
        if self.differs:
            return f"({self.backing_type}) {expression}"
        return expression
