#!/usr/bin/env python3

"""Code emission for plain (non-attached) properties."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...models.declaration import PropertyInfo
from .source_buffer import SourceBuffer
from .type_mapping import TypeMapping

if TYPE_CHECKING:
    from .interface_emitter import InterfaceEmitter


class PropertyEmitter:
    """Generates the descriptor, accessors and fluent extension for one property.

    Emitted shape for ``double X1`` on ``ILine`` (WPF)::

        public static readonly System.Windows.DependencyProperty X1Property = PropertyUtils.Create(nameof(X1), typeof(double), typeof(Line), 0.0);

        public double X1
        {
            get => (double) GetValue(X1Property);
            set => SetValue(X1Property, value);
        }
    """

    def __init__(self, interface: InterfaceEmitter, property_info: PropertyInfo) -> None:
        self.interface = interface
        self.context = interface.context
        self.property_info = property_info
        self.name = property_info.name
        self.type_mapping = TypeMapping.resolve(self.context, property_info.type_name)

    @property
    def descriptor_name(self) -> str:
        return f"{self.name}Property"

    @property
    def collection_element_type(self) -> str | None:
        """Element type when the property holds a registered collection class."""
        return self.context.is_collection_type(self.type_mapping.backing_type)

    @property
    def is_array(self) -> bool:
        return self.type_mapping.is_array

    def emit_descriptor(self, source: SourceBuffer) -> None:
        strategy = self.context.output_strategy
        backing_type = self.type_mapping.backing_type
        default_value = self.type_mapping.default_value(self.property_info.default_value)
        if self.collection_element_type is not None:
            # Collections are created per instance by the constructor
            default_value = "null"

        source.add_line(
            f"public static readonly {strategy.property_descriptor_class} {self.descriptor_name} = "
            f"{strategy.property_factory}(nameof({self.name}), typeof({backing_type}), "
            f"typeof({self.interface.destination_class_name}), {default_value});"
        )

    def emit_accessors(self, source: SourceBuffer) -> None:
        mapping = self.type_mapping

        if not source.is_empty:
            source.add_blank_line()

        source.add_lines(f"public {mapping.backing_type} {self.name}", "{")
        with source.indent():
            source.add_lines(
                f"get => ({mapping.backing_type}) GetValue({self.descriptor_name});",
                f"set => SetValue({self.descriptor_name}, value);",
            )
        source.add_line("}")

        if not mapping.differs:
            return

        # Explicit implementation of the abstract contract, converting between representations
        source.add_lines(f"{mapping.source_type} {self.interface.name}.{self.name}", "{")
        with source.indent():
            source.add_lines(
                f"get => {mapping.to_abstract(self.name)};",
                f"set => {self.name} = {mapping.to_backing('value')};",
            )
        source.add_line("}")

    def emit_extension_method(self, source: SourceBuffer) -> None:
        if not self.property_info.is_fluent:
            return

        interface_name = self.interface.name
        variable_name = self.interface.variable_name

        if not source.is_empty:
            source.add_blank_line()

        source.add_lines(
            f"public static {interface_name} {self.name}(this {interface_name} {variable_name}, "
            f"{self.type_mapping.source_type} value)",
            "{",
        )
        with source.indent():
            source.add_lines(
                f"{variable_name}.{self.name} = value;",
                f"return {variable_name};",
            )
        source.add_line("}")
