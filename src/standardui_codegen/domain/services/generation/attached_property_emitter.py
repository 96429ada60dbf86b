#!/usr/bin/env python3

"""Code emission for attached properties."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...models.declaration import AttachedPair
from .source_buffer import SourceBuffer
from .type_mapping import TypeMapping

if TYPE_CHECKING:
    from .interface_emitter import InterfaceEmitter


class AttachedPropertyEmitter:
    """Generates the artifacts of one attached property.

    Attached property storage lives on the primary class (``Canvas``), which
    gets a descriptor and static Get/Set wrappers. The attached class
    (``CanvasAttached``) implements the abstract attached contract by
    downcasting the abstract element and delegating to those wrappers.
    Read-only pairs only produce the Get side.
    """

    def __init__(self, interface: InterfaceEmitter, pair: AttachedPair) -> None:
        self.interface = interface
        self.context = interface.context
        self.pair = pair
        self.name = pair.property_name
        self.value_mapping = TypeMapping.resolve(self.context, pair.value_type)
        self.element_mapping = TypeMapping.resolve(self.context, pair.element_type)

    @property
    def descriptor_name(self) -> str:
        return f"{self.name}Property"

    @property
    def element_parameter(self) -> str:
        return self.pair.getter.parameters[0].name

    @property
    def value_parameter(self) -> str:
        assert self.pair.setter is not None
        return self.pair.setter.parameters[1].name

    def emit_main_class_descriptor(self, source: SourceBuffer) -> None:
        strategy = self.context.output_strategy
        source.add_line(
            f"public static readonly {strategy.property_descriptor_class} {self.descriptor_name} = "
            f'{strategy.attached_property_factory}("{self.name}", '
            f"typeof({self.value_mapping.backing_type}), "
            f"typeof({self.interface.destination_class_name}), "
            f"{self.value_mapping.default_value()});"
        )

    def emit_main_class_wrappers(self, source: SourceBuffer) -> None:
        value_type = self.value_mapping.backing_type
        element_type = self.element_mapping.backing_type
        element = self.element_parameter

        if not source.is_empty:
            source.add_blank_line()

        source.add_line(
            f"public static {value_type} Get{self.name}({element_type} {element}) => "
            f"({value_type}) {element}.GetValue({self.descriptor_name});"
        )
        if not self.pair.is_read_only:
            value = self.value_parameter
            source.add_line(
                f"public static void Set{self.name}({element_type} {element}, {value_type} {value}) => "
                f"{element}.SetValue({self.descriptor_name}, {value});"
            )

    def emit_attached_class_methods(self, source: SourceBuffer) -> None:
        class_name = self.interface.destination_class_name
        element = self.element_parameter
        abstract_element_type = self.element_mapping.source_type
        native_element = f"({self.element_mapping.backing_type}) {element}"

        if not source.is_empty:
            source.add_blank_line()

        getter_call = f"{class_name}.Get{self.name}({native_element})"
        source.add_line(
            f"public {self.value_mapping.source_type} Get{self.name}({abstract_element_type} {element}) => "
            f"{self.value_mapping.to_abstract(getter_call)};"
        )
        if not self.pair.is_read_only:
            value = self.value_parameter
            source.add_line(
                f"public void Set{self.name}({abstract_element_type} {element}, "
                f"{self.value_mapping.source_type} {value}) => "
                f"{class_name}.Set{self.name}({native_element}, {self.value_mapping.to_backing(value)});"
            )
