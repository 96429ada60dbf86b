#!/usr/bin/env python3

"""Platform class generation for one interface declaration.

The InterfaceEmitter validates a declaration, drives the property and
attached-property emitters over its members and assembles up to three
files:

- the primary class (``Line.cs``), always
- the attached class (``CanvasAttached.cs``), when a companion attached
  declaration exists
- the fluent extension class (``LineExtensions.cs``), when any property
  asks for fluent setters
"""

from dataclasses import dataclass
from pathlib import Path

from ....infrastructure.logging import get_logger, log_timing
from ....utils.path_utils import create_source_filename
from ...models.declaration import DeclarationUnit
from .attached_property_emitter import AttachedPropertyEmitter
from .context import Context, strip_marker
from .property_emitter import PropertyEmitter
from .source_buffer import SourceBuffer

logger = get_logger(__name__)

ARRAY_SUPPORT_NAMESPACE = "System"
TYPE_CONVERTER_ATTRIBUTE = "System.ComponentModel.TypeConverter"


@dataclass(frozen=True)
class GeneratedFile:
    """One generated source file, not yet written."""

    path: Path
    class_name: str
    source: SourceBuffer

    @property
    def content(self) -> str:
        return self.source.text()

    def write(self) -> Path:
        return self.source.write_to_file(self.path.parent, self.path.name)


class InterfaceEmitter:
    """Generates the platform classes for one declaration unit."""

    def __init__(self, context: Context, unit: DeclarationUnit) -> None:
        """Validate the declaration and derive its destination names.

        Args:
            context: Run context
            unit: Declaration and optional companion attached declaration

        Raises:
            NamingError: If a declaration name lacks the marker letter
            ConfigurationError: If the namespace is not under the root namespace
        """
        self.context = context
        self.unit = unit
        self.declaration = unit.declaration
        self.attached_declaration = unit.attached_declaration

        self.name = self.declaration.name
        # Unmarked names fail even when registered
        strip_marker(self.name)
        if self.attached_declaration is not None:
            strip_marker(self.attached_declaration.name)

        self.destination_class_name = context.destination_class_name(self.name)
        self.variable_name = context.variable_name(self.name)

        self.source_namespace = self.declaration.namespace
        self.destination_namespace = context.map_namespace(self.source_namespace)

    @property
    def attached_class_name(self) -> str:
        return f"{self.destination_class_name}Attached"

    @property
    def extensions_class_name(self) -> str:
        return f"{self.destination_class_name}Extensions"

    @log_timing
    def generate(self) -> list[GeneratedFile]:
        """Build every output file for the declaration in memory.

        Returns:
            Primary file first, then the attached and extension files when present
        """
        indent_size = self.context.indent_size
        descriptors = SourceBuffer(indent_size)
        static_methods = SourceBuffer(indent_size)
        nonstatic_methods = SourceBuffer(indent_size)
        extension_methods = SourceBuffer(indent_size)
        attached_methods = SourceBuffer(indent_size)

        property_emitters = [
            PropertyEmitter(self, property_info) for property_info in self.declaration.properties
        ]
        for property_emitter in property_emitters:
            property_emitter.emit_descriptor(descriptors)
            property_emitter.emit_accessors(nonstatic_methods)
            property_emitter.emit_extension_method(extension_methods)

        for pair in self.unit.attached_pairs:
            attached_emitter = AttachedPropertyEmitter(self, pair)
            attached_emitter.emit_main_class_descriptor(descriptors)
            attached_emitter.emit_main_class_wrappers(static_methods)
            attached_emitter.emit_attached_class_methods(attached_methods)

        imports = self._generate_imports(property_emitters)
        constructor = self._generate_constructor(property_emitters)

        attributes = []
        if self.context.output_strategy.has_type_converter(self.destination_class_name):
            attributes.append(
                f"[{TYPE_CONVERTER_ATTRIBUTE}(typeof({self.destination_class_name}TypeConverter))]"
            )

        files = [
            self._make_file(
                self.destination_namespace,
                self.destination_class_name,
                self._generate_class_file(
                    imports,
                    self.destination_namespace,
                    f"public class {self.destination_class_name} : "
                    f"{self._get_destination_base_class()}, {self.name}",
                    [descriptors, static_methods, constructor, nonstatic_methods],
                    attributes,
                ),
            )
        ]

        if self.attached_declaration is not None:
            files.append(
                self._make_file(
                    self.destination_namespace,
                    self.attached_class_name,
                    self._generate_class_file(
                        imports,
                        self.destination_namespace,
                        f"public class {self.attached_class_name} : {self.attached_declaration.name}",
                        [attached_methods],
                    ),
                )
            )

        if not extension_methods.is_empty:
            files.append(
                self._make_file(
                    self.source_namespace,
                    self.extensions_class_name,
                    self._generate_class_file(
                        self._generate_extension_imports(),
                        self.source_namespace,
                        f"public static class {self.extensions_class_name}",
                        [extension_methods],
                    ),
                )
            )

        logger.debug(
            f"{self.name}: {len(property_emitters)} properties, "
            f"{len(self.unit.attached_pairs)} attached properties, {len(files)} file(s)"
        )
        return files

    def write(self) -> list[Path]:
        """Generate and write every output file.

        Nothing is written when generation fails.

        Returns:
            Paths of the written files
        """
        files = self.generate()
        return [generated_file.write() for generated_file in files]

    def _make_file(self, namespace: str, class_name: str, source: SourceBuffer) -> GeneratedFile:
        return GeneratedFile(
            path=self.context.output_path_for(namespace, class_name),
            class_name=class_name,
            source=source,
        )

    def _generate_file_header(self, file_source: SourceBuffer) -> None:
        file_source.add_line(
            f"// This file is generated from {create_source_filename(self.name)}. "
            "Update the source file to change its contents."
        )
        file_source.add_blank_line()

    def _generate_class_file(
        self,
        imports: SourceBuffer,
        namespace: str,
        class_declaration: str,
        sections: list[SourceBuffer | None],
        attributes: list[str] | None = None,
    ) -> SourceBuffer:
        file_source = SourceBuffer(self.context.indent_size)

        self._generate_file_header(file_source)

        if not imports.is_empty:
            file_source.add_source(imports)
            file_source.add_blank_line()

        file_source.add_lines(f"namespace {namespace}", "{")
        with file_source.indent():
            file_source.add_lines(*(attributes or []))
            file_source.add_lines(class_declaration, "{")
            with file_source.indent():
                first = True
                for section in sections:
                    if section is None or section.is_empty:
                        continue
                    if not first:
                        file_source.add_blank_line()
                    file_source.add_source(section)
                    first = False
            file_source.add_line("}")
        file_source.add_line("}")

        return file_source

    def _generate_constructor(self, property_emitters: list[PropertyEmitter]) -> SourceBuffer | None:
        collection_properties = [
            emitter for emitter in property_emitters if emitter.collection_element_type is not None
        ]
        if not collection_properties:
            return None

        constructor = SourceBuffer(self.context.indent_size)
        constructor.add_lines(f"public {self.destination_class_name}()", "{")
        with constructor.indent():
            for emitter in collection_properties:
                constructor.add_line(f"{emitter.name} = new {emitter.type_mapping.backing_type}();")
        constructor.add_line("}")
        return constructor

    def _generate_imports(self, property_emitters: list[PropertyEmitter]) -> SourceBuffer:
        # dict keys keep first-seen order and drop duplicates
        names: dict[str, None] = {}

        for using in self.declaration.usings:
            names.setdefault(using)
            if self.context.is_under_root(using):
                names.setdefault(self.context.map_namespace(using))

        names.setdefault(self.source_namespace)

        for required_import in self.context.output_strategy.required_imports():
            names.setdefault(required_import)

        if any(emitter.is_array for emitter in property_emitters):
            names.setdefault(ARRAY_SUPPORT_NAMESPACE)

        if self.context.output_strategy.has_type_converter(self.destination_class_name):
            names.setdefault(self.context.output_strategy.converters_namespace)

        source = SourceBuffer(self.context.indent_size)
        for name in names:
            source.add_line(f"using {name};")
        return source

    def _generate_extension_imports(self) -> SourceBuffer:
        source = SourceBuffer(self.context.indent_size)
        for using in self.declaration.usings:
            source.add_line(f"using {using};")
        return source

    def _get_destination_base_class(self) -> str:
        strategy = self.context.output_strategy

        element_type = self.context.is_collection_type(self.destination_class_name)
        if element_type is not None:
            return f"{strategy.collection_base_class}<{element_type}>"

        base_type = self.declaration.base_type
        if base_type is not None:
            return self.context.map_type(base_type)

        if self.name == self.context.root_element_declaration:
            return strategy.root_base_class
        return strategy.default_base_class
