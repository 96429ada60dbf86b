#!/usr/bin/env python3

"""Interface declaration loading using tree-sitter.

This module turns C# source files containing the abstract model interfaces
into DeclarationInfo objects. Parsing is delegated to tree-sitter's C#
grammar; this module only walks the syntax tree and enforces the nesting
rules generation depends on:

- the file's only top-level unit (besides using directives) is one
  namespace declaration
- every interface is declared directly inside that namespace
- an ``IXAttached`` interface is the companion of ``IX`` in the same file
"""

import re
from pathlib import Path

import tree_sitter_c_sharp
from tree_sitter import Language, Node, Parser

from ....infrastructure.logging import get_logger
from ...errors import StructuralError
from ...models.declaration import (
    DeclarationInfo,
    DeclarationUnit,
    MethodInfo,
    ParameterInfo,
    PropertyInfo,
)
from .attached_pair_resolver import make_declaration_unit

logger = get_logger(__name__)

_CSHARP_LANGUAGE = Language(tree_sitter_c_sharp.language())

_DEFAULT_ENCODING = "utf-8"
_SOURCE_FILE_ENCODING = "utf-8-sig"  # model sources are saved with a BOM

ATTACHED_SUFFIX = "Attached"
DEFAULT_VALUE_ATTRIBUTE = "DefaultValue"
FLUENT_ATTRIBUTE = "Fluent"

# Top-level nodes allowed next to the namespace declaration
_IGNORED_TOP_LEVEL_TYPES = frozenset({"using_directive", "comment", "extern_alias_directive"})

_USING_PATTERN = re.compile(r"^\s*(?:global\s+)?using\s+(?:static\s+)?(.+?)\s*;\s*$", re.DOTALL)


def _get_node_text(node: Node, source_bytes: bytes) -> str:
    return source_bytes[node.start_byte : node.end_byte].decode(_DEFAULT_ENCODING)


def _find_nodes_by_type(node: Node, node_type: str) -> list[Node]:
    """Find all descendant nodes of a type, depth-first."""
    results: list[Node] = []
    if node.type == node_type:
        results.append(node)
    for child in node.children:
        results.extend(_find_nodes_by_type(child, node_type))
    return results


class DeclarationParser:
    """Loads interface declarations from C# source files."""

    def __init__(self) -> None:
        self.parser = Parser()
        self.parser.language = _CSHARP_LANGUAGE

    @staticmethod
    def is_supported_file(file_path: Path) -> bool:
        return file_path.suffix.lower() == ".cs"

    def parse_file(self, file_path: Path) -> list[DeclarationUnit]:
        """Load all declaration units from a source file.

        Args:
            file_path: Path to a C# source file

        Returns:
            One DeclarationUnit per non-attached interface, in source order

        Raises:
            StructuralError: If the file can't be read as text or violates the
                nesting rules
        """
        logger.debug(f"Parsing declarations from {file_path}")
        try:
            source_code = file_path.read_text(encoding=_SOURCE_FILE_ENCODING)
        except (UnicodeDecodeError, OSError) as e:
            raise StructuralError(f"Cannot read {file_path}: {e}", subject=str(file_path)) from e
        return self.parse_source(source_code, source_file=file_path)

    def parse_source(self, source_code: str, source_file: Path | None = None) -> list[DeclarationUnit]:
        """Load all declaration units from source text.

        Args:
            source_code: C# source text
            source_file: Originating file, recorded on each declaration

        Returns:
            One DeclarationUnit per non-attached interface, in source order

        Raises:
            StructuralError: If the source has syntax errors or violates the
                nesting rules
        """
        source_bytes = source_code.encode(_DEFAULT_ENCODING)
        tree = self.parser.parse(source_bytes)
        root = tree.root_node
        origin = str(source_file) if source_file else "<source>"

        if root.has_error:
            raise StructuralError(f"Syntax errors in {origin}", subject=origin)

        namespace_node = self._get_sole_namespace(root, origin, source_bytes)
        namespace_name = self._get_field_text(namespace_node, "name", source_bytes, origin)
        usings = tuple(
            self._parse_using(child, source_bytes)
            for child in root.named_children
            if child.type == "using_directive"
        )

        declarations: list[DeclarationInfo] = []
        for interface_node in _find_nodes_by_type(root, "interface_declaration"):
            self._check_nesting(interface_node, namespace_node, origin, source_bytes)
            declarations.append(
                self._parse_interface(interface_node, namespace_name, usings, source_bytes, source_file)
            )

        units = self._group_units(declarations, origin)
        logger.debug(f"Loaded {len(units)} declaration(s) from {origin}")
        return units

    def _get_sole_namespace(self, root: Node, origin: str, source_bytes: bytes) -> Node:
        namespaces = []
        for child in root.named_children:
            if child.type in _IGNORED_TOP_LEVEL_TYPES:
                continue
            if child.type != "namespace_declaration":
                raise StructuralError(
                    f"Top level of {origin} should contain only a namespace declaration, "
                    f"but it contains a {child.type} node",
                    subject=origin,
                )
            namespaces.append(child)

        if len(namespaces) != 1:
            raise StructuralError(
                f"{origin} should contain exactly one namespace declaration, "
                f"found {len(namespaces)}",
                subject=origin,
            )
        return namespaces[0]

    def _check_nesting(
        self, interface_node: Node, namespace_node: Node, origin: str, source_bytes: bytes
    ) -> None:
        # interface -> declaration_list -> namespace_declaration
        body = interface_node.parent
        if body is None or body.parent is None or body.parent != namespace_node:
            name_node = interface_node.child_by_field_name("name")
            name = _get_node_text(name_node, source_bytes) if name_node else "<unnamed>"
            parent_type = body.parent.type if body is not None and body.parent is not None else None
            raise StructuralError(
                f"Parent of {name} interface should be a namespace declaration, "
                f"but it's a {parent_type} node instead",
                subject=name,
            )

    @staticmethod
    def _parse_using(node: Node, source_bytes: bytes) -> str:
        text = _get_node_text(node, source_bytes)
        match = _USING_PATTERN.match(text)
        return match.group(1) if match else text.strip()

    def _parse_interface(
        self,
        node: Node,
        namespace_name: str,
        usings: tuple[str, ...],
        source_bytes: bytes,
        source_file: Path | None,
    ) -> DeclarationInfo:
        name = self._get_field_text(node, "name", source_bytes, "interface")

        base_types: tuple[str, ...] = ()
        for child in node.named_children:
            if child.type == "base_list":
                base_types = tuple(
                    _get_node_text(base, source_bytes)
                    for base in child.named_children
                    if base.type != "comment"
                )

        properties: list[PropertyInfo] = []
        methods: list[MethodInfo] = []
        body = node.child_by_field_name("body")
        members = body.named_children if body is not None else []
        for member in members:
            if member.type == "property_declaration":
                properties.append(self._parse_property(member, name, source_bytes))
            elif member.type == "method_declaration":
                methods.append(self._parse_method(member, name, source_bytes))
            elif member.type != "comment":
                logger.debug(f"Skipping {member.type} member of {name}")

        return DeclarationInfo(
            name=name,
            namespace=namespace_name,
            usings=usings,
            properties=tuple(properties),
            methods=tuple(methods),
            base_types=base_types,
            source_file=source_file,
        )

    def _parse_property(self, node: Node, owner: str, source_bytes: bytes) -> PropertyInfo:
        name = self._get_field_text(node, "name", source_bytes, f"{owner} property")
        type_name = self._get_field_text(node, "type", source_bytes, f"{owner}.{name}")
        attributes = self._parse_attributes(node, source_bytes)

        return PropertyInfo(
            name=name,
            type_name=type_name,
            default_value=attributes.get(DEFAULT_VALUE_ATTRIBUTE),
            is_fluent=FLUENT_ATTRIBUTE in attributes,
            attributes=tuple(attributes),
        )

    def _parse_method(self, node: Node, owner: str, source_bytes: bytes) -> MethodInfo:
        name = self._get_field_text(node, "name", source_bytes, f"{owner} method")
        # The return type field was renamed from "type" to "returns" in newer grammars
        return_node = node.child_by_field_name("returns") or node.child_by_field_name("type")
        if return_node is None:
            raise StructuralError(
                f"Cannot determine return type of {owner}.{name}", subject=f"{owner}.{name}"
            )

        parameters: list[ParameterInfo] = []
        parameter_list = node.child_by_field_name("parameters")
        if parameter_list is not None:
            for parameter in parameter_list.named_children:
                if parameter.type != "parameter":
                    continue
                qualified = f"{owner}.{name}"
                parameters.append(
                    ParameterInfo(
                        name=self._get_field_text(parameter, "name", source_bytes, qualified),
                        type_name=self._get_field_text(parameter, "type", source_bytes, qualified),
                    )
                )

        return MethodInfo(
            name=name,
            return_type=_get_node_text(return_node, source_bytes),
            parameters=tuple(parameters),
        )

    @staticmethod
    def _parse_attributes(node: Node, source_bytes: bytes) -> dict[str, str | None]:
        """Collect attribute names and their (unparenthesised) argument text."""
        attributes: dict[str, str | None] = {}
        for attribute_list in node.named_children:
            if attribute_list.type != "attribute_list":
                continue
            for attribute in attribute_list.named_children:
                if attribute.type != "attribute":
                    continue
                name_node = attribute.child_by_field_name("name")
                if name_node is None:
                    continue
                name = _get_node_text(name_node, source_bytes)
                if name.endswith("Attribute"):
                    name = name[: -len("Attribute")]

                arguments = None
                for child in attribute.named_children:
                    if child.type == "attribute_argument_list":
                        arguments = _get_node_text(child, source_bytes).strip()[1:-1].strip()
                attributes[name] = arguments or None
        return attributes

    @staticmethod
    def _get_field_text(node: Node, field_name: str, source_bytes: bytes, context: str) -> str:
        field_node = node.child_by_field_name(field_name)
        if field_node is None:
            raise StructuralError(
                f"Missing {field_name} on {node.type} in {context}", subject=context
            )
        return _get_node_text(field_node, source_bytes)

    @staticmethod
    def _group_units(declarations: list[DeclarationInfo], origin: str) -> list[DeclarationUnit]:
        by_name = {declaration.name: declaration for declaration in declarations}
        attached_by_owner: dict[str, DeclarationInfo] = {}

        for declaration in declarations:
            if not declaration.name.endswith(ATTACHED_SUFFIX):
                continue
            owner = declaration.name[: -len(ATTACHED_SUFFIX)]
            if owner not in by_name:
                raise StructuralError(
                    f"Attached interface {declaration.name} in {origin} has no "
                    f"{owner} interface in the same file",
                    subject=declaration.name,
                )
            attached_by_owner[owner] = declaration

        return [
            make_declaration_unit(declaration, attached_by_owner.get(declaration.name))
            for declaration in declarations
            if not declaration.name.endswith(ATTACHED_SUFFIX)
        ]
