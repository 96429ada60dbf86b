#!/usr/bin/env python3

"""Run-wide generation context.

The context holds everything that is shared between declarations: the
namespace and type remapping rules, the collection-type registry, the
registry of known declarations and the selected output strategy. It is
built once before generation starts and never modified afterwards.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from ....infrastructure.config import Config, get_config
from ....infrastructure.logging import get_logger
from ....utils.path_utils import SOURCE_FILE_EXTENSION, create_source_filename
from ...errors import ConfigurationError, NamingError
from ...models.declaration import DeclarationUnit
from ...models.platform import OutputStrategy, get_output_strategy
from ..parsing.type_name import TypeName, parse_type_name

logger = get_logger(__name__)

MARKER_LETTER = "I"


def has_marker(name: str) -> bool:
    """Check whether a name follows the marker convention (``IFoo``)."""
    return len(name) > 1 and name.startswith(MARKER_LETTER) and name[1].isupper()


def strip_marker(declaration_name: str) -> str:
    """Return the destination class name for a declaration name.

    Raises:
        NamingError: If the name doesn't start with the marker letter
    """
    if not has_marker(declaration_name):
        raise NamingError(
            f"Data model interface {declaration_name} must start with '{MARKER_LETTER}'",
            subject=declaration_name,
        )
    return declaration_name[len(MARKER_LETTER) :]


# C# keywords that can't be used as a bare variable name
_CSHARP_KEYWORDS = frozenset(
    {
        "base", "bool", "byte", "case", "catch", "char", "checked", "class", "const",
        "decimal", "default", "delegate", "double", "enum", "event", "explicit", "extern",
        "fixed", "float", "implicit", "int", "interface", "internal", "lock", "long",
        "namespace", "object", "operator", "params", "private", "protected", "public",
        "readonly", "ref", "return", "sbyte", "sealed", "short", "static", "string",
        "struct", "switch", "this", "throw", "typeof", "uint", "ulong", "unchecked",
        "unsafe", "ushort", "using", "virtual", "void", "volatile", "while",
    }
)


def _freeze(mapping: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class Context:
    """Immutable configuration shared by every declaration in a run."""

    output_strategy: OutputStrategy
    output_root: Path
    root_namespace: str = "Microsoft.StandardUI"
    collection_types: Mapping[str, str] = field(default_factory=lambda: _freeze(None))
    known_declarations: Mapping[str, str] = field(default_factory=lambda: _freeze(None))
    """Source declaration name -> destination class name, built at load time."""
    root_element_declaration: str = "IFrameworkElement"
    shared_project_directory: str = "StandardUI"
    generated_directory: str = "generated"
    indent_size: int = 4
    file_extension: str = SOURCE_FILE_EXTENSION

    def __post_init__(self) -> None:
        object.__setattr__(self, "collection_types", _freeze(self.collection_types))
        object.__setattr__(self, "known_declarations", _freeze(self.known_declarations))

    @classmethod
    def create(
        cls,
        config: Config,
        units: Iterable[DeclarationUnit] = (),
        target_platform: str | None = None,
    ) -> "Context":
        """Build the run context from configuration and the loaded declarations.

        Args:
            config: Run configuration
            units: All declaration units loaded for this run
            target_platform: Overrides ``config.target_platform``

        Returns:
            Context for the run

        Raises:
            ConfigurationError: If the target platform is unknown
        """
        settings = get_config()
        strategy = get_output_strategy(target_platform or config.target_platform)

        known: dict[str, str] = {}
        for unit in units:
            for declaration in (unit.declaration, unit.attached_declaration):
                if declaration is not None and has_marker(declaration.name):
                    known[declaration.name] = strip_marker(declaration.name)

        logger.debug(
            f"Context for {strategy.platform}: {len(known)} known declarations, "
            f"{len(config.collection_types)} collection types"
        )

        return cls(
            output_strategy=strategy,
            output_root=config.output_dir,
            root_namespace=config.root_namespace,
            collection_types=config.collection_types,
            known_declarations=known,
            root_element_declaration=settings["ROOT_ELEMENT_DECLARATION"],
            shared_project_directory=settings["SHARED_PROJECT_DIRECTORY"],
            generated_directory=settings["GENERATED_DIRECTORY"],
            indent_size=settings["INDENT_SIZE"],
            file_extension=settings["FILE_EXTENSION"],
        )

    @property
    def destination_root_namespace(self) -> str:
        return self.output_strategy.destination_root_namespace

    def destination_class_name(self, declaration_name: str) -> str:
        """Destination class of a declaration: registry entry, else marker stripped.

        Raises:
            NamingError: If the name doesn't start with the marker letter
        """
        if declaration_name in self.known_declarations:
            return self.known_declarations[declaration_name]
        return strip_marker(declaration_name)

    def variable_name(self, declaration_name: str) -> str:
        """Default instance variable name, e.g. ``canvas`` for ``ICanvas``.

        Raises:
            NamingError: If the name doesn't start with the marker letter
        """
        class_name = self.destination_class_name(declaration_name)
        variable_name = class_name[:1].lower() + class_name[1:]
        return f"@{variable_name}" if variable_name in _CSHARP_KEYWORDS else variable_name

    def is_under_root(self, namespace: str) -> bool:
        """Check whether a namespace is the root namespace or nested inside it."""
        return namespace == self.root_namespace or namespace.startswith(self.root_namespace + ".")

    def map_namespace(self, source_namespace: str) -> str:
        """Map a source namespace to the platform's destination namespace.

        ``Microsoft.StandardUI.Shapes`` becomes ``Microsoft.StandardUI.Wpf.Shapes``.

        Raises:
            ConfigurationError: If the namespace is not under the root namespace
        """
        if not self.is_under_root(source_namespace):
            raise ConfigurationError(
                f"Namespace {source_namespace} is not under root namespace {self.root_namespace}",
                subject=source_namespace,
            )
        return self.destination_root_namespace + source_namespace[len(self.root_namespace) :]

    def map_type(self, source_type: str) -> str:
        """Map a source type reference to its destination type.

        Known declarations map through the registry, other marker-prefixed
        names by stripping the marker. Arrays map element-wise and generic
        arguments recursively; every other name is returned unchanged.

        Raises:
            ConfigurationError: If the type reference is malformed
        """
        return str(self.map_type_name(parse_type_name(source_type)))

    def map_type_name(self, type_name: TypeName) -> TypeName:
        return type_name.map_names(self._map_simple_name)

    def _map_simple_name(self, name: str, is_generic: bool) -> str:
        if name in self.known_declarations:
            return self.known_declarations[name]
        if not is_generic and "." not in name and has_marker(name):
            return strip_marker(name)
        return name

    def is_collection_type(self, name: str) -> str | None:
        """Return the element type if ``name`` is a registered collection class."""
        return self.collection_types.get(name)

    def output_directory_for(self, namespace: str) -> Path:
        """Directory generated files for ``namespace`` are written to.

        Destination namespaces go to the platform project, source namespaces
        (fluent extensions) to the shared project.

        Raises:
            ConfigurationError: If the namespace is under neither root
        """
        destination_root = self.destination_root_namespace
        if namespace == destination_root or namespace.startswith(destination_root + "."):
            project_directory = self.output_strategy.project_directory
            relative = namespace[len(destination_root) :]
        elif self.is_under_root(namespace):
            project_directory = self.shared_project_directory
            relative = namespace[len(self.root_namespace) :]
        else:
            raise ConfigurationError(
                f"Namespace {namespace} is under neither {self.root_namespace} "
                f"nor {destination_root}",
                subject=namespace,
            )

        parts = [part for part in relative.split(".") if part]
        return self.output_root.joinpath(project_directory, self.generated_directory, *parts)

    def output_path_for(self, namespace: str, class_name: str) -> Path:
        """Path of the generated file for ``class_name`` in ``namespace``. No I/O."""
        return self.output_directory_for(namespace) / create_source_filename(class_name, self.file_extension)
