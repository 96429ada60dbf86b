#!/usr/bin/env python3

"""Per-platform output strategies.

Each supported target platform is described by a plain fact table: the
names of the classes generated code derives from, the property registration
calls it emits and the imports it always needs. Strategies are looked up by
platform identifier once per run.
"""

from dataclasses import dataclass, field

from ...errors import ConfigurationError


@dataclass(frozen=True)
class OutputStrategy:
    """Fact table for one target platform."""

    platform: str
    destination_root_namespace: str
    project_directory: str
    property_descriptor_class: str
    default_base_class: str
    root_base_class: str
    collection_base_class: str = "StandardUICollection"
    property_factory: str = "PropertyUtils.Create"
    attached_property_factory: str = "PropertyUtils.CreateAttached"
    required_import_names: tuple[str, ...] = field(default_factory=tuple)
    wrapped_value_types: frozenset[str] = field(default_factory=frozenset)
    """Abstract value types backed by a platform-native wrapper struct."""
    wrapper_suffix: str = ""
    type_converter_classes: frozenset[str] = field(default_factory=frozenset)

    def required_imports(self) -> tuple[str, ...]:
        """Imports every primary class file needs on this platform."""
        return self.required_import_names

    def has_type_converter(self, class_name: str) -> bool:
        return class_name in self.type_converter_classes

    def native_type(self, type_name: str) -> str | None:
        """Return the native wrapper for an abstract value type, if any.

        Args:
            type_name: Abstract type name (e.g. "Point")

        Returns:
            Wrapper type name (e.g. "PointWpf") or None when the type is
            used as-is on this platform
        """
        if type_name in self.wrapped_value_types:
            return f"{type_name}{self.wrapper_suffix}"
        return None

    @property
    def converters_namespace(self) -> str:
        return f"{self.destination_root_namespace}.Converters"


_XAML_VALUE_TYPES = frozenset({"Point", "Size", "Color", "Rect"})
_XAML_TYPE_CONVERTER_CLASSES = frozenset({"Geometry", "Brush"})

OUTPUT_STRATEGIES: dict[str, OutputStrategy] = {
    "wpf": OutputStrategy(
        platform="wpf",
        destination_root_namespace="Microsoft.StandardUI.Wpf",
        project_directory="StandardUI.WPF",
        property_descriptor_class="System.Windows.DependencyProperty",
        default_base_class="StandardUIDependencyObject",
        root_base_class="StandardUIFrameworkElement",
        required_import_names=("System.Windows",),
        wrapped_value_types=_XAML_VALUE_TYPES,
        wrapper_suffix="Wpf",
        type_converter_classes=_XAML_TYPE_CONVERTER_CLASSES,
    ),
    "winui": OutputStrategy(
        platform="winui",
        destination_root_namespace="Microsoft.StandardUI.WinUI",
        project_directory="StandardUI.WinUI",
        property_descriptor_class="Microsoft.UI.Xaml.DependencyProperty",
        default_base_class="StandardUIDependencyObject",
        root_base_class="StandardUIFrameworkElement",
        required_import_names=("Microsoft.UI.Xaml",),
        wrapped_value_types=_XAML_VALUE_TYPES,
        wrapper_suffix="WinUI",
        type_converter_classes=_XAML_TYPE_CONVERTER_CLASSES,
    ),
    "maui": OutputStrategy(
        platform="maui",
        destination_root_namespace="Microsoft.StandardUI.Maui",
        project_directory="StandardUI.Maui",
        property_descriptor_class="Microsoft.Maui.Controls.BindableProperty",
        default_base_class="StandardUIBindableObject",
        root_base_class="StandardUIView",
        required_import_names=("Microsoft.Maui.Controls",),
        wrapped_value_types=frozenset({"Point", "Size", "Rect"}),
        wrapper_suffix="Maui",
    ),
}


def get_output_strategy(platform: str) -> OutputStrategy:
    """Look up the output strategy for a platform identifier.

    Args:
        platform: Platform identifier, case-insensitive (e.g. "wpf")

    Returns:
        The platform's OutputStrategy

    Raises:
        ConfigurationError: If the platform is not registered
    """
    strategy = OUTPUT_STRATEGIES.get(platform.lower())
    if strategy is None:
        raise ConfigurationError(
            f"Unknown target platform '{platform}'. "
            f"Supported platforms: {sorted(OUTPUT_STRATEGIES)}",
            subject=platform,
        )
    return strategy
