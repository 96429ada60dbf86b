#!/usr/bin/env python3

"""Attached property pair model."""

from dataclasses import dataclass

from .method_info import MethodInfo


@dataclass(frozen=True)
class AttachedPair:
    """A Get/Set method pair describing one attached property.

    The setter is optional; a getter on its own describes a read-only
    attached property.
    """

    property_name: str
    getter: MethodInfo
    setter: MethodInfo | None = None

    @property
    def is_read_only(self) -> bool:
        return self.setter is None

    @property
    def value_type(self) -> str:
        return self.getter.return_type

    @property
    def element_type(self) -> str:
        """Abstract type of the element the property is attached to."""
        return self.getter.parameters[0].type_name
