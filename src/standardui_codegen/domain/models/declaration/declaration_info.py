#!/usr/bin/env python3

"""Declaration information models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .attached_pair import AttachedPair
from .method_info import MethodInfo
from .property_info import PropertyInfo


@dataclass(frozen=True)
class DeclarationInfo:
    """One abstract interface declaration, the unit of generation."""

    name: str
    namespace: str
    usings: tuple[str, ...] = field(default_factory=tuple)
    """Using directives of the enclosing compilation unit, in source order."""
    properties: tuple[PropertyInfo, ...] = field(default_factory=tuple)
    methods: tuple[MethodInfo, ...] = field(default_factory=tuple)
    base_types: tuple[str, ...] = field(default_factory=tuple)
    source_file: Path | None = None

    @property
    def base_type(self) -> str | None:
        """First entry of the base list, the only one generation uses."""
        return self.base_types[0] if self.base_types else None


@dataclass(frozen=True)
class DeclarationUnit:
    """A declaration together with its optional companion attached declaration.

    ``attached_pairs`` is resolved when the unit is loaded so that an orphaned
    accessor is reported once, before any generation happens.
    """

    declaration: DeclarationInfo
    attached_declaration: DeclarationInfo | None = None
    attached_pairs: tuple[AttachedPair, ...] = field(default_factory=tuple)
