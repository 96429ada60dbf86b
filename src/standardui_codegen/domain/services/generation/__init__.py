#!/usr/bin/env python3

"""Generation services for platform class creation."""

from .attached_property_emitter import AttachedPropertyEmitter
from .context import Context, has_marker, strip_marker
from .interface_emitter import GeneratedFile, InterfaceEmitter
from .property_emitter import PropertyEmitter
from .source_buffer import SourceBuffer
from .type_mapping import TypeMapping

__all__ = [
    "AttachedPropertyEmitter",
    "Context",
    "GeneratedFile",
    "InterfaceEmitter",
    "PropertyEmitter",
    "SourceBuffer",
    "TypeMapping",
    "has_marker",
    "strip_marker",
]
