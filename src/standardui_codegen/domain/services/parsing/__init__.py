#!/usr/bin/env python3

"""Declaration loading services."""

from .attached_pair_resolver import AttachedPairResolver, make_declaration_unit
from .declaration_parser import DeclarationParser
from .type_name import TypeName, parse_type_name

__all__ = [
    "AttachedPairResolver",
    "DeclarationParser",
    "TypeName",
    "make_declaration_unit",
    "parse_type_name",
]
