#!/usr/bin/env python3

"""Interface declaration domain models."""

from .attached_pair import AttachedPair
from .declaration_info import DeclarationInfo, DeclarationUnit
from .method_info import MethodInfo
from .parameter_info import ParameterInfo
from .property_info import PropertyInfo

__all__ = [
    "AttachedPair",
    "DeclarationInfo",
    "DeclarationUnit",
    "MethodInfo",
    "ParameterInfo",
    "PropertyInfo",
]
