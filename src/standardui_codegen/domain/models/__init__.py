#!/usr/bin/env python3

"""Domain models for the model code generator."""

from . import declaration, platform

__all__ = [
    "declaration",
    "platform",
]
