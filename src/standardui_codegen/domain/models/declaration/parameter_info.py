#!/usr/bin/env python3

"""Parameter information model for interface declarations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParameterInfo:
    """Information about a method parameter."""

    name: str
    type_name: str
