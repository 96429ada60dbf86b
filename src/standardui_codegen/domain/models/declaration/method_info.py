#!/usr/bin/env python3

"""Method information model for interface declarations."""

from dataclasses import dataclass, field

from .parameter_info import ParameterInfo


@dataclass(frozen=True)
class MethodInfo:
    """Information about an interface method."""

    name: str
    return_type: str
    parameters: tuple[ParameterInfo, ...] = field(default_factory=tuple)
