#!/usr/bin/env python3

"""Target platform models."""

from .output_strategy import OUTPUT_STRATEGIES, OutputStrategy, get_output_strategy

__all__ = [
    "OUTPUT_STRATEGIES",
    "OutputStrategy",
    "get_output_strategy",
]
