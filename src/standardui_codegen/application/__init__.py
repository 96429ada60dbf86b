#!/usr/bin/env python3

"""Application layer orchestrating generation runs."""

from .generators import ModelGenerator

__all__ = ["ModelGenerator"]
