"""Application generators."""

from .model_generator import ModelGenerator

__all__ = ["ModelGenerator"]
