"""StandardUI model code generator - platform classes from abstract interface declarations."""

from .application.generators import ModelGenerator
from .infrastructure.config import Config
from .main import main

__all__ = ["Config", "ModelGenerator", "main"]
