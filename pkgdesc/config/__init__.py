"""Configuration schema and loading for pkgdesc."""

from .loader import load_generator_config
from .schema import SUPPORTED_FORMATS, GeneratorConfig

__all__ = [
    "GeneratorConfig",
    "SUPPORTED_FORMATS",
    "load_generator_config",
]
