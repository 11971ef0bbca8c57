"""CLI command modules for oceanvision."""

from .config import config
from .species import species

__all__ = [
    "config",
    "species",
]
