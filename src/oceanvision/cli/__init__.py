"""Command line interface for oceanvision."""

from .cli import cli

__all__ = ["cli"]
