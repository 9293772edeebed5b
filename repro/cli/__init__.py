"""Command line interface for inspecting route tables."""

from .cli import main

__all__ = ["main"]
