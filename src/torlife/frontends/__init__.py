"""Frontend interfaces for the board engine."""

from .cli import main

__all__ = ["main"]
