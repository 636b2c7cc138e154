"""Frontend interfaces for Game of Life."""

from .cli import CLIGameOfLife

__all__ = ["CLIGameOfLife"]
