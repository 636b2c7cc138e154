"""Exceptions raised by the Game of Life engine."""

from typing import Optional


class LifeError(Exception):
    """Base class for all engine errors.

    Attributes:
        generation: Index of the generation being computed when the error
            was raised, or None if it happened outside a simulation run.
    """

    def __init__(self, message: str, generation: Optional[int] = None) -> None:
        super().__init__(message)
        self.generation = generation

    def __str__(self) -> str:
        message = super().__str__()
        if self.generation is not None:
            return f"{message} (at generation {self.generation})"
        return message


class MalformedInputError(LifeError, ValueError):
    """Rows of unequal length or cell values other than dead/alive."""


class EmptyPatternError(LifeError, ValueError):
    """A pattern with zero rows or zero columns."""
