"""Simulation configuration."""

from dataclasses import dataclass
from typing import List, Union

from .game import DEFAULT_GENERATION_COUNT, BoundaryPolicy, Simulator
from .grid import ALIVE_GLYPH, DEAD_GLYPH


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""

    generation_count: int = DEFAULT_GENERATION_COUNT
    policy: Union[BoundaryPolicy, str] = BoundaryPolicy.FIXED_BOUNDS
    dead_glyph: str = DEAD_GLYPH
    alive_glyph: str = ALIVE_GLYPH
    comment_marker: str = "!"

    def validate(self) -> List[str]:
        """Check the configuration.

        Returns:
            List of error messages, empty if the configuration is valid
        """
        errors = []

        if self.generation_count < 0:
            errors.append("Generation count must be non-negative")

        try:
            BoundaryPolicy(self.policy)
        except ValueError:
            errors.append(f"Unknown boundary policy: {self.policy!r}")

        for name in ("dead_glyph", "alive_glyph", "comment_marker"):
            if len(getattr(self, name)) != 1:
                errors.append(f"{name.replace('_', ' ').capitalize()} must be a single character")

        if self.dead_glyph == self.alive_glyph:
            errors.append("Dead and alive glyphs must differ")

        if self.comment_marker == self.dead_glyph:
            errors.append("Comment marker must differ from the dead glyph")

        return errors

    def create_simulator(self) -> Simulator:
        """Create a simulator using this configuration's boundary policy.

        Raises:
            ValueError: If the configuration is invalid
        """
        errors = self.validate()
        if errors:
            raise ValueError("Invalid simulation configuration: " + "; ".join(errors))
        return Simulator(self.policy)
