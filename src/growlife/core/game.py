"""Conway's Game of Life implementation."""

import logging
from enum import Enum
from typing import Any, List, Union

import numpy as np

from .errors import LifeError
from .grid import CellState, Grid, count_all_neighbors

logger = logging.getLogger(__name__)

DEFAULT_GENERATION_COUNT = 100


class BoundaryPolicy(Enum):
    """What happens when live cells reach the edge of the grid."""

    FIXED_BOUNDS = "fixed-bounds"
    AUTO_GROW = "auto-grow"


def _as_grid(current: Any) -> Grid:
    if isinstance(current, Grid):
        return current
    return Grid(current)


def _apply_rules(current: Grid) -> Grid:
    """Apply Conway's Game of Life rules, reading only from `current`."""
    neighbor_counts = count_all_neighbors(current)
    alive = current.cells == CellState.ALIVE

    # Survival: live cell with 2 or 3 neighbors
    survives = alive & ((neighbor_counts == 2) | (neighbor_counts == 3))

    # Birth: dead cell with exactly 3 neighbors
    born = ~alive & (neighbor_counts == 3)

    return Grid(np.where(survives | born, CellState.ALIVE, CellState.DEAD))


def step(current: Any, policy: Union[BoundaryPolicy, str] = BoundaryPolicy.FIXED_BOUNDS) -> Grid:
    """Compute the next generation.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    With AUTO_GROW, a grid whose border holds a live cell is first padded
    with one ring of dead cells, so the result is two rows and two columns
    larger. FIXED_BOUNDS never changes the dimensions and clips patterns at
    the edges.

    Args:
        current: Grid (or sequence of rows) holding the current generation
        policy: Boundary policy, or its name ("fixed-bounds" or "auto-grow")

    Returns:
        New Grid with the next generation

    Raises:
        MalformedInputError: If `current` is not rectangular
        EmptyPatternError: If `current` has no cells
        ValueError: If the policy name is unknown
    """
    policy = BoundaryPolicy(policy)
    grid = _as_grid(current)

    if policy is BoundaryPolicy.AUTO_GROW and grid.border_has_life():
        grid = grid.grow()
        logger.debug("Live cells on border, grid grown to %dx%d", grid.rows, grid.cols)

    return _apply_rules(grid)


def step_with_growth(current: Any) -> Grid:
    """Compute the next generation with automatic boundary growth."""
    return step(current, BoundaryPolicy.AUTO_GROW)


class Simulator:
    """Produces a finite sequence of generations from a starting grid.

    The boundary policy is fixed when the simulator is created and applies
    to every step of every run. A simulator keeps no state between runs.
    """

    def __init__(self, policy: Union[BoundaryPolicy, str] = BoundaryPolicy.FIXED_BOUNDS) -> None:
        """Initialize the simulator.

        Args:
            policy: Boundary policy used by every step, or its name

        Raises:
            ValueError: If the policy name is unknown
        """
        self.policy = BoundaryPolicy(policy)

    def step(self, current: Any) -> Grid:
        """Advance one generation under this simulator's policy."""
        return step(current, self.policy)

    def simulate(self, start: Any, generation_count: int = DEFAULT_GENERATION_COUNT) -> List[Grid]:
        """Compute `generation_count` generations, starting with `start`.

        The whole sequence is computed before returning. Element 0 is the
        starting grid and element i is the step of element i - 1.
        A count of 0 gives an empty list.

        Args:
            start: Starting Grid (or sequence of rows)
            generation_count: Length of the returned sequence

        Returns:
            List of Grids

        Raises:
            ValueError: If generation_count is negative
            LifeError: If a generation cannot be computed; its `generation`
                attribute holds the failing index
        """
        if generation_count < 0:
            raise ValueError(f"Generation count must be non-negative, got {generation_count}")

        try:
            first = _as_grid(start)
        except LifeError as e:
            e.generation = 0
            raise

        if generation_count == 0:
            return []

        generations = [first]
        for index in range(1, generation_count):
            try:
                generations.append(self.step(generations[index - 1]))
            except LifeError as e:
                e.generation = index
                raise

        final = generations[-1]
        logger.debug(
            "Simulated %d generations (%s): %s -> %s, population %d -> %d",
            generation_count,
            self.policy.value,
            first.shape,
            final.shape,
            first.population,
            final.population,
        )
        return generations


def simulate(
    start: Any,
    generation_count: int = DEFAULT_GENERATION_COUNT,
    policy: Union[BoundaryPolicy, str] = BoundaryPolicy.FIXED_BOUNDS,
) -> List[Grid]:
    """Compute a sequence of generations; see Simulator.simulate()."""
    return Simulator(policy).simulate(start, generation_count)
