"""Conway's Game of Life engine with automatic boundary growth."""

__version__ = "0.1.0"

from .core.errors import LifeError, MalformedInputError, EmptyPatternError
from .core.grid import CellState, Grid, parse, format_grid, count_live_neighbors
from .core.game import BoundaryPolicy, Simulator, step, step_with_growth, simulate
from .core.config import SimulationConfig
from .core.patterns import Pattern, PatternLibrary, read_cells, load_cells

__all__ = [
    "LifeError",
    "MalformedInputError",
    "EmptyPatternError",
    "CellState",
    "Grid",
    "parse",
    "format_grid",
    "count_live_neighbors",
    "BoundaryPolicy",
    "Simulator",
    "step",
    "step_with_growth",
    "simulate",
    "SimulationConfig",
    "Pattern",
    "PatternLibrary",
    "read_cells",
    "load_cells",
]
