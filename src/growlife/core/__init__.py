"""Core Game of Life engine."""

from .errors import LifeError, MalformedInputError, EmptyPatternError
from .grid import CellState, Grid, parse, format_grid, count_live_neighbors, count_all_neighbors
from .game import BoundaryPolicy, Simulator, step, step_with_growth, simulate
from .config import SimulationConfig
from .patterns import Pattern, PatternLibrary, read_cells, load_cells
from .metrics import GenerationMetrics, collect_metrics, summarize

__all__ = [
    "LifeError",
    "MalformedInputError",
    "EmptyPatternError",
    "CellState",
    "Grid",
    "parse",
    "format_grid",
    "count_live_neighbors",
    "count_all_neighbors",
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
    "GenerationMetrics",
    "collect_metrics",
    "summarize",
]
