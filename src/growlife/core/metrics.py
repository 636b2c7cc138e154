"""Per-generation metrics for consumers of a simulated sequence."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from .grid import Grid


@dataclass
class GenerationMetrics:
    """Dimensions and population of one generation."""

    index: int
    rows: int
    cols: int
    population: int
    bounding_box: Optional[Tuple[int, int, int, int]] = None

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def to_dict(self) -> Dict[str, Any]:
        """Convert metrics to dictionary."""
        return asdict(self)


def collect_metrics(generations: Sequence[Grid]) -> List[GenerationMetrics]:
    """Collect metrics for every generation of a sequence."""
    return [
        GenerationMetrics(
            index=index,
            rows=grid.rows,
            cols=grid.cols,
            population=grid.population,
            bounding_box=grid.get_bounding_box(),
        )
        for index, grid in enumerate(generations)
    ]


def summarize(generations: Sequence[Grid]) -> Dict[str, Any]:
    """Summarize a generation sequence.

    Returns:
        Dictionary with generation count, population statistics, the
        initial and final shapes and how many steps grew the grid
    """
    if not generations:
        return {"generations": 0}

    metrics = collect_metrics(generations)
    populations = [m.population for m in metrics]
    growth_steps = sum(1 for prev, cur in zip(metrics, metrics[1:]) if cur.shape != prev.shape)

    return {
        "generations": len(metrics),
        "initial_population": populations[0],
        "final_population": populations[-1],
        "min_population": min(populations),
        "max_population": max(populations),
        "avg_population": float(np.mean(populations)),
        "initial_shape": metrics[0].shape,
        "final_shape": metrics[-1].shape,
        "growth_steps": growth_steps,
    }
