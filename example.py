#!/usr/bin/env python3
"""
Example usage of the growlife package.
"""

from growlife import BoundaryPolicy, PatternLibrary, Simulator, format_grid
from growlife.core.metrics import summarize


def main():
    """Demonstrate programmatic usage of the growlife package."""
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    # Start with the glider touching every edge and let the grid grow
    simulator = Simulator(BoundaryPolicy.AUTO_GROW)
    generations = simulator.simulate(glider.to_grid(), 10)

    for index, grid in enumerate(generations):
        print(f"Generation {index} ({grid.rows}x{grid.cols}):")
        print(format_grid(grid))
        print(f"Population: {grid.population}")
        print()

    print("Final statistics:")
    for key, value in summarize(generations).items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
