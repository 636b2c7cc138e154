"""Command-line interface for Conway's Game of Life."""

import argparse
import logging
from typing import List, Optional

from ..core.config import SimulationConfig
from ..core.errors import LifeError
from ..core.game import BoundaryPolicy
from ..core.grid import Grid, format_grid
from ..core.metrics import summarize
from ..core.patterns import PatternLibrary, load_cells
from ..logging_config import setup_logging

logger = logging.getLogger(__name__)


class CLIGameOfLife:
    """Command-line interface printing every generation as plaintext."""

    def __init__(self) -> None:
        """Initialize CLI interface."""
        self.pattern_library = PatternLibrary()

    def load_start(
        self,
        path: Optional[str],
        pattern: Optional[str],
        margin: int,
        config: SimulationConfig,
    ) -> Grid:
        """Build the starting grid from a .cells file or a library pattern.

        Args:
            path: Path of a .cells file, used when no pattern name is given
            pattern: Name of a library pattern
            margin: Rings of dead cells to add around the pattern
            config: Glyphs and comment marker for reading files

        Returns:
            Starting Grid

        Raises:
            KeyError: If the pattern name is unknown
            OSError: If the file cannot be read
            LifeError: If the pattern is malformed or empty
        """
        if pattern:
            found = self.pattern_library.get_pattern(pattern)
            if found is None:
                raise KeyError(pattern)
            start = found.to_grid()
        else:
            start = load_cells(path, config.comment_marker, config.dead_glyph)

        return start.grow(margin)

    def run_simulation(self, start: Grid, config: SimulationConfig, show_grid: bool = True) -> List[Grid]:
        """Run a simulation and print each generation.

        Args:
            start: Starting grid
            config: Simulation configuration
            show_grid: Print the generations

        Returns:
            The generation sequence
        """
        simulator = config.create_simulator()
        generations = simulator.simulate(start, config.generation_count)

        if show_grid:
            for index, grid in enumerate(generations):
                print(f"Generation {index} ({grid.rows}x{grid.cols}):")
                print(format_grid(grid, config.dead_glyph, config.alive_glyph))
                print()

        return generations

    def list_patterns(self) -> None:
        """Print available patterns."""
        print("Available patterns:")
        for name in self.pattern_library.list_patterns():
            pattern = self.pattern_library.get_pattern(name)
            rows, cols = pattern.get_size()
            description = f" - {pattern.description}" if pattern.description else ""
            print(f"  {name} ({rows}x{cols}){description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life and print every generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print 10 generations of a plaintext pattern file
  growlife-cli patterns/toad.cells

  # Let a glider drift, growing the grid whenever it reaches the edge
  growlife-cli --pattern Glider --generations 20 --grow

  # Centre a pattern in a dead margin and report statistics only
  growlife-cli --pattern R-pentomino --margin 10 -n 100 --stats --quiet

  # List available patterns
  growlife-cli --list-patterns
        """,
    )

    parser.add_argument("file", nargs="?", help="Plaintext (.cells) pattern file")

    parser.add_argument("--pattern", type=str, help="Use a library pattern instead of a file")

    parser.add_argument(
        "--pattern-dir",
        type=str,
        help="Directory of extra .cells patterns to add to the library",
    )

    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=10,
        help="Number of generations to produce, including the start (default: 10)",
    )

    parser.add_argument(
        "--grow",
        action="store_true",
        help="Grow the grid by one dead ring whenever live cells touch the edge",
    )

    parser.add_argument(
        "--margin",
        type=int,
        default=0,
        help="Rings of dead cells to add around the starting pattern (default: 0)",
    )

    # Output configuration
    parser.add_argument("--stats", action="store_true", help="Print run statistics")

    parser.add_argument("-q", "--quiet", action="store_true", help="Don't print the generations")

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.margin < 0:
        errors.append("Margin must be non-negative")

    if args.file and args.pattern:
        errors.append("Give either a pattern file or --pattern, not both")

    if not args.file and not args.pattern:
        errors.append("A pattern file or --pattern is required")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def print_statistics(stats: dict) -> None:
    """Print a run summary produced by summarize()."""
    print("Statistics:")
    if not stats.get("generations"):
        print("  No generations produced")
        return

    print(f"  Generations: {stats['generations']}")
    print(f"  Population: {stats['initial_population']} → {stats['final_population']}")
    print(
        f"  Population range: {stats['min_population']}-{stats['max_population']} "
        f"(avg {stats['avg_population']:.1f})"
    )
    initial_rows, initial_cols = stats["initial_shape"]
    final_rows, final_cols = stats["final_shape"]
    print(f"  Grid: {initial_rows}x{initial_cols} → {final_rows}x{final_cols}")
    print(f"  Growth steps: {stats['growth_steps']}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    cli = CLIGameOfLife()

    if args.pattern_dir:
        loaded = cli.pattern_library.load_directory(args.pattern_dir)
        logger.info("Loaded %d patterns from %s", len(loaded), args.pattern_dir)

    # Handle special commands
    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    config = SimulationConfig(
        generation_count=args.generations,
        policy=BoundaryPolicy.AUTO_GROW if args.grow else BoundaryPolicy.FIXED_BOUNDS,
    )

    config_errors = config.validate()
    if config_errors:
        print("Error: Invalid arguments:")
        for error in config_errors:
            print(f"  - {error}")
        return 1

    try:
        start = cli.load_start(args.file, args.pattern, args.margin, config)
    except KeyError:
        available = cli.pattern_library.list_patterns()
        print(f"Error: Pattern '{args.pattern}' not found")
        print(f"Available patterns: {', '.join(available)}")
        return 1
    except (LifeError, OSError) as e:
        print(f"Error: {e}")
        return 1

    try:
        generations = cli.run_simulation(start, config, show_grid=not args.quiet)
    except LifeError as e:
        print(f"Error: {e}")
        return 1

    if args.stats:
        print_statistics(summarize(generations))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
