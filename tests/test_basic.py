"""Basic tests for the growlife package."""

from growlife import (
    BoundaryPolicy,
    Grid,
    PatternLibrary,
    format_grid,
    parse,
    simulate,
    step,
)


def test_grid_creation():
    """Test basic grid creation and cell reads."""
    grid = parse("...\n.O.\n...")
    assert grid.shape == (3, 3)
    assert grid.is_alive(1, 1) is True
    assert grid.is_alive(0, 0) is False


def test_pattern_library():
    """Test pattern library has some patterns."""
    library = PatternLibrary()
    patterns = library.list_patterns()
    assert len(patterns) > 0
    assert "Glider" in patterns


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    grid = parse(".....\n..O..\n..O..\n..O..\n.....")

    horizontal = step(grid)
    assert format_grid(horizontal) == ".....\n.....\n.OOO.\n.....\n....."

    assert step(horizontal) == grid


def test_simulate_with_growth():
    """Test a short run with boundary growth."""
    generations = simulate(Grid([[1, 1, 1]]), 3, BoundaryPolicy.AUTO_GROW)

    assert [g.shape for g in generations] == [(1, 3), (3, 5), (5, 7)]
    assert all(g.population == 3 for g in generations)
