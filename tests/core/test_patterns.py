"""Tests for plaintext pattern loading and the PatternLibrary."""

import logging
import tempfile
from pathlib import Path

import pytest

from growlife.core.errors import EmptyPatternError
from growlife.core.grid import Grid, format_grid
from growlife.core.patterns import Pattern, PatternLibrary, load_cells, read_cells

TOAD_FILE = """!Name: Toad
!Period-2 oscillator.
!
.OOO
OOO.
"""


class TestReadCells:
    """Test cases for reading .cells text."""

    def test_comments_dropped(self):
        """Test that comment and blank lines are not rows."""
        grid = read_cells(TOAD_FILE)
        assert grid.shape == (2, 4)
        assert format_grid(grid) == ".OOO\nOOO."

    def test_short_lines_padded_with_dead_cells(self):
        """Test that uneven lines are padded on the right with dead cells."""
        grid = read_cells("O\n.O.\nOO")
        assert grid.to_list() == [[1, 0, 0], [0, 1, 0], [1, 1, 0]]

    def test_custom_markers(self):
        """Test a different comment marker and dead glyph."""
        grid = read_cells("# comment\n-*\n*", comment_marker="#", dead="-")
        assert grid.to_list() == [[0, 1], [1, 0]]

    def test_splits_on_newlines_only(self):
        """Test that a form feed stays inside its row."""
        grid = read_cells("!comment\n.\x0c.\nO")
        assert grid.to_list() == [[0, 1, 0], [1, 0, 0]]

    def test_no_data_lines(self):
        """Test a file holding only comments."""
        with pytest.raises(EmptyPatternError):
            read_cells("!Name: Nothing\n!\n")

        with pytest.raises(EmptyPatternError):
            read_cells("")

    def test_load_cells(self):
        """Test loading a .cells file from disk."""
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "toad.cells"
            path.write_text(TOAD_FILE)

            grid = load_cells(path)
            assert grid == read_cells(TOAD_FILE)

            assert load_cells(str(path)) == grid

    def test_load_cells_missing_file(self):
        """Test loading a file that does not exist."""
        with tempfile.TemporaryDirectory() as temp_dir:
            with pytest.raises(FileNotFoundError):
                load_cells(Path(temp_dir) / "missing.cells")


class TestPattern:
    """Test cases for the Pattern class."""

    def test_initialization(self):
        """Test pattern initialization."""
        pattern = Pattern("Blinker", "OOO", "Period-2 oscillator")

        assert pattern.name == "Blinker"
        assert pattern.text == "OOO"
        assert pattern.description == "Period-2 oscillator"

    def test_to_grid(self):
        """Test building a grid from a pattern."""
        pattern = Pattern("Blinker", "OOO")
        assert pattern.to_grid() == Grid([[1, 1, 1]])

    def test_to_grid_with_margin(self):
        """Test surrounding a pattern with dead cells."""
        grid = Pattern("Glider", ".O.\n..O\nOOO").to_grid(margin=2)

        assert grid.shape == (7, 7)
        assert grid.population == 5
        assert not grid.border_has_life()

    def test_get_size(self):
        """Test pattern size."""
        assert Pattern("Toad", ".OOO\nOOO.").get_size() == (2, 4)

    def test_from_cells(self):
        """Test reading name and description from comments."""
        pattern = Pattern.from_cells(TOAD_FILE)

        assert pattern.name == "Toad"
        assert pattern.description == "Period-2 oscillator."
        assert pattern.text == ".OOO\nOOO."

    def test_from_cells_default_name(self):
        """Test the fallback name when the file has no name comment."""
        pattern = Pattern.from_cells("OO\nOO", default_name="block")
        assert pattern.name == "block"
        assert pattern.description == ""


class TestPatternLibrary:
    """Test cases for the PatternLibrary class."""

    def test_builtin_patterns(self):
        """Test that built-in patterns are available and well formed."""
        library = PatternLibrary()
        names = library.list_patterns()

        for expected in ["Block", "Blinker", "Toad", "Glider", "R-pentomino"]:
            assert expected in names

        for name in names:
            grid = library.get_pattern(name).to_grid()
            assert grid.population > 0

    def test_get_missing_pattern(self):
        """Test looking up an unknown pattern."""
        assert PatternLibrary().get_pattern("Nonexistent") is None

    def test_add_pattern(self):
        """Test adding a custom pattern."""
        library = PatternLibrary()
        library.add_pattern(Pattern("Custom", "O.O"))

        assert "Custom" in library.list_patterns()
        assert library.get_pattern("Custom").to_grid() == Grid([[1, 0, 1]])

    def test_load_pattern(self):
        """Test loading a pattern file into the library."""
        library = PatternLibrary()

        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "my_toad.cells"
            path.write_text(TOAD_FILE)

            pattern = library.load_pattern(path)

        assert pattern.name == "Toad"
        assert library.get_pattern("Toad") is pattern

    def test_load_directory(self, caplog):
        """Test loading a directory, skipping broken files."""
        library = PatternLibrary()

        with tempfile.TemporaryDirectory() as temp_dir:
            directory = Path(temp_dir)
            (directory / "ship.cells").write_text("!Name: Tiny ship\n.O\nO.\n")
            (directory / "empty.cells").write_text("!Name: Broken\n!nothing here\n")
            (directory / "notes.txt").write_text("OOO")

            with caplog.at_level(logging.WARNING, logger="growlife"):
                loaded = library.load_directory(directory)

        assert [pattern.name for pattern in loaded] == ["Tiny ship"]
        assert "Tiny ship" in library.list_patterns()
        assert "Broken" not in library.list_patterns()
        assert "empty.cells" in caplog.text

    def test_load_directory_skips_unreadable_entries(self, caplog):
        """Test that a directory matching the pattern glob is skipped."""
        library = PatternLibrary()

        with tempfile.TemporaryDirectory() as temp_dir:
            directory = Path(temp_dir)
            (directory / "folder.cells").mkdir()
            (directory / "pair.cells").write_text("OO\n")

            with caplog.at_level(logging.WARNING, logger="growlife"):
                loaded = library.load_directory(directory)

        assert [pattern.name for pattern in loaded] == ["pair"]
        assert "folder.cells" in caplog.text
