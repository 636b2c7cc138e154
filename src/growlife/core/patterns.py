"""Plaintext (.cells) pattern loading and a library of common patterns."""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from .errors import LifeError
from .grid import DEAD_GLYPH, Grid, parse, split_rows

logger = logging.getLogger(__name__)

COMMENT_MARKER = "!"
NAME_PREFIX = "Name:"


def _data_lines(text: str, comment_marker: str) -> List[str]:
    return [line for line in split_rows(text) if line and not line.startswith(comment_marker)]


def read_cells(text: str, comment_marker: str = COMMENT_MARKER, dead: str = DEAD_GLYPH) -> Grid:
    """Read a pattern in plaintext (.cells) format.

    Comment lines and blank lines are dropped. Lines shorter than the
    widest one are padded on the right with dead cells, so the result is
    always rectangular.

    Args:
        text: Pattern file contents
        comment_marker: Prefix marking comment lines
        dead: Glyph for dead cells

    Returns:
        New Grid

    Raises:
        EmptyPatternError: If there are no data lines
    """
    lines = _data_lines(text, comment_marker)
    width = max((len(line) for line in lines), default=0)
    return parse("\n".join(line.ljust(width, dead) for line in lines), dead)


def load_cells(
    path: Union[str, Path], comment_marker: str = COMMENT_MARKER, dead: str = DEAD_GLYPH
) -> Grid:
    """Load a plaintext (.cells) pattern file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        EmptyPatternError: If the file has no data lines
    """
    return read_cells(Path(path).read_text(encoding="utf-8"), comment_marker, dead)


class Pattern:
    """Represents a named Game of Life pattern."""

    def __init__(self, name: str, text: str, description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            text: Pattern body in plaintext format
            description: Optional description
        """
        self.name = name
        self.text = text
        self.description = description

    def to_grid(self, margin: int = 0) -> Grid:
        """Build a grid holding this pattern.

        Args:
            margin: Rings of dead cells to place around the pattern

        Returns:
            New Grid
        """
        return read_cells(self.text).grow(margin)

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (rows, cols)."""
        return read_cells(self.text).shape

    @classmethod
    def from_cells(cls, text: str, default_name: str = "") -> "Pattern":
        """Create a pattern from .cells file contents.

        A "!Name:" comment sets the name; other comments form the description.
        """
        name = default_name
        notes = []
        for line in split_rows(text):
            if not line.startswith(COMMENT_MARKER):
                continue
            comment = line[len(COMMENT_MARKER):].strip()
            if comment.startswith(NAME_PREFIX):
                name = comment[len(NAME_PREFIX):].strip()
            elif comment:
                notes.append(comment)

        body = "\n".join(_data_lines(text, COMMENT_MARKER))
        return cls(name, body, " ".join(notes))


class PatternLibrary:
    """Manages a collection of patterns."""

    def __init__(self) -> None:
        """Initialize pattern library with the built-in patterns."""
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(Pattern("Block", "OO\nOO", "2x2 still life block"))
        self.add_pattern(Pattern("Beehive", ".OO.\nO..O\n.OO.", "Beehive still life"))

        # Oscillators
        self.add_pattern(Pattern("Blinker", "OOO", "Period-2 oscillator"))
        self.add_pattern(Pattern("Toad", ".OOO\nOOO.", "Period-2 oscillator"))
        self.add_pattern(Pattern("Beacon", "OO..\nOO..\n..OO\n..OO", "Period-2 oscillator"))

        # Spaceships
        self.add_pattern(Pattern("Glider", ".O.\n..O\nOOO", "Smallest spaceship, period-4"))
        self.add_pattern(
            Pattern(
                "Lightweight Spaceship",
                ".O..O\nO....\nO...O\nOOOO.",
                "LWSS - Period-4 spaceship",
            )
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "R-pentomino",
                ".OO\nOO.\n.O.",
                "Famous methuselah that stabilizes after 1103 generations",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def load_pattern(self, path: Union[str, Path]) -> Pattern:
        """Load a .cells file into the library.

        The file stem names the pattern unless the file has a "!Name:" comment.

        Raises:
            FileNotFoundError: If file doesn't exist
            EmptyPatternError: If the file has no data lines
        """
        path = Path(path)
        pattern = Pattern.from_cells(path.read_text(encoding="utf-8"), default_name=path.stem)
        # Reject unusable files before they reach the library
        pattern.to_grid()
        self.add_pattern(pattern)
        return pattern

    def load_directory(self, directory: Union[str, Path]) -> List[Pattern]:
        """Load all .cells patterns from a directory.

        Files that cannot be read as patterns are skipped with a warning.

        Returns:
            Patterns that were loaded
        """
        loaded = []
        for path in sorted(Path(directory).glob("*.cells")):
            try:
                loaded.append(self.load_pattern(path))
            except (LifeError, OSError, UnicodeDecodeError) as e:
                logger.warning("Failed to load pattern from %s: %s", path.name, e)
        return loaded
