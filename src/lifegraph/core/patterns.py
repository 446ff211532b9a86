"""Common Conway's Game of Life patterns as grid initial states."""

from typing import Any, Dict, List, Optional, Tuple

ALIVE_CHARS = "*O"
DEAD_CHARS = "."


def parse_state(text: str) -> List[List[bool]]:
    """Parse a text drawing into a matrix of life states.

    Rows are separated by newlines or '/'. Live cells are drawn with '*' or
    'O' and dead cells with '.'. Blank rows are ignored, and row lengths are
    kept as written, so the result may be ragged.

    Args:
        text: Drawing to parse

    Returns:
        Row-major nested list of booleans

    Raises:
        ValueError: If the drawing contains any other character
    """
    rows = []
    for line in text.replace("/", "\n").splitlines():
        line = line.strip()
        if not line:
            continue

        row = []
        for char in line:
            if char in ALIVE_CHARS:
                row.append(True)
            elif char in DEAD_CHARS:
                row.append(False)
            else:
                raise ValueError(f"Invalid cell character {char!r} in row {line!r}")
        rows.append(row)

    return rows


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(
        self,
        name: str,
        cells: List[Tuple[int, int]],
        description: str = "",
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (x, y) coordinates for living cells, x is the column
            description: Optional description
            metadata: Optional metadata dictionary
        """
        self.name = name
        self.cells = cells
        self.description = description
        self.metadata = metadata or {}

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return len(set(self.cells))

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        xs, ys = zip(*self.cells)
        return (min(xs), min(ys), max(xs), max(ys))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size.

        Returns:
            Tuple of (width, height)
        """
        if not self.cells:
            return (0, 0)

        min_x, min_y, max_x, max_y = self.get_bounding_box()
        return (max_x - min_x + 1, max_y - min_y + 1)

    def normalize(self) -> "Pattern":
        """Return a new pattern with coordinates shifted to start at (0, 0)."""
        if not self.cells:
            return Pattern(self.name, [], self.description, self.metadata.copy())

        min_x, min_y, _, _ = self.get_bounding_box()
        normalized_cells = [(x - min_x, y - min_y) for x, y in self.cells]

        return Pattern(self.name, normalized_cells, self.description, self.metadata.copy())

    def to_initial_state(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        offset_x: int = 0,
        offset_y: int = 0,
    ) -> List[List[bool]]:
        """Lay the pattern out as a rectangular matrix of life states.

        The pattern is normalized first, so its bounding box starts at the
        offset. Cells that fall outside the matrix are skipped.

        Args:
            width: Number of columns (defaults to fit the pattern)
            height: Number of rows (defaults to fit the pattern)
            offset_x: Horizontal offset
            offset_y: Vertical offset

        Returns:
            Row-major nested list of booleans, usable as a Grid initial state
        """
        normalized = self.normalize()
        size_x, size_y = normalized.get_size()
        if width is None:
            width = size_x + offset_x if self.cells else 0
        if height is None:
            height = size_y + offset_y if self.cells else 0

        state = [[False] * width for _ in range(height)]
        for x, y in normalized.cells:
            column, row = x + offset_x, y + offset_y
            if 0 <= row < height and 0 <= column < width:
                state[row][column] = True

        return state

    @classmethod
    def from_text(cls, name: str, text: str, description: str = "") -> "Pattern":
        """Create a pattern from a text drawing.

        Args:
            name: Pattern name
            text: Drawing in the format accepted by parse_state
            description: Optional description

        Returns:
            New Pattern instance
        """
        cells = [
            (x, y)
            for y, row in enumerate(parse_state(text))
            for x, alive in enumerate(row)
            if alive
        ]
        return cls(name, cells, description)


class PatternLibrary:
    """Manages a collection of patterns."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))
        self.add_pattern(Pattern.from_text("Beehive", ".**./*..*/.**.", "Beehive still life"))
        self.add_pattern(Pattern.from_text("Loaf", ".**./*..*/.*.*/..*.", "Loaf still life"))

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(0, 1), (1, 1), (2, 1)], "Period-2 oscillator"))
        self.add_pattern(Pattern.from_text("Toad", ".***/***.", "Period-2 oscillator"))
        self.add_pattern(Pattern.from_text("Beacon", "**../*.../...*/..**", "Period-2 oscillator"))

        # Spaceships
        self.add_pattern(
            Pattern("Glider", [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)], "Smallest spaceship, period-4")
        )
        self.add_pattern(
            Pattern.from_text(
                "Lightweight Spaceship", "*..*./....*/*...*/.****", "LWSS - Period-4 spaceship"
            )
        )

        # Methuselahs
        self.add_pattern(
            Pattern.from_text(
                "R-pentomino", ".**/**./.*.", "Famous methuselah that stabilizes after 1103 generations"
            )
        )
        self.add_pattern(
            Pattern.from_text("Diehard", "......*./**....../.*...***", "Dies after exactly 130 generations")
        )
        self.add_pattern(
            Pattern.from_text("Acorn", ".*...../...*.../**..***", "Takes 5206 generations to stabilize")
        )

    def add_pattern(self, pattern: Pattern) -> None:
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Args:
            name: Pattern name

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Returns:
            Dictionary mapping categories to pattern name lists
        """
        categories: Dict[str, List[str]] = {
            "Still Life": ["Block", "Beehive", "Loaf"],
            "Oscillators": ["Blinker", "Toad", "Beacon"],
            "Spaceships": ["Glider", "Lightweight Spaceship"],
            "Methuselahs": ["R-pentomino", "Diehard", "Acorn"],
            "Custom": [],
        }

        all_builtin = {name for names in categories.values() for name in names}
        for name in self._patterns:
            if name not in all_builtin:
                categories["Custom"].append(name)

        # Remove empty categories
        return {cat: names for cat, names in categories.items() if names}
