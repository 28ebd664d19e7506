"""
Board module for the Minesweeper board engine.

Implements the grid of squares with bomb placement, adjacency counting,
flagging and flood reveal. Coordinates are ``(x, y)`` with ``x`` the column
and ``y`` the row.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .errors import InvalidConfigurationError, OutOfBoundsError
from .square import Square


logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        bomb_count: Total bombs to place.
        seed: Optional seed for the bomb placement generator.
    """

    width: int = 9
    height: int = 9
    bomb_count: int = 10
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfigurationError("Board dimensions must be positive")
        if self.bomb_count < 0:
            raise InvalidConfigurationError("Number of bombs cannot be negative")
        max_bombs = self.width * self.height
        if self.bomb_count > max_bombs:
            raise InvalidConfigurationError(f"Too many bombs (max {max_bombs})")

    @property
    def total_squares(self) -> int:
        return self.width * self.height


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper board.

    Owns the grid of squares. Bombs are placed once at construction and
    never move; reveal and flag operations mutate squares in place.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        *,
        rng: Optional[np.random.Generator] = None,
        bombs: Optional[Iterable[Coordinate]] = None,
    ) -> None:
        """
        Create a board and place its bombs.

        Args:
            config: Board configuration (default: 9x9 with 10 bombs).
            rng: Generator used for placement. Defaults to one seeded
                from ``config.seed``.
            bombs: Explicit bomb positions, distinct and exactly
                ``config.bomb_count`` of them. When given, no random
                placement happens; see ``from_bombs``.
        """
        self.config = config or BoardConfig()
        self._init_grid()
        if bombs is None:
            if rng is None:
                rng = np.random.default_rng(self.config.seed)
            self._place_bombs(rng)
        else:
            self._set_bombs(bombs)
        logger.debug(
            "Created %dx%d board with %d bombs",
            self.width, self.height, self.bomb_count,
        )

    @classmethod
    def initialize(
        cls,
        bomb_count: int,
        width: int,
        height: int,
        rng: Optional[np.random.Generator] = None,
    ) -> "Board":
        """Create a board with randomly placed bombs."""
        return cls(BoardConfig(width, height, bomb_count), rng=rng)

    @classmethod
    def from_bombs(
        cls, width: int, height: int, bombs: Iterable[Coordinate]
    ) -> "Board":
        """
        Create a board with bombs at the given positions.

        Raises:
            InvalidConfigurationError: If a position repeats or lies
                outside the board.
        """
        positions = list(bombs)
        config = BoardConfig(width, height, len(positions))
        return cls(config, bombs=positions)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create a grid of hidden, bomb-free squares."""
        self._grid: List[List[Square]] = [
            [Square.hidden() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def _place_bombs(self, rng: np.random.Generator) -> None:
        """
        Place ``bomb_count`` bombs with one draw per square.

        Squares are visited in row-major order. With ``left`` squares still
        to visit and ``remaining`` bombs still to place, the current square
        gets a bomb when a uniform draw from ``[0, left)`` is below
        ``remaining``, which makes every layout equally likely.
        """
        total = self.config.total_squares
        remaining = self.config.bomb_count
        for index in range(total):
            if rng.integers(total - index) < remaining:
                x, y = index % self.config.width, index // self.config.width
                self._grid[y][x] = Square.hidden(has_bomb=True)
                remaining -= 1

    def _set_bombs(self, bombs: Iterable[Coordinate]) -> None:
        """Place bombs at explicit positions, matching the configured count."""
        positions = list(bombs)
        if len(set(positions)) != len(positions):
            raise InvalidConfigurationError("Bomb positions must be distinct")
        if len(positions) != self.config.bomb_count:
            raise InvalidConfigurationError(
                f"Expected {self.config.bomb_count} bomb positions, "
                f"got {len(positions)}"
            )
        for x, y in positions:
            if not self.in_bounds(x, y):
                raise InvalidConfigurationError(
                    f"Bomb at ({x}, {y}) is outside the board"
                )
            self._grid[y][x] = Square.hidden(has_bomb=True)

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.config.width, self.config.height)

    def neighbours(self, x: int, y: int) -> List[Coordinate]:
        """
        Get valid neighbouring positions.

        Args:
            x: Column of the centre square.
            y: Row of the centre square.

        Returns:
            Up to eight (x, y) tuples, clipped at the board edges.
        """
        self._check_bounds(x, y)
        positions = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self.in_bounds(new_x, new_y):
                    positions.append((new_x, new_y))
        return positions

    def count_adjacent_bombs(self, x: int, y: int) -> int:
        """
        Count neighbours carrying a bomb.

        Hidden, flagged and uncovered bombs all count.
        """
        count = 0
        for neighbour_x, neighbour_y in self.neighbours(x, y):
            if self._grid[neighbour_y][neighbour_x].has_bomb:
                count += 1
        return count

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> None:
        """
        Reveal the square at the given position.

        A hidden safe square is uncovered and, if none of its neighbours
        carries a bomb, the surrounding empty region floods open. A hidden
        bomb is uncovered on its own. Flagged and uncovered squares are
        left alone.

        Raises:
            OutOfBoundsError: If the position is outside the board.
        """
        self._check_bounds(x, y)
        square = self._grid[y][x]
        if not square.is_hidden:
            return

        if square.has_bomb:
            self._grid[y][x] = square.uncovered()
            logger.debug("Bomb uncovered at (%d, %d)", x, y)
            return

        uncovered = self._flood_reveal(x, y)
        logger.debug("Reveal at (%d, %d) uncovered %d squares", x, y, uncovered)

    def _flood_reveal(self, x: int, y: int) -> int:
        """
        Uncover a safe square and the empty region around it.

        Squares are uncovered before being pushed on the work-list, so a
        square never enters the list twice.

        Returns:
            Number of squares uncovered.
        """
        uncovered = 1
        pending = [(x, y)] if self._expose(x, y) == 0 else []
        while pending:
            current_x, current_y = pending.pop()
            for neighbour_x, neighbour_y in self.neighbours(current_x, current_y):
                neighbour = self._grid[neighbour_y][neighbour_x]
                if not neighbour.is_hidden or neighbour.has_bomb:
                    continue
                uncovered += 1
                if self._expose(neighbour_x, neighbour_y) == 0:
                    pending.append((neighbour_x, neighbour_y))
        return uncovered

    def _expose(self, x: int, y: int) -> int:
        """Uncover a hidden safe square, freezing its neighbour count."""
        count = self.count_adjacent_bombs(x, y)
        self._grid[y][x] = self._grid[y][x].uncovered(count)
        return count

    def toggle_flag(self, x: int, y: int) -> None:
        """
        Toggle the flag on a square.

        Uncovered squares are left alone.

        Raises:
            OutOfBoundsError: If the position is outside the board.
        """
        self._check_bounds(x, y)
        self._grid[y][x] = self._grid[y][x].toggled_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def bomb_count(self) -> int:
        return self.config.bomb_count

    def square(self, x: int, y: int) -> Square:
        """
        Get the square at a position.

        Raises:
            OutOfBoundsError: If the position is outside the board.
        """
        self._check_bounds(x, y)
        return self._grid[y][x]

    def squares(self) -> Iterator[Tuple[int, int, Square]]:
        """Iterate over (x, y, square) in row-major order."""
        for y, row in enumerate(self._grid):
            for x, square in enumerate(row):
                yield x, y, square

    def bomb_positions(self) -> List[Coordinate]:
        """Get positions of every square carrying a bomb."""
        return [(x, y) for x, y, square in self.squares() if square.has_bomb]

    @property
    def uncovered_count(self) -> int:
        """Number of uncovered squares, bombs included."""
        return sum(1 for _, _, square in self.squares() if square.is_uncovered)

    @property
    def flag_count(self) -> int:
        return sum(1 for _, _, square in self.squares() if square.is_flagged)

    @property
    def has_uncovered_bomb(self) -> bool:
        """Check if any bomb has been uncovered."""
        return any(
            square.has_bomb and square.is_uncovered
            for _, _, square in self.squares()
        )

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = uncovered with adjacent count
                9 = uncovered bomb
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for x, y, square in self.squares():
            obs[y, x] = square.to_observation()
        return obs


# ============================================================================
# Functional Interface
# ============================================================================

def initialize(
    bomb_count: int,
    width: int,
    height: int,
    rng: Optional[np.random.Generator] = None,
) -> Board:
    """Create a board with ``bomb_count`` randomly placed bombs."""
    return Board.initialize(bomb_count, width, height, rng=rng)


def reveal(board: Board, x: int, y: int) -> None:
    """Reveal the square at (x, y) on ``board``."""
    board.reveal(x, y)


def toggle_flag(board: Board, x: int, y: int) -> None:
    """Toggle the flag on the square at (x, y) on ``board``."""
    board.toggle_flag(x, y)


def count_adjacent_bombs(board: Board, x: int, y: int) -> int:
    """Count bombs around the square at (x, y) on ``board``."""
    return board.count_adjacent_bombs(x, y)
