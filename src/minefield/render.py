"""
Rendering helpers for the Minesweeper board.

Maps every square to a tile identifier and redraws the whole grid. What a
tile looks like is up to the renderer subclass.
"""
from abc import ABC, abstractmethod
from typing import Dict, List

from .board import Board
from .square import Square, SquareKind


HIDDEN_TILE = "hidden"
FLAGGED_TILE = "flagged"
BOMB_TILE = "bomb"
BLANK_TILE = "blank"


def tile_id(square: Square) -> str:
    """
    Get the tile identifier for a square.

    Returns:
        "hidden", "flagged", "bomb", "blank" or "number-N" for N in 1-8.
    """
    if square.kind == SquareKind.HIDDEN:
        return HIDDEN_TILE
    if square.kind == SquareKind.FLAGGED:
        return FLAGGED_TILE
    if square.kind == SquareKind.UNCOVERED_BOMB:
        return BOMB_TILE
    if square.adjacent_bombs == 0:
        return BLANK_TILE
    return f"number-{square.adjacent_bombs}"


def tile_grid(board: Board) -> List[List[str]]:
    """Get tile identifiers for the whole board, one list per row."""
    return [
        [tile_id(board.square(x, y)) for x in range(board.width)]
        for y in range(board.height)
    ]


# ============================================================================
# Renderers
# ============================================================================

class Renderer(ABC):
    """
    Base class for board renderers.

    ``draw`` repaints every square; callers invoke it after each
    board mutation.
    """

    def draw(self, board: Board) -> None:
        """Draw every square of the board."""
        for x, y, square in board.squares():
            self.draw_tile(tile_id(square), x, y)

    @abstractmethod
    def draw_tile(self, tile: str, x: int, y: int) -> None:
        """Draw one tile at grid position (x, y)."""
        pass


TEXT_TILES: Dict[str, str] = {
    HIDDEN_TILE: ".",
    FLAGGED_TILE: "F",
    BOMB_TILE: "*",
    BLANK_TILE: " ",
}


class TextRenderer(Renderer):
    """Renders the board as rows of characters."""

    def __init__(self) -> None:
        self._rows: List[List[str]] = []

    def draw(self, board: Board) -> None:
        self._rows = [[" "] * board.width for _ in range(board.height)]
        super().draw(board)

    def draw_tile(self, tile: str, x: int, y: int) -> None:
        self._rows[y][x] = TEXT_TILES.get(tile, tile[len("number-"):])

    def render(self, board: Board) -> str:
        """Draw the board and return it as a string."""
        self.draw(board)
        return self.text

    @property
    def text(self) -> str:
        """The most recently drawn board."""
        return "\n".join(" ".join(row) for row in self._rows)
