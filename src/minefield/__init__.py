"""
Minesweeper board engine.

Provides the board state engine plus the renderer, pointer input and
Gymnasium environment that sit on top of it.
"""
from .errors import MinefieldError, OutOfBoundsError, InvalidConfigurationError
from .square import Square, SquareKind
from .board import (
    Board,
    BoardConfig,
    initialize,
    reveal,
    toggle_flag,
    count_adjacent_bombs,
)
from .render import Renderer, TextRenderer, tile_id, tile_grid
from .pointer import (
    InputAdapter,
    ListenerHandle,
    PointerButton,
    PointerEvent,
    PointerEventSource,
    attach_board,
)
from .environment import MinefieldEnv

__all__ = [
    "MinefieldError",
    "OutOfBoundsError",
    "InvalidConfigurationError",
    "Square",
    "SquareKind",
    "Board",
    "BoardConfig",
    "initialize",
    "reveal",
    "toggle_flag",
    "count_adjacent_bombs",
    "Renderer",
    "TextRenderer",
    "tile_id",
    "tile_grid",
    "InputAdapter",
    "ListenerHandle",
    "PointerButton",
    "PointerEvent",
    "PointerEventSource",
    "attach_board",
    "MinefieldEnv",
]
