"""
Exceptions raised by the board engine.
"""


class MinefieldError(Exception):
    """Base class for board engine errors."""


class OutOfBoundsError(MinefieldError, IndexError):
    """Raised when a coordinate falls outside the board."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"Square ({x}, {y}) is outside the {width}x{height} board"
        )
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class InvalidConfigurationError(MinefieldError, ValueError):
    """Raised when a board cannot be built from the given settings."""
