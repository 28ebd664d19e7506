"""
Square module for the Minesweeper board engine.

A square is one grid position. Its state combines whether it is covered,
flagged or uncovered with whether it carries a bomb and, once uncovered
safely, how many of its neighbours carry one.
"""
from dataclasses import dataclass
from enum import Enum, auto


MAX_ADJACENT_BOMBS = 8


# ============================================================================
# Constants
# ============================================================================

class SquareKind(Enum):
    """Possible kinds of a square."""

    HIDDEN = auto()
    FLAGGED = auto()
    UNCOVERED_BOMB = auto()
    UNCOVERED_SAFE = auto()


# ============================================================================
# Square Value Class
# ============================================================================

@dataclass(frozen=True)
class Square:
    """
    Immutable state of a single square.

    Attributes:
        kind: Which variant this square is in.
        has_bomb: Whether the square carries a bomb.
        adjacent_bombs: Neighbouring bombs counted when the square was
            uncovered. Always 0 unless ``kind`` is ``UNCOVERED_SAFE``.
    """

    kind: SquareKind = SquareKind.HIDDEN
    has_bomb: bool = False
    adjacent_bombs: int = 0

    def __post_init__(self) -> None:
        """Reject combinations that no variant allows."""
        if self.kind == SquareKind.UNCOVERED_BOMB and not self.has_bomb:
            raise ValueError("An uncovered bomb square must carry a bomb")
        if self.kind == SquareKind.UNCOVERED_SAFE and self.has_bomb:
            raise ValueError("An uncovered safe square cannot carry a bomb")
        if self.kind != SquareKind.UNCOVERED_SAFE and self.adjacent_bombs:
            raise ValueError("Only uncovered safe squares have a count")
        if not 0 <= self.adjacent_bombs <= MAX_ADJACENT_BOMBS:
            raise ValueError(
                f"Adjacent bomb count must be 0-{MAX_ADJACENT_BOMBS}, "
                f"got {self.adjacent_bombs}"
            )

    # ========================================================================
    # Variant Constructors
    # ========================================================================

    @classmethod
    def hidden(cls, has_bomb: bool = False) -> "Square":
        return cls(SquareKind.HIDDEN, has_bomb)

    @classmethod
    def flagged(cls, has_bomb: bool = False) -> "Square":
        return cls(SquareKind.FLAGGED, has_bomb)

    @classmethod
    def uncovered_bomb(cls) -> "Square":
        return cls(SquareKind.UNCOVERED_BOMB, True)

    @classmethod
    def uncovered_safe(cls, adjacent_bombs: int) -> "Square":
        return cls(SquareKind.UNCOVERED_SAFE, False, adjacent_bombs)

    # ========================================================================
    # Transitions
    # ========================================================================

    def toggled_flag(self) -> "Square":
        """
        Flip between hidden and flagged.

        Returns:
            The flagged/hidden counterpart, or this square unchanged if
            it is already uncovered.
        """
        if self.kind == SquareKind.HIDDEN:
            return Square.flagged(self.has_bomb)
        if self.kind == SquareKind.FLAGGED:
            return Square.hidden(self.has_bomb)
        return self

    def uncovered(self, adjacent_bombs: int = 0) -> "Square":
        """
        Uncover a hidden square.

        Args:
            adjacent_bombs: Neighbour count to freeze into a safe square.
                Ignored when the square carries a bomb.

        Returns:
            The uncovered square, or this square unchanged if it is
            flagged or already uncovered.
        """
        if self.kind != SquareKind.HIDDEN:
            return self
        if self.has_bomb:
            return Square.uncovered_bomb()
        return Square.uncovered_safe(adjacent_bombs)

    # ========================================================================
    # Queries
    # ========================================================================

    @property
    def is_hidden(self) -> bool:
        """Check if square is hidden."""
        return self.kind == SquareKind.HIDDEN

    @property
    def is_flagged(self) -> bool:
        """Check if square is flagged."""
        return self.kind == SquareKind.FLAGGED

    @property
    def is_uncovered(self) -> bool:
        """Check if square is uncovered, bomb or not."""
        return self.kind in (SquareKind.UNCOVERED_BOMB, SquareKind.UNCOVERED_SAFE)

    def to_observation(self) -> int:
        """
        Convert square to an observation value.

        Returns:
            -1: Hidden square
            -2: Flagged square
            0-8: Uncovered safe square with adjacent bomb count
            9: Uncovered bomb
        """
        if self.kind == SquareKind.HIDDEN:
            return -1
        if self.kind == SquareKind.FLAGGED:
            return -2
        if self.kind == SquareKind.UNCOVERED_BOMB:
            return 9
        return self.adjacent_bombs
