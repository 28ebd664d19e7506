"""
Pointer input for the Minesweeper board.

Turns clicks in pixel space into board operations: the primary button
reveals, the secondary button toggles a flag. Adapters are attached to an
event source through a handle that can later detach them.
"""
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, List, Optional, Tuple

from .board import Board
from .render import Renderer


logger = logging.getLogger(__name__)


# ============================================================================
# Events
# ============================================================================

class PointerButton(Enum):
    """Buttons that can produce a click."""

    PRIMARY = auto()
    SECONDARY = auto()


@dataclass(frozen=True)
class PointerEvent:
    """A click at a pixel position."""

    pixel_x: float
    pixel_y: float
    button: PointerButton = PointerButton.PRIMARY


Listener = Callable[[PointerEvent], None]


# ============================================================================
# Input Adapter
# ============================================================================

class InputAdapter:
    """
    Dispatches pointer events to a board and requests a redraw.

    Clicks that land outside the grid are ignored.
    """

    def __init__(
        self,
        board: Board,
        square_size: int,
        renderer: Optional[Renderer] = None,
        origin: Tuple[int, int] = (0, 0),
    ) -> None:
        """
        Initialize the adapter.

        Args:
            board: Board receiving the operations.
            square_size: Width and height of a square in pixels.
            renderer: Renderer redrawn after every handled click.
            origin: Pixel position of the board's top-left corner.
        """
        if square_size < 1:
            raise ValueError("Square size must be positive")
        self.board = board
        self.square_size = square_size
        self.renderer = renderer
        self.origin = origin

    def to_grid(self, pixel_x: float, pixel_y: float) -> Tuple[int, int]:
        """Convert a pixel position to grid coordinates."""
        x = int((pixel_x - self.origin[0]) // self.square_size)
        y = int((pixel_y - self.origin[1]) // self.square_size)
        return x, y

    def handle(self, event: PointerEvent) -> bool:
        """
        Apply a click to the board.

        Returns:
            True if the click landed on the board, False if ignored.
        """
        x, y = self.to_grid(event.pixel_x, event.pixel_y)
        if not self.board.in_bounds(x, y):
            logger.debug("Ignoring click outside board at (%d, %d)", x, y)
            return False

        if event.button == PointerButton.PRIMARY:
            self.board.reveal(x, y)
        else:
            self.board.toggle_flag(x, y)

        if self.renderer is not None:
            self.renderer.draw(self.board)
        return True

    def __call__(self, event: PointerEvent) -> None:
        self.handle(event)


# ============================================================================
# Event Source and Handles
# ============================================================================

class ListenerHandle:
    """Token returned by ``PointerEventSource.attach``."""

    def __init__(self, source: "PointerEventSource", listener: Listener) -> None:
        self._source = source
        self.listener = listener
        self._attached = True

    @property
    def attached(self) -> bool:
        return self._attached

    def detach(self) -> None:
        """Stop delivering events to the listener. Safe to call twice."""
        if not self._attached:
            return
        self._source._remove(self)
        self._attached = False
        logger.debug("Detached listener %r", self.listener)

    def __enter__(self) -> "ListenerHandle":
        return self

    def __exit__(self, *exc_info) -> None:
        self.detach()


class PointerEventSource:
    """Delivers pointer events to attached listeners."""

    def __init__(self) -> None:
        self._handles: List[ListenerHandle] = []

    def attach(self, listener: Listener) -> ListenerHandle:
        """Start delivering events to ``listener``."""
        handle = ListenerHandle(self, listener)
        self._handles.append(handle)
        logger.debug("Attached listener %r", listener)
        return handle

    def _remove(self, handle: ListenerHandle) -> None:
        self._handles.remove(handle)

    @property
    def listener_count(self) -> int:
        return len(self._handles)

    def emit(self, event: PointerEvent) -> None:
        """Deliver an event to every attached listener."""
        for handle in list(self._handles):
            handle.listener(event)


def attach_board(
    source: PointerEventSource,
    board: Board,
    square_size: int,
    renderer: Optional[Renderer] = None,
) -> ListenerHandle:
    """
    Connect a board to an event source.

    Returns:
        Handle whose ``detach`` disconnects the board again.
    """
    adapter = InputAdapter(board, square_size, renderer)
    return source.attach(adapter)
