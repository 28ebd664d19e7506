"""
Unit tests for pointer input handling.
"""
import pytest

from minefield import (
    Board,
    InputAdapter,
    PointerButton,
    PointerEvent,
    PointerEventSource,
    Square,
    TextRenderer,
    attach_board,
)


SQUARE_SIZE = 16


# ============================================================================
# Input Adapter Tests
# ============================================================================

class TestInputAdapter:
    """Test pixel to board dispatch."""

    def test_to_grid_uses_floor_division(self, corner_bomb_board: Board) -> None:
        """Pixels inside a square map to that square."""
        adapter = InputAdapter(corner_bomb_board, SQUARE_SIZE)
        assert adapter.to_grid(0, 0) == (0, 0)
        assert adapter.to_grid(15, 15) == (0, 0)
        assert adapter.to_grid(16, 47) == (1, 2)

    def test_origin_offset(self, corner_bomb_board: Board) -> None:
        """The board origin is subtracted before conversion."""
        adapter = InputAdapter(corner_bomb_board, SQUARE_SIZE, origin=(100, 50))
        assert adapter.to_grid(133, 50) == (2, 0)

    def test_float_pixels_map_to_int_squares(
        self, corner_bomb_board: Board
    ) -> None:
        """Fractional pixel positions still land on a square."""
        adapter = InputAdapter(corner_bomb_board, SQUARE_SIZE)
        x, y = adapter.to_grid(20.5, 40.75)
        assert (x, y) == (1, 2)
        assert isinstance(x, int) and isinstance(y, int)
        assert adapter.handle(PointerEvent(20.5, 20.25))
        assert corner_bomb_board.square(1, 1) == Square.uncovered_safe(1)

    def test_negative_float_pixels_are_ignored(
        self, corner_bomb_board: Board
    ) -> None:
        """Fractional positions left of the board stay off the board."""
        adapter = InputAdapter(corner_bomb_board, SQUARE_SIZE)
        assert adapter.handle(PointerEvent(-0.5, 0.0)) is False

    def test_primary_click_reveals(self, corner_bomb_board: Board) -> None:
        """Primary button should reveal the square."""
        adapter = InputAdapter(corner_bomb_board, SQUARE_SIZE)
        assert adapter.handle(PointerEvent(20, 20, PointerButton.PRIMARY))
        assert corner_bomb_board.square(1, 1) == Square.uncovered_safe(1)

    def test_secondary_click_toggles_flag(
        self, corner_bomb_board: Board
    ) -> None:
        """Secondary button should toggle the flag."""
        adapter = InputAdapter(corner_bomb_board, SQUARE_SIZE)
        event = PointerEvent(40, 0, PointerButton.SECONDARY)
        adapter.handle(event)
        assert corner_bomb_board.square(2, 0) == Square.flagged(has_bomb=True)
        adapter.handle(event)
        assert corner_bomb_board.square(2, 0) == Square.hidden(has_bomb=True)

    @pytest.mark.parametrize("pixel_x, pixel_y", [(-1, 0), (48, 0), (0, 100)])
    def test_click_outside_board_is_ignored(
        self, corner_bomb_board: Board, pixel_x: int, pixel_y: int
    ) -> None:
        """Clicks off the board should not reach the engine."""
        adapter = InputAdapter(corner_bomb_board, SQUARE_SIZE)
        assert adapter.handle(PointerEvent(pixel_x, pixel_y)) is False
        assert corner_bomb_board.uncovered_count == 0

    def test_click_redraws(self, corner_bomb_board: Board) -> None:
        """Every handled click should redraw the board."""
        renderer = TextRenderer()
        adapter = InputAdapter(corner_bomb_board, SQUARE_SIZE, renderer)
        adapter.handle(PointerEvent(0, 0))
        assert renderer.text.split("\n")[0] == "  1 ."

    def test_non_positive_square_size_raises_error(
        self, corner_bomb_board: Board
    ) -> None:
        """Square size must be positive."""
        with pytest.raises(ValueError, match="must be positive"):
            InputAdapter(corner_bomb_board, 0)


# ============================================================================
# Listener Handle Tests
# ============================================================================

class TestListenerHandle:
    """Test attaching and detaching listeners."""

    def test_attached_board_receives_clicks(
        self, corner_bomb_board: Board
    ) -> None:
        """Events emitted by the source should reach the board."""
        source = PointerEventSource()
        attach_board(source, corner_bomb_board, SQUARE_SIZE)
        source.emit(PointerEvent(40, 0))
        assert corner_bomb_board.has_uncovered_bomb is True

    def test_detach_stops_delivery(self, corner_bomb_board: Board) -> None:
        """A detached board should no longer receive clicks."""
        source = PointerEventSource()
        handle = attach_board(source, corner_bomb_board, SQUARE_SIZE)
        handle.detach()
        source.emit(PointerEvent(0, 0))
        assert corner_bomb_board.uncovered_count == 0
        assert handle.attached is False

    def test_detach_twice_is_safe(self) -> None:
        """Detaching an already detached handle does nothing."""
        source = PointerEventSource()
        handle = source.attach(lambda event: None)
        handle.detach()
        handle.detach()
        assert source.listener_count == 0

    def test_detach_leaves_other_listeners(self) -> None:
        """Only the detached listener should stop receiving events."""
        source = PointerEventSource()
        received = []
        first = source.attach(lambda event: received.append("first"))
        source.attach(lambda event: received.append("second"))
        first.detach()
        source.emit(PointerEvent(0, 0))
        assert received == ["second"]

    def test_new_game_replaces_old_board(self) -> None:
        """Swapping boards detaches the old one without global state."""
        source = PointerEventSource()
        old_board = Board.from_bombs(3, 3, [(2, 0)])
        new_board = Board.from_bombs(3, 3, [(2, 0)])
        handle = attach_board(source, old_board, SQUARE_SIZE)
        handle.detach()
        attach_board(source, new_board, SQUARE_SIZE)
        source.emit(PointerEvent(0, 0))
        assert old_board.uncovered_count == 0
        assert new_board.uncovered_count == 8

    def test_handle_as_context_manager(self, corner_bomb_board: Board) -> None:
        """Leaving the with-block should detach."""
        source = PointerEventSource()
        with attach_board(source, corner_bomb_board, SQUARE_SIZE):
            assert source.listener_count == 1
        assert source.listener_count == 0
