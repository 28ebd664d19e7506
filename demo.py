#!/usr/bin/env python3
"""Watch random clicks play out on a Minesweeper board."""
import argparse
import logging
import time

import numpy as np

from minefield import (
    Board,
    BoardConfig,
    PointerButton,
    PointerEvent,
    PointerEventSource,
    TextRenderer,
    attach_board,
)


def demo(
    config: BoardConfig,
    clicks: int = 20,
    square_size: int = 16,
    delay: float = 0.3,
) -> None:
    """Click random pixels until a bomb is uncovered or clicks run out."""
    board = Board(config)
    renderer = TextRenderer()
    source = PointerEventSource()
    rng = np.random.default_rng(config.seed)

    print(f"Board: {config.width}x{config.height} with {config.bomb_count} bombs")
    print(renderer.render(board))

    with attach_board(source, board, square_size, renderer):
        for click in range(clicks):
            button = (
                PointerButton.SECONDARY if rng.random() < 0.2
                else PointerButton.PRIMARY
            )
            event = PointerEvent(
                int(rng.integers(config.width * square_size)),
                int(rng.integers(config.height * square_size)),
                button,
            )
            source.emit(event)

            print(f"\n=== Click {click + 1}/{clicks}: {button.name} at "
                  f"({event.pixel_x}, {event.pixel_y}) ===")
            print(renderer.text)

            if board.has_uncovered_bomb:
                print("\n*** BOOM ***")
                break
            time.sleep(delay)


def main() -> None:
    """Parse arguments and run the demo."""
    parser = argparse.ArgumentParser(description="Minesweeper board demo")
    parser.add_argument("--width", type=int, default=9, help="Board width")
    parser.add_argument("--height", type=int, default=9, help="Board height")
    parser.add_argument("--bombs", type=int, default=10, help="Number of bombs")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--clicks", type=int, default=20, help="Clicks to make")
    parser.add_argument(
        "--square-size", type=int, default=16, help="Square size in pixels"
    )
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between clicks")
    parser.add_argument("--verbose", action="store_true", help="Log engine events")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    config = BoardConfig(args.width, args.height, args.bombs, args.seed)
    demo(config, args.clicks, args.square_size, args.delay)


if __name__ == "__main__":
    main()
