"""Command-line entry point: render a FEN position to a PNG file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from chessimage.core.fen import DEMO_FEN, LastMove
from chessimage.core.types import D1, E8, H5, tile_from_algebraic
from chessimage.errors import ChessImageError
from chessimage.render.options import RenderOptions, Resampler
from chessimage.render.renderer import Renderer, save_png

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessimage",
        description="Render a chess position given in FEN to a PNG image.",
    )
    parser.add_argument("--fen", default=DEMO_FEN, help="Forsyth-Edwards Notation")
    parser.add_argument(
        "-o", "--output", type=Path, default=Path("board.png"),
        help="Output path for the board PNG",
    )
    parser.add_argument("--size", type=int, default=0, help="Board size in pixels")
    parser.add_argument(
        "--piece-ratio", type=float, default=0.0,
        help="Piece size relative to a square",
    )
    parser.add_argument(
        "--inverted", action="store_true", help="Draw the board from black's side",
    )
    parser.add_argument(
        "--fast", action="store_true", help="Use fast (nearest) sprite scaling",
    )
    parser.add_argument(
        "--last-move", metavar="FROMTO",
        help="Highlight a move given as two squares, e.g. e2e4",
    )
    parser.add_argument("--check", metavar="SQUARE", help="Highlight a square in red")
    parser.add_argument(
        "--assets", type=Path, default=None,
        help="Directory with piece PNGs (bd.png, bl.png, ...)",
    )
    parser.add_argument(
        "--strict", action="store_true", help="Reject FEN rows that are not 8 wide",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _parse_last_move(text: str) -> LastMove:
    if len(text) != 4:
        raise argparse.ArgumentTypeError(f"Invalid move {text!r} (expected e.g. e2e4)")
    return LastMove(tile_from_algebraic(text[:2]), tile_from_algebraic(text[2:]))


def run(argv: list[str] | None = None) -> int:
    """Parse *argv*, render the board and write it; return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        renderer = Renderer.from_fen(args.fen, strict=args.strict)
        if args.last_move:
            renderer.set_last_move(_parse_last_move(args.last_move))
        if args.check:
            renderer.set_check_tile(tile_from_algebraic(args.check))
        if args.fen == DEMO_FEN and not (args.last_move or args.check):
            renderer.set_last_move(LastMove(D1, H5))
            renderer.set_check_tile(E8)

        options = RenderOptions(
            board_size=args.size,
            piece_ratio=args.piece_ratio,
            resampler=Resampler.FAST if args.fast else Resampler.SMOOTH,
            inverted=args.inverted,
            asset_source=args.assets,
        )
        save_png(renderer.render(options), args.output)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))
    except (ChessImageError, OSError) as exc:
        _LOGGER.error("%s", exc)
        return 1

    _LOGGER.info("Rendered board to %s", args.output)
    return 0


def main() -> None:
    """Console-script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
