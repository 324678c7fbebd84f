"""Command-line utilities for the chess rules core."""

from __future__ import annotations

import argparse
import logging

from chesscore.constants import Player
from chesscore.game import Game
from chesscore.position import Position
from chesscore.render import format_positions, render_board


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Chess move and capture generation")
    parser.add_argument(
        "--play",
        action="append",
        default=[],
        metavar="MOVE",
        help="Coordinate move such as e2e4 applied from the starting position first (repeatable)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    subparsers.add_parser("board", help="Print the board")

    moves_parser = subparsers.add_parser("moves", help="List moves and captures for one square")
    moves_parser.add_argument("square", help="Square of the piece, e.g. e2")

    all_parser = subparsers.add_parser("all", help="List moves and captures for every piece of a player")
    all_parser.add_argument(
        "--player",
        choices=["white", "black"],
        default=None,
        help="Defaults to the player to move",
    )

    return parser


def _split_move(text: str) -> tuple[Position, Position]:
    if len(text) != 4:
        raise ValueError(f"Invalid move: {text}")
    return Position.from_name(text[:2]), Position.from_name(text[2:])


def _play_moves(game: Game, moves: list[str]) -> None:
    for text in moves:
        source, target = _split_move(text)
        if not game.make_move(source, target):
            raise ValueError(f"Illegal move for {game.player_to_move!s}: {text}")


def run() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    game = Game()
    try:
        _play_moves(game, args.play)
        position = Position.from_name(args.square) if args.command == "moves" else None
    except ValueError as exc:
        parser.error(str(exc))

    if args.command == "moves":
        piece = game.board.occupant_at(position)
        if piece is None:
            print(f"{position}: empty")
            return
        options = piece.moves_and_captures(game.board)
        print(piece)
        print(f"moves    {format_positions(options.moves)}")
        print(f"captures {format_positions(options.captures)}")
        return

    if args.command == "all":
        player = game.player_to_move if args.player is None else Player[args.player.upper()]
        for piece in game.board.pieces(player).values():
            options = piece.moves_and_captures(game.board)
            print(
                f"{piece.position} {piece.name:<6} "
                f"moves: {format_positions(options.moves)}  "
                f"captures: {format_positions(options.captures)}"
            )
        return

    print(render_board(game.board))
    print(f"turn {game.turn} to move: {game.player_to_move!s}")


if __name__ == "__main__":
    run()
