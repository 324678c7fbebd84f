"""Game state: a board plus the turn counter."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .board import Board
from .constants import Player
from .movegen import MoveSet, generate_for_player, generate_moves_and_captures
from .piece import Piece
from .position import Position

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class Game:
    # Even turns are White's, odd turns Black's.
    board: Board = field(default_factory=Board.initial)
    turn: int = 0

    @property
    def player_to_move(self) -> Player:
        return Player.WHITE if self.turn % 2 == 0 else Player.BLACK

    def selectable_piece(self, position: Position) -> Piece | None:
        """The piece on *position* if it belongs to the player to move."""
        piece = self.board.occupant_at(position)
        if piece is None or piece.owner != self.player_to_move:
            return None
        return piece

    def options_for(self, position: Position) -> MoveSet:
        """Moves and captures for the player to move's piece on *position*.

        Returns an empty set for an empty square or an opposing piece.
        """
        piece = self.selectable_piece(position)
        if piece is None:
            return MoveSet()
        return generate_moves_and_captures(piece, self.board)

    def all_options(self) -> dict[Position, MoveSet]:
        return generate_for_player(self.board, self.player_to_move)

    def make_move(self, source: Position, target: Position) -> bool:
        if target not in self.options_for(source):
            _LOGGER.debug("Rejected move %s -> %s on turn %d", source, target, self.turn)
            return False
        self.board.make_move(source, target)
        self.turn += 1
        return True
