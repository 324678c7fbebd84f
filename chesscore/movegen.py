"""Quiet-move and capture generation for a single piece."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .constants import (
    BISHOP_DIRS,
    KING_DELTAS,
    KNIGHT_DELTAS,
    QUEEN_DIRS,
    ROOK_DIRS,
    PieceKind,
    Player,
)
from .position import Position

if TYPE_CHECKING:
    from .board import Board
    from .piece import Piece

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class MoveSet:
    moves: list[Position] = field(default_factory=list)
    captures: list[Position] = field(default_factory=list)

    def __contains__(self, target: Position) -> bool:
        return target in self.moves or target in self.captures

    def __bool__(self) -> bool:
        return bool(self.moves or self.captures)


def _generate_pawn(piece: Piece, board: Board, result: MoveSet) -> None:
    origin = piece.position
    step = piece.owner.forward

    one_ahead = origin.offset(step, 0).validate_move(board)
    if one_ahead is not None:
        result.moves.append(one_ahead)
        # A blocked single step also blocks the double step.
        if not piece.has_moved:
            two_ahead = origin.offset(2 * step, 0).validate_move(board)
            if two_ahead is not None:
                result.moves.append(two_ahead)

    for column_step in (-1, 1):
        target = origin.offset(step, column_step).validate_capture(piece.owner, board)
        if target is not None:
            result.captures.append(target)


def _generate_slider(
    piece: Piece,
    board: Board,
    result: MoveSet,
    directions: tuple[tuple[int, int], ...],
) -> None:
    origin = piece.position
    for dr, dc in directions:
        distance = 1
        while True:
            candidate = origin.offset(dr * distance, dc * distance)
            target = candidate.validate_move(board)
            if target is None:
                break
            result.moves.append(target)
            distance += 1

        # The walk stopped at the edge or at the first occupant.
        capture = candidate.validate_capture(piece.owner, board)
        if capture is not None:
            result.captures.append(capture)


def _generate_leaper(
    piece: Piece,
    board: Board,
    result: MoveSet,
    deltas: tuple[tuple[int, int], ...],
) -> None:
    origin = piece.position
    for dr, dc in deltas:
        candidate = origin.offset(dr, dc)
        target = candidate.validate_move(board)
        if target is not None:
            result.moves.append(target)
            continue
        capture = candidate.validate_capture(piece.owner, board)
        if capture is not None:
            result.captures.append(capture)


def generate_moves_and_captures(piece: Piece, board: Board) -> MoveSet:
    """Legal quiet moves and captures for *piece* on *board*.

    Reads the board only. Moves are listed in direction (or offset) order,
    walking outward along each direction before moving to the next.
    """
    result = MoveSet()
    kind = piece.kind

    if kind == PieceKind.PAWN:
        _generate_pawn(piece, board, result)
    elif kind == PieceKind.KNIGHT:
        _generate_leaper(piece, board, result, KNIGHT_DELTAS)
    elif kind == PieceKind.BISHOP:
        _generate_slider(piece, board, result, BISHOP_DIRS)
    elif kind == PieceKind.ROOK:
        _generate_slider(piece, board, result, ROOK_DIRS)
    elif kind == PieceKind.QUEEN:
        _generate_slider(piece, board, result, QUEEN_DIRS)
    elif kind == PieceKind.KING:
        _generate_leaper(piece, board, result, KING_DELTAS)
    else:
        raise ValueError(f"Unknown piece kind: {kind!r}")

    _LOGGER.debug(
        "%s: %d moves, %d captures",
        piece,
        len(result.moves),
        len(result.captures),
    )
    return result


def generate_for_player(board: Board, player: Player) -> dict[Position, MoveSet]:
    """Move sets for every piece *player* has on *board*, keyed by square."""
    return {
        position: generate_moves_and_captures(piece, board)
        for position, piece in board.pieces(player).items()
    }
