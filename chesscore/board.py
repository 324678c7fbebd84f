"""Board representation: an 8x8 grid of optional pieces."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .constants import (
    BACK_RANK,
    BLACK_BACK_ROW,
    BLACK_PAWN_ROW,
    BOARD_SIZE,
    WHITE_BACK_ROW,
    WHITE_PAWN_ROW,
    PieceKind,
    Player,
    starting_player,
)
from .piece import Piece
from .position import Position

_LOGGER = logging.getLogger(__name__)


class Board:
    """Grid of cells indexed by validated positions.

    The grid is the only source of truth. Per-player views are derived from it
    on demand, and every mutation goes through :meth:`place`, :meth:`remove`
    or :meth:`make_move`, which keep each piece's stored position equal to the
    cell it occupies.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: White on rows 0-1, Black on rows 6-7."""
        board = cls()
        for row in (WHITE_BACK_ROW, WHITE_PAWN_ROW, BLACK_PAWN_ROW, BLACK_BACK_ROW):
            player = starting_player(row)
            for column in range(BOARD_SIZE):
                if row in (WHITE_PAWN_ROW, BLACK_PAWN_ROW):
                    kind = PieceKind.PAWN
                else:
                    kind = BACK_RANK[column]
                board.place(Piece(kind, player, Position(row, column)))
        return board

    # -- Element access -----------------------------------------------------

    def occupant_at(self, position: Position) -> Piece | None:
        return self._grid[position.row][position.column]

    def __getitem__(self, position: Position) -> Piece | None:
        return self.occupant_at(position)

    def is_empty(self, position: Position) -> bool:
        return self.occupant_at(position) is None

    def occupants(self) -> Iterator[Piece]:
        for row in self._grid:
            for piece in row:
                if piece is not None:
                    yield piece

    def pieces(self, player: Player) -> dict[Position, Piece]:
        """Position -> piece index for *player*, derived from the grid."""
        return {piece.position: piece for piece in self.occupants() if piece.owner == player}

    # -- Mutation -----------------------------------------------------------

    def place(self, piece: Piece) -> None:
        position = piece.position
        if self.occupant_at(position) is not None:
            raise ValueError(f"Square {position} is already occupied")
        self._grid[position.row][position.column] = piece

    def remove(self, position: Position) -> Piece:
        piece = self.occupant_at(position)
        if piece is None:
            raise ValueError(f"Square {position} is empty")
        self._grid[position.row][position.column] = None
        return piece

    def make_move(self, source: Position, target: Position) -> Piece | None:
        """Move the piece on *source* to *target*, returning any captured piece.

        Performs no rule checks beyond refusing to land on an own piece;
        callers validate against the generated move set first.
        """
        piece = self.occupant_at(source)
        if piece is None:
            raise ValueError(f"No piece on {source}")
        captured = self.occupant_at(target)
        if captured is not None and captured.owner == piece.owner:
            raise ValueError(f"Cannot capture own piece on {target}")

        if captured is not None:
            self.remove(target)
        self.remove(source)
        self.place(piece.moved_to(target))
        _LOGGER.debug("Moved %s to %s (captured: %s)", piece, target, captured)
        return captured

    # -- Copying / dunder helpers -------------------------------------------

    def copy(self) -> Board:
        board = Board()
        board._grid = [row.copy() for row in self._grid]
        return board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = []
            for piece in self._grid[row]:
                if piece is None:
                    cells.append(".")
                elif piece.owner == Player.WHITE:
                    cells.append(piece.letter)
                else:
                    cells.append(piece.letter.lower())
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
