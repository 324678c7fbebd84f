"""Candidate and validated board coordinates.

All coordinate arithmetic produces a :class:`CandidatePosition`, which may lie
off the board. The only way to index the board or store a location in a piece
is a :class:`Position`, obtained by validating a candidate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .constants import BOARD_SIZE, Player, column_letter, parse_square, square_name

if TYPE_CHECKING:
    from .board import Board


@dataclass(frozen=True, slots=True)
class Position:
    """A row/column pair guaranteed to lie on the 8x8 board."""

    row: int
    column: int

    def __post_init__(self) -> None:
        if not (0 <= self.row < BOARD_SIZE and 0 <= self.column < BOARD_SIZE):
            raise ValueError(f"Position out of bounds: ({self.row}, {self.column})")

    @classmethod
    def from_name(cls, square: str) -> Position:
        row, column = parse_square(square)
        return cls(row, column)

    def offset(self, row_step: int, column_step: int) -> CandidatePosition:
        return CandidatePosition(self.row + row_step, self.column + column_step)

    @property
    def column_letter(self) -> str:
        return column_letter(self.column)

    @property
    def name(self) -> str:
        return square_name(self.row, self.column)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class CandidatePosition:
    """Signed coordinates with no bounds guarantee."""

    row: int
    column: int

    def validate(self, board_size: int = BOARD_SIZE) -> Position | None:
        if 0 <= self.row < board_size and 0 <= self.column < board_size:
            return Position(self.row, self.column)
        return None

    def validate_and_unwrap(self, board_size: int = BOARD_SIZE) -> Position:
        # Only for coordinates already known to be on the board.
        position = self.validate(board_size)
        if position is None:
            raise ValueError(f"Candidate position is off the board: ({self.row}, {self.column})")
        return position

    def validate_move(self, board: Board) -> Position | None:
        """The validated target of a quiet move, or None if off-board or occupied."""
        position = self.validate()
        if position is None or board.occupant_at(position) is not None:
            return None
        return position

    def validate_capture(self, player: Player, board: Board) -> Position | None:
        """The validated target of a capture by *player*, or None.

        Fails for an off-board target, an empty target, or a target held by
        *player*'s own piece.
        """
        position = self.validate()
        if position is None:
            return None
        occupant = board.occupant_at(position)
        if occupant is None or occupant.owner == player:
            return None
        return position
