"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from .constants import KIND_LETTERS, PieceKind, Player
from .movegen import MoveSet, generate_moves_and_captures
from .position import Position

if TYPE_CHECKING:
    from .board import Board


@dataclass(frozen=True, slots=True)
class Piece:
    """A piece of one of the six kinds, owned by a player and standing on a square.

    ``has_moved`` only affects pawns (the initial two-square advance).
    """

    kind: PieceKind
    owner: Player
    position: Position
    has_moved: bool = False

    @property
    def name(self) -> str:
        return self.kind.name.capitalize()

    @property
    def letter(self) -> str:
        return KIND_LETTERS[self.kind]

    @property
    def glyph(self) -> str:
        """``[X]`` for White, ``(X)`` for Black."""
        if self.owner == Player.WHITE:
            return f"[{self.letter}]"
        return f"({self.letter})"

    def moved_to(self, position: Position) -> Piece:
        return replace(self, position=position, has_moved=True)

    def moves_and_captures(self, board: Board) -> MoveSet:
        return generate_moves_and_captures(self, board)

    def __str__(self) -> str:
        return f"{self.owner!s} {self.name} at {self.position}"
