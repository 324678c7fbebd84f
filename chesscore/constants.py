"""Board-wide constants, identities and square helpers."""

from __future__ import annotations

from enum import Enum, IntEnum

BOARD_SIZE = 8

FILES = "abcdefgh"
RANKS = "12345678"


class Player(Enum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opposite(self) -> Player:
        return Player.BLACK if self is Player.WHITE else Player.WHITE

    @property
    def forward(self) -> int:
        """Row step toward the opponent's back rank."""
        return 1 if self is Player.WHITE else -1

    def __str__(self) -> str:
        return self.name.capitalize()


class PieceKind(IntEnum):
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


KIND_LETTERS = {
    PieceKind.PAWN: "P",
    PieceKind.KNIGHT: "N",
    PieceKind.BISHOP: "B",
    PieceKind.ROOK: "R",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
}

# (row, column) steps.
BISHOP_DIRS = ((1, -1), (1, 1), (-1, -1), (-1, 1))
ROOK_DIRS = ((1, 0), (-1, 0), (0, -1), (0, 1))
QUEEN_DIRS = BISHOP_DIRS + ROOK_DIRS

KNIGHT_DELTAS = ((2, -1), (2, 1), (1, -2), (1, 2), (-1, -2), (-1, 2), (-2, -1), (-2, 1))
KING_DELTAS = ((1, -1), (1, 0), (1, 1), (0, -1), (0, 1), (-1, -1), (-1, 0), (-1, 1))

BACK_RANK = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)

WHITE_BACK_ROW = 0
WHITE_PAWN_ROW = 1
BLACK_PAWN_ROW = 6
BLACK_BACK_ROW = 7


def column_letter(index: int) -> str:
    if not 0 <= index < BOARD_SIZE:
        raise ValueError(f"Column index out of range: {index}")
    return FILES[index]


def square_name(row: int, column: int) -> str:
    if not 0 <= row < BOARD_SIZE:
        raise ValueError(f"Row index out of range: {row}")
    return f"{column_letter(column)}{RANKS[row]}"


def parse_square(square: str) -> tuple[int, int]:
    """Return ``(row, column)`` for a square name such as ``"e4"``."""
    text = square.strip().lower()
    if len(text) != 2 or text[0] not in FILES or text[1] not in RANKS:
        raise ValueError(f"Invalid square: {square}")
    return RANKS.index(text[1]), FILES.index(text[0])


def starting_player(row: int) -> Player:
    if row in (WHITE_BACK_ROW, WHITE_PAWN_ROW):
        return Player.WHITE
    if row in (BLACK_PAWN_ROW, BLACK_BACK_ROW):
        return Player.BLACK
    raise ValueError(f"Row {row} is not a starting row")
