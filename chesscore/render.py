"""Plain-text presentation of boards and square lists.

Nothing in the core imports this module.
"""

from __future__ import annotations

from collections.abc import Iterable

from .board import Board
from .constants import BOARD_SIZE, FILES
from .position import Position

_EMPTY_CELL = "   "
_RULE = "    " + "-" * 49
_COLUMN_LABELS = " " * 7 + (" " * 5).join(FILES)


def _banner(text: str) -> str:
    return "    " + " " * 20 + text


def render_board(board: Board) -> str:
    """Draw *board* with row 8 at the top, so White's home rank is at the bottom."""
    lines = ["", _banner("(Black)"), "", _COLUMN_LABELS, _RULE]
    for row in range(BOARD_SIZE - 1, -1, -1):
        cells = []
        for column in range(BOARD_SIZE):
            piece = board.occupant_at(Position(row, column))
            cells.append(_EMPTY_CELL if piece is None else piece.glyph)
        label = row + 1
        lines.append(f" {label}  | " + " | ".join(cells) + f" |  {label}")
        lines.append(_RULE)
    lines.extend([_COLUMN_LABELS, "", _banner("[White]"), ""])
    return "\n".join(lines)


def format_positions(positions: Iterable[Position]) -> str:
    names = [position.name for position in positions]
    return ", ".join(names) if names else "-"
