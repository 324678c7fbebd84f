"""Chess rule-validation core: board, pieces and move/capture generation."""

from .board import Board
from .constants import PieceKind, Player
from .game import Game
from .movegen import MoveSet, generate_for_player, generate_moves_and_captures
from .piece import Piece
from .position import CandidatePosition, Position

__all__ = [
    "Board",
    "CandidatePosition",
    "Game",
    "MoveSet",
    "Piece",
    "PieceKind",
    "Player",
    "Position",
    "generate_for_player",
    "generate_moves_and_captures",
]
