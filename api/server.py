"""FastAPI server exposing move and capture generation."""

from __future__ import annotations

from typing import Literal

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from chesscore.board import Board
from chesscore.constants import BOARD_SIZE, PieceKind, Player
from chesscore.movegen import MoveSet, generate_for_player, generate_moves_and_captures
from chesscore.piece import Piece
from chesscore.position import Position
from chesscore.render import render_board

KindName = Literal["pawn", "knight", "bishop", "rook", "queen", "king"]
PlayerName = Literal["white", "black"]


class PieceModel(BaseModel):
    kind: KindName
    player: PlayerName
    row: int = Field(ge=0, le=BOARD_SIZE - 1)
    column: int = Field(ge=0, le=BOARD_SIZE - 1)
    has_moved: bool = Field(default=False)


class PlacementRequest(BaseModel):
    # None means the standard starting position.
    pieces: list[PieceModel] | None = Field(default=None)


class MovesRequest(PlacementRequest):
    square: str = Field(min_length=2, max_length=2)
    # When given, only that player's pieces may be queried.
    player: PlayerName | None = Field(default=None)


class PlayerMovesRequest(PlacementRequest):
    player: PlayerName = Field(default="white")


app = FastAPI(title="Chess Rules API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def _piece_from_model(model: PieceModel) -> Piece:
    return Piece(
        kind=PieceKind[model.kind.upper()],
        owner=Player[model.player.upper()],
        position=Position(model.row, model.column),
        has_moved=model.has_moved,
    )


def _piece_payload(piece: Piece) -> dict:
    return {
        "kind": piece.kind.name.lower(),
        "player": piece.owner.name.lower(),
        "row": piece.position.row,
        "column": piece.position.column,
        "square": piece.position.name,
        "has_moved": piece.has_moved,
        "glyph": piece.glyph,
    }


def _board_from_request(payload: PlacementRequest) -> Board:
    if payload.pieces is None:
        return Board.initial()
    board = Board.empty()
    try:
        for model in payload.pieces:
            board.place(_piece_from_model(model))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return board


def _move_set_payload(move_set: MoveSet) -> dict:
    return {
        "moves": [position.name for position in move_set.moves],
        "captures": [position.name for position in move_set.captures],
    }


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/board")
def initial_board() -> dict:
    board = Board.initial()
    return {
        "pieces": [_piece_payload(piece) for piece in board.occupants()],
        "text": render_board(board),
    }


@app.post("/moves")
def moves(payload: MovesRequest) -> dict:
    board = _board_from_request(payload)
    try:
        position = Position.from_name(payload.square)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    piece = board.occupant_at(position)
    if piece is None:
        raise HTTPException(status_code=400, detail=f"No piece on {position}")
    if payload.player is not None and piece.owner != Player[payload.player.upper()]:
        raise HTTPException(status_code=400, detail=f"{piece} does not belong to {payload.player}")

    response = {"piece": _piece_payload(piece)}
    response.update(_move_set_payload(generate_moves_and_captures(piece, board)))
    return response


@app.post("/player-moves")
def player_moves(payload: PlayerMovesRequest) -> dict:
    board = _board_from_request(payload)
    player = Player[payload.player.upper()]
    options = generate_for_player(board, player)
    return {
        "player": payload.player,
        "pieces": {position.name: _move_set_payload(move_set) for position, move_set in options.items()},
    }
