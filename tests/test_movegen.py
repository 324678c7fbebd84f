from chesscore.board import Board
from chesscore.constants import PieceKind, Player
from chesscore.movegen import MoveSet, generate_for_player, generate_moves_and_captures
from chesscore.piece import Piece
from chesscore.position import Position


def _place(board: Board, kind: PieceKind, player: Player, row: int, column: int, has_moved: bool = False) -> Piece:
    piece = Piece(kind, player, Position(row, column), has_moved)
    board.place(piece)
    return piece


def _positions(*coords: tuple[int, int]) -> list[Position]:
    return [Position(row, column) for row, column in coords]


def test_bishop_on_empty_board_walks_single_diagonal() -> None:
    board = Board.empty()
    bishop = _place(board, PieceKind.BISHOP, Player.BLACK, 0, 7)

    result = generate_moves_and_captures(bishop, board)

    assert result.moves == _positions((1, 6), (2, 5), (3, 4), (4, 3), (5, 2), (6, 1), (7, 0))
    assert result.captures == []


def test_bishop_blocked_by_own_piece() -> None:
    board = Board.empty()
    bishop = _place(board, PieceKind.BISHOP, Player.BLACK, 0, 7)
    _place(board, PieceKind.PAWN, Player.BLACK, 1, 6)

    result = generate_moves_and_captures(bishop, board)

    assert result.moves == []
    assert result.captures == []


def test_bishop_captures_first_opposing_piece_only() -> None:
    board = Board.empty()
    bishop = _place(board, PieceKind.BISHOP, Player.WHITE, 0, 2)
    _place(board, PieceKind.PAWN, Player.WHITE, 1, 1)
    _place(board, PieceKind.PAWN, Player.BLACK, 2, 4)
    _place(board, PieceKind.KNIGHT, Player.BLACK, 3, 5)

    result = generate_moves_and_captures(bishop, board)

    assert result.moves == _positions((1, 3))
    assert result.captures == _positions((2, 4))


def test_pawn_that_has_moved_steps_once() -> None:
    board = Board.empty()
    pawn = _place(board, PieceKind.PAWN, Player.BLACK, 5, 5, has_moved=True)

    result = generate_moves_and_captures(pawn, board)

    assert result.moves == _positions((4, 5))
    assert result.captures == []


def test_blocked_pawn_has_no_double_step() -> None:
    board = Board.empty()
    pawn = _place(board, PieceKind.PAWN, Player.BLACK, 7, 0)
    _place(board, PieceKind.PAWN, Player.WHITE, 6, 0)

    result = generate_moves_and_captures(pawn, board)

    assert result.moves == []
    assert result.captures == []


def test_pawn_captures_both_diagonals_left_first() -> None:
    board = Board.empty()
    pawn = _place(board, PieceKind.PAWN, Player.WHITE, 3, 4, has_moved=True)
    _place(board, PieceKind.PAWN, Player.BLACK, 4, 3)
    _place(board, PieceKind.PAWN, Player.BLACK, 4, 5)

    result = generate_moves_and_captures(pawn, board)

    assert result.moves == _positions((4, 4))
    assert result.captures == _positions((4, 3), (4, 5))


def test_unmoved_pawn_double_step() -> None:
    board = Board.empty()
    pawn = _place(board, PieceKind.PAWN, Player.WHITE, 1, 4)

    assert generate_moves_and_captures(pawn, board).moves == _positions((2, 4), (3, 4))


def test_double_step_blocked_at_second_square() -> None:
    board = Board.empty()
    pawn = _place(board, PieceKind.PAWN, Player.WHITE, 1, 4)
    _place(board, PieceKind.KNIGHT, Player.BLACK, 3, 4)

    result = generate_moves_and_captures(pawn, board)

    assert result.moves == _positions((2, 4))
    assert result.captures == []


def test_pawn_ignores_own_pieces_on_diagonals() -> None:
    board = Board.empty()
    pawn = _place(board, PieceKind.PAWN, Player.BLACK, 4, 4, has_moved=True)
    _place(board, PieceKind.ROOK, Player.BLACK, 3, 3)
    _place(board, PieceKind.ROOK, Player.WHITE, 3, 5)

    assert generate_moves_and_captures(pawn, board).captures == _positions((3, 5))


def test_pawn_on_last_rank_has_nothing() -> None:
    board = Board.empty()
    pawn = _place(board, PieceKind.PAWN, Player.WHITE, 7, 3, has_moved=True)

    assert not generate_moves_and_captures(pawn, board)


def test_rook_stops_at_first_occupant() -> None:
    board = Board.empty()
    rook = _place(board, PieceKind.ROOK, Player.WHITE, 0, 0)
    _place(board, PieceKind.PAWN, Player.BLACK, 3, 0)

    result = generate_moves_and_captures(rook, board)

    expected = _positions((1, 0), (2, 0)) + [Position(0, column) for column in range(1, 8)]
    assert result.moves == expected
    assert result.captures == _positions((3, 0))
    assert Position(4, 0) not in result.moves


def test_queen_on_empty_board_reaches_27_squares() -> None:
    board = Board.empty()
    queen = _place(board, PieceKind.QUEEN, Player.WHITE, 3, 3)

    result = generate_moves_and_captures(queen, board)

    assert len(result.moves) == 27
    assert len(set(result.moves)) == 27
    assert result.captures == []


def test_knight_jumps_and_captures() -> None:
    board = Board.empty()
    knight = _place(board, PieceKind.KNIGHT, Player.WHITE, 3, 3)
    _place(board, PieceKind.PAWN, Player.WHITE, 5, 2)
    _place(board, PieceKind.PAWN, Player.BLACK, 5, 4)
    # adjacent pieces do not block a knight
    _place(board, PieceKind.PAWN, Player.BLACK, 4, 3)

    result = generate_moves_and_captures(knight, board)

    assert result.moves == _positions((4, 1), (4, 5), (2, 1), (2, 5), (1, 2), (1, 4))
    assert result.captures == _positions((5, 4))


def test_knight_in_corner_region() -> None:
    board = Board.empty()
    knight = _place(board, PieceKind.KNIGHT, Player.WHITE, 0, 1)

    assert generate_moves_and_captures(knight, board).moves == _positions((2, 0), (2, 2), (1, 3))


def test_king_steps_one_square() -> None:
    board = Board.empty()
    king = _place(board, PieceKind.KING, Player.WHITE, 0, 4)
    _place(board, PieceKind.PAWN, Player.BLACK, 1, 4)

    result = generate_moves_and_captures(king, board)

    assert result.moves == _positions((1, 3), (1, 5), (0, 3), (0, 5))
    assert result.captures == _positions((1, 4))


def test_start_position_has_20_quiet_moves_for_white() -> None:
    board = Board.initial()
    options = generate_for_player(board, Player.WHITE)

    assert len(options) == 16
    assert sum(len(o.moves) for o in options.values()) == 20
    assert sum(len(o.captures) for o in options.values()) == 0
    assert options[Position(0, 6)].moves == _positions((2, 5), (2, 7))
    assert Position(6, 0) not in options


def test_generation_is_pure_and_repeatable() -> None:
    board = Board.initial()
    board.make_move(Position(1, 4), Position(3, 4))
    board.make_move(Position(6, 3), Position(4, 3))
    snapshot = board.copy()

    first = {p: generate_moves_and_captures(piece, board) for p, piece in board.pieces(Player.WHITE).items()}
    second = {p: generate_moves_and_captures(piece, board) for p, piece in board.pieces(Player.WHITE).items()}

    assert first == second
    assert board == snapshot
    assert first[Position(3, 4)] == MoveSet(moves=_positions((4, 4)), captures=_positions((4, 3)))


def test_moves_land_on_empty_squares_and_captures_on_enemies() -> None:
    board = Board.initial()
    board.make_move(Position(1, 4), Position(3, 4))
    board.make_move(Position(6, 3), Position(4, 3))
    board.make_move(Position(0, 5), Position(3, 2))

    for player in Player:
        for move_set in generate_for_player(board, player).values():
            for target in move_set.moves:
                assert board.is_empty(target)
            for target in move_set.captures:
                occupant = board.occupant_at(target)
                assert occupant is not None and occupant.owner == player.opposite


def test_piece_delegates_to_generator() -> None:
    board = Board.initial()
    pawn = board[Position(6, 4)]
    assert pawn.moves_and_captures(board).moves == _positions((5, 4), (4, 4))
