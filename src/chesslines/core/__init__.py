"""Core domain layer — squares, pieces, moves and the board.

Quick start::

    from chesslines.core import Board, Color, Move, Piece, PieceType, Square

    board = Board()
    board.setup_standard_position()
    pawn = Piece(Color.WHITE, PieceType.PAWN)
    board.make_move(Move.standard(pawn, Square.parse("e2"), Square.parse("e4")))
"""

from chesslines.core.board import Board
from chesslines.core.chess960 import STANDARD_POSITION_ID, back_rank
from chesslines.core.enums import Color, MoveAnnotation, MoveKind, PieceType
from chesslines.core.move import Move
from chesslines.core.piece import Piece
from chesslines.core.square import Square

__all__ = [
    # Enums
    "Color",
    "MoveAnnotation",
    "MoveKind",
    "PieceType",
    # Value types
    "Move",
    "Piece",
    "Square",
    # Board
    "Board",
    "STANDARD_POSITION_ID",
    "back_rank",
]
