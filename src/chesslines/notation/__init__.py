"""Notation package: FEN codec and move-name recognition."""

from chesslines.notation.fen import (
    EMPTY_FEN,
    STARTING_FEN,
    FenRecord,
    board_to_fen,
    fen_error,
    fen_to_board,
    is_valid_fen,
)
from chesslines.notation.san import MoveName, is_valid_move_name, parse_move_name

__all__ = [
    "EMPTY_FEN",
    "STARTING_FEN",
    "FenRecord",
    "board_to_fen",
    "fen_error",
    "fen_to_board",
    "is_valid_fen",
    "MoveName",
    "is_valid_move_name",
    "parse_move_name",
]
