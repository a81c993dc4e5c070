"""chesslines — chess board bookkeeping, FEN codec and move trees."""

from chesslines.config import GameSettings, Variant
from chesslines.core import (
    Board,
    Color,
    Move,
    MoveAnnotation,
    MoveKind,
    Piece,
    PieceType,
    Square,
)
from chesslines.errors import (
    ChessError,
    InvalidOperationError,
    NotationError,
    OutOfRangeError,
)
from chesslines.game import Game, IEngine
from chesslines.history import MoveNode, MoveTree, Variation, VariationLines
from chesslines.notation import STARTING_FEN, board_to_fen, fen_to_board, is_valid_fen

__version__ = "0.1.0"

__all__ = [
    # Errors
    "ChessError",
    "InvalidOperationError",
    "NotationError",
    "OutOfRangeError",
    # Core
    "Board",
    "Color",
    "Move",
    "MoveAnnotation",
    "MoveKind",
    "Piece",
    "PieceType",
    "Square",
    # Notation
    "STARTING_FEN",
    "board_to_fen",
    "fen_to_board",
    "is_valid_fen",
    # History
    "MoveNode",
    "MoveTree",
    "Variation",
    "VariationLines",
    # Game
    "Game",
    "GameSettings",
    "IEngine",
    "Variant",
]
