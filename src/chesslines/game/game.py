"""Game — ties a Board to its MoveTree and the FEN bookkeeping fields.

Moves are trusted to be legal; only turn order and board bounds are
enforced here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chesslines.config import GameSettings, Variant
from chesslines.core.board import Board
from chesslines.core.enums import Color, MoveKind, PieceType
from chesslines.core.move import Move
from chesslines.core.square import Square
from chesslines.errors import InvalidOperationError
from chesslines.game.engine import IEngine
from chesslines.history.node import MoveNode
from chesslines.history.tree import MoveTree
from chesslines.history.variation import Variation
from chesslines.notation.fen import FenRecord, board_to_fen

_LOGGER = logging.getLogger(__name__)

_CASTLING_ORDER = "KQkq"
_HOME_ROW: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}
_RIGHTS: dict[Color, tuple[str, str]] = {Color.WHITE: ("K", "Q"), Color.BLACK: ("k", "q")}


@dataclass(slots=True)
class _Snapshot:
    """State restored by :meth:`Game.undo`."""

    board: Board
    side_to_move: Color
    castling: str
    en_passant: str
    halfmove_clock: int
    fullmove_number: int


class Game:
    """Orchestrates one game: board state, move history, turn tracking.

    Thread-safety: none; call from a single thread.
    """

    __slots__ = (
        "_engine",
        "_board",
        "_moves",
        "_side_to_move",
        "_castling",
        "_en_passant",
        "_halfmove_clock",
        "_fullmove_number",
        "_chess960_id",
        "_rook_columns",
        "_history",
    )

    def __init__(
        self,
        engine: IEngine | None = None,
        settings: GameSettings | None = None,
    ) -> None:
        settings = settings or GameSettings()
        self._engine = engine
        self._board = Board()
        self._moves = MoveTree()
        self._side_to_move = Color.WHITE
        self._castling = _CASTLING_ORDER
        self._en_passant = "-"
        self._halfmove_clock = 0
        self._fullmove_number = 1
        self._chess960_id: int | None = None
        self._history: list[_Snapshot] = []

        if settings.start_fen is not None:
            record = FenRecord.parse(settings.start_fen)
            self._board = record.to_board()
            self._side_to_move = record.side_to_move
            self._castling = record.castling
            self._en_passant = record.en_passant
            self._halfmove_clock = record.halfmove_clock
            self._fullmove_number = record.fullmove_number
        elif settings.variant == Variant.CHESS960:
            self._chess960_id = self._board.setup_chess960_position(
                settings.chess960_id, settings.rng()
            )
        else:
            self._board.setup_standard_position()

        self._rook_columns = self._find_rook_columns()
        _LOGGER.debug("New game: %s", self.fen())

    @classmethod
    def from_fen(cls, fen: str, engine: IEngine | None = None) -> Game:
        return cls(engine, GameSettings(start_fen=fen))

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def engine(self) -> IEngine | None:
        return self._engine

    @property
    def board(self) -> Board:
        return self._board

    @property
    def moves(self) -> MoveTree:
        return self._moves

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def castling(self) -> str:
        return self._castling

    @property
    def en_passant(self) -> str:
        return self._en_passant

    @property
    def halfmove_clock(self) -> int:
        return self._halfmove_clock

    @property
    def fullmove_number(self) -> int:
        return self._fullmove_number

    @property
    def chess960_id(self) -> int | None:
        return self._chess960_id

    @property
    def ply_count(self) -> int:
        return self._moves.size

    def fen(self) -> str:
        return board_to_fen(
            self._board,
            self._side_to_move.fen,
            self._castling,
            self._en_passant,
            self._halfmove_clock,
            self._fullmove_number,
        )

    # ── Moves ────────────────────────────────────────────────────────────

    def make_move(self, move: Move) -> bool:
        """Apply a move on the main line. Returns False if it is off the board."""
        if move.piece.color != self._side_to_move:
            raise InvalidOperationError(
                f"It is {self._side_to_move}'s turn, got a move by {move.piece.color}"
            )

        snapshot = _Snapshot(
            self._board.clone(),
            self._side_to_move,
            self._castling,
            self._en_passant,
            self._halfmove_clock,
            self._fullmove_number,
        )
        is_capture = move.kind == MoveKind.EN_PASSANT or (
            move.kind != MoveKind.CASTLING and self._board[move.to_sq] is not None
        )
        if not self._board.make_move(move):
            _LOGGER.debug("Move rejected by board: %s", move)
            return False

        self._moves.push_move(MoveNode(move))
        self._history.append(snapshot)

        if move.piece.piece_type == PieceType.PAWN or is_capture:
            self._halfmove_clock = 0
        else:
            self._halfmove_clock += 1
        if move.piece.color == Color.BLACK:
            self._fullmove_number += 1
        self._en_passant = _en_passant_after(move)
        self._castling = self._castling_after(move)
        self._side_to_move = self._side_to_move.opposite

        _LOGGER.debug("Applied %s -> %s", move, self.fen())
        return True

    def make_variation_move(self, move: Move) -> Variation:
        """Record *move* as an alternative to the latest main-line move.

        The board is not touched; the variation starts a side-line at the
        current node.
        """
        current = self._moves.current
        if current is None:
            raise InvalidOperationError("No move to branch a variation from")
        if move.piece.color != current.color:
            raise InvalidOperationError(
                f"An alternative to {current.name} must be played by {current.color}"
            )
        return current.variations.add_variation_line(MoveNode(move))

    def undo(self) -> bool:
        """Take back the last main-line move. Returns True on success."""
        if self._moves.is_empty:
            return False
        self._moves.drop_last_move()
        snapshot = self._history.pop()
        self._board = snapshot.board
        self._side_to_move = snapshot.side_to_move
        self._castling = snapshot.castling
        self._en_passant = snapshot.en_passant
        self._halfmove_clock = snapshot.halfmove_clock
        self._fullmove_number = snapshot.fullmove_number
        _LOGGER.debug("Undo -> %s", self.fen())
        return True

    def play_engine_move(self) -> Move | None:
        """Ask the engine for a move and apply it; None if it has none."""
        if self._engine is None:
            raise InvalidOperationError("No engine attached to this game")
        move = self._engine.propose_move(self._board.clone(), self._side_to_move)
        if move is None:
            _LOGGER.info("Engine returned no move for %s", self._side_to_move)
            return None
        if not self.make_move(move):
            return None
        return move

    # ── Castling rights ──────────────────────────────────────────────────

    def _find_rook_columns(self) -> dict[str, int]:
        """Home columns of the castling rooks, keyed by right letter."""
        columns: dict[str, int] = {}
        for color, row in _HOME_ROW.items():
            king_col: int | None = None
            rook_cols: list[int] = []
            for col in range(8):
                piece = self._board.get_piece(row, col)
                if piece is None or piece.color != color:
                    continue
                if piece.piece_type == PieceType.KING:
                    king_col = col
                elif piece.piece_type == PieceType.ROOK:
                    rook_cols.append(col)
            if king_col is None:
                continue

            kingside, queenside = _RIGHTS[color]
            right = [col for col in rook_cols if col > king_col]
            left = [col for col in rook_cols if col < king_col]
            if right:
                columns[kingside] = right[-1]
            if left:
                columns[queenside] = left[0]
        return columns

    def _castling_after(self, move: Move) -> str:
        rights = set(self._castling) - {"-"}
        color = move.piece.color
        if move.piece.piece_type == PieceType.KING:
            rights.difference_update(_RIGHTS[color])
        for letter in list(rights):
            column = self._rook_columns.get(letter)
            if column is None:
                continue
            owner = Color.WHITE if letter.isupper() else Color.BLACK
            home = Square.algebraic(_HOME_ROW[owner], column)
            if str(move.from_sq) == home or str(move.to_sq) == home:
                rights.discard(letter)
        return "".join(ch for ch in _CASTLING_ORDER if ch in rights) or "-"


def _en_passant_after(move: Move) -> str:
    if move.piece.piece_type != PieceType.PAWN:
        return "-"
    if abs(move.to_sq.rank - move.from_sq.rank) != 2:
        return "-"
    return f"{move.from_sq.file}{(move.from_sq.rank + move.to_sq.rank) // 2}"
