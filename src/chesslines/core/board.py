"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from random import Random

from chesslines.core.chess960 import POSITION_COUNT, RandomSource, back_rank
from chesslines.core.enums import Color, MoveKind, PieceType
from chesslines.core.move import Move
from chesslines.core.piece import Piece
from chesslines.core.square import Square

_LOGGER = logging.getLogger(__name__)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

_WHITE_BACK_ROW = 7
_WHITE_PAWN_ROW = 6
_BLACK_PAWN_ROW = 1
_BLACK_BACK_ROW = 0


class Board:
    """Mutable 8x8 grid indexed ``[row][col]``; row 0 is rank 8.

    Coordinate helpers report bad indices through their return value
    (``False`` / ``None``) and never raise.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    @staticmethod
    def is_valid_position(row: int, col: int) -> bool:
        return 0 <= row < 8 and 0 <= col < 8

    def get_piece(self, row: int, col: int) -> Piece | None:
        """Piece at ``(row, col)``; None when empty or off the board."""
        if not self.is_valid_position(row, col):
            return None
        return self._squares[row][col]

    def set_piece(self, row: int, col: int, piece: Piece) -> bool:
        if not self.is_valid_position(row, col):
            return False
        self._squares[row][col] = piece
        return True

    def remove_piece(self, row: int, col: int) -> bool:
        if not self.is_valid_position(row, col):
            return False
        self._squares[row][col] = None
        return True

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.get_piece(*sq.to_indices())

    def pieces(self) -> Iterator[tuple[int, int, Piece]]:
        """Occupied squares as ``(row, col, piece)`` in row-major order."""
        for row, rank in enumerate(self._squares):
            for col, piece in enumerate(rank):
                if piece is not None:
                    yield row, col, piece

    # -- Mutation / copying -------------------------------------------------

    def clone(self) -> Board:
        b = Board()
        b._squares = [rank.copy() for rank in self._squares]
        return b

    def clear(self) -> None:
        self._squares = [[None] * 8 for _ in range(8)]

    # -- Setup --------------------------------------------------------------

    def setup_standard_position(self) -> None:
        """Standard starting position."""
        self.clear()
        self._place_pawns()
        self._place_back_ranks(_BACK_RANK)

    def setup_chess960_position(
        self,
        position_id: int | None = None,
        rng: RandomSource | None = None,
    ) -> int:
        """Fischer Random setup; returns the position id used.

        When *position_id* is omitted one is drawn from *rng* (a fresh
        :class:`random.Random` if that is omitted too).
        """
        if position_id is None:
            position_id = (rng or Random()).randrange(POSITION_COUNT)
        # Raises before any mutation for ids outside 0..959.
        pieces = back_rank(position_id)

        self.clear()
        self._place_pawns()
        self._place_back_ranks(pieces)
        _LOGGER.debug("Chess960 position %d: %s", position_id, pieces)
        return position_id

    def _place_pawns(self) -> None:
        for col in range(8):
            self.set_piece(_WHITE_PAWN_ROW, col, Piece(Color.WHITE, PieceType.PAWN))
            self.set_piece(_BLACK_PAWN_ROW, col, Piece(Color.BLACK, PieceType.PAWN))

    def _place_back_ranks(self, pieces: tuple[PieceType, ...] | list[PieceType]) -> None:
        for col, pt in enumerate(pieces):
            self.set_piece(_WHITE_BACK_ROW, col, Piece(Color.WHITE, pt))
            self.set_piece(_BLACK_BACK_ROW, col, Piece(Color.BLACK, pt))

    # -- Move application ---------------------------------------------------

    def make_move(self, move: Move) -> bool:
        """Apply *move* without any legality check.

        The source square is not required to hold ``move.piece``; castling
        relocates whatever stands in the corner column of the destination
        row into the rook's square, keyed only on the destination file.
        """
        src_row, src_col = move.from_sq.to_indices()
        dst_row, dst_col = move.to_sq.to_indices()
        if not (
            self.is_valid_position(src_row, src_col)
            and self.is_valid_position(dst_row, dst_col)
        ):
            _LOGGER.debug("Rejected off-board move: %s", move)
            return False

        self.remove_piece(src_row, src_col)

        if move.kind == MoveKind.EN_PASSANT and move.en_passant_target is not None:
            ep_row, ep_col = move.en_passant_target.to_indices()
            if self.is_valid_position(ep_row, ep_col):
                self.remove_piece(ep_row, ep_col)
        elif move.kind == MoveKind.CASTLING:
            rook = Piece(move.piece.color, PieceType.ROOK)
            if move.to_sq.file == "g":
                self.remove_piece(dst_row, 7)
                self.set_piece(dst_row, 5, rook)
            elif move.to_sq.file == "c":
                self.remove_piece(dst_row, 0)
                self.set_piece(dst_row, 3, rook)

        if move.kind == MoveKind.PROMOTION and move.promotion is not None:
            self.set_piece(dst_row, dst_col, move.promotion)
        else:
            self.set_piece(dst_row, dst_col, move.piece)
        return True

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = []
            for col in range(8):
                p = self._squares[row][col]
                cells.append(p.fen_char if p else ".")
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
