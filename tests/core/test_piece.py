"""Tests for Piece and the core enums."""

import pytest

from chesslines.core.enums import Color, MoveAnnotation, PieceType
from chesslines.core.piece import Piece
from chesslines.errors import NotationError


class TestPiece:
    def test_str_color_and_type_letters(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.QUEEN)) == "WQ"
        assert str(Piece(Color.BLACK, PieceType.KNIGHT)) == "BN"

    @pytest.mark.parametrize(
        ("char", "color", "piece_type"),
        [
            ("P", Color.WHITE, PieceType.PAWN),
            ("r", Color.BLACK, PieceType.ROOK),
            ("N", Color.WHITE, PieceType.KNIGHT),
            ("b", Color.BLACK, PieceType.BISHOP),
            ("Q", Color.WHITE, PieceType.QUEEN),
            ("k", Color.BLACK, PieceType.KING),
        ],
    )
    def test_from_char(self, char: str, color: Color, piece_type: PieceType) -> None:
        piece = Piece.from_char(char)
        assert piece == Piece(color, piece_type)
        assert piece.fen_char == char

    def test_invalid_char_raises(self) -> None:
        with pytest.raises(NotationError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_value_equality(self) -> None:
        assert Piece(Color.WHITE, PieceType.ROOK) == Piece(Color.WHITE, PieceType.ROOK)
        assert Piece(Color.WHITE, PieceType.ROOK) != Piece(Color.BLACK, PieceType.ROOK)


class TestEnums:
    def test_color_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE

    def test_color_fen(self) -> None:
        assert Color.WHITE.fen == "w"
        assert Color.from_fen("b") == Color.BLACK
        with pytest.raises(ValueError):
            Color.from_fen("x")

    def test_annotation_symbols(self) -> None:
        assert [a.symbol for a in MoveAnnotation] == ["??", "?", "?!", "!", "!!"]

    def test_annotation_from_symbol(self) -> None:
        assert MoveAnnotation.from_symbol("!!") == MoveAnnotation.BRILLIANT
        assert MoveAnnotation.from_symbol("!?") is None
