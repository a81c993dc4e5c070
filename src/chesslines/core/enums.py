"""Core enumerations for chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def letter(self) -> str:
        """'W' or 'B', used in piece rendering."""
        return "W" if self == Color.WHITE else "B"

    @property
    def fen(self) -> str:
        """Active-color field value, 'w' or 'b'."""
        return "w" if self == Color.WHITE else "b"

    @classmethod
    def from_fen(cls, field: str) -> Color:
        if field == "w":
            return cls.WHITE
        if field == "b":
            return cls.BLACK
        raise ValueError(f"Invalid active color: {field!r}")

    def __str__(self) -> str:
        return self.name.capitalize()


class PieceType(IntEnum):
    """Chess piece types."""

    PAWN = 1
    ROOK = 2
    KNIGHT = 3
    BISHOP = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        return _TYPE_LETTERS[self]


_TYPE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.ROOK: "R",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


class MoveKind(IntEnum):
    """Move variant tag."""

    STANDARD = 0
    CASTLING = 1
    EN_PASSANT = 2
    PROMOTION = 3


class MoveAnnotation(Enum):
    """Human judgement attached to a move, valued by its glyph."""

    BLUNDER = "??"
    MISTAKE = "?"
    INACCURACY = "?!"
    GOOD = "!"
    BRILLIANT = "!!"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> MoveAnnotation | None:
        """Map a glyph to an annotation; unknown glyphs (e.g. '!?') give None."""
        try:
            return cls(symbol)
        except ValueError:
            return None
