"""Move value object.

A single record tagged with :class:`MoveKind` covers every move variant;
only the payload relevant to the tag is populated.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from chesslines.core.enums import MoveAnnotation, MoveKind
from chesslines.core.piece import Piece
from chesslines.core.square import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move."""

    piece: Piece
    from_sq: Square
    to_sq: Square
    kind: MoveKind = MoveKind.STANDARD
    promotion: Piece | None = None
    en_passant_target: Square | None = None
    annotation: MoveAnnotation | None = None

    def __post_init__(self) -> None:
        if (self.kind == MoveKind.PROMOTION) != (self.promotion is not None):
            raise ValueError("A promotion piece is required for, and only for, promotions")
        if (self.kind == MoveKind.EN_PASSANT) != (self.en_passant_target is not None):
            raise ValueError(
                "An en-passant target is required for, and only for, en-passant captures"
            )

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def standard(
        cls,
        piece: Piece,
        from_sq: Square,
        to_sq: Square,
        annotation: MoveAnnotation | None = None,
    ) -> Move:
        return cls(piece, from_sq, to_sq, annotation=annotation)

    @classmethod
    def castling(
        cls,
        piece: Piece,
        from_sq: Square,
        to_sq: Square,
        annotation: MoveAnnotation | None = None,
    ) -> Move:
        """King move of a castle; the destination file picks the side."""
        return cls(piece, from_sq, to_sq, MoveKind.CASTLING, annotation=annotation)

    @classmethod
    def en_passant(
        cls,
        piece: Piece,
        from_sq: Square,
        to_sq: Square,
        target: Square,
        annotation: MoveAnnotation | None = None,
    ) -> Move:
        """*target* is the square of the captured pawn, not the destination."""
        return cls(
            piece,
            from_sq,
            to_sq,
            MoveKind.EN_PASSANT,
            en_passant_target=target,
            annotation=annotation,
        )

    @classmethod
    def promote(
        cls,
        piece: Piece,
        from_sq: Square,
        to_sq: Square,
        promotion: Piece,
        annotation: MoveAnnotation | None = None,
    ) -> Move:
        return cls(
            piece,
            from_sq,
            to_sq,
            MoveKind.PROMOTION,
            promotion=promotion,
            annotation=annotation,
        )

    def with_annotation(self, annotation: MoveAnnotation | None) -> Move:
        return replace(self, annotation=annotation)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_kingside_castle(self) -> bool:
        return self.kind == MoveKind.CASTLING and self.to_sq.file == "g"

    @property
    def is_queenside_castle(self) -> bool:
        return self.kind == MoveKind.CASTLING and self.to_sq.file == "c"

    # ── Display ──────────────────────────────────────────────────────────

    def _variant_suffix(self) -> str:
        if self.kind == MoveKind.STANDARD:
            return ""
        if self.kind == MoveKind.CASTLING:
            return " (castling)"
        if self.kind == MoveKind.EN_PASSANT:
            return f" (en passant on {self.en_passant_target})"
        if self.kind == MoveKind.PROMOTION:
            return f" (promotion to {self.promotion})"
        raise AssertionError(f"Unhandled move kind: {self.kind!r}")

    def __str__(self) -> str:
        annotation = f" {self.annotation.symbol}" if self.annotation is not None else ""
        return (
            f"{self.piece} from {self.from_sq} to {self.to_sq}"
            f"{self._variant_suffix()}{annotation}"
        )

    @property
    def uci(self) -> str:
        """Coordinate notation, e.g. 'e2e4' or 'e7e8q'."""
        base = f"{self.from_sq}{self.to_sq}"
        if self.promotion is not None:
            base += self.promotion.piece_type.letter.lower()
        return base
