"""Recognizer for SAN-style move names used by textual move nodes.

Grammar (no regular expressions involved)::

    name      := body check? marks
    body      := "O-O" | "O-O-O"
               | piece? file? rank? "x"? file rank promotion?
    piece     := K | Q | R | B | N
    promotion := "=" (Q | R | B | N)
    check     := "+" | "#"
    marks     := zero to two of "!" / "?"
"""

from __future__ import annotations

from dataclasses import dataclass

from chesslines.core.enums import MoveAnnotation, PieceType
from chesslines.errors import NotationError

_SAN_PIECE_REV: dict[str, PieceType] = {
    "K": PieceType.KING,
    "Q": PieceType.QUEEN,
    "R": PieceType.ROOK,
    "B": PieceType.BISHOP,
    "N": PieceType.KNIGHT,
}
_PROMOTION_CHARS = "QRBN"
_FILES = "abcdefgh"
_RANKS = "12345678"
_MARK_CHARS = "!?"
_MAX_MARKS = 2


@dataclass(frozen=True, slots=True)
class MoveName:
    """Structured view of a recognised move name."""

    text: str
    castle: str | None = None
    piece: PieceType = PieceType.PAWN
    from_file: str | None = None
    from_rank: str | None = None
    capture: bool = False
    destination: str | None = None
    promotion: PieceType | None = None
    check: bool = False
    mate: bool = False
    suffix: str = ""

    @property
    def annotation(self) -> MoveAnnotation | None:
        return MoveAnnotation.from_symbol(self.suffix) if self.suffix else None


def parse_move_name(text: str) -> MoveName:
    """Recognise *text*; raises :class:`NotationError` when it is malformed."""
    if not text:
        raise NotationError("Invalid move name: ''")

    def fail() -> NotationError:
        return NotationError(f"Invalid move name: {text!r}")

    body = text.rstrip(_MARK_CHARS)
    suffix = text[len(body) :]
    if len(suffix) > _MAX_MARKS:
        raise fail()

    check = mate = False
    if body.endswith("+"):
        check, body = True, body[:-1]
    elif body.endswith("#"):
        mate, body = True, body[:-1]

    if body in ("O-O", "O-O-O"):
        return MoveName(text, castle=body, piece=PieceType.KING, check=check, mate=mate, suffix=suffix)

    promotion: PieceType | None = None
    if len(body) >= 2 and body[-2] == "=":
        if body[-1] not in _PROMOTION_CHARS:
            raise fail()
        promotion = _SAN_PIECE_REV[body[-1]]
        body = body[:-2]

    if len(body) < 2 or body[-2] not in _FILES or body[-1] not in _RANKS:
        raise fail()
    destination, body = body[-2:], body[:-2]

    capture = body.endswith("x")
    if capture:
        body = body[:-1]

    # What is left is the optional piece letter and disambiguation.
    piece = PieceType.PAWN
    pos = 0
    if pos < len(body) and body[pos] in _SAN_PIECE_REV:
        piece = _SAN_PIECE_REV[body[pos]]
        pos += 1
    from_file: str | None = None
    if pos < len(body) and body[pos] in _FILES:
        from_file = body[pos]
        pos += 1
    from_rank: str | None = None
    if pos < len(body) and body[pos] in _RANKS:
        from_rank = body[pos]
        pos += 1
    if pos != len(body):
        raise fail()

    return MoveName(
        text,
        piece=piece,
        from_file=from_file,
        from_rank=from_rank,
        capture=capture,
        destination=destination,
        promotion=promotion,
        check=check,
        mate=mate,
        suffix=suffix,
    )


def is_valid_move_name(text: str) -> bool:
    try:
        parse_move_name(text)
    except NotationError:
        return False
    return True
