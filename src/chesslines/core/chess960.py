"""Chess960 back-rank derivation (Scharnagl numbering).

Position 518 is the standard ``RNBQKBNR`` arrangement.
"""

from __future__ import annotations

from typing import Protocol

from chesslines.core.enums import PieceType
from chesslines.errors import OutOfRangeError

POSITION_COUNT = 960
STANDARD_POSITION_ID = 518

# Knight placements over the five squares left after bishops and queen.
_KNIGHT_TABLE: tuple[tuple[int, int], ...] = (
    (0, 1), (0, 2), (0, 3), (0, 4),
    (1, 2), (1, 3), (1, 4),
    (2, 3), (2, 4),
    (3, 4),
)


class RandomSource(Protocol):
    """The part of :class:`random.Random` used to draw a position id."""

    def randrange(self, stop: int) -> int: ...


def back_rank(position_id: int) -> list[PieceType]:
    """Piece types for files a–h of the back rank of *position_id*."""
    if not 0 <= position_id < POSITION_COUNT:
        raise OutOfRangeError(
            f"Chess960 position id must be in 0..{POSITION_COUNT - 1}, got {position_id}"
        )

    rank: list[PieceType | None] = [None] * 8
    n = position_id

    n, light = divmod(n, 4)
    rank[2 * light + 1] = PieceType.BISHOP
    n, dark = divmod(n, 4)
    rank[2 * dark] = PieceType.BISHOP

    n, queen = divmod(n, 6)
    _fill_nth_empty(rank, queen, PieceType.QUEEN)

    first, second = _KNIGHT_TABLE[n]
    # Fill the later slot first so the earlier index is not shifted.
    _fill_nth_empty(rank, second, PieceType.KNIGHT)
    _fill_nth_empty(rank, first, PieceType.KNIGHT)

    for piece_type in (PieceType.ROOK, PieceType.KING, PieceType.ROOK):
        _fill_nth_empty(rank, 0, piece_type)

    return [pt for pt in rank if pt is not None]


def _fill_nth_empty(rank: list[PieceType | None], n: int, piece_type: PieceType) -> None:
    empties = [idx for idx, pt in enumerate(rank) if pt is None]
    rank[empties[n]] = piece_type
