"""Square value type and array-index conversions.

Board layout follows the printed diagram: row 0 is rank 8, row 7 is
rank 1, column 0 is the a-file.
"""

from __future__ import annotations

from dataclasses import dataclass

from chesslines.errors import NotationError, OutOfRangeError

FILES = "abcdefgh"
RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable algebraic coordinate, e.g. ``Square("e", 4)``."""

    file: str
    rank: int

    def __post_init__(self) -> None:
        if not isinstance(self.file, str) or len(self.file) != 1:
            raise NotationError(f"Invalid file: {self.file!r}")
        if self.file not in FILES or not 1 <= self.rank <= 8:
            raise OutOfRangeError(
                f"Square out of range: file must be a-h and rank 1-8, "
                f"got {self.file!r}{self.rank!r}"
            )

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def parse(cls, name: str) -> Square:
        """Parse square name, e.g. 'e4'."""
        if not name or len(name) != 2:
            raise NotationError(f"Invalid square name: {name!r}")
        file_char, rank_char = name
        if file_char not in FILES or rank_char not in RANKS:
            raise OutOfRangeError(f"Square out of range: {name!r}")
        return cls(file_char, int(rank_char))

    @classmethod
    def from_indices(cls, row: int, col: int) -> Square:
        """Inverse of :meth:`to_indices`."""
        if not (0 <= row < 8 and 0 <= col < 8):
            raise OutOfRangeError(f"Array indices out of range: ({row}, {col})")
        return cls(FILES[col], 8 - row)

    # ── Conversion ───────────────────────────────────────────────────────

    def to_indices(self) -> tuple[int, int]:
        """Zero-based ``(row, col)`` for board array access."""
        return 8 - self.rank, ord(self.file) - ord("a")

    @staticmethod
    def algebraic(row: int, col: int) -> str:
        """Name of the square at array indices, without range checks."""
        return f"{chr(ord('a') + col)}{8 - row}"

    def __str__(self) -> str:
        return f"{self.file}{self.rank}"
