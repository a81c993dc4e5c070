"""FEN validation, parsing and serialization."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chesslines.core.board import Board
from chesslines.core.enums import Color
from chesslines.core.piece import Piece
from chesslines.errors import NotationError

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
EMPTY_FEN = "8/8/8/8/8/8/8/8 w - - 0 1"

_PIECE_CHARS = frozenset("rnbqkpRNBQKP")
_RUN_DIGITS = frozenset("12345678")
_DIGITS = frozenset("0123456789")
_CASTLING_CHARS = frozenset("KQkq")


# ── Validation ───────────────────────────────────────────────────────────────


def _placement_error(placement: str) -> str | None:
    ranks = placement.split("/")
    if len(ranks) != 8:
        return f"board must contain 8 ranks, got {len(ranks)}"
    for rank_idx, rank_text in enumerate(ranks, start=1):
        if not rank_text:
            return f"rank {rank_idx} is empty"
        width = 0
        prev_digit = False
        for ch in rank_text:
            if ch in _RUN_DIGITS:
                # Standard FEN grammar allows "44"; such ranks are rejected so
                # every accepted record re-encodes to the same text.
                if prev_digit:
                    return f"rank {rank_idx} has adjacent empty-square counts"
                width += int(ch)
                prev_digit = True
            elif ch in _PIECE_CHARS:
                width += 1
                prev_digit = False
            else:
                return f"rank {rank_idx} has invalid character {ch!r}"
        if width != 8:
            return f"rank {rank_idx} covers {width} squares instead of 8"
    return None


def _castling_error(castling: str) -> str | None:
    if castling == "-":
        return None
    if not 1 <= len(castling) <= 4:
        return f"castling field has invalid length: {castling!r}"
    if any(ch not in _CASTLING_CHARS for ch in castling):
        return f"castling field has invalid character: {castling!r}"
    if len(set(castling)) != len(castling):
        return f"castling field repeats a right: {castling!r}"
    return None


def _en_passant_error(en_passant: str, active: str) -> str | None:
    if en_passant == "-":
        return None
    if len(en_passant) != 2 or en_passant[0] not in "abcdefgh" or en_passant[1] not in "36":
        return f"en-passant field is not a rank 3/6 square: {en_passant!r}"
    expected = "6" if active == "w" else "3"
    if en_passant[1] != expected:
        return f"en-passant square {en_passant!r} does not match side to move {active!r}"
    return None


def _is_number(text: str) -> bool:
    return bool(text) and all(ch in _DIGITS for ch in text)


def fen_error(fen: str) -> str | None:
    """Describe the first FEN rule *fen* violates, or None when valid."""
    if not fen or fen.isspace():
        return "FEN is empty"
    parts = fen.split(" ")
    if len(parts) != 6:
        return f"FEN needs 6 space-separated fields, got {len(parts)}"
    placement, active, castling, en_passant, halfmove, fullmove = parts

    error = _placement_error(placement)
    if error is not None:
        return error
    if active not in ("w", "b"):
        return f"side-to-move field must be 'w' or 'b', got {active!r}"
    error = _castling_error(castling) or _en_passant_error(en_passant, active)
    if error is not None:
        return error
    if not _is_number(halfmove) or (len(halfmove) > 1 and halfmove[0] == "0"):
        return f"halfmove clock must be a non-negative integer, got {halfmove!r}"
    if not _is_number(fullmove) or fullmove[0] == "0":
        return f"fullmove number must be a positive integer, got {fullmove!r}"
    return None


def is_valid_fen(fen: str) -> bool:
    """Whether *fen* is a well-formed six-field FEN record."""
    error = fen_error(fen)
    if error is not None:
        _LOGGER.debug("Rejected FEN %r: %s", fen, error)
        return False
    return True


# ── Parsed record ────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class FenRecord:
    """The six fields of a validated FEN record."""

    placement: str
    active_color: str
    castling: str
    en_passant: str
    halfmove_clock: int
    fullmove_number: int

    @classmethod
    def parse(cls, fen: str) -> FenRecord:
        error = fen_error(fen)
        if error is not None:
            raise NotationError(f"Invalid FEN ({error}): {fen!r}")
        placement, active, castling, en_passant, halfmove, fullmove = fen.split(" ")
        return cls(placement, active, castling, en_passant, int(halfmove), int(fullmove))

    @property
    def side_to_move(self) -> Color:
        return Color.from_fen(self.active_color)

    def to_board(self) -> Board:
        board = Board()
        for row, rank_text in enumerate(self.placement.split("/")):
            col = 0
            for ch in rank_text:
                if ch.isdigit():
                    col += int(ch)
                else:
                    board.set_piece(row, col, Piece.from_char(ch))
                    col += 1
        return board

    def __str__(self) -> str:
        return (
            f"{self.placement} {self.active_color} {self.castling} "
            f"{self.en_passant} {self.halfmove_clock} {self.fullmove_number}"
        )


# ── Board codec ──────────────────────────────────────────────────────────────


def board_to_fen(
    board: Board,
    active_color: str = "w",
    castling: str = "-",
    en_passant: str = "-",
    halfmove_clock: int = 0,
    fullmove_number: int = 1,
) -> str:
    """Serialise *board* plus the five trailing fields to FEN."""
    rows: list[str] = []
    for row in range(8):
        empty = 0
        text = ""
        for col in range(8):
            piece = board.get_piece(row, col)
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += piece.fen_char
        if empty:
            text += str(empty)
        rows.append(text)
    placement = "/".join(rows)

    return f"{placement} {active_color} {castling} {en_passant} {halfmove_clock} {fullmove_number}"


def fen_to_board(fen: str) -> Board:
    """Parse the placement field of *fen* into a new :class:`Board`."""
    return FenRecord.parse(fen).to_board()
