"""Exception taxonomy shared by the whole library.

Board coordinate helpers never raise; everything else reports failures
with one of the classes below.
"""

from __future__ import annotations


class ChessError(Exception):
    """Base class for all library errors."""


class NotationError(ChessError, ValueError):
    """Malformed text input: FEN, square names, move names, movetext."""


class OutOfRangeError(ChessError, IndexError):
    """A value has the right shape but lies outside its allowed range."""


class InvalidOperationError(ChessError, RuntimeError):
    """A structural invariant of the move history would be broken."""
