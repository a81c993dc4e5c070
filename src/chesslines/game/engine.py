"""Engine collaborator protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chesslines.core.board import Board
    from chesslines.core.enums import Color
    from chesslines.core.move import Move


class IEngine(Protocol):
    """Protocol for engines a :class:`~chesslines.game.Game` can consult.

    The engine receives a private copy of the board and may mutate it.
    """

    def propose_move(self, board: Board, side_to_move: Color) -> Move | None: ...
