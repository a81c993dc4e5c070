"""Game layer — orchestration over Board and MoveTree."""

from chesslines.game.engine import IEngine
from chesslines.game.game import Game

__all__ = [
    "Game",
    "IEngine",
]
