"""Move history: main line, variations and PGN movetext.

Quick start::

    from chesslines.core import Color
    from chesslines.history import MoveNode, MoveTree

    tree = MoveTree()
    tree.push_move(MoveNode("e4", Color.WHITE))
    tree.push_move(MoveNode("e5", Color.BLACK))
    tree.current.variations.add_variation_line(MoveNode("c5", Color.BLACK))
"""

from chesslines.history.movetext import ParsedMovetext, movetext_from_tree, parse_movetext
from chesslines.history.node import MoveNode
from chesslines.history.tree import MoveTree
from chesslines.history.variation import Variation, VariationLines

__all__ = [
    "MoveNode",
    "MoveTree",
    "Variation",
    "VariationLines",
    "ParsedMovetext",
    "movetext_from_tree",
    "parse_movetext",
]
