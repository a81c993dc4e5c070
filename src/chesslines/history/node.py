"""MoveNode — one move occurrence in a game history."""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, overload

from chesslines.core.enums import Color
from chesslines.errors import InvalidOperationError
from chesslines.history.variation import VariationLines
from chesslines.notation.san import parse_move_name

if TYPE_CHECKING:
    from chesslines.core.move import Move


def _deref(ref: weakref.ref[MoveNode] | None) -> MoveNode | None:
    return ref() if ref is not None else None


def _coordinate_name(move: Move) -> str:
    """Coordinate text the move-name parser accepts, e.g. "e7e8=Q"."""
    name = f"{move.from_sq}{move.to_sq}"
    if move.promotion is not None:
        name += f"={move.promotion.piece_type.letter}"
    return name


class MoveNode:
    """A move plus its links inside a line of play.

    A node either wraps a :class:`Move` or, in textual mode, a move name
    such as ``"Nf3"`` together with the color that played it.

    ``next`` is the owning edge of a chain; ``prev`` and ``parent`` are
    weak back-references used for traversal only.
    """

    __slots__ = (
        "_move",
        "_name",
        "_color",
        "comment",
        "_prev",
        "_next",
        "_parent",
        "_variations",
        "__weakref__",
    )

    @overload
    def __init__(
        self,
        move: Move,
        color: None = None,
        comment: str | None = None,
        prev: MoveNode | None = None,
        next: MoveNode | None = None,
        parent: MoveNode | None = None,
    ) -> None: ...

    @overload
    def __init__(
        self,
        move: str,
        color: Color,
        comment: str | None = None,
        prev: MoveNode | None = None,
        next: MoveNode | None = None,
        parent: MoveNode | None = None,
    ) -> None: ...

    def __init__(
        self,
        move: Move | str,
        color: Color | None = None,
        comment: str | None = None,
        prev: MoveNode | None = None,
        next: MoveNode | None = None,
        parent: MoveNode | None = None,
    ) -> None:
        if isinstance(move, str):
            if color is None:
                raise TypeError("A textual move node needs the color that played it")
            parse_move_name(move)
            self._move: Move | None = None
            self._name = move
            self._color = color
        else:
            if color is not None and color != move.piece.color:
                raise ValueError(
                    f"Color {color} does not match the moved piece {move.piece}"
                )
            self._move = move
            self._name = _coordinate_name(move)
            self._color = move.piece.color

        self.comment = comment
        self._prev: weakref.ref[MoveNode] | None = None
        self._next: MoveNode | None = None
        self._parent: weakref.ref[MoveNode] | None = None
        self.prev = prev
        self.next = next
        self.parent = parent
        self._variations = VariationLines(self)

    # ── Payload ──────────────────────────────────────────────────────────

    @property
    def move(self) -> Move | None:
        """The wrapped move; None for textual nodes."""
        return self._move

    @property
    def name(self) -> str:
        """Move name: SAN text, or coordinate text such as "e7e8=Q"."""
        return self._name

    @property
    def color(self) -> Color:
        return self._color

    @property
    def variations(self) -> VariationLines:
        return self._variations

    # ── Links ────────────────────────────────────────────────────────────

    @property
    def prev(self) -> MoveNode | None:
        return _deref(self._prev)

    @prev.setter
    def prev(self, node: MoveNode | None) -> None:
        self._check_link(node, "previous")
        self._prev = weakref.ref(node) if node is not None else None

    @property
    def next(self) -> MoveNode | None:
        return self._next

    @next.setter
    def next(self, node: MoveNode | None) -> None:
        self._check_link(node, "next")
        self._next = node

    @property
    def parent(self) -> MoveNode | None:
        """Node this one branches from, when it belongs to a variation."""
        return _deref(self._parent)

    @parent.setter
    def parent(self, node: MoveNode | None) -> None:
        if node is self:
            raise InvalidOperationError("A node cannot be its own parent")
        self._parent = weakref.ref(node) if node is not None else None

    def _check_link(self, node: MoveNode | None, role: str) -> None:
        if node is None:
            return
        if node is self:
            raise InvalidOperationError(f"A node cannot be its own {role} move")
        if node.color == self._color:
            raise InvalidOperationError(
                f"The {role} move must have a different color than the current move"
            )

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        text = str(self._move) if self._move is not None else f"{self._color} {self._name}"
        if self.comment is not None:
            text += f" ({self.comment})"
        return text

    def __repr__(self) -> str:
        return f"MoveNode({self._name!r}, {self._color.name})"
