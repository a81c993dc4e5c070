"""Variations: side-lines branching off a move node."""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from typing import TYPE_CHECKING

from chesslines.errors import InvalidOperationError, OutOfRangeError

if TYPE_CHECKING:
    from chesslines.history.node import MoveNode


class Variation:
    """A non-empty line of moves branching from *parent*.

    A variation always keeps at least its root move.
    """

    __slots__ = ("_root", "_current", "_size", "_parent")

    def __init__(self, node: MoveNode, parent: MoveNode) -> None:
        if node is None:
            raise TypeError("A variation needs a root move")
        node.parent = parent
        self._root = node
        self._current = node
        self._size = 1
        self._parent = weakref.ref(parent)

    @property
    def root(self) -> MoveNode:
        return self._root

    @property
    def current(self) -> MoveNode:
        return self._current

    @property
    def size(self) -> int:
        return self._size

    @property
    def parent(self) -> MoveNode | None:
        return self._parent()

    # ── Mutation ─────────────────────────────────────────────────────────

    def push_move(self, node: MoveNode) -> None:
        if node is None:
            raise TypeError("Cannot push a missing move")
        if node.color == self._current.color:
            raise InvalidOperationError(
                "The new move must have a different color than the current move"
            )
        self._current.next = node
        node.prev = self._current
        node.parent = self.parent
        self._current = node
        self._size += 1

    def drop_last_move(self) -> None:
        if self._size == 1:
            raise InvalidOperationError("Each variation must contain at least one move")
        dropped = self._current
        previous = dropped.prev
        if previous is None:
            raise InvalidOperationError("Variation chain is missing a previous move")
        dropped.prev = None
        dropped.parent = None
        previous.next = None
        self._current = previous
        self._size -= 1

    def drop_last_moves(self, count: int) -> None:
        if count <= 0:
            raise OutOfRangeError(f"Number of moves to drop must be positive, got {count}")
        if count >= self._size:
            raise InvalidOperationError(
                f"Cannot drop {count} of {self._size} moves: "
                "each variation must contain at least one move"
            )
        for _ in range(count):
            self.drop_last_move()

    # ── Iteration / display ──────────────────────────────────────────────

    def __iter__(self) -> Iterator[MoveNode]:
        node: MoveNode | None = self._root
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(str(node) for node in self)


class VariationLines:
    """Insertion-ordered variations hanging off one move node."""

    __slots__ = ("_parent", "_lines")

    def __init__(self, parent: MoveNode) -> None:
        self._parent = weakref.ref(parent)
        self._lines: list[Variation] = []

    @property
    def parent(self) -> MoveNode | None:
        return self._parent()

    def add_variation_line(self, node: MoveNode) -> Variation:
        """Start a new variation at *node* and return it."""
        if node is None:
            raise TypeError("Cannot add a variation without a move")
        parent = self.parent
        if parent is None:
            raise InvalidOperationError("The owning move node no longer exists")
        variation = Variation(node, parent)
        self._lines.append(variation)
        return variation

    def remove_variation_line(self, index: int) -> None:
        self._check_index(index)
        del self._lines[index]

    def get_variation_line(self, index: int) -> Variation:
        self._check_index(index)
        return self._lines[index]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._lines):
            raise OutOfRangeError(
                f"Variation index {index} out of range for {len(self._lines)} line(s)"
            )

    def __iter__(self) -> Iterator[Variation]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)
