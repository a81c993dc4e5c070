"""MoveTree — the main line of a game."""

from __future__ import annotations

from collections.abc import Iterator

from chesslines.errors import InvalidOperationError, OutOfRangeError
from chesslines.history.node import MoveNode

_INDENT = "    "


class MoveTree:
    """Owned main line of move nodes; side-lines hang off the nodes.

    An empty tree accepts a first move of either color; afterwards colors
    must alternate.
    """

    __slots__ = ("_root", "_current", "_size")

    def __init__(self) -> None:
        self._root: MoveNode | None = None
        self._current: MoveNode | None = None
        self._size = 0

    @property
    def root(self) -> MoveNode | None:
        return self._root

    @property
    def current(self) -> MoveNode | None:
        return self._current

    @property
    def size(self) -> int:
        return self._size

    @property
    def is_empty(self) -> bool:
        return self._size == 0

    # ── Mutation ─────────────────────────────────────────────────────────

    def push_move(self, node: MoveNode) -> None:
        if node is None:
            raise TypeError("Cannot push a missing move")
        if self._current is None:
            self._root = node
            self._current = node
            self._size = 1
            return
        if node.color == self._current.color:
            raise InvalidOperationError(
                "The new move must have a different color than the current move"
            )
        self._current.next = node
        node.prev = self._current
        self._current = node
        self._size += 1

    def drop_last_move(self) -> None:
        if self._current is None:
            raise InvalidOperationError("Cannot drop a move from an empty tree")
        dropped = self._current
        if self._size == 1:
            dropped.prev = None
            self._root = None
            self._current = None
            self._size = 0
            return
        previous = dropped.prev
        if previous is None:
            raise InvalidOperationError("Move tree chain is missing a previous move")
        dropped.prev = None
        previous.next = None
        self._current = previous
        self._size -= 1

    def drop_last_moves(self, count: int) -> None:
        if count < 1:
            raise OutOfRangeError(f"Number of moves to drop must be at least 1, got {count}")
        if count > self._size:
            raise InvalidOperationError(
                f"Cannot drop {count} moves from a tree of {self._size}"
            )
        for _ in range(count):
            self.drop_last_move()

    # ── Iteration / display ──────────────────────────────────────────────

    def __iter__(self) -> Iterator[MoveNode]:
        node = self._root
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        lines: list[str] = []
        _render(lines, self._root, 0)
        return "\n".join(lines)


def _render(lines: list[str], node: MoveNode | None, depth: int) -> None:
    """Main line one node per line, each node's variations nested below it."""
    while node is not None:
        lines.append(f"{_INDENT * depth}{node}")
        for variation in node.variations:
            lines.append(f"{_INDENT * (depth + 1)}[Variation]")
            _render(lines, variation.root, depth + 1)
        node = node.next
