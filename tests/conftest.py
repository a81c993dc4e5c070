"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chesslines.core.board import Board


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def standard_board() -> Board:
    board = Board()
    board.setup_standard_position()
    return board
