"""Tests for Game — board state, history and FEN bookkeeping."""

import pytest

from chesslines.config import GameSettings, Variant
from chesslines.core.board import Board
from chesslines.core.enums import Color, PieceType
from chesslines.core.move import Move
from chesslines.core.piece import Piece
from chesslines.core.square import Square
from chesslines.errors import InvalidOperationError, NotationError, OutOfRangeError
from chesslines.game.game import Game
from chesslines.notation.fen import STARTING_FEN

AFTER_E4 = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
ROOKS_AND_KINGS = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"


def _move(color: Color, piece_type: PieceType, src: str, dst: str) -> Move:
    return Move.standard(Piece(color, piece_type), Square.parse(src), Square.parse(dst))


def _white(piece_type: PieceType, src: str, dst: str) -> Move:
    return _move(Color.WHITE, piece_type, src, dst)


def _black(piece_type: PieceType, src: str, dst: str) -> Move:
    return _move(Color.BLACK, piece_type, src, dst)


class _FixedEngine:
    def __init__(self, move: Move | None) -> None:
        self.move = move
        self.calls: list[Color] = []

    def propose_move(self, board: Board, side_to_move: Color) -> Move | None:
        self.calls.append(side_to_move)
        return self.move


class TestSetup:
    def test_standard(self) -> None:
        game = Game()
        assert game.fen() == STARTING_FEN
        assert game.side_to_move == Color.WHITE
        assert game.chess960_id is None
        assert game.moves.is_empty

    def test_chess960_explicit_id(self) -> None:
        game = Game(settings=GameSettings(variant=Variant.CHESS960, chess960_id=0))
        assert game.chess960_id == 0
        assert game.fen() == "bbqnnrkr/pppppppp/8/8/8/8/PPPPPPPP/BBQNNRKR w KQkq - 0 1"

    def test_chess960_standard_id(self) -> None:
        game = Game(settings=GameSettings(variant=Variant.CHESS960, chess960_id=518))
        assert game.fen() == STARTING_FEN

    def test_chess960_seed_is_deterministic(self) -> None:
        settings = GameSettings(variant=Variant.CHESS960, seed=7)
        first = Game(settings=settings)
        second = Game(settings=settings)
        assert first.chess960_id is not None
        assert 0 <= first.chess960_id < 960
        assert first.chess960_id == second.chess960_id
        assert first.fen() == second.fen()

    def test_chess960_bad_id(self) -> None:
        with pytest.raises(OutOfRangeError):
            Game(settings=GameSettings(variant=Variant.CHESS960, chess960_id=960))

    def test_from_fen(self) -> None:
        game = Game.from_fen(AFTER_E4)
        assert game.side_to_move == Color.BLACK
        assert game.en_passant == "e3"
        assert game.castling == "KQkq"
        assert game.fen() == AFTER_E4

    def test_start_fen_overrides_variant(self) -> None:
        game = Game(settings=GameSettings(variant=Variant.CHESS960, start_fen=AFTER_E4))
        assert game.chess960_id is None
        assert game.fen() == AFTER_E4

    def test_invalid_fen_raises(self) -> None:
        with pytest.raises(NotationError):
            Game.from_fen("not a fen")


class TestMakeMove:
    def test_double_push_sets_en_passant(self) -> None:
        game = Game()
        assert game.make_move(_white(PieceType.PAWN, "e2", "e4"))
        assert game.fen() == AFTER_E4
        assert game.ply_count == 1
        assert game.moves.current.name == "e2e4"

    def test_clocks_and_counters(self) -> None:
        game = Game()
        game.make_move(_white(PieceType.PAWN, "e2", "e4"))
        game.make_move(_black(PieceType.PAWN, "e7", "e5"))
        assert game.fen() == "rnbqkbnr/pppp1ppp/8/4p3/4P3/8/PPPP1PPP/RNBQKBNR w KQkq e6 0 2"
        game.make_move(_white(PieceType.KNIGHT, "g1", "f3"))
        assert game.fen() == "rnbqkbnr/pppp1ppp/8/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R b KQkq - 1 2"
        assert game.halfmove_clock == 1
        assert game.fullmove_number == 2

    def test_out_of_turn_raises(self) -> None:
        game = Game()
        with pytest.raises(InvalidOperationError, match="turn"):
            game.make_move(_black(PieceType.PAWN, "e7", "e5"))
        assert game.fen() == STARTING_FEN
        assert game.moves.is_empty

    def test_black_first_from_fen(self) -> None:
        game = Game.from_fen(AFTER_E4)
        game.make_move(_black(PieceType.PAWN, "e7", "e5"))
        assert game.moves.root.color == Color.BLACK
        assert game.fullmove_number == 2

    def test_capture_resets_halfmove_clock(self) -> None:
        game = Game.from_fen("4k3/8/8/3n4/8/8/8/3RK3 w - - 5 10")
        game.make_move(_white(PieceType.ROOK, "d1", "d5"))
        assert game.halfmove_clock == 0
        assert game.fen() == "4k3/8/8/3R4/8/8/8/4K3 b - - 0 10"

    def test_en_passant_capture(self) -> None:
        game = Game.from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 2")
        pawn = Piece(Color.WHITE, PieceType.PAWN)
        move = Move.en_passant(pawn, Square.parse("e5"), Square.parse("d6"), Square.parse("d5"))
        assert game.make_move(move)
        assert game.fen() == "4k3/8/3P4/8/8/8/8/4K3 b - - 0 2"

    def test_promotion(self) -> None:
        game = Game.from_fen("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        move = Move.promote(
            Piece(Color.WHITE, PieceType.PAWN),
            Square.parse("a7"),
            Square.parse("a8"),
            Piece(Color.WHITE, PieceType.QUEEN),
        )
        assert game.make_move(move)
        assert game.fen() == "Q3k3/8/8/8/8/8/8/4K3 b - - 0 1"


class TestCastlingRights:
    def test_king_move_drops_both(self) -> None:
        game = Game.from_fen(ROOKS_AND_KINGS)
        game.make_move(_white(PieceType.KING, "e1", "e2"))
        assert game.castling == "kq"

    def test_rook_move_drops_one(self) -> None:
        game = Game.from_fen(ROOKS_AND_KINGS)
        game.make_move(_white(PieceType.ROOK, "h1", "h4"))
        assert game.castling == "Qkq"

    def test_rook_captured_on_home_square(self) -> None:
        game = Game.from_fen(ROOKS_AND_KINGS)
        game.make_move(_white(PieceType.ROOK, "a1", "a8"))
        assert game.fen() == "R3k2r/8/8/8/8/8/8/4K2R b Kk - 0 1"

    def test_castle_kingside(self) -> None:
        game = Game.from_fen(ROOKS_AND_KINGS)
        king = Piece(Color.WHITE, PieceType.KING)
        game.make_move(Move.castling(king, Square.parse("e1"), Square.parse("g1")))
        assert game.fen() == "r3k2r/8/8/8/8/8/8/R4RK1 b kq - 1 1"

    def test_castle_queenside_black(self) -> None:
        game = Game.from_fen("r3k2r/8/8/8/8/8/8/R3K2R b KQkq - 0 1")
        king = Piece(Color.BLACK, PieceType.KING)
        game.make_move(Move.castling(king, Square.parse("e8"), Square.parse("c8")))
        assert game.fen() == "2kr3r/8/8/8/8/8/8/R3K2R w KQ - 1 2"

    def test_no_rights_stays_dash(self) -> None:
        game = Game.from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 0 1")
        game.make_move(_white(PieceType.ROOK, "a1", "a2"))
        assert game.castling == "-"


class TestUndo:
    def test_undo_restores_position(self) -> None:
        game = Game()
        game.make_move(_white(PieceType.PAWN, "e2", "e4"))
        game.make_move(_black(PieceType.PAWN, "e7", "e5"))
        assert game.undo()
        assert game.fen() == AFTER_E4
        assert game.ply_count == 1
        assert game.undo()
        assert game.fen() == STARTING_FEN
        assert game.moves.is_empty

    def test_undo_empty(self) -> None:
        assert not Game().undo()

    def test_undo_restores_castling(self) -> None:
        game = Game.from_fen(ROOKS_AND_KINGS)
        game.make_move(_white(PieceType.KING, "e1", "f1"))
        game.undo()
        assert game.fen() == ROOKS_AND_KINGS


class TestVariationMove:
    def test_records_alternative(self) -> None:
        game = Game()
        game.make_move(_white(PieceType.PAWN, "e2", "e4"))
        variation = game.make_variation_move(_white(PieceType.PAWN, "d2", "d4"))
        assert variation.root.name == "d2d4"
        assert variation.parent is game.moves.current
        assert len(game.moves.current.variations) == 1
        # Board stays on the main line
        assert game.fen() == AFTER_E4

    def test_wrong_color_raises(self) -> None:
        game = Game()
        game.make_move(_white(PieceType.PAWN, "e2", "e4"))
        with pytest.raises(InvalidOperationError):
            game.make_variation_move(_black(PieceType.PAWN, "e7", "e5"))

    def test_empty_history_raises(self) -> None:
        with pytest.raises(InvalidOperationError):
            Game().make_variation_move(_white(PieceType.PAWN, "d2", "d4"))


class TestEngine:
    def test_engine_move_applied(self) -> None:
        engine = _FixedEngine(_white(PieceType.PAWN, "e2", "e4"))
        game = Game(engine)
        move = game.play_engine_move()
        assert move == engine.move
        assert engine.calls == [Color.WHITE]
        assert game.fen() == AFTER_E4

    def test_engine_without_move(self) -> None:
        game = Game(_FixedEngine(None))
        assert game.play_engine_move() is None
        assert game.moves.is_empty

    def test_no_engine_raises(self) -> None:
        with pytest.raises(InvalidOperationError):
            Game().play_engine_move()
