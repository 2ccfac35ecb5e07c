"""
Unit Tests for Pieces and Moves

Tests for:
    - Piece sides and display
    - Move value semantics
    - Move notation (both forms) and malformed input
"""

import pytest

from amazons_engine.board.move import Move, Piece, is_move_text, mv, parse_move
from amazons_engine.board.square import parse_square
from amazons_engine.exceptions import InvalidMoveFormatError


class TestPiece:
    def test_opponent(self):
        assert Piece.WHITE.opponent() is Piece.BLACK
        assert Piece.BLACK.opponent() is Piece.WHITE

    @pytest.mark.parametrize("piece", [Piece.EMPTY, Piece.SPEAR])
    def test_non_side_has_no_opponent(self, piece):
        with pytest.raises(ValueError):
            piece.opponent()

    def test_display(self):
        assert [str(p) for p in Piece] == ["-", "W", "B", "S"]

    def test_is_queen(self):
        assert Piece.WHITE.is_queen and Piece.BLACK.is_queen
        assert not Piece.EMPTY.is_queen and not Piece.SPEAR.is_queen


class TestMove:
    def test_fields(self):
        move = mv(parse_square("d1"), parse_square("d7"), parse_square("g7"))
        assert move.from_square is parse_square("d1")
        assert move.to_square is parse_square("d7")
        assert move.spear is parse_square("g7")

    def test_value_equality(self):
        a = Move(parse_square("a4"), parse_square("b5"), parse_square("a4"))
        b = parse_move("a4-b5(a4)")
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_immutable(self):
        move = parse_move("a4-b5(a4)")
        with pytest.raises(AttributeError):
            move.spear = parse_square("c6")

    def test_canonical_text(self):
        assert str(parse_move("j10-j1(a10)")) == "j10-j1(a10)"


class TestNotation:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("d1-d7(g7)", ("d1", "d7", "g7")),
            ("d1 d7 g7", ("d1", "d7", "g7")),
            ("  a10-a9(j9)  ", ("a10", "a9", "j9")),
            ("g10\tg2  g10", ("g10", "g2", "g10")),
        ],
    )
    def test_parse(self, text, expected):
        move = parse_move(text)
        assert (str(move.from_square), str(move.to_square), str(move.spear)) == expected

    def test_text_round_trip(self):
        for text in ["a1-a2(a3)", "j10-a1(j10)", "e5-e10(e1)"]:
            assert str(parse_move(text)) == text

    @pytest.mark.parametrize(
        "text",
        ["", "d1-d7", "d1-d7-g7", "d1 d7", "d1-d7(k7)", "d1-d7(g7", "x1 d7 g7", "d1-d7 (g7)"],
    )
    def test_malformed(self, text):
        with pytest.raises(InvalidMoveFormatError):
            parse_move(text)
        assert not is_move_text(text)

    def test_malformed_is_value_error(self):
        with pytest.raises(ValueError):
            parse_move("nonsense")
