"""Tests for Square: parsing, canonical identity, stepping."""

import copy
import pickle

import pytest

from chessrules.core.direction import Direction
from chessrules.core.enums import File, Rank
from chessrules.core.errors import InvalidSquareFormat
from chessrules.core.square import (
    A1, A2, A3, A4, A5, A6, A7, A8,
    B1, B2, B3,
    C1, C3, C4, C5, C6, C7, C8,
    D2, E3, E4, E5, F4,
    G7,
    H1, H8,
    ALL_SQUARES,
    Square,
)


class TestCanonicalIdentity:
    def test_every_pair_returns_same_instance(self) -> None:
        for file in File:
            for rank in Rank:
                assert Square.of(file, rank) is Square.of(file, rank)

    def test_every_pair_has_its_coordinates(self) -> None:
        for file in File:
            for rank in Rank:
                sq = Square.of(file, rank)
                assert sq.file is file
                assert sq.rank is rank

    def test_exactly_64_distinct_squares(self) -> None:
        assert len(ALL_SQUARES) == 64
        assert len(set(ALL_SQUARES)) == 64
        assert len({id(sq) for sq in ALL_SQUARES}) == 64

    def test_text_and_pair_agree(self) -> None:
        assert Square.of("e4") is Square.of(File.E, Rank.FOUR)
        assert Square.of("e4") is E4

    def test_direct_construction_refused(self) -> None:
        with pytest.raises(TypeError, match="canonical"):
            Square(File.E, Rank.FOUR)

    def test_copy_keeps_identity(self) -> None:
        assert copy.copy(E4) is E4
        assert copy.deepcopy(E4) is E4
        assert copy.deepcopy([E4, A1]) == [E4, A1]

    def test_pickle_keeps_identity(self) -> None:
        assert pickle.loads(pickle.dumps(G7)) is G7

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            E4.file = File.A  # type: ignore[misc]

    def test_equality_is_identity(self) -> None:
        assert E4 == Square.of("E4")
        assert E4 != E5
        assert E4 != "e4"


class TestParsing:
    def test_lowercase(self) -> None:
        sq = Square.of("e4")
        assert sq.file is File.E
        assert sq.rank is Rank.FOUR

    def test_case_insensitive(self) -> None:
        assert Square.of("e4") is Square.of("E4")
        assert Square.of("h8") is H8

    def test_corners(self) -> None:
        assert Square.of("a1") is A1
        assert Square.of("H1") is H1

    @pytest.mark.parametrize("name", ["I1", "A9", "A", "", "a0", "e44", "4e", "z9", " e4"])
    def test_invalid_names(self, name: str) -> None:
        with pytest.raises(InvalidSquareFormat, match="Invalid square name"):
            Square.of(name)

    def test_non_string_rejected(self) -> None:
        with pytest.raises(InvalidSquareFormat):
            Square.of(42)  # type: ignore[call-overload]

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Square.of("j1")

    def test_from_index(self) -> None:
        assert Square.from_index(0) is A1
        assert Square.from_index(28) is E4
        assert Square.from_index(63) is H8

    def test_from_index_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            Square.from_index(64)


class TestDisplay:
    def test_name(self) -> None:
        assert E4.name == "e4"
        assert str(H8) == "h8"

    def test_repr(self) -> None:
        assert repr(C3) == "Square.of('c3')"

    def test_index(self) -> None:
        assert A1.index == 0
        assert H1.index == 7
        assert A2.index == 8
        assert H8.index == 63
        assert [sq.index for sq in ALL_SQUARES] == list(range(64))


class TestStepping:
    def test_step_inside_board(self) -> None:
        assert E4.step(Direction.N) is E5
        assert E4.step(Direction.SW) is Square.of("d3")
        assert B1.step(Direction.NE) is Square.of("c2")

    def test_step_off_board_is_none(self) -> None:
        assert H8.step(Direction.NE) is None
        assert H8.step(Direction.E) is None
        assert A1.step(Direction.S) is None
        assert A1.step(Direction.SW) is None
        assert A8.step(Direction.W) is None

    def test_ray_stops_at_edge(self) -> None:
        ray = list(A1.ray(Direction.NE))
        assert len(ray) == 7
        assert ray[0] is B2
        assert ray[-1] is H8

    def test_ray_from_edge_is_empty(self) -> None:
        assert list(H8.ray(Direction.N)) == []

    def test_delta(self) -> None:
        assert B1.delta(C3) == (1, 2)
        assert C3.delta(B1) == (-1, -2)
        assert E4.delta(E4) == (0, 0)


class TestBetween:
    def test_file(self) -> None:
        assert A1.between(A8) == (A2, A3, A4, A5, A6, A7)

    def test_file_reversed(self) -> None:
        assert C8.between(C3) == (C7, C6, C5, C4)

    def test_diagonal(self) -> None:
        assert C1.between(F4) == (D2, E3)

    def test_adjacent_is_empty(self) -> None:
        assert E4.between(E5) == ()

    def test_same_square_is_empty(self) -> None:
        assert E4.between(E4) == ()

    def test_off_line_is_empty(self) -> None:
        assert A1.between(B3) == ()
