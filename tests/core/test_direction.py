"""Tests for Direction vectors and line decomposition."""

from chessrules.core.direction import ALL_DIRECTIONS, DIAGONAL, ORTHOGONAL, Direction


class TestDirectionSet:
    def test_eight_unit_vectors(self) -> None:
        assert len(Direction) == 8
        vectors = {d.vector for d in Direction}
        assert len(vectors) == 8
        for df, dr in vectors:
            assert df in (-1, 0, 1)
            assert dr in (-1, 0, 1)
            assert (df, dr) != (0, 0)

    def test_compass_orientation(self) -> None:
        assert Direction.N.vector == (0, 1)
        assert Direction.E.vector == (1, 0)
        assert Direction.SW.file_delta == -1
        assert Direction.SW.rank_delta == -1

    def test_groups(self) -> None:
        assert len(ORTHOGONAL) == 4
        assert len(DIAGONAL) == 4
        assert ORTHOGONAL.isdisjoint(DIAGONAL)
        assert ALL_DIRECTIONS == frozenset(Direction)
        assert all(d.is_diagonal for d in DIAGONAL)
        assert not any(d.is_diagonal for d in ORTHOGONAL)


class TestLookup:
    def test_of(self) -> None:
        assert Direction.of(0, 1) is Direction.N
        assert Direction.of(-1, 1) is Direction.NW

    def test_of_non_unit(self) -> None:
        assert Direction.of(2, 0) is None
        assert Direction.of(0, 0) is None


class TestAlong:
    def test_file(self) -> None:
        assert Direction.along(0, 4) == (Direction.N, 4)
        assert Direction.along(0, -2) == (Direction.S, 2)

    def test_rank(self) -> None:
        assert Direction.along(-7, 0) == (Direction.W, 7)

    def test_diagonal(self) -> None:
        assert Direction.along(-3, -3) == (Direction.SW, 3)
        assert Direction.along(1, 1) == (Direction.NE, 1)

    def test_off_line(self) -> None:
        assert Direction.along(1, 2) is None
        assert Direction.along(3, -2) is None

    def test_zero(self) -> None:
        assert Direction.along(0, 0) is None
