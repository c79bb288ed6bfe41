"""Compass step vectors.

``N`` points towards rank 8 (black's side), ``E`` towards the h-file.
"""

from __future__ import annotations

from enum import Enum


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Direction(Enum):
    """One of the 8 unit steps on the board as ``(file_delta, rank_delta)``."""

    N = (0, 1)
    S = (0, -1)
    E = (1, 0)
    W = (-1, 0)
    NE = (1, 1)
    NW = (-1, 1)
    SE = (1, -1)
    SW = (-1, -1)

    def __init__(self, file_delta: int, rank_delta: int) -> None:
        self.file_delta = file_delta
        self.rank_delta = rank_delta

    @property
    def vector(self) -> tuple[int, int]:
        return self.value

    @property
    def is_diagonal(self) -> bool:
        return self.file_delta != 0 and self.rank_delta != 0

    @classmethod
    def of(cls, file_delta: int, rank_delta: int) -> Direction | None:
        """Exact lookup of a unit vector; ``None`` if it is not one."""
        try:
            return cls((file_delta, rank_delta))
        except ValueError:
            return None

    @classmethod
    def along(cls, file_delta: int, rank_delta: int) -> tuple[Direction, int] | None:
        """Split a delta into ``(direction, distance)``.

        Returns ``None`` for the zero vector and for deltas that do not lie
        on a rank, file or diagonal (e.g. a knight jump).
        """
        if file_delta == 0 and rank_delta == 0:
            return None
        if file_delta != 0 and rank_delta != 0 and abs(file_delta) != abs(rank_delta):
            return None
        direction = cls((_sign(file_delta), _sign(rank_delta)))
        return direction, max(abs(file_delta), abs(rank_delta))

    def __repr__(self) -> str:
        return f"Direction.{self.name}"


ORTHOGONAL: frozenset[Direction] = frozenset(
    (Direction.N, Direction.S, Direction.E, Direction.W)
)
DIAGONAL: frozenset[Direction] = frozenset(
    (Direction.NE, Direction.NW, Direction.SE, Direction.SW)
)
ALL_DIRECTIONS: frozenset[Direction] = ORTHOGONAL | DIAGONAL
