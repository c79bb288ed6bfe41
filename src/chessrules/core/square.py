"""Canonical board squares.

Every (file, rank) pair maps to exactly one :class:`Square` object for the
lifetime of the process, so ``a is b`` is a valid equality check. All 64
squares are built once at import time; afterwards direct construction is
refused and :meth:`Square.of` only ever looks up the table.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import overload

from chessrules.core.direction import Direction
from chessrules.core.enums import File, Rank
from chessrules.core.errors import InvalidSquareFormat

_LOGGER = logging.getLogger(__name__)

_sealed = False


@dataclass(frozen=True, slots=True, eq=False)
class Square:
    """One board cell. Obtain instances through :meth:`Square.of`."""

    file: File
    rank: Rank

    def __post_init__(self) -> None:
        if _sealed:
            raise TypeError("Squares are canonical; use Square.of() instead")

    # ── Lookup ───────────────────────────────────────────────────────────

    @overload
    @classmethod
    def of(cls, name: str, /) -> Square: ...

    @overload
    @classmethod
    def of(cls, file: File, rank: Rank, /) -> Square: ...

    @classmethod
    def of(cls, file_or_name: File | str, rank: Rank | None = None, /) -> Square:
        """Return the canonical square for ``'e4'`` or ``(File.E, Rank.FOUR)``."""
        if rank is None:
            return _parse(file_or_name)
        return _SQUARES[Rank(rank) * 8 + File(file_or_name)]

    @classmethod
    def from_index(cls, index: int) -> Square:
        """Square for a 0–63 index (a1=0, h8=63)."""
        if not 0 <= index < 64:
            raise ValueError(f"Square index out of range: {index!r}")
        return _SQUARES[index]

    # ── Coordinates ──────────────────────────────────────────────────────

    @property
    def index(self) -> int:
        return self.rank * 8 + self.file

    @property
    def name(self) -> str:
        """Algebraic name, e.g. 'e4'."""
        return f"{self.file.letter}{self.rank.number}"

    def delta(self, target: Square) -> tuple[int, int]:
        """``(file_delta, rank_delta)`` from this square to *target*."""
        return target.file - self.file, target.rank - self.rank

    # ── Stepping ─────────────────────────────────────────────────────────

    def step(self, direction: Direction) -> Square | None:
        """Neighbouring square along *direction*, or ``None`` off the board."""
        file_idx = self.file + direction.file_delta
        rank_idx = self.rank + direction.rank_delta
        if 0 <= file_idx < 8 and 0 <= rank_idx < 8:
            return _SQUARES[rank_idx * 8 + file_idx]
        return None

    def ray(self, direction: Direction) -> Iterator[Square]:
        """Successive squares along *direction* up to the board edge."""
        current = self.step(direction)
        while current is not None:
            yield current
            current = current.step(direction)

    def between(self, target: Square) -> tuple[Square, ...]:
        """Squares strictly between two squares sharing a line.

        Empty when the squares are adjacent, identical, or not on a common
        rank, file or diagonal.
        """
        line = Direction.along(*self.delta(target))
        if line is None:
            return ()
        direction, distance = line
        squares: list[Square] = []
        current = self
        for _ in range(distance - 1):
            current = _SQUARES[
                (current.rank + direction.rank_delta) * 8
                + current.file
                + direction.file_delta
            ]
            squares.append(current)
        return tuple(squares)

    # ── Identity ─────────────────────────────────────────────────────────

    def __hash__(self) -> int:
        return self.index

    def __copy__(self) -> Square:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> Square:
        return self

    def __reduce__(self) -> tuple[object, tuple[File, Rank]]:
        return Square.of, (self.file, self.rank)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Square.of({self.name!r})"


def _parse(name: object) -> Square:
    if not isinstance(name, str) or len(name) != 2:
        raise InvalidSquareFormat(f"Invalid square name: {name!r}")
    try:
        file = File.parse(name[0])
        rank = Rank.parse(name[1])
    except InvalidSquareFormat:
        raise InvalidSquareFormat(f"Invalid square name: {name!r}") from None
    return _SQUARES[rank * 8 + file]


def _build_squares() -> tuple[Square, ...]:
    return tuple(Square(file, rank) for rank in Rank for file in File)


_SQUARES: tuple[Square, ...] = _build_squares()
_sealed = True
_LOGGER.debug("Built canonical square table (%d squares)", len(_SQUARES))

ALL_SQUARES: tuple[Square, ...] = _SQUARES


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = _SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = _SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = _SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = _SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = _SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = _SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = _SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = _SQUARES[56:64]
