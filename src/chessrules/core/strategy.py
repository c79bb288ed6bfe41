"""Movement strategies: pluggable geometric legality predicates.

A strategy answers one question: can a piece governed by it go from
``source`` to ``target`` with the given :class:`MoveType`? Strategies never
look at the board. Whether intervening or target squares are occupied is
the caller's concern (see :meth:`Square.between`).

Four variants cover every piece kind:

* :class:`UnlimitedMovable`: rook, bishop, queen
* :class:`LimitedMovable`: king
* :class:`KnightMovable`: knight
* :class:`PawnMovable`: pawns (one instance per color)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from chessrules.core.direction import Direction
from chessrules.core.enums import MoveType, Rank
from chessrules.core.errors import InvalidStrategyConfiguration
from chessrules.core.square import ALL_SQUARES, Square

_LOGGER = logging.getLogger(__name__)

KNIGHT_OFFSETS: frozenset[tuple[int, int]] = frozenset(
    (
        (-2, -1),
        (-2, 1),
        (-1, -2),
        (-1, 2),
        (1, -2),
        (1, 2),
        (2, -1),
        (2, 1),
    )
)


def _reject(message: str) -> InvalidStrategyConfiguration:
    _LOGGER.debug("Rejected strategy configuration: %s", message)
    return InvalidStrategyConfiguration(message)


def _direction_set(
    directions: Iterable[Direction], label: str
) -> frozenset[Direction]:
    try:
        result = frozenset(directions)
    except TypeError:
        msg = f"{label} must be an iterable of Direction: {directions!r}"
        raise _reject(msg) from None
    if not result:
        raise _reject(f"{label} must not be empty")
    for direction in result:
        if not isinstance(direction, Direction):
            raise _reject(f"Invalid entry in {label}: {direction!r}")
    return result


def _freeze_directions(strategy: MovableStrategy, *fields: str) -> None:
    for name in fields:
        value = _direction_set(getattr(strategy, name), name)
        object.__setattr__(strategy, name, value)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class MovableStrategy(ABC):
    """Geometric legality rule shared by every piece of one kind."""

    __slots__ = ()

    @abstractmethod
    def movable(self, source: Square, target: Square, move_type: MoveType) -> bool:
        """Whether ``source → target`` fits this rule for *move_type*."""

    def targets(self, source: Square, move_type: MoveType) -> Iterator[Square]:
        """Every square accepted by :meth:`movable` from *source*, a1..h8."""
        for target in ALL_SQUARES:
            if self.movable(source, target, move_type):
                yield target


@dataclass(frozen=True, slots=True)
class UnlimitedMovable(MovableStrategy):
    """Slide any distance along one of *directions*."""

    directions: frozenset[Direction]

    def __post_init__(self) -> None:
        _freeze_directions(self, "directions")

    def movable(self, source: Square, target: Square, move_type: MoveType) -> bool:
        line = Direction.along(*source.delta(target))
        return line is not None and line[0] in self.directions


@dataclass(frozen=True, slots=True)
class LimitedMovable(MovableStrategy):
    """Slide at most *max_steps* squares along one of *directions*."""

    directions: frozenset[Direction]
    max_steps: int = 1

    def __post_init__(self) -> None:
        _freeze_directions(self, "directions")
        if not _is_int(self.max_steps):
            raise _reject(f"max_steps must be an integer: {self.max_steps!r}")
        if self.max_steps < 1:
            raise _reject(f"max_steps must be >= 1: {self.max_steps!r}")

    def movable(self, source: Square, target: Square, move_type: MoveType) -> bool:
        line = Direction.along(*source.delta(target))
        if line is None:
            return False
        direction, distance = line
        return direction in self.directions and distance <= self.max_steps


@dataclass(frozen=True, slots=True)
class KnightMovable(MovableStrategy):
    """Jump by exactly one of *offsets*, given as ``(file_delta, rank_delta)``."""

    offsets: frozenset[tuple[int, int]] = KNIGHT_OFFSETS

    def __post_init__(self) -> None:
        try:
            offsets = frozenset(tuple(offset) for offset in self.offsets)
        except TypeError:
            msg = f"offsets must be (file, rank) pairs: {self.offsets!r}"
            raise _reject(msg) from None
        if not offsets:
            raise _reject("offsets must not be empty")
        for offset in offsets:
            if (
                len(offset) != 2
                or not all(_is_int(v) for v in offset)
                or offset == (0, 0)
            ):
                raise _reject(f"Invalid knight offset: {offset!r}")
        object.__setattr__(self, "offsets", offsets)

    def movable(self, source: Square, target: Square, move_type: MoveType) -> bool:
        return source.delta(target) in self.offsets


@dataclass(frozen=True, slots=True)
class PawnMovable(MovableStrategy):
    """Advance along *move_directions*, capture along *attack_directions*.

    A quiet move is one step forward, or two from *start_rank*. A capture is
    exactly one step along an attack direction. Both squares of a double
    advance must be checked for emptiness by the caller.
    """

    move_directions: frozenset[Direction]
    attack_directions: frozenset[Direction]
    start_rank: Rank

    def __post_init__(self) -> None:
        _freeze_directions(self, "move_directions", "attack_directions")
        if not isinstance(self.start_rank, Rank):
            raise _reject(f"start_rank must be a Rank: {self.start_rank!r}")

    def movable(self, source: Square, target: Square, move_type: MoveType) -> bool:
        line = Direction.along(*source.delta(target))
        if line is None:
            return False
        direction, distance = line

        if move_type == MoveType.CAPTURE:
            return distance == 1 and direction in self.attack_directions

        if direction not in self.move_directions:
            return False
        return distance == 1 or (distance == 2 and source.rank is self.start_rank)
