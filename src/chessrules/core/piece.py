"""Piece hierarchy.

Each concrete kind pairs a :class:`Color` with one shared, immutable
:class:`MovableStrategy`. Pawns are split per color into :class:`WhitePawn`
and :class:`BlackPawn`; ``Pawn(color)`` picks the right one.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import ClassVar, NoReturn

from chessrules.core.direction import ALL_DIRECTIONS, DIAGONAL, ORTHOGONAL, Direction
from chessrules.core.enums import Color, MoveType, PieceType, Rank
from chessrules.core.errors import InvalidPieceColor
from chessrules.core.square import Square
from chessrules.core.strategy import (
    KnightMovable,
    LimitedMovable,
    MovableStrategy,
    PawnMovable,
    UnlimitedMovable,
)

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

# Shared strategies; immutable, so one instance per rule is enough.
KING_STRATEGY = LimitedMovable(ALL_DIRECTIONS, max_steps=1)
QUEEN_STRATEGY = UnlimitedMovable(ALL_DIRECTIONS)
ROOK_STRATEGY = UnlimitedMovable(ORTHOGONAL)
BISHOP_STRATEGY = UnlimitedMovable(DIAGONAL)
KNIGHT_STRATEGY = KnightMovable()
WHITE_PAWN_STRATEGY = PawnMovable(
    move_directions=frozenset((Direction.N,)),
    attack_directions=frozenset((Direction.NE, Direction.NW)),
    start_rank=Rank.TWO,
)
BLACK_PAWN_STRATEGY = PawnMovable(
    move_directions=frozenset((Direction.S,)),
    attack_directions=frozenset((Direction.SE, Direction.SW)),
    start_rank=Rank.SEVEN,
)


class Piece(ABC):
    """Immutable chess piece: a color plus the movement rule of its kind."""

    __slots__ = ("_color",)

    piece_type: ClassVar[PieceType]
    strategy: ClassVar[MovableStrategy]

    def __init__(self, color: Color) -> None:
        object.__setattr__(self, "_color", Color(color))

    @property
    def color(self) -> Color:
        return self._color

    # ── Rules ────────────────────────────────────────────────────────────

    def movable(self, source: Square, target: Square, move_type: MoveType) -> bool:
        """Whether this piece may geometrically move ``source → target``.

        Occupancy is not considered; the board layer checks paths.
        """
        return self.strategy.movable(source, target, move_type)

    def targets(self, source: Square, move_type: MoveType) -> Iterator[Square]:
        """All squares this piece could reach from *source* on an empty board."""
        return self.strategy.targets(source, move_type)

    @abstractmethod
    def point_value(self) -> float:
        """Material value used for scoring."""

    # ── Serialisation ────────────────────────────────────────────────────

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return create_piece(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self._color, self.piece_type)]

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self._color, self.piece_type)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(Color.{self._color.name})"

    # ── Value semantics ──────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return type(self) is type(other) and self._color is other._color

    def __hash__(self) -> int:
        return hash((self.piece_type, self._color))

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[Piece], tuple[Color]]:
        return type(self), (self._color,)


class King(Piece):
    __slots__ = ()
    piece_type = PieceType.KING
    strategy = KING_STRATEGY

    def point_value(self) -> float:
        return 0.0


class Queen(Piece):
    __slots__ = ()
    piece_type = PieceType.QUEEN
    strategy = QUEEN_STRATEGY

    def point_value(self) -> float:
        return 9.0


class Rook(Piece):
    __slots__ = ()
    piece_type = PieceType.ROOK
    strategy = ROOK_STRATEGY

    def point_value(self) -> float:
        return 5.0


class Bishop(Piece):
    __slots__ = ()
    piece_type = PieceType.BISHOP
    strategy = BISHOP_STRATEGY

    def point_value(self) -> float:
        return 3.0


class Knight(Piece):
    __slots__ = ()
    piece_type = PieceType.KNIGHT
    strategy = KNIGHT_STRATEGY

    def point_value(self) -> float:
        return 2.5


class Pawn(Piece):
    """Common base of the per-color pawns.

    ``Pawn(color)`` returns a :class:`WhitePawn` or :class:`BlackPawn`.
    """

    __slots__ = ()
    piece_type = PieceType.PAWN

    def __new__(cls, color: Color | None = None) -> Pawn:
        if cls is not Pawn:
            return super().__new__(cls)
        if color is None:
            raise TypeError("Pawn() requires a color")
        return super().__new__(BlackPawn if Color(color).is_black() else WhitePawn)

    def point_value(self) -> float:
        return 1.0


class WhitePawn(Pawn):
    __slots__ = ()
    strategy = WHITE_PAWN_STRATEGY

    def __init__(self, color: Color = Color.WHITE) -> None:
        if Color(color) is not Color.WHITE:
            raise InvalidPieceColor(f"WhitePawn cannot be {color!r}")
        super().__init__(color)


class BlackPawn(Pawn):
    __slots__ = ()
    strategy = BLACK_PAWN_STRATEGY

    def __init__(self, color: Color = Color.BLACK) -> None:
        if Color(color) is not Color.BLACK:
            raise InvalidPieceColor(f"BlackPawn cannot be {color!r}")
        super().__init__(color)


_PIECE_CLASSES: dict[PieceType, type[Piece]] = {
    PieceType.PAWN: Pawn,
    PieceType.KNIGHT: Knight,
    PieceType.BISHOP: Bishop,
    PieceType.ROOK: Rook,
    PieceType.QUEEN: Queen,
    PieceType.KING: King,
}


def create_piece(color: Color, piece_type: PieceType) -> Piece:
    """Build the piece of *piece_type* for *color*."""
    return _PIECE_CLASSES[PieceType(piece_type)](color)
