"""Core enumerations for the coordinate model."""

from __future__ import annotations

from enum import IntEnum

from chessrules.core.errors import InvalidSquareFormat


class File(IntEnum):
    """Board column, a–h."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    @classmethod
    def parse(cls, letter: str) -> File:
        """Parse a file letter, e.g. 'e' or 'E' → File.E."""
        if len(letter) != 1 or letter.upper() not in cls.__members__:
            raise InvalidSquareFormat(f"Invalid file letter: {letter!r}")
        return cls[letter.upper()]

    @property
    def letter(self) -> str:
        return self.name.lower()

    def __str__(self) -> str:
        return self.letter


class Rank(IntEnum):
    """Board row, 1–8."""

    ONE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7

    @classmethod
    def parse(cls, digit: str) -> Rank:
        """Parse a rank digit, e.g. '4' → Rank.FOUR."""
        if len(digit) != 1 or digit not in "12345678":
            raise InvalidSquareFormat(f"Invalid rank digit: {digit!r}")
        return cls(int(digit) - 1)

    @property
    def number(self) -> int:
        return self.value + 1

    def __str__(self) -> str:
        return str(self.number)


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def is_black(self) -> bool:
        return self is Color.BLACK

    def is_white(self) -> bool:
        return self is Color.WHITE

    def __str__(self) -> str:
        return self.name.lower()


class MoveType(IntEnum):
    """Intent of a move: plain relocation or capture."""

    QUIET = 0
    CAPTURE = 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6
