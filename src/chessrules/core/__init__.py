"""Core domain layer — pure chess movement rules with zero external dependencies.

Quick start::

    from chessrules.core import Color, MoveType, Pawn, Square

    pawn = Pawn(Color.WHITE)
    pawn.movable(Square.of("e2"), Square.of("e4"), MoveType.QUIET)  # True
"""

from chessrules.core.direction import ALL_DIRECTIONS, DIAGONAL, ORTHOGONAL, Direction
from chessrules.core.enums import Color, File, MoveType, PieceType, Rank
from chessrules.core.errors import (
    ChessRulesError,
    InvalidPieceColor,
    InvalidSquareFormat,
    InvalidStrategyConfiguration,
)
from chessrules.core.piece import (
    Bishop,
    BlackPawn,
    King,
    Knight,
    Pawn,
    Piece,
    Queen,
    Rook,
    WhitePawn,
    create_piece,
)
from chessrules.core.square import ALL_SQUARES, Square
from chessrules.core.strategy import (
    KNIGHT_OFFSETS,
    KnightMovable,
    LimitedMovable,
    MovableStrategy,
    PawnMovable,
    UnlimitedMovable,
)

__all__ = [
    # Enums / coordinates
    "Color",
    "File",
    "MoveType",
    "PieceType",
    "Rank",
    "Direction",
    "ALL_DIRECTIONS",
    "DIAGONAL",
    "ORTHOGONAL",
    "Square",
    "ALL_SQUARES",
    # Errors
    "ChessRulesError",
    "InvalidPieceColor",
    "InvalidSquareFormat",
    "InvalidStrategyConfiguration",
    # Strategies
    "KNIGHT_OFFSETS",
    "KnightMovable",
    "LimitedMovable",
    "MovableStrategy",
    "PawnMovable",
    "UnlimitedMovable",
    # Pieces
    "Bishop",
    "BlackPawn",
    "King",
    "Knight",
    "Pawn",
    "Piece",
    "Queen",
    "Rook",
    "WhitePawn",
    "create_piece",
]
