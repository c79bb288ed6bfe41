"""Domain exceptions.

Both errors are ``ValueError`` subclasses so callers that only care about
bad input can keep catching ``ValueError``.
"""

from __future__ import annotations


class ChessRulesError(Exception):
    """Base class for all errors raised by :mod:`chessrules`."""


class InvalidSquareFormat(ChessRulesError, ValueError):
    """A textual square coordinate could not be parsed."""


class InvalidStrategyConfiguration(ChessRulesError, ValueError):
    """A movement strategy was built with unusable parameters."""


class InvalidPieceColor(ChessRulesError, ValueError):
    """A color-specific piece was constructed with the other color."""
