"""chessrules — geometric move legality for chess pieces."""

__version__ = "0.1.0"
