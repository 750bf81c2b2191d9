"""
Type definitions used across layers
"""

from enum import StrEnum


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


class Orientation(StrEnum):
    """Which side of the board is drawn at the bottom. Values are also the spelling used in the notation."""

    WHITE = "white"
    BLACK = "black"
