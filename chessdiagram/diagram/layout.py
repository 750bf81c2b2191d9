"""
Pixel geometry of the board.

Row 0 / column 0 is always the top left corner of the drawing. Orientation only changes which square ends up there.
"""

import math
from dataclasses import dataclass

from chessdiagram.board.square import BOARD_DIMENSIONS, Square
from chessdiagram.core.shared_types import Orientation

Point = tuple[float, float]

# Arrow proportions, relative to the side of a square
ARROW_SHAFT_WIDTH = 0.18
ARROW_HEAD_WIDTH = 0.45
ARROW_HEAD_HEIGHT = 0.35
# short arrows (neighbouring squares) get a smaller head so the shaft stays visible
SHORT_ARROW_LENGTH = 1.2
SHORT_ARROW_HEAD_WIDTH = 0.4
SHORT_ARROW_HEAD_HEIGHT = 0.3


@dataclass(frozen=True)
class BoardLayout:
    board_width: float
    orientation: Orientation

    @property
    def square_size(self) -> float:
        return self.board_width / BOARD_DIMENSIONS[0]

    def grid_coordinates(self, square: Square) -> tuple[int, int]:
        """(row, column) of the square in the drawing.

        White: a -> column 0, rank 8 -> row 0. Black flips both axes, so h1 ends up in the top left corner.
        """
        num_files, num_ranks = BOARD_DIMENSIONS
        column = square.file - 1
        row = num_ranks - square.rank
        if self.orientation == Orientation.BLACK:
            return num_ranks - 1 - row, num_files - 1 - column
        return row, column

    def square_origin(self, row: int, column: int) -> Point:
        """Top left corner of the square at (row, column)"""
        return column * self.square_size, row * self.square_size

    def square_center(self, square: Square) -> Point:
        x, y = self.square_origin(*self.grid_coordinates(square))
        half = self.square_size / 2
        return x + half, y + half

    @staticmethod
    def is_dark(row: int, column: int) -> bool:
        """Parity on the drawn grid: the bottom left corner (a1 for white, h8 for black) is always dark."""
        return (row + column) % 2 == 1

    def arrow_outline(self, start: Square, end: Square) -> list[Point]:
        """
        Outline of an arrow from the center of `start` to the center of `end`.

        The shaft stops at the "neck", a head height before the tip, and the head is the triangle neck -> tip.
        `start` and `end` must be different squares.
        Points run: tail (right side), neck (right side), head (right), tip, head (left), neck (left), tail (left).
        """
        size = self.square_size
        tail_x, tail_y = self.square_center(start)
        tip_x, tip_y = self.square_center(end)
        dx, dy = tip_x - tail_x, tip_y - tail_y
        length = math.hypot(dx, dy)

        head_width, head_height = ARROW_HEAD_WIDTH * size, ARROW_HEAD_HEIGHT * size
        if length < SHORT_ARROW_LENGTH * size:
            head_width = SHORT_ARROW_HEAD_WIDTH * size
            head_height = SHORT_ARROW_HEAD_HEIGHT * size

        # unit vectors along and perpendicular to the arrow
        ux, uy = dx / length, dy / length
        px, py = -uy, ux
        neck_x, neck_y = tip_x - ux * head_height, tip_y - uy * head_height

        shaft = ARROW_SHAFT_WIDTH * size / 2
        head = head_width / 2
        return [
            (tail_x - px * shaft, tail_y - py * shaft),
            (neck_x - px * shaft, neck_y - py * shaft),
            (neck_x - px * head, neck_y - py * head),
            (tip_x, tip_y),
            (neck_x + px * head, neck_y + py * head),
            (neck_x + px * shaft, neck_y + py * shaft),
            (tail_x + px * shaft, tail_y + py * shaft),
        ]
