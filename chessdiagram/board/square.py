"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase, digits

from chessdiagram.core.exceptions import SquareLookupError

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)

FILE_NAMES = ascii_lowercase[: BOARD_DIMENSIONS[0]]


@dataclass(frozen=True)
class Square:
    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (1,1) - (8,8). Anything else is not on the board."""
        if len(sq) != 2 or sq[0] not in FILE_NAMES or sq[1] not in digits:
            raise SquareLookupError(f"Unknown square: {sq!r}")

        square = cls(FILE_NAMES.index(sq[0]) + 1, int(sq[1]))
        if not square.is_within_bounds():
            raise SquareLookupError(f"Unknown square: {sq!r}")
        return square

    def to_algebraic(self) -> str:
        return f"{chr(self.file + ord('a') - 1)}{self.rank}"

    def is_within_bounds(self) -> bool:
        return (1 <= self.file <= BOARD_DIMENSIONS[0]) and (
            1 <= self.rank <= BOARD_DIMENSIONS[1]
        )

    def __str__(self) -> str:
        return self.to_algebraic()


def all_squares() -> list[Square]:
    """Every square, in FEN reading order: a8 - h8, a7 - h7, ..., a1 - h1"""
    num_files, num_ranks = BOARD_DIMENSIONS
    return [
        Square(file, rank)
        for rank in range(num_ranks, 0, -1)
        for file in range(1, num_files + 1)
    ]
