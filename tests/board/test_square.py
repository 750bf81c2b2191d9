"""Unit tests for chessdiagram/board/square.py"""

from string import ascii_lowercase

import pytest

from chessdiagram.board.square import BOARD_DIMENSIONS, Square, all_squares
from chessdiagram.core.exceptions import SquareLookupError


@pytest.mark.parametrize(
    "file, rank, notation",
    [
        (file, rank, f"{ascii_lowercase[file - 1]}{rank}")
        for file in range(1, 9)
        for rank in range(1, 9)
    ],
)
def test_creating_from_algebraic(file: int, rank: int, notation: str) -> None:
    """Simply checks if the notation for 'a1' indeed maps to file 1, rank 1, etc."""
    square = Square.from_algebraic(notation)
    assert square.file == file
    assert square.rank == rank
    assert square.to_algebraic() == notation
    assert str(square) == notation


@pytest.mark.parametrize("notation", ["i1", "a9", "a0", "z9", "e", "e44", "", "E4", "4e", "e\u0664", "e\uff14"])
def test_unknown_square_names(notation: str) -> None:
    """Anything outside a1 - h8 is a lookup error"""
    with pytest.raises(SquareLookupError, match="Unknown square"):
        Square.from_algebraic(notation)


def test_square_within_bounds() -> None:
    for file in range(1, BOARD_DIMENSIONS[0] + 1):
        for rank in range(1, BOARD_DIMENSIONS[1] + 1):
            assert Square(file, rank).is_within_bounds()

    assert not Square(BOARD_DIMENSIONS[0] + 1, BOARD_DIMENSIONS[1] + 1).is_within_bounds()
    assert not Square(-1, -1).is_within_bounds()


def test_all_squares_in_fen_reading_order() -> None:
    squares = all_squares()
    assert len(squares) == 64
    assert len(set(squares)) == 64
    assert squares[0] == Square.from_algebraic("a8")
    assert squares[7] == Square.from_algebraic("h8")
    assert squares[-1] == Square.from_algebraic("h1")
