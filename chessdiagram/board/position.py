"""
The configuration of pieces on the board. The part of a FEN string that describes piece placement.
"""

from dataclasses import dataclass
from string import digits
from typing import Optional, Self

from chessdiagram.board.pieces import Piece
from chessdiagram.board.square import BOARD_DIMENSIONS, Square, all_squares
from chessdiagram.core.exceptions import FenDecodeError

STARTING_POSITION_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


@dataclass(frozen=True)
class Position:
    squares: dict[Square, Optional[Piece]]

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a position using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank, starting with rook on a8, knight on b8, etc.
        * pawns cover 7th rank entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        * 1st rank are the white pieces. Again, left-to-right reads a1-h1.

        Anything that does not add up to exactly 8 ranks of 8 squares is rejected.
        """
        num_files, num_ranks = BOARD_DIMENSIONS
        fen_by_ranks = fen_str.split("/")
        if len(fen_by_ranks) != num_ranks:
            raise FenDecodeError(
                f"Expected {num_ranks} ranks separated by '/', got {len(fen_by_ranks)}: {fen_str!r}"
            )

        squares: dict[Square, Optional[Piece]] = {}
        for rank_idx, fen_one_rank in enumerate(fen_by_ranks):
            # FEN string is read from top rank (8th) to bottom rank (1st)
            rank = num_ranks - rank_idx
            # ... but the first character is the a-file, so reads in normal direction
            file = 1
            for character in fen_one_rank:
                if character in digits:
                    # A number denotes the amount of empty squares after each other
                    for _ in range(int(character)):
                        squares[Square(file, rank)] = None
                        file += 1
                else:
                    try:
                        squares[Square(file, rank)] = Piece.from_fen(character)
                    except FenDecodeError as e:
                        raise FenDecodeError(f"{e} on rank {rank}: {fen_one_rank!r}") from e
                    file += 1

            # make sure you are creating a correctly sized board
            if file - 1 != num_files:
                raise FenDecodeError(
                    f"Rank {rank} describes {file - 1} squares instead of {num_files}: {fen_one_rank!r}"
                )
        return cls(squares)

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_POSITION_FEN)

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(
            self._rank_to_fen(rank) for rank in range(BOARD_DIMENSIONS[1], 0, -1)
        )

    def _rank_to_fen(self, rank: int) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for file in range(1, BOARD_DIMENSIONS[0] + 1):
            piece = self.piece(Square(file, rank))

            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece(self, square: Square) -> Optional[Piece]:
        return self.squares[square]

    def occupied(self) -> list[tuple[Square, Piece]]:
        """Occupied squares in FEN reading order (a8 first, h1 last)"""
        return [
            (square, piece)
            for square in all_squares()
            if (piece := self.squares[square]) is not None
        ]

    def empty_squares(self) -> list[Square]:
        return [square for square in all_squares() if self.squares[square] is None]
