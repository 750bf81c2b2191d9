"""
The render-ready unit: a position, the annotations drawn on top of it, the orientation and the style.

Annotations can only be appended, and they are drawn in the order they were added.
Drawing does not change the diagram, so calling `draw()` twice gives two identical (but independent) trees.
"""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Self, assert_never

from chessdiagram.board.position import Position
from chessdiagram.board.square import Square
from chessdiagram.core.config import StyleConfig
from chessdiagram.core.shared_types import Orientation
from chessdiagram.diagram import render
from chessdiagram.diagram.layout import BoardLayout
from chessdiagram.notation.parser import Annotation, Arrow, Highlight

log = logging.getLogger(__name__)


@dataclass
class Diagram:
    position: Position
    style: StyleConfig = field(default_factory=StyleConfig)
    orientation: Orientation = Orientation.WHITE
    annotations: list[Annotation] = field(default_factory=list)

    @classmethod
    def from_fen(
        cls,
        fen: str,
        style: StyleConfig | None = None,
        orientation: Orientation = Orientation.WHITE,
    ) -> Self:
        """Only the piece placement (first field) of the FEN string is used. Side to move, castling etc. are ignored."""
        placement = fen.strip().split(" ")[0]
        return cls(Position.from_fen(placement), style or StyleConfig(), orientation)

    @property
    def layout(self) -> BoardLayout:
        return BoardLayout(self.style.board_width_px, self.orientation)

    def grid_coordinates(self, square_name: str) -> tuple[int, int]:
        """(row, column) where the square gets drawn. Raises SquareLookupError for squares not on the board."""
        return self.layout.grid_coordinates(Square.from_algebraic(square_name))

    # --- append-only builders ---
    def highlight(self, square: str) -> None:
        Square.from_algebraic(square)
        self.annotations.append(Highlight(square))

    def add_arrow(self, start: str, end: str) -> None:
        Square.from_algebraic(start)
        Square.from_algebraic(end)
        self.annotations.append(Arrow(start, end))

    def annotate(self, annotation: Annotation) -> None:
        """Same as calling the builder that corresponds to the annotation"""
        match annotation:
            case Highlight(square=square):
                self.highlight(square)
            case Arrow(start=start, end=end):
                self.add_arrow(start, end)
            case _:
                assert_never(annotation)

    # --- rendering ---
    def draw(self) -> ET.Element:
        """Fresh shape tree: squares, pieces, highlights, arrows (bottom to top)."""
        layout = self.layout
        log.debug(
            "Drawing %dpx board (%s orientation) with %d annotations",
            self.style.board_width_px,
            self.orientation,
            len(self.annotations),
        )

        board = ET.Element("g", {"class": "chessboard"})
        board.append(
            render.draw_squares(
                layout, self.style.white_square_color, self.style.black_square_color
            )
        )
        board.append(render.draw_pieces(layout, self.position))

        highlights = ET.SubElement(board, "g", {"class": "highlights"})
        arrows = ET.SubElement(board, "g", {"class": "arrows"})
        for annotation in self.annotations:
            match annotation:
                case Highlight(square=square):
                    highlights.append(
                        render.draw_highlight(layout, Square.from_algebraic(square))
                    )
                case Arrow(start=start, end=end):
                    arrows.append(
                        render.draw_arrow(
                            layout,
                            Square.from_algebraic(start),
                            Square.from_algebraic(end),
                        )
                    )
                case _:
                    assert_never(annotation)
        return board

    def to_svg(self) -> str:
        """The drawing wrapped in a viewport of the configured board width, serialized"""
        return render.to_string(
            render.svg_viewport(self.draw(), self.style.board_width_px)
        )
