"""
Emits the SVG shapes of a diagram.

Layers are drawn bottom to top: squares, pieces, highlights, arrows. Within the annotation layers the order of the annotations is kept.
Piece artwork is the 45x45 set that ships with python-chess (`chess.svg.PIECES`).
"""

import xml.etree.ElementTree as ET

import chess.svg

from chessdiagram.board.pieces import Piece
from chessdiagram.board.position import Position
from chessdiagram.board.square import Square, all_squares
from chessdiagram.diagram.layout import BoardLayout, Point

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
PIECE_ARTWORK_SIZE = 45

HIGHLIGHT_COLOR = "#15781b"
HIGHLIGHT_OPACITY = "0.5"
ARROW_COLOR = "#15781b"
ARROW_OPACITY = "0.8"
# ring drawn for an arrow that starts and ends on the same square
RING_RADIUS = 0.45
RING_STROKE_WIDTH = 0.08


def fmt(value: float) -> str:
    """Deterministic number formatting: at most 2 decimals, no trailing zeros, no negative zero"""
    return f"{round(value, 2) + 0.0:.2f}".rstrip("0").rstrip(".")


def draw_squares(layout: BoardLayout, light_color: str, dark_color: str) -> ET.Element:
    group = ET.Element("g", {"class": "squares"})
    size = fmt(layout.square_size)
    for square in all_squares():
        row, column = layout.grid_coordinates(square)
        x, y = layout.square_origin(row, column)
        shade = "dark" if layout.is_dark(row, column) else "light"
        ET.SubElement(
            group,
            "rect",
            {
                "class": f"square {shade} {square}",
                "x": fmt(x),
                "y": fmt(y),
                "width": size,
                "height": size,
                "fill": dark_color if shade == "dark" else light_color,
            },
        )
    return group


def draw_pieces(layout: BoardLayout, position: Position) -> ET.Element:
    group = ET.Element("g", {"class": "pieces"})
    for square, piece in position.occupied():
        group.append(piece_glyph(layout, square, piece))
    return group


def piece_glyph(layout: BoardLayout, square: Square, piece: Piece) -> ET.Element:
    """The artwork, translated to the top left corner of the square and scaled to fill it"""
    x, y = layout.square_origin(*layout.grid_coordinates(square))
    scale = layout.square_size / PIECE_ARTWORK_SIZE
    wrapper = ET.Element(
        "g",
        {
            "class": f"piece {piece.color} {piece.type} {square}",
            "transform": f"translate({fmt(x)}, {fmt(y)}) scale({scale:.6g})",
        },
    )
    artwork = ET.fromstring(chess.svg.PIECES[piece.to_fen()])
    # the same glyph can appear on several squares, ids would no longer be unique
    artwork.attrib.pop("id", None)
    wrapper.append(artwork)
    return wrapper


def draw_highlight(layout: BoardLayout, square: Square) -> ET.Element:
    x, y = layout.square_origin(*layout.grid_coordinates(square))
    size = fmt(layout.square_size)
    return ET.Element(
        "rect",
        {
            "class": f"highlight {square}",
            "x": fmt(x),
            "y": fmt(y),
            "width": size,
            "height": size,
            "fill": HIGHLIGHT_COLOR,
            "fill-opacity": HIGHLIGHT_OPACITY,
        },
    )


def draw_arrow(layout: BoardLayout, start: Square, end: Square) -> ET.Element:
    if start == end:
        cx, cy = layout.square_center(start)
        return ET.Element(
            "circle",
            {
                "class": f"arrow {start} {end}",
                "cx": fmt(cx),
                "cy": fmt(cy),
                "r": fmt(RING_RADIUS * layout.square_size),
                "fill": "none",
                "stroke": ARROW_COLOR,
                "stroke-width": fmt(RING_STROKE_WIDTH * layout.square_size),
                "opacity": ARROW_OPACITY,
            },
        )

    return ET.Element(
        "polygon",
        {
            "class": f"arrow {start} {end}",
            "points": _points(layout.arrow_outline(start, end)),
            "fill": ARROW_COLOR,
            "opacity": ARROW_OPACITY,
        },
    )


def _points(points: list[Point]) -> str:
    return " ".join(f"{fmt(x)},{fmt(y)}" for x, y in points)


def svg_viewport(content: ET.Element, board_width: int) -> ET.Element:
    """Square viewport of the configured width, the way the diagram gets embedded in a document"""
    svg = ET.Element(
        "svg",
        {
            "xmlns": SVG_NAMESPACE,
            "viewBox": f"0 0 {board_width} {board_width}",
            "width": str(board_width),
            "height": str(board_width),
            "style": "display: block",
        },
    )
    svg.append(content)
    return svg


def to_string(element: ET.Element) -> str:
    return ET.tostring(element, encoding="unicode")
