"""Unit tests for chessdiagram/diagram/diagram.py"""

import xml.etree.ElementTree as ET

import pytest

from chessdiagram.board.position import STARTING_POSITION_FEN
from chessdiagram.core.config import StyleConfig
from chessdiagram.core.exceptions import FenDecodeError, SquareLookupError
from chessdiagram.core.shared_types import Orientation
from chessdiagram.diagram.diagram import Diagram
from chessdiagram.notation.parser import Arrow, Highlight

STYLE = StyleConfig(
    white_square_color="#ffffff", black_square_color="#000000", board_width_px=320
)


def _classes(element: ET.Element) -> list[str]:
    return element.get("class", "").split()


def _square_rects(tree: ET.Element) -> dict[str, ET.Element]:
    """square name -> rect"""
    return {
        _classes(rect)[-1]: rect
        for rect in tree.iter("rect")
        if _classes(rect)[:1] == ["square"]
    }


@pytest.fixture
def diagram() -> Diagram:
    return Diagram.from_fen(STARTING_POSITION_FEN, STYLE)


def test_sixty_four_squares(diagram: Diagram) -> None:
    squares = _square_rects(diagram.draw())
    assert len(squares) == 64
    assert {rect.get("width") for rect in squares.values()} == {"40"}


@pytest.mark.parametrize("orientation", list(Orientation))
def test_a1_dark_h1_light(orientation: Orientation) -> None:
    diagram = Diagram.from_fen(STARTING_POSITION_FEN, STYLE, orientation)
    squares = _square_rects(diagram.draw())
    assert squares["a1"].get("fill") == STYLE.black_square_color
    assert squares["h1"].get("fill") == STYLE.white_square_color


@pytest.mark.parametrize(
    "orientation, top_left", [(Orientation.WHITE, "a8"), (Orientation.BLACK, "h1")]
)
def test_orientation_top_left_square(orientation: Orientation, top_left: str) -> None:
    diagram = Diagram.from_fen(STARTING_POSITION_FEN, STYLE, orientation)
    assert diagram.grid_coordinates(top_left) == (0, 0)
    rect = _square_rects(diagram.draw())[top_left]
    assert (rect.get("x"), rect.get("y")) == ("0", "0")


@pytest.mark.parametrize("orientation", list(Orientation))
def test_pieces_and_annotations_agree_on_squares(orientation: Orientation) -> None:
    """The white king (e1) and a highlight on e1 land on the same spot"""
    diagram = Diagram.from_fen(STARTING_POSITION_FEN, STYLE, orientation)
    diagram.highlight("e1")
    tree = diagram.draw()

    king = next(
        group for group in tree.iter("g") if _classes(group)[:3] == ["piece", "white", "king"]
    )
    highlight = next(rect for rect in tree.iter("rect") if _classes(rect)[:1] == ["highlight"])
    square = _square_rects(tree)["e1"]

    assert _classes(king)[-1] == "e1"
    assert king.get("transform", "").startswith(
        f"translate({square.get('x')}, {square.get('y')})"
    )
    assert (highlight.get("x"), highlight.get("y")) == (square.get("x"), square.get("y"))


def test_every_piece_drawn(diagram: Diagram) -> None:
    pieces = [group for group in diagram.draw().iter("g") if _classes(group)[:1] == ["piece"]]
    assert len(pieces) == 32


def test_layer_order(diagram: Diagram) -> None:
    """Squares, pieces, highlights, arrows: bottom to top"""
    layers = [_classes(child)[0] for child in diagram.draw()]
    assert layers == ["squares", "pieces", "highlights", "arrows"]


def test_highlight_drawn_before_arrow(diagram: Diagram) -> None:
    diagram.highlight("e4")
    diagram.add_arrow("e2", "e4")
    shapes = [
        _classes(element)[0]
        for element in diagram.draw().iter()
        if _classes(element)[:1] in (["highlight"], ["arrow"])
    ]
    assert shapes == ["highlight", "arrow"]


def test_annotation_order_is_kept(diagram: Diagram) -> None:
    for square in ["e4", "d5", "c6"]:
        diagram.highlight(square)
    highlights = [
        _classes(rect)[-1] for rect in diagram.draw().iter("rect") if _classes(rect)[:1] == ["highlight"]
    ]
    assert highlights == ["e4", "d5", "c6"]


def test_draw_is_idempotent(diagram: Diagram) -> None:
    diagram.highlight("e4")
    diagram.add_arrow("g1", "f3")
    diagram.add_arrow("d4", "d4")
    first = diagram.draw()
    second = diagram.draw()
    assert first is not second
    assert ET.tostring(first) == ET.tostring(second)
    assert diagram.to_svg() == diagram.to_svg()


@pytest.mark.parametrize("square", ["z9", "i1", "e0", "", "e4-e5"])
def test_unknown_squares(diagram: Diagram, square: str) -> None:
    with pytest.raises(SquareLookupError):
        diagram.highlight(square)
    with pytest.raises(SquareLookupError):
        diagram.add_arrow("e2", square)
    assert diagram.annotations == []


def test_annotate_matches_builders(diagram: Diagram) -> None:
    diagram.annotate(Highlight("e4"))
    diagram.annotate(Arrow("e2", "e4"))
    assert diagram.annotations == [Highlight("e4"), Arrow("e2", "e4")]

    with pytest.raises(SquareLookupError):
        diagram.annotate(Arrow("e2", ""))


def test_full_fen_uses_placement_only() -> None:
    diagram = Diagram.from_fen(f"{STARTING_POSITION_FEN} b KQkq - 0 1")
    assert diagram.position.to_fen() == STARTING_POSITION_FEN
    assert diagram.style == StyleConfig()
    assert diagram.orientation == Orientation.WHITE


def test_invalid_fen() -> None:
    with pytest.raises(FenDecodeError):
        Diagram.from_fen("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP")


def test_svg_viewport() -> None:
    diagram = Diagram.from_fen(STARTING_POSITION_FEN, STYLE.model_copy(update={"board_width_px": 400}))
    svg = ET.fromstring(diagram.to_svg())
    assert svg.tag == "{http://www.w3.org/2000/svg}svg"
    assert svg.get("width") == "400"
    assert svg.get("height") == "400"
    assert svg.get("viewBox") == "0 0 400 400"
