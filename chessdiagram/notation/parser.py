"""
Parser for the source text of a `chessboard` code block.

<fen-ranks-string>            (optionally prefixed "fen: ")
[orientation: white|black]
[annotations: <token> <token> ...]

Annotation tokens are `H<square>` (highlight) or `A<square>-<square>` (arrow).
Tokens with any other leading character, and lines without a recognized prefix, are dropped without an error.
Square names are not checked here; that happens when the annotations are put on a Diagram.
"""

import logging
import re
from dataclasses import dataclass, field

from chessdiagram.core.exceptions import NotationError
from chessdiagram.core.shared_types import Orientation

log = logging.getLogger(__name__)

FEN_PREFIX = "fen: "
ORIENTATION_PREFIX = "orientation: "
ANNOTATIONS_PREFIX = "annotations: "

HIGHLIGHT_TAG = "H"
ARROW_TAG = "A"


@dataclass(frozen=True)
class Highlight:
    square: str


@dataclass(frozen=True)
class Arrow:
    start: str
    end: str


Annotation = Highlight | Arrow


@dataclass
class ParsedNotation:
    fen: str
    orientation: Orientation = Orientation.WHITE
    annotations: list[Annotation] = field(default_factory=list)


def parse_notation(source: str) -> ParsedNotation:
    """First line is the position, every other line is an (optional) directive."""
    lines = re.split(r"\r?\n", source)

    fen = lines[0]
    if fen.startswith(FEN_PREFIX):
        fen = fen.removeprefix(FEN_PREFIX)

    parsed = ParsedNotation(fen)
    for line in lines[1:]:
        if line.strip() == "":
            continue
        if line.startswith(ORIENTATION_PREFIX):
            parsed.orientation = parse_orientation(line.removeprefix(ORIENTATION_PREFIX))
        elif line.startswith(ANNOTATIONS_PREFIX):
            parsed.annotations.extend(
                parse_annotations(line.removeprefix(ANNOTATIONS_PREFIX))
            )
        else:
            log.debug("Ignoring unrecognized line: %r", line)

    log.debug(
        "Parsed notation: fen=%r orientation=%s annotations=%d",
        parsed.fen,
        parsed.orientation,
        len(parsed.annotations),
    )
    return parsed


def parse_orientation(value: str) -> Orientation:
    """Only the exact (lower case) spellings are accepted"""
    value = value.strip()
    if value not in (Orientation.WHITE.value, Orientation.BLACK.value):
        raise NotationError(f"Unknown orientation {value!r}")
    return Orientation(value)


def parse_annotations(value: str) -> list[Annotation]:
    """Tokens are separated by single spaces. Empty tokens (double spaces) are skipped."""
    annotations: list[Annotation] = []
    for token in value.split(" "):
        if not token:
            continue
        annotation = parse_annotation_token(token)
        if annotation is None:
            log.debug("Ignoring unrecognized annotation token: %r", token)
            continue
        annotations.append(annotation)
    return annotations


def parse_annotation_token(token: str) -> Annotation | None:
    tag, body = token[0], token[1:]
    if tag == HIGHLIGHT_TAG:
        return Highlight(body)
    if tag == ARROW_TAG:
        # anything after a second dash is dropped: Ae2-e4-e6 is e2 -> e4
        start, end, *_ = body.split("-") + [""]
        return Arrow(start, end)
    return None
