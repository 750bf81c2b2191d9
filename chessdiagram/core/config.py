"""
Style configuration consumed by the renderer.

The field aliases are the keys of the persisted settings blob, so dumping with `by_alias=True` gives back exactly the stored schema.
"""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chessdiagram.core.exceptions import ConfigurationError

DEFAULT_WHITE_SQUARE_COLOR = "#f0d9b5"
DEFAULT_BLACK_SQUARE_COLOR = "#b58862"
DEFAULT_BOARD_WIDTH_PX = 320


class StyleConfig(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    white_square_color: str = Field(
        default=DEFAULT_WHITE_SQUARE_COLOR, alias="whiteSquareColor"
    )
    black_square_color: str = Field(
        default=DEFAULT_BLACK_SQUARE_COLOR, alias="blackSquareColor"
    )
    board_width_px: int = Field(default=DEFAULT_BOARD_WIDTH_PX, alias="boardWidthPx")

    @field_validator("white_square_color", "black_square_color")
    @classmethod
    def validate_color(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ConfigurationError("Square color cannot be empty.")
        return value

    @field_validator("board_width_px")
    @classmethod
    def validate_width(cls, value: int) -> int:
        if value <= 0:
            raise ConfigurationError(
                f"Board width must be a positive number of pixels, got {value!r}."
            )
        return value

    @classmethod
    def from_blob(cls, blob: dict[str, Any] | None) -> Self:
        """Absence of persisted data falls back to the defaults (so do missing keys)."""
        return cls.model_validate(blob or {})

    def to_blob(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
