"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from chessdiagram.core.exceptions import ConfigurationError


# --- REQUEST MODELS ---
class SettingsUpdateRequest(BaseModel):
    """
    Values as they come out of the settings form. Every field is optional: only the changed ones are sent.
    The board width is typed as text in the form, so it may still be a string here.
    """

    white_square_color: Optional[str] = None
    black_square_color: Optional[str] = None
    board_width_px: Optional[int] = None

    @field_validator("board_width_px", mode="before")
    @classmethod
    def validate_board_width(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip()
            if not value.isdecimal():
                raise ConfigurationError(
                    f"Cannot interpret board width: {value!r} as a number of pixels."
                )
            return int(value)
        return value

    def changes(self) -> dict[str, object]:
        return self.model_dump(exclude_none=True)


class RenderRequest(BaseModel):
    language: str = "chessboard"
    source: str


# --- RESPONSE MODELS ---
class RenderResponse(BaseModel):
    language: str
    svg: Optional[str] = None
    error: Optional[str] = None
