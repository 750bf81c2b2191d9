"""
Exceptions raised across layers.

Everything that goes wrong while turning the source text of a code block into a diagram derives from DiagramError,
so the code block host can isolate a single failing block without catching unrelated errors.
"""


class DiagramError(Exception):
    """Base class: the source text of one code block could not be turned into a diagram."""


class NotationError(DiagramError):
    """A directive line could not be interpreted (ex. an unknown orientation)."""


class FenDecodeError(DiagramError):
    """The FEN ranks string does not describe an 8x8 board."""


class SquareLookupError(DiagramError):
    """A square name does not exist on the board."""


class ConfigurationError(ValueError):
    """Invalid style configuration value."""


class RepositoryError(Exception):
    """Settings could not be read from / written to persistence."""
