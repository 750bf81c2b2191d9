"""
In-process stand-in for the document host: code block languages mapped to the function that renders them.

The host is the one that keeps a failing block from taking the rest of the document down, so that is done here.
"""

import logging
from typing import Callable

from chessdiagram.api.models import RenderRequest, RenderResponse
from chessdiagram.core.exceptions import DiagramError

log = logging.getLogger(__name__)

RenderFn = Callable[[str], str]


class CodeBlockRegistry:
    def __init__(self) -> None:
        self._renderers: dict[str, RenderFn] = {}

    def register_renderer(self, language: str, render_fn: RenderFn) -> None:
        """Registering the same language again replaces the previous renderer."""
        if language in self._renderers:
            log.info("Re-registering renderer for %r code blocks", language)
        self._renderers[language] = render_fn

    def renderer(self, language: str) -> RenderFn:
        try:
            return self._renderers[language]
        except KeyError:
            raise LookupError(f"No renderer registered for {language!r} code blocks")

    def render_block(self, request: RenderRequest) -> RenderResponse:
        """Render one block. A block that cannot be rendered gets an error message instead of a (partial) drawing."""
        render_fn = self.renderer(request.language)
        try:
            svg = render_fn(request.source)
        except DiagramError as e:
            log.warning("Could not render %r code block: %s", request.language, e)
            return RenderResponse(language=request.language, error=str(e))
        return RenderResponse(language=request.language, svg=svg)
