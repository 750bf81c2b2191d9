"""Orchestration from the host (code blocks, settings form) to the notation, diagram and persistence layers."""

import logging
from typing import Protocol

from chessdiagram.api.models import SettingsUpdateRequest
from chessdiagram.core.config import StyleConfig
from chessdiagram.db.repository import SettingsRepository
from chessdiagram.diagram.diagram import Diagram
from chessdiagram.notation.parser import parse_notation
from chessdiagram.services.registry import RenderFn

log = logging.getLogger(__name__)

CODE_BLOCK_LANGUAGE = "chessboard"


class RendererRegistry(Protocol):
    def register_renderer(self, language: str, render_fn: RenderFn) -> None: ...


class ChessboardPlugin:
    """Plugin lifecycle: load settings once, register the renderer, re-register whenever a setting changes."""

    def __init__(
        self, repository: SettingsRepository, registry: RendererRegistry
    ) -> None:
        self.repo = repository
        self.registry = registry
        self.config = StyleConfig()

    def load(self) -> None:
        """Called once at startup."""
        stored = self.repo.load_config()
        if stored is None:
            log.info("No stored settings, using defaults")
        self.config = stored or StyleConfig()
        self._register()

    def update_settings(self, request: SettingsUpdateRequest) -> StyleConfig:
        """Apply the changed values, store them and make sure later renders pick them up."""
        updated = StyleConfig.model_validate(
            self.config.model_dump() | request.changes()
        )
        # only go live once the change is stored
        self.repo.save_config(updated)
        self.config = updated
        log.info("Settings changed: %s", request.changes())
        self._register()
        return self.config

    def render(self, source: str) -> str:
        """Source text of one code block -> SVG markup, with the current settings"""
        return render_source(source, self.config)

    def _register(self) -> None:
        log.info("Registering renderer for %r code blocks", CODE_BLOCK_LANGUAGE)
        self.registry.register_renderer(CODE_BLOCK_LANGUAGE, self._make_renderer())

    def _make_renderer(self) -> RenderFn:
        """Renderer bound to the configuration at registration time"""
        config = self.config
        return lambda source: render_source(source, config)


def render_source(source: str, config: StyleConfig) -> str:
    """Parse, build the diagram, put the annotations on it in order and draw it"""
    parsed = parse_notation(source)
    diagram = Diagram.from_fen(parsed.fen, config, parsed.orientation)
    for annotation in parsed.annotations:
        diagram.annotate(annotation)
    return diagram.to_svg()
