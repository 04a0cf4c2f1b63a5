"""Composes the full four-quadrant frame as a stream of draw commands."""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, List

from starquads.config import PanelConfig
from starquads.patterns.modes import StarMode
from starquads.patterns.star import RenderRequest, star_commands
from starquads.render.surface import DrawSurface, execute
from starquads.state.commands import DrawCommand, DrawText, FillBackground

log = logging.getLogger(__name__)


def default_requests(cfg: PanelConfig) -> List[RenderRequest]:
    q = cfg.quadrant_size
    n = cfg.num_lines
    return [
        RenderRequest(0, 0, n, 0, StarMode.CLASSIC),
        RenderRequest(q, 0, n, 5, StarMode.SWIRL),
        RenderRequest(0, q, n * 2, 2, StarMode.DENSE),
        RenderRequest(q, q, n, 0, StarMode.RAINBOW),
    ]


def compose_scene(cfg: PanelConfig, requests: Iterable[RenderRequest]) -> Iterator[DrawCommand]:
    yield FillBackground(cfg.background)
    for request in requests:
        yield from star_commands(request, cfg.quadrant_size)
    yield DrawText(cfg.label_text, cfg.label_position, cfg.label_color)


def draw_star_in_quadrant(surface: DrawSurface, request: RenderRequest, quadrant_size: int) -> int:
    """Draw one star straight onto a surface."""
    return execute(star_commands(request, quadrant_size), surface)


def render_scene(surface: DrawSurface, cfg: PanelConfig, requests: Iterable[RenderRequest]) -> int:
    count = execute(compose_scene(cfg, requests), surface)
    log.info("Scene rendered: %d draw commands", count)
    return count
