"""
Engine: owns pygame setup, drawing the frame once and the idle window loop.

Nothing animates. The frame is drawn a single time into a logical surface
and the window only re-presents it until the user closes it.
"""
from __future__ import annotations

import logging
from typing import List, Optional

import pygame

from starquads.config import PanelConfig
from starquads.patterns.star import RenderRequest
from starquads.render.pygame_surface import PygameSurface
from starquads.scene import render_scene

log = logging.getLogger(__name__)


class Engine:
    def __init__(self, cfg: PanelConfig, requests: List[RenderRequest]) -> None:
        pygame.init()
        self.cfg = cfg
        self.requests = requests
        size = (cfg.panel_size, cfg.panel_size)
        self.canvas = PygameSurface(pygame.Surface(size), cfg.font_name, cfg.font_size)
        self.display: Optional[pygame.Surface] = None
        self.running = False

    def draw(self) -> int:
        return render_scene(self.canvas, self.cfg, self.requests)

    def save(self, path: str) -> None:
        """Render off-screen and write the frame to an image file."""
        try:
            self.draw()
            self.canvas.save(path)
            log.info("Saved frame to %s", path)
        finally:
            self.teardown()

    def run(self) -> None:
        try:
            self.display = pygame.display.set_mode((self.cfg.panel_size, self.cfg.panel_size))
            pygame.display.set_caption(self.cfg.caption)
            self.draw()
            self.present()
            log.info("Window open (%dx%d)", self.cfg.panel_size, self.cfg.panel_size)
            self.running = True
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type in (pygame.VIDEOEXPOSE, pygame.WINDOWEXPOSED):
                        self.present()
                pygame.time.wait(self.cfg.delay_ms)
        finally:
            self.teardown()

    def present(self) -> None:
        if self.display is None:
            return
        self.display.blit(self.canvas.target, (0, 0))
        pygame.display.flip()

    def teardown(self) -> None:
        log.debug("Shutting down pygame")
        pygame.quit()
