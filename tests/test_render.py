"""Surfaces: command execution and the pygame backend (headless)."""

from __future__ import annotations

import pygame
import pytest

from starquads.engine import Engine
from starquads.render.pygame_surface import PygameSurface
from starquads.render.surface import RecordingSurface, execute
from starquads.scene import default_requests
from starquads.state.commands import DrawLine, LineSegment, SetColor


@pytest.fixture
def pg():
    pygame.init()
    yield
    pygame.quit()


def test_execute_rejects_unknown_commands() -> None:
    with pytest.raises(TypeError):
        execute([object()], RecordingSurface())


def test_color_is_set_before_lines_are_drawn() -> None:
    surface = RecordingSurface()
    execute([SetColor((1, 2, 3)), DrawLine(LineSegment((0, 0), (5, 5)))], surface)
    assert surface.calls == [("set_color", (1, 2, 3)), ("draw_line", 0, 0, 5, 5)]


def test_pygame_surface_draws_in_current_color(pg) -> None:
    surface = PygameSurface(pygame.Surface((20, 20)))
    surface.fill((0, 0, 0))
    surface.set_color((255, 0, 255))
    surface.draw_line(0, 5, 19, 5)
    assert tuple(surface.target.get_at((10, 5)))[:3] == (255, 0, 255)
    assert tuple(surface.target.get_at((10, 15)))[:3] == (0, 0, 0)


def test_pygame_surface_draws_text(pg) -> None:
    surface = PygameSurface(pygame.Surface((200, 60)))
    surface.fill((0, 0, 0))
    surface.set_color((255, 255, 255))
    surface.draw_text("Hello", 10, 40)
    lit = [
        (x, y)
        for x in range(200)
        for y in range(60)
        if tuple(surface.target.get_at((x, y)))[:3] != (0, 0, 0)
    ]
    assert lit
    assert min(x for x, _ in lit) >= 10


def test_engine_draws_frame(cfg) -> None:
    engine = Engine(cfg, default_requests(cfg))
    try:
        engine.draw()
        target = engine.canvas.target
        assert target.get_size() == (600, 600)
        # first classic arm runs down the top-left quadrant's center column
        assert tuple(target.get_at((150, 75)))[:3] == (255, 0, 255)
        assert tuple(target.get_at((3, 3)))[:3] == (0, 0, 0)
    finally:
        engine.teardown()


def test_engine_save_writes_image(cfg, tmp_path) -> None:
    out = tmp_path / "frame.png"
    Engine(cfg, default_requests(cfg)).save(str(out))
    assert out.exists()
    assert out.stat().st_size > 0


def test_engine_run_polls_until_window_closed(cfg, monkeypatch) -> None:
    polls = []
    waits = []

    def fake_get():
        polls.append(1)
        return [pygame.event.Event(pygame.QUIT)] if len(polls) == 3 else []

    monkeypatch.setattr(pygame.event, "get", fake_get)
    monkeypatch.setattr(pygame.time, "wait", waits.append)

    engine = Engine(cfg, default_requests(cfg))
    engine.run()

    assert len(polls) == 3
    assert waits == [cfg.delay_ms] * 3
    assert engine.running is False
    assert not pygame.get_init()
