from __future__ import annotations

import logging

import pygame
import pytest

from starquads.config import PanelConfig
from starquads.content.layout import LayoutError
from starquads.logging_config import setup_logging
from starquads.main import build_parser, main


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger = logging.getLogger("starquads")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_config_defaults() -> None:
    cfg = PanelConfig()
    assert cfg.quadrant_size == 300
    assert cfg.label_position == (480, 580)
    assert cfg.delay_ms == 10


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])
    assert args.output is None
    assert args.debug_log is None
    assert args.verbose is False


def test_setup_logging_writes_debug_file(tmp_path) -> None:
    log_file = tmp_path / "debug.log"
    setup_logging(logging.INFO, str(log_file))
    logging.getLogger("starquads.test").debug("arm detail")
    for handler in logging.getLogger("starquads").handlers:
        handler.flush()
    assert "arm detail" in log_file.read_text(encoding="utf-8")


def test_main_saves_frame(tmp_path) -> None:
    out = tmp_path / "stars.png"
    assert main(["--output", str(out)]) == 0
    assert out.exists()


def test_main_reports_bad_layout(monkeypatch, tmp_path) -> None:
    def broken(cfg, path=None):
        raise LayoutError("quadrant #0: boom")

    monkeypatch.setattr("starquads.main.load_layout", broken)
    assert main(["--output", str(tmp_path / "x.png")]) == 2
    assert not (tmp_path / "x.png").exists()


def test_main_opens_window_and_exits_on_close(monkeypatch) -> None:
    monkeypatch.setattr(pygame.event, "get", lambda: [pygame.event.Event(pygame.QUIT)])
    monkeypatch.setattr(pygame.time, "wait", lambda ms: None)
    assert main([]) == 0
    assert not pygame.get_init()
