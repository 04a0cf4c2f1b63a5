import os

# headless pygame for every test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from starquads.config import PanelConfig


@pytest.fixture
def cfg() -> PanelConfig:
    return PanelConfig()
