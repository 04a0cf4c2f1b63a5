from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class PanelConfig:
    panel_size: int = 600
    num_lines: int = 30
    delay_ms: int = 10  # idle wait between event polls; nothing animates
    background: Tuple[int, int, int] = (0, 0, 0)
    caption: str = "Star Quadrants"
    label_text: str = "Yabtse Amente"
    label_color: Tuple[int, int, int] = (255, 255, 255)
    label_margin_x: int = 120
    label_margin_y: int = 20
    font_name: str = "consolas"
    font_size: int = 14
    debug_log_path: Optional[str] = None

    @property
    def quadrant_size(self) -> int:
        return self.panel_size // 2

    @property
    def label_position(self) -> Tuple[int, int]:
        """Baseline-left anchor of the label, measured from the bottom-right corner."""
        return (self.panel_size - self.label_margin_x, self.panel_size - self.label_margin_y)
