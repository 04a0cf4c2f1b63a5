"""Drawing surfaces and the command executor that feeds them."""
from __future__ import annotations

from typing import Any, Iterable, List, Protocol, Tuple

from starquads.state.commands import Color, DrawCommand, DrawLine, DrawText, FillBackground, SetColor


class DrawSurface(Protocol):
    def fill(self, color: Color) -> None: ...

    def set_color(self, color: Color) -> None: ...

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None: ...

    def draw_text(self, text: str, x: int, y: int) -> None: ...


class RecordingSurface:
    """
    In-memory surface that keeps every call in order.

    Used for headless runs and tests; each entry is a tuple whose first item
    is the method name, e.g. ("draw_line", 150, 0, 150, 150).
    """

    def __init__(self) -> None:
        self.color: Color = (0, 0, 0)
        self.calls: List[Tuple[Any, ...]] = []

    def fill(self, color: Color) -> None:
        self.calls.append(("fill", color))

    def set_color(self, color: Color) -> None:
        self.color = color
        self.calls.append(("set_color", color))

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        self.calls.append(("draw_line", x1, y1, x2, y2))

    def draw_text(self, text: str, x: int, y: int) -> None:
        self.calls.append(("draw_text", text, x, y))

    # helpers for inspection
    def lines(self) -> List[Tuple[int, int, int, int]]:
        return [c[1:] for c in self.calls if c[0] == "draw_line"]

    def colors(self) -> List[Color]:
        return [c[1] for c in self.calls if c[0] == "set_color"]


def execute(commands: Iterable[DrawCommand], surface: DrawSurface) -> int:
    """Replay commands against a surface in order; return how many ran."""
    count = 0
    for cmd in commands:
        if isinstance(cmd, DrawLine):
            (x1, y1), (x2, y2) = cmd.segment.start, cmd.segment.end
            surface.draw_line(x1, y1, x2, y2)
        elif isinstance(cmd, SetColor):
            surface.set_color(cmd.color)
        elif isinstance(cmd, FillBackground):
            surface.fill(cmd.color)
        elif isinstance(cmd, DrawText):
            surface.set_color(cmd.color)
            surface.draw_text(cmd.text, cmd.position[0], cmd.position[1])
        else:
            raise TypeError(f"Unknown draw command: {cmd!r}")
        count += 1
    return count
