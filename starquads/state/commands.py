"""Draw commands produced by the pattern code and consumed by surfaces."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

Color = Tuple[int, int, int]
Point = Tuple[int, int]


@dataclass(frozen=True)
class LineSegment:
    start: Point
    end: Point

    def translated(self, dx: int, dy: int) -> "LineSegment":
        return LineSegment((self.start[0] + dx, self.start[1] + dy), (self.end[0] + dx, self.end[1] + dy))


@dataclass(frozen=True)
class FillBackground:
    color: Color


@dataclass(frozen=True)
class SetColor:
    color: Color


@dataclass(frozen=True)
class DrawLine:
    segment: LineSegment


@dataclass(frozen=True)
class DrawText:
    text: str
    position: Point  # baseline-left, like java.awt drawString
    color: Color


DrawCommand = Union[FillBackground, SetColor, DrawLine, DrawText]
