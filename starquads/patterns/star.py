"""
Star pattern geometry.

A star is drawn as lineCount + 1 arms. Arm i is a set of eight line segments
joining points on the quadrant's edges, its diagonals and a (possibly
twisted) center, mirrored so the figure is eight-fold symmetric. All math is
integer, truncating exactly like the classic applet this reproduces.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator, List

from starquads.patterns.colors import color_for
from starquads.patterns.modes import StarMode
from starquads.state.commands import DrawCommand, DrawLine, LineSegment, SetColor

SEGMENTS_PER_ARM = 8

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderRequest:
    offset_x: int
    offset_y: int
    line_count: int
    twist_factor: int
    mode: StarMode

    def __post_init__(self) -> None:
        if not isinstance(self.mode, StarMode):
            raise ValueError(f"mode must be a StarMode, got {self.mode!r}")
        if self.line_count <= 0:
            raise ValueError(f"line_count must be positive, got {self.line_count}")
        if self.offset_x < 0 or self.offset_y < 0:
            raise ValueError(f"offsets must be non-negative, got ({self.offset_x}, {self.offset_y})")
        if self.twist_factor < 0:
            raise ValueError(f"twist_factor must be non-negative, got {self.twist_factor}")


@dataclass(frozen=True)
class ArmCoordinates:
    center: int
    y_start: int
    y_start_ref: int
    x_diag: int
    y_diag: int
    y_diag_ref: int


def step_sizes(line_count: int, quadrant_size: int) -> tuple[int, int]:
    """Return (increment, diagonal step) for a star of line_count arms."""
    center = quadrant_size // 2
    increment = center // line_count
    diag_step = int(increment / math.sqrt(2))
    return increment, diag_step


def arm_coordinates(i: int, line_count: int, quadrant_size: int) -> ArmCoordinates:
    center = quadrant_size // 2
    increment, diag_step = step_sizes(line_count, quadrant_size)
    y_start = i * increment
    return ArmCoordinates(
        center=center,
        y_start=y_start,
        y_start_ref=quadrant_size - y_start,
        x_diag=center + i * diag_step,
        y_diag=center - i * diag_step,
        y_diag_ref=center + i * diag_step,
    )


def twist_for(mode: StarMode, i: int, twist_factor: int) -> int:
    """
    Offset of the arm center for step i.

    Swirl scales the twist up with the factor; every other mode divides by it.
    A factor of 0 divides by 1, so those modes still twist by i.
    """
    if mode is StarMode.SWIRL:
        return i * twist_factor // 5
    return i // max(twist_factor, 1)


def arm_segments(request: RenderRequest, i: int, quadrant_size: int) -> List[LineSegment]:
    """The eight segments of arm i, in screen coordinates."""
    a = arm_coordinates(i, request.line_count, quadrant_size)
    twist = twist_for(request.mode, i, request.twist_factor)
    cx = a.center + twist
    cy = a.center - twist
    c2 = 2 * a.center

    local = [
        LineSegment((cx, a.y_start), (a.x_diag, a.y_diag)),
        LineSegment((a.y_start_ref, cy), (a.x_diag, a.y_diag)),
        LineSegment((a.y_start_ref, cy), (a.y_diag_ref, a.y_diag_ref)),
        LineSegment((cx, a.y_start), (c2 - a.x_diag, a.y_diag)),
        LineSegment((cx, a.y_start_ref), (a.x_diag, a.y_diag_ref)),
        LineSegment((cx, a.y_start_ref), (a.y_diag, a.x_diag)),
        LineSegment((c2 - a.y_start_ref, cy), (c2 - a.y_diag_ref, a.y_diag_ref)),
        LineSegment((c2 - a.y_start_ref, cy), (c2 - a.x_diag, a.y_diag)),
    ]
    return [seg.translated(request.offset_x, request.offset_y) for seg in local]


def star_commands(request: RenderRequest, quadrant_size: int) -> Iterator[DrawCommand]:
    """
    Lazily yield the draw commands for a whole star.

    Each arm contributes one SetColor followed by its eight DrawLine commands.
    """
    log.debug(
        "star at (%d, %d): %d lines, twist %d, %s",
        request.offset_x,
        request.offset_y,
        request.line_count,
        request.twist_factor,
        request.mode.value,
    )
    for i in range(request.line_count + 1):
        yield SetColor(color_for(request.mode, i, request.line_count))
        for seg in arm_segments(request, i, quadrant_size):
            yield DrawLine(seg)
