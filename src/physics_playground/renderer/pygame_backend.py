# MIT License (see LICENSE)
"""
Pygame backend: replays draw commands onto a pygame Surface.

Circles use gfxdraw for antialiased edges. Colors with an alpha channel are
pre-blended against the background so drawing order is preserved without an
extra alpha surface.
"""
from __future__ import annotations

import pygame
from pygame import gfxdraw

from .. import constants as C
from ..util import clamp
from .adapter import RendererAdapter
from .commands import ClearRect, FilledCircle, FilledTriangle, Line, RGBA

# gfxdraw takes 16-bit coordinates
SAFE_COORD_LIMIT = 30000


def _px(v: float) -> int:
    return int(round(clamp(v, -SAFE_COORD_LIMIT, SAFE_COORD_LIMIT)))


def blend(color: RGBA, background: RGBA) -> tuple[int, int, int]:
    """Flatten an RGB or RGBA color over an opaque background."""
    if len(color) < 4:
        return (color[0], color[1], color[2])
    a = color[3] / 255.0
    return tuple(int(round(c * a + b * (1.0 - a))) for c, b in zip(color[:3], background[:3]))


class PygameRenderer(RendererAdapter):
    """
    Draws frames onto a pygame Surface (usually the display surface).

    Args:
        surface: Target surface. Can be replaced after a window resize.
        background: Fill color used by ClearRect.
    """

    def __init__(self, surface: pygame.Surface, background: RGBA = C.BACKGROUND_COLOR):
        self.surface = surface
        self.background = background

    def begin_frame(self, tick: int) -> None:
        pass

    def clear(self, cmd: ClearRect) -> None:
        rect = pygame.Rect(_px(cmd.x), _px(cmd.y), _px(cmd.width), _px(cmd.height))
        self.surface.fill(self.background[:3], rect)

    def circle(self, cmd: FilledCircle) -> None:
        x, y = _px(cmd.center[0]), _px(cmd.center[1])
        r = max(1, _px(cmd.radius))
        color = blend(cmd.color, self.background)
        gfxdraw.filled_circle(self.surface, x, y, r, color)
        gfxdraw.aacircle(self.surface, x, y, r, color)

    def line(self, cmd: Line) -> None:
        start = (_px(cmd.start[0]), _px(cmd.start[1]))
        end = (_px(cmd.end[0]), _px(cmd.end[1]))
        pygame.draw.line(self.surface, blend(cmd.color, self.background), start, end, cmd.width)

    def triangle(self, cmd: FilledTriangle) -> None:
        pts = [(_px(x), _px(y)) for x, y in cmd.points]
        pygame.draw.polygon(self.surface, blend(cmd.color, self.background), pts)

    def end_frame(self) -> None:
        pass
