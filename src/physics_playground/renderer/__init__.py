# MIT License (see LICENSE)
"""
Rendering for the sandbox.

This subpackage provides:
    - commands: Backend-independent draw primitives.
    - render: The render pass (state -> commands), pure.
    - adapter: RendererAdapter base plus Debug/Null/Buffered renderers.
    - pygame_backend: PygameRenderer (imported on demand, needs pygame).

Typical usage:
    from physics_playground.renderer import render_frame, DebugRenderer

    renderer = DebugRenderer()
    renderer.render_commands(0, render_frame(controller.state, viewport))
"""
from .commands import ClearRect, FilledCircle, Line, FilledTriangle, DrawCommand
from .render import render_frame, render_bodies, render_pendulum, arrowhead
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)

__all__ = [
    # Primitives
    "ClearRect",
    "FilledCircle",
    "Line",
    "FilledTriangle",
    "DrawCommand",
    # Render pass
    "render_frame",
    "render_bodies",
    "render_pendulum",
    "arrowhead",
    # Adapters
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
]
