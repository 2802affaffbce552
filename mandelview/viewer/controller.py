"""Zoom-region state machine driving re-renders of the Mandelbrot view."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional

import numpy as np

from mandelview.core.mapping import map_range
from mandelview.core.viewport import DEFAULT_VIEWPORT, Viewport
from mandelview.viewer.inputs import InputState
from mandelview.util.logging_setup import get_logger

DEFAULT_MAX_ITER = 10
DEFAULT_VELOCITY = 5

RenderFn = Callable[[Viewport, int, int, int], np.ndarray]
ExportFn = Callable[[np.ndarray], None]


class Axis(Enum):
    X = "x"
    Y = "y"


class Edge(Enum):
    MIN = "min"
    MAX = "max"


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class SelectionRect:
    """Inclusive pixel bounds of the region to zoom into next."""

    min_x: int
    max_x: int
    min_y: int
    max_y: int

    @classmethod
    def default_for(cls, width: int, height: int) -> SelectionRect:
        return cls(0, max(1, width // 8), 0, max(1, height // 8))

    def is_valid_for(self, width: int, height: int) -> bool:
        return (0 <= self.min_x < self.max_x <= width - 1
                and 0 <= self.min_y < self.max_y <= height - 1)


class ZoomController:
    """Owns viewport, iteration cap and selection; decides when to re-render.

    ``render`` is called as ``render(viewport, max_iter, width, height)`` and
    must return a fresh buffer. ``export`` receives the current buffer.
    """

    def __init__(
        self,
        width: int,
        height: int,
        render: RenderFn,
        *,
        export: Optional[ExportFn] = None,
        viewport: Viewport = DEFAULT_VIEWPORT,
        max_iter: int = DEFAULT_MAX_ITER,
        velocity: int = DEFAULT_VELOCITY,
        selection: Optional[SelectionRect] = None,
    ):
        if width < 2 or height < 2:
            raise ValueError("width and height must be at least 2 pixels")
        if max_iter <= 0 or velocity <= 0:
            raise ValueError("max_iter and velocity must be positive")

        self.width = width
        self.height = height
        self.viewport = viewport
        self.max_iter = max_iter
        self.velocity = velocity
        self.selection = selection or SelectionRect.default_for(width, height)
        if not self.selection.is_valid_for(width, height):
            raise ValueError(f"Selection {self.selection} does not fit {width}x{height}")
        # Focus is tracked but the directional steps do not consult it.
        self.axis = Axis.X
        self.edge = Edge.MIN

        self._render = render
        self._export = export
        self.renders = 0
        self.buffer: Optional[np.ndarray] = None
        self.logger = get_logger()

    def regenerate(self) -> np.ndarray:
        self.buffer = self._render(self.viewport, self.max_iter, self.width, self.height)
        self.renders += 1
        return self.buffer

    def set_axis(self, axis: Axis) -> None:
        self.axis = axis

    def set_edge(self, edge: Edge) -> None:
        self.edge = edge

    def step(self, direction: Direction) -> None:
        sel = self.selection
        v = self.velocity
        if direction is Direction.LEFT and sel.min_x - v >= 0:
            sel = replace(sel, min_x=sel.min_x - v, max_x=sel.max_x - v)
        elif direction is Direction.RIGHT and sel.max_x + v < self.width - 1:
            sel = replace(sel, min_x=sel.min_x + v, max_x=sel.max_x + v)
        elif direction is Direction.UP and sel.min_y - v >= 0:
            sel = replace(sel, min_y=sel.min_y - v, max_y=sel.max_y - v)
        elif direction is Direction.DOWN and sel.max_y + v < self.height - 1:
            sel = replace(sel, min_y=sel.min_y + v, max_y=sel.max_y + v)
        else:
            return
        self.selection = sel
        self.logger.debug("Selection moved %s -> %s", direction.value, sel)

    def selection_viewport(self) -> Viewport:
        """Map the selection's pixel edges onto the current viewport."""
        sel = self.selection
        # Inclusive edges over (0, dim-1), so a full-screen selection is the
        # identity; the renderer samples [0, dim) and the two differ by a pixel.
        x_pixels = (0.0, float(self.width - 1))
        y_pixels = (0.0, float(self.height - 1))
        vp = self.viewport
        return Viewport(
            map_range(x_pixels, vp.x_range, float(sel.min_x)),
            map_range(x_pixels, vp.x_range, float(sel.max_x)),
            map_range(y_pixels, vp.y_range, float(sel.min_y)),
            map_range(y_pixels, vp.y_range, float(sel.max_y)),
        )

    def commit(self) -> Optional[np.ndarray]:
        try:
            viewport = self.selection_viewport()
        except ValueError:
            # float spacing exhausted; bounds collapsed onto each other
            self.logger.warning("Zoom limit reached at viewport=%s; commit ignored", self.viewport)
            return self.buffer
        self.viewport = viewport
        self.logger.info("Zoom committed selection=%s viewport=%s", self.selection, self.viewport)
        return self.regenerate()

    def increase_cap(self) -> np.ndarray:
        self.max_iter += 1
        self.logger.info("Iteration cap raised to %s", self.max_iter)
        return self.regenerate()

    def export(self) -> None:
        if self._export is None or self.buffer is None:
            self.logger.warning("Export requested but nothing to export")
            return
        self._export(self.buffer)

    def apply(self, inputs: InputState) -> bool:
        """Apply one polled frame of input. Returns True if the buffer was replaced."""
        if inputs.axis_x:
            self.set_axis(Axis.X)
        if inputs.axis_y:
            self.set_axis(Axis.Y)
        if inputs.edge_min:
            self.set_edge(Edge.MIN)
        if inputs.edge_max:
            self.set_edge(Edge.MAX)

        if inputs.left:
            self.step(Direction.LEFT)
        if inputs.right:
            self.step(Direction.RIGHT)
        if inputs.up:
            self.step(Direction.UP)
        if inputs.down:
            self.step(Direction.DOWN)

        renders = self.renders
        if inputs.commit:
            self.commit()
        if inputs.increase_cap:
            self.increase_cap()
        if inputs.export:
            self.export()
        return self.renders != renders
