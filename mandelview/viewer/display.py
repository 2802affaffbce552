"""pygame window: polls keyboard input and shows the current buffer."""

from __future__ import annotations

import pygame

from mandelview.output.png_writer import make_exporter
from mandelview.viewer.controller import RenderFn, ZoomController
from mandelview.viewer.inputs import InputState
from mandelview.util.logging_setup import get_logger

SELECTION_COLOR = (255, 255, 255)

# edge-triggered controls, read from KEYDOWN events
EDGE_KEYS = {
    pygame.K_x: "axis_x",
    pygame.K_y: "axis_y",
    pygame.K_n: "edge_min",
    pygame.K_m: "edge_max",
    pygame.K_SPACE: "commit",
    pygame.K_i: "increase_cap",
    pygame.K_s: "export",
    pygame.K_ESCAPE: "quit",
}

# level-triggered steppers, read from the held-key snapshot
HELD_KEYS = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
}


def poll_input() -> InputState:
    flags = {}
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            flags["quit"] = True
        elif event.type == pygame.KEYDOWN and event.key in EDGE_KEYS:
            flags[EDGE_KEYS[event.key]] = True
    pressed = pygame.key.get_pressed()
    for key, name in HELD_KEYS.items():
        if pressed[key]:
            flags[name] = True
    return InputState(**flags)


class PygameDisplay:
    def __init__(self, width: int, height: int, fps: int = 60, caption: str = "Mandelbrot Set"):
        self.width = width
        self.height = height
        self.fps = fps
        self.caption = caption
        self.logger = get_logger()
        self._surface = None

    def show(self, buffer) -> None:
        try:
            image = pygame.image.frombuffer(buffer.tobytes(), (self.width, self.height), "RGBA")
            self._surface = image.convert()
        except (pygame.error, ValueError):
            self.logger.exception("Could not upload frame to the display")

    def draw(self, screen, controller: ZoomController) -> None:
        screen.fill((0, 0, 0))
        if self._surface is not None:
            screen.blit(self._surface, (0, 0))
        sel = controller.selection
        rect = pygame.Rect(sel.min_x, sel.min_y, sel.max_x - sel.min_x + 1, sel.max_y - sel.min_y + 1)
        pygame.draw.rect(screen, SELECTION_COLOR, rect, 1)
        pygame.display.flip()

    def run(self, *, render: RenderFn, viewport, max_iter: int, velocity: int, output: str) -> None:
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(self.caption)
            clock = pygame.time.Clock()

            controller = ZoomController(
                self.width, self.height, render,
                export=make_exporter(self.width, self.height, output),
                viewport=viewport, max_iter=max_iter, velocity=velocity,
            )
            self.show(controller.regenerate())
            self.logger.info("Viewer started %sx%s iter=%s", self.width, self.height, max_iter)

            while True:
                inputs = poll_input()
                if inputs.quit:
                    break
                if controller.apply(inputs):
                    self.show(controller.buffer)
                    pygame.display.set_caption(f"{self.caption} - iter {controller.max_iter}")
                self.draw(screen, controller)
                clock.tick(self.fps)
            self.logger.info("Viewer closed after %s renders", controller.renders)
        finally:
            pygame.quit()
