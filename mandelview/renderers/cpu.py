from __future__ import annotations

import time

import numpy as np
from tqdm import tqdm

from mandelview.color import build_palette
from mandelview.core.escape import escape_time
from mandelview.core.viewport import Viewport
from mandelview.util.logging_setup import get_logger

CHANNELS = 4

def render_rgba(
    viewport: Viewport,
    max_iter: int,
    width: int,
    height: int,
    *,
    palette: str = "hsl",
    progress: bool = False,
) -> np.ndarray:
    """Render one frame as a flat row-major RGBA8 array of width*height*4 bytes.

    Pure in its inputs: every call allocates its own buffer.
    """
    logger = get_logger()
    start = time.time()
    logger.info("CPU render start viewport=%s iter=%s size=%sx%s", viewport, max_iter, width, height)

    colors = build_palette(max_iter, palette)
    buf = np.zeros((height, width, CHANNELS), dtype=np.uint8)

    rows = tqdm(range(height), desc="rows", unit="row", disable=not progress)
    for py in rows:
        row = buf[py]
        for px in range(width):
            n = escape_time(viewport.pixel_to_complex(px, py, width, height), max_iter)
            row[px] = colors[n]

    logger.info("CPU render done time=%.2fs", time.time() - start)
    return buf.reshape(-1)
