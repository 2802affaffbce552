from __future__ import annotations

import os

import numpy as np
from PIL import Image

from mandelview.util.logging_setup import get_logger

def to_image(buffer: np.ndarray, width: int, height: int) -> Image.Image:
    if buffer.size != width * height * 4:
        raise ValueError(f"Buffer of {buffer.size} bytes does not match {width}x{height} RGBA")
    return Image.frombuffer("RGBA", (width, height), np.ascontiguousarray(buffer, dtype=np.uint8).tobytes(), "raw", "RGBA", 0, 1)

def save_png(buffer: np.ndarray, width: int, height: int, path: str) -> str:
    logger = get_logger()
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    to_image(buffer, width, height).save(path, format="PNG", optimize=True)
    logger.info("Image written: %s (%sx%s)", path, width, height)
    return path

def make_exporter(width: int, height: int, path: str):
    """Exporter for the interactive loop: failures are logged, never raised."""
    logger = get_logger()

    def export(buffer: np.ndarray) -> None:
        try:
            save_png(buffer, width, height, path)
        except Exception:
            logger.exception("Export to %s failed", path)

    return export
