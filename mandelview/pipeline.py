from __future__ import annotations

import os
import time
from functools import partial
from typing import Any, Dict

from mandelview.output.png_writer import save_png
from mandelview.renderers.cpu import render_rgba
from mandelview.util.logging_setup import get_logger
from mandelview.util.manifest import build_manifest, write_manifest

def manifest_path_for(output: str) -> str:
    root, _ = os.path.splitext(output)
    return root + ".json"

def render_single(*, cfg: Dict[str, Any], progress: bool = True) -> Dict[str, Any]:
    logger = get_logger()

    width = int(cfg["width"])
    height = int(cfg["height"])
    max_iter = int(cfg["max_iter"])
    viewport = cfg["viewport"]
    output = str(cfg["output"])

    logger.info("Render start size=%sx%s iter=%s viewport=%s palette=%s",
                width, height, max_iter, viewport, cfg["palette"])
    start = time.time()
    buf = render_rgba(viewport, max_iter, width, height, palette=cfg["palette"], progress=progress)
    save_png(buf, width, height, output)
    elapsed = time.time() - start

    info = {"output": output, "viewport": viewport, "max_iter": max_iter, "seconds": round(elapsed, 3)}
    manifest_path = manifest_path_for(output)
    write_manifest(manifest_path, build_manifest(config=cfg, render_info=info))
    logger.info("Run manifest written: %s", manifest_path)
    return info

def run_viewer(*, cfg: Dict[str, Any]) -> None:
    from mandelview.viewer.display import PygameDisplay

    display = PygameDisplay(width=int(cfg["width"]), height=int(cfg["height"]), fps=int(cfg["fps"]))
    display.run(
        render=partial(render_rgba, palette=cfg["palette"]),
        viewport=cfg["viewport"],
        max_iter=int(cfg["max_iter"]),
        velocity=int(cfg["velocity"]),
        output=str(cfg["output"]),
    )
