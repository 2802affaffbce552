import json
from typing import Any, Dict, Optional

from mandelview.color import PALETTES
from mandelview.core.viewport import DEFAULT_VIEWPORT, Viewport

DEFAULTS: Dict[str, Any] = {
    "width": 500,
    "height": 500,
    "max_iter": 10,
    "viewport": [DEFAULT_VIEWPORT.x_min, DEFAULT_VIEWPORT.x_max, DEFAULT_VIEWPORT.y_min, DEFAULT_VIEWPORT.y_max],
    "velocity": 5,
    "palette": "hsl",
    "output": "mandelbrot.png",
    "fps": 60,
}

def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    cfg = dict(DEFAULTS)
    if config_path:
        with open(config_path, "r", encoding="utf-8") as f:
            overrides = json.load(f)
        if not isinstance(overrides, dict):
            raise ValueError("Config JSON must be an object.")
        unknown = sorted(set(overrides) - set(DEFAULTS))
        if unknown:
            raise ValueError(f"Unknown config fields: {', '.join(unknown)}")
        cfg.update(overrides)
    return cfg

def normalise_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    for r in DEFAULTS:
        if r not in cfg:
            raise ValueError(f"Missing config field: {r}")

    width = int(cfg["width"])
    height = int(cfg["height"])
    if width < 2 or height < 2:
        raise ValueError("width/height must be at least 2.")

    max_iter = int(cfg["max_iter"])
    velocity = int(cfg["velocity"])
    fps = int(cfg["fps"])
    if max_iter <= 0 or velocity <= 0 or fps <= 0:
        raise ValueError("max_iter/velocity/fps must be positive.")

    bounds = cfg["viewport"]
    if not (isinstance(bounds, (list, tuple)) and len(bounds) == 4):
        raise ValueError("viewport must be [x_min, x_max, y_min, y_max].")

    palette = str(cfg["palette"])
    if palette not in PALETTES:
        raise ValueError(f"palette must be one of: {', '.join(PALETTES)}")

    out = dict(cfg)
    out["width"] = width
    out["height"] = height
    out["max_iter"] = max_iter
    out["velocity"] = velocity
    out["fps"] = fps
    out["viewport"] = Viewport(*(float(b) for b in bounds))
    out["palette"] = palette
    out["output"] = str(cfg["output"])
    return out
