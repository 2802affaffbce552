from colorsys import hls_to_rgb
from typing import List, Tuple

from mandelview.core.mapping import map_range

PALETTES = ("hsl", "gray")

RGBA = Tuple[int, int, int, int]

def _to_byte(channel: float) -> int:
    return int(map_range((0.0, 1.0), (0.0, 255.0), channel))

def get_color(n: int, max_iter: int, palette: str = "hsl") -> RGBA:
    """
    Returns an (R, G, B, A) byte tuple for iteration count n out of max_iter.
    The "hsl" palette feeds n/max_iter straight in as hue (saturation 1.0,
    lightness 0.5), so n == 0 and n == max_iter share a hue. "gray" uses
    n/max_iter as brightness.
    """
    t = map_range((0.0, float(max_iter)), (0.0, 1.0), float(n))
    if palette == "hsl":
        r, g, b = hls_to_rgb(t, 0.5, 1.0)
    elif palette == "gray":
        r = g = b = t
    else:
        raise ValueError(f"Unknown palette: {palette}")
    return (_to_byte(r), _to_byte(g), _to_byte(b), _to_byte(1.0))

def build_palette(max_iter: int, palette: str = "hsl") -> List[RGBA]:
    return [get_color(n, max_iter, palette) for n in range(max_iter + 1)]
