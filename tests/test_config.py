import json

import pytest

from mandelview.config import DEFAULTS, load_config, normalise_config
from mandelview.core.viewport import DEFAULT_VIEWPORT, Viewport


def test_defaults():
    cfg = normalise_config(load_config(None))
    assert (cfg["width"], cfg["height"]) == (500, 500)
    assert cfg["max_iter"] == 10
    assert cfg["viewport"] == DEFAULT_VIEWPORT
    assert cfg["palette"] == "hsl"


def test_json_overrides(tmp_path):
    path = tmp_path / "view.json"
    path.write_text(json.dumps({"width": 64, "viewport": [-1, 1, -0.5, 0.5], "palette": "gray"}))
    cfg = normalise_config(load_config(str(path)))
    assert cfg["width"] == 64
    assert cfg["height"] == DEFAULTS["height"]
    assert cfg["viewport"] == Viewport(-1.0, 1.0, -0.5, 0.5)
    assert cfg["palette"] == "gray"


def test_unknown_field_rejected(tmp_path):
    path = tmp_path / "view.json"
    path.write_text(json.dumps({"zoom": 3}))
    with pytest.raises(ValueError, match="zoom"):
        load_config(str(path))


def test_non_object_rejected(tmp_path):
    path = tmp_path / "view.json"
    path.write_text("[1, 2]")
    with pytest.raises(ValueError):
        load_config(str(path))


@pytest.mark.parametrize("field,value", [
    ("width", 1),
    ("max_iter", 0),
    ("velocity", -5),
    ("viewport", [0.47, -2.0, -1.12, 1.12]),
    ("viewport", [0, 1, 2]),
    ("palette", "plasma"),
])
def test_invalid_values(field, value):
    cfg = load_config(None)
    cfg[field] = value
    with pytest.raises(ValueError):
        normalise_config(cfg)


def test_missing_field():
    cfg = load_config(None)
    del cfg["fps"]
    with pytest.raises(ValueError, match="fps"):
        normalise_config(cfg)
