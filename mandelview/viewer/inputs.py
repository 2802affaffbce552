from dataclasses import dataclass


@dataclass(frozen=True)
class InputState:
    """One polled frame of logical controls.

    Steppers are level signals (held); everything else is an edge (just pressed).
    """

    axis_x: bool = False
    axis_y: bool = False
    edge_min: bool = False
    edge_max: bool = False
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    commit: bool = False
    increase_cap: bool = False
    export: bool = False
    quit: bool = False
