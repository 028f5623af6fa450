from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Tuple

from lightning_maze.core.errors import ConfigurationError

ALGORITHMS = ("prim",)


@dataclass
class MazeConfig:
    width: int = 64
    height: int = 64
    dead_end_factor: float = 0.4  # Chance each dead end gets an extra opening
    loop_factor: float = 0.7      # Chance each closed interior wall is opened
    seed: Optional[int] = None
    start: Tuple[int, int] = (0, 0)
    algo: str = "prim"

    def validate(self) -> "MazeConfig":
        validate_dimensions(self.width, self.height)
        validate_factor("dead_end_factor", self.dead_end_factor)
        validate_factor("loop_factor", self.loop_factor)
        validate_algo(self.algo)
        validate_start(self.start, self.width, self.height)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def validate_dimensions(width, height):
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        if value <= 0:
            raise ConfigurationError(f"{name} must be >= 1, got {value}")


def validate_factor(name: str, value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    # NaN fails both comparisons
    if not (0.0 <= value <= 1.0):
        raise ConfigurationError(f"{name} must be in [0, 1], got {value}")


def validate_algo(algo: str):
    if algo not in ALGORITHMS:
        raise ConfigurationError(f"Unknown algorithm {algo!r}, expected one of {ALGORITHMS}")


def validate_start(start, width: int, height: int):
    try:
        x, y = start
    except (TypeError, ValueError):
        raise ConfigurationError(f"start must be a (col, row) pair, got {start!r}") from None
    for value in (x, y):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"start coordinates must be integers, got {tuple(start)!r}")
    if not (0 <= x < width and 0 <= y < height):
        raise ConfigurationError(f"start {tuple(start)} outside {width}x{height} grid")
