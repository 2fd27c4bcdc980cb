"""
Configuration
=============
Defaults shared by the viewer, the CLI and the benchmark.

Exports:
    APP_TITLE (str): Window / tab bar title.
    X_BOUNDS, Y_BOUNDS (tuple): Range random points are drawn from.
    TICK_RATE_MS (int): Autoplay interval in milliseconds.
    MAX_POINTS (int): Largest point amount the input box accepts.
    ViewerConfig: Dataclass bundling the values above, built from CLI arguments.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

APP_TITLE: str = "Computational geometry algorithms"
X_BOUNDS: Tuple[float, float] = (-200.0, 200.0)
Y_BOUNDS: Tuple[float, float] = (-100.0, 100.0)
TICK_RATE_MS: int = 250
MAX_POINTS: int = 5000


@dataclass
class ViewerConfig:
    title: str = APP_TITLE
    x_bounds: Tuple[float, float] = X_BOUNDS
    y_bounds: Tuple[float, float] = Y_BOUNDS
    tick_rate_ms: int = TICK_RATE_MS
    max_points: int = MAX_POINTS
    seed: Optional[int] = None
    initial_points: Optional[int] = None
    log_level: int = logging.INFO
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        for name, (low, high) in (("x_bounds", self.x_bounds), ("y_bounds", self.y_bounds)):
            if not low < high:
                raise ValueError(f"{name} must be (low, high) with low < high, got {(low, high)}")
        if self.tick_rate_ms <= 0:
            raise ValueError(f"tick_rate_ms must be positive, got {self.tick_rate_ms}")

    @classmethod
    def from_args(cls, args) -> "ViewerConfig":
        """Build a config from an argparse namespace (see hull_stepper.__main__)."""
        return cls(
            tick_rate_ms=args.tick_rate,
            seed=args.seed,
            initial_points=args.points,
            log_level=getattr(logging, args.log_level.upper()),
            log_file=args.log_file,
        )
