"""
Module: session
Description: UI state of the viewer, kept apart from the hull engines.
             - input mode and the point-amount text box,
             - one tab (algorithm + navigator) per registered algorithm,
             - key handling, point generation and autoplay.
             Nothing here imports matplotlib; the viewer only forwards key names.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import numpy as np

from hull_stepper.config import ViewerConfig
from hull_stepper.errors import InvalidInputError
from hull_stepper.hull_engine import ALGORITHMS, HullAlgorithm
from hull_stepper.step_navigator import StepNavigator

logger = logging.getLogger(__name__)


class InputMode(Enum):
    NORMAL = "normal"
    EDITING = "editing"


@dataclass
class Tab:
    algorithm: HullAlgorithm
    navigator: StepNavigator

    @property
    def title(self) -> str:
        return self.algorithm.title


def random_points(count: int, x_bounds, y_bounds, rng: np.random.Generator) -> np.ndarray:
    """`count` x 2 array of uniform coordinates inside the given bounds."""
    xs = rng.uniform(x_bounds[0], x_bounds[1], size=count)
    ys = rng.uniform(y_bounds[0], y_bounds[1], size=count)
    return np.column_stack([xs, ys])


def parse_point_amount(text: str, max_points: Optional[int] = None) -> int:
    """Digits only => int. Anything else (including an empty box) raises InvalidInputError."""
    stripped = text.strip()
    if not stripped or not (stripped.isascii() and stripped.isdigit()):
        raise InvalidInputError(text)
    amount = int(stripped)
    if max_points is not None and amount > max_points:
        raise InvalidInputError(text, f"at most {max_points} points are supported")
    return amount


class Session:
    def __init__(self, config: Optional[ViewerConfig] = None, rng: Optional[np.random.Generator] = None):
        self.config = config or ViewerConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        self.input_mode = InputMode.NORMAL
        self.input = ""
        self.point_amount: Optional[int] = None
        self.status = ""
        self.playing = False
        self.should_quit = False

        self.tabs: List[Tab] = []
        for cls in ALGORITHMS.values():
            algorithm = cls()
            self.tabs.append(Tab(algorithm, StepNavigator(algorithm)))
        self.tab_index = 0

    @property
    def current_tab(self) -> Tab:
        return self.tabs[self.tab_index]

    @property
    def navigator(self) -> StepNavigator:
        return self.current_tab.navigator

    def next_tab(self) -> None:
        self.tab_index = (self.tab_index + 1) % len(self.tabs)
        self.playing = False

    def previous_tab(self) -> None:
        self.tab_index = (self.tab_index - 1) % len(self.tabs)
        self.playing = False

    # ---------- Computation ----------
    def load_points(self, points) -> None:
        """Calculate the current tab for an explicit point set and rewind its cursor."""
        self.navigator.calculate(points)
        self.playing = False
        self.status = f"{len(self.current_tab.algorithm.points)} points, {self.navigator.total_steps} steps"

    def commit(self) -> None:
        """
        Parse the input box, generate that many random points and recompute.
        On InvalidInputError nothing changes: input text, points, logs and cursor stay.
        """
        amount = parse_point_amount(self.input, self.config.max_points)
        points = random_points(amount, self.config.x_bounds, self.config.y_bounds, self.rng)
        self.load_points(points)
        self.point_amount = amount
        logger.info("Generated %d random points for %s", amount, self.current_tab.title)

    def toggle_play(self) -> None:
        self.playing = not self.playing and not self.navigator.at_end

    def tick(self) -> None:
        """Autoplay step: advance once, stop at the last step."""
        if not self.playing:
            return
        self.navigator.advance()
        if self.navigator.at_end:
            self.playing = False

    # ---------- Keys ----------
    def handle_key(self, key: Optional[str]) -> None:
        """
        Dispatch a key name (matplotlib naming: 'enter', 'escape', 'left', ...).
        NORMAL:  i => edit, q => quit
        EDITING: digits append, backspace deletes, escape => normal, enter => commit
        Both:    left/right step, home/end jump, tab/shift+tab switch, space play/pause
        """
        if key is None:
            return

        if key == "right":
            self.navigator.advance()
        elif key == "left":
            self.navigator.retreat()
        elif key == "home":
            self.navigator.reset()
        elif key == "end":
            self.navigator.jump_to_end()
        elif key == "tab":
            self.next_tab()
        elif key == "shift+tab":
            self.previous_tab()
        elif key in (" ", "space"):
            self.toggle_play()
        elif self.input_mode is InputMode.NORMAL:
            if key == "i":
                self.input_mode = InputMode.EDITING
            elif key == "q":
                self.should_quit = True
        elif key == "enter":
            self.commit()
        elif key == "backspace":
            self.input = self.input[:-1]
        elif key == "escape":
            self.input_mode = InputMode.NORMAL
        elif len(key) == 1 and key in "0123456789":
            self.input += key
