"""
Module: step_navigator
Description: A single cursor over the concatenated phase timeline of a hull algorithm.
             The phases are stored as independent logs; the navigator is the one place
             that translates the global step into (phase, local index).
"""
import logging
from enum import Enum
from typing import Optional, Tuple

from hull_stepper.chain_builder import Phase
from hull_stepper.errors import NoTimelineError
from hull_stepper.hull_engine import Frame, HullAlgorithm, HullResult

logger = logging.getLogger(__name__)


class NavigatorState(Enum):
    NO_DATA = "no_data"
    READY = "ready"


class StepNavigator:
    """
    Cursor in [0, total_steps). Saturates at both ends, never wraps.
    The cursor is bound to the algorithm's generation: once the algorithm
    installs new points or a new result, the cursor falls back to 0.
    """

    def __init__(self, algorithm: HullAlgorithm):
        self.algorithm = algorithm
        self._cursor = 0
        self._generation = algorithm.generation

    def _sync(self) -> None:
        if self._generation != self.algorithm.generation:
            logger.debug("Timeline of %s replaced, cursor %d reset to 0",
                         self.algorithm.title, self._cursor)
            self._cursor = 0
            self._generation = self.algorithm.generation

    @property
    def state(self) -> NavigatorState:
        self._sync()
        return NavigatorState.READY if self.algorithm.has_result else NavigatorState.NO_DATA

    @property
    def cursor(self) -> int:
        self._sync()
        return self._cursor

    @property
    def total_steps(self) -> int:
        return self.algorithm.maximum_step_count()

    def calculate(self, points=None) -> HullResult:
        """Recompute the algorithm and rewind. On failure the old timeline and cursor stay."""
        result = self.algorithm.calculate(points)
        self.reset()
        return result

    # ---------- Movement ----------
    def advance(self) -> None:
        self._sync()
        if self._cursor + 1 < self.total_steps:
            self._cursor += 1
            logger.debug("advance -> %d", self._cursor)

    def retreat(self) -> None:
        self._sync()
        if self._cursor > 0:
            self._cursor -= 1
            logger.debug("retreat -> %d", self._cursor)

    def reset(self) -> None:
        self._cursor = 0
        self._generation = self.algorithm.generation

    def jump(self, step: int) -> None:
        """Move to `step`, clamped into the timeline."""
        self._sync()
        last = self.total_steps - 1
        self._cursor = max(0, min(step, last)) if last >= 0 else 0

    def jump_to_end(self) -> None:
        self.jump(self.total_steps - 1)

    @property
    def at_start(self) -> bool:
        return self.cursor == 0

    @property
    def at_end(self) -> bool:
        return self.cursor >= self.total_steps - 1

    # ---------- Mapping ----------
    def phase_and_local_index(self) -> Tuple[Phase, int]:
        """
        Global cursor => (phase, index inside that phase's log).
        e.g. upper has 5 steps: cursor 4 => (UPPER, 4), cursor 5 => (LOWER, 0).
        """
        if self.state is NavigatorState.NO_DATA or self.total_steps == 0:
            raise NoTimelineError(f"{self.algorithm.title}: no steps to navigate")

        remaining = self._cursor
        for phase, length in self.algorithm.phase_lengths():
            if remaining < length:
                return phase, remaining
            remaining -= length
        raise NoTimelineError(f"cursor {self._cursor} is past the end of the timeline")

    @property
    def phase(self) -> Optional[Phase]:
        """Phase under the cursor, None when there is no timeline."""
        try:
            return self.phase_and_local_index()[0]
        except NoTimelineError:
            return None

    @property
    def prefix_length(self) -> int:
        """How many leading points of current_chains().lower are the final upper chain."""
        if self.phase is not Phase.LOWER:
            return 0
        return len(self.current_chains().upper)

    def progress(self) -> float:
        """Position as a ratio in [0, 1]; 0.0 when there is nothing to scrub."""
        total = self.total_steps
        if total <= 1:
            return 0.0
        return self.cursor / (total - 1)

    def current_chains(self) -> Frame:
        """Chains to draw at the cursor; empty chains (but the points) when there is no timeline."""
        try:
            phase, index = self.phase_and_local_index()
        except NoTimelineError:
            return self.algorithm.empty_frame()
        return self.algorithm.frame_at(phase, index)
