"""
Module: hull_engine
Description: Hull algorithms that keep their whole construction history.
             - HullAlgorithm: capability interface every algorithm tab relies on.
             - MonotoneChainScan: sort once per pass, build the upper chain, then the lower chain.
             - ALGORITHMS: registry the session builds its tabs from.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional, Tuple, Type

import pandas as pd

from hull_stepper.chain_builder import ChainLog, Phase, build_chain
from hull_stepper.errors import NoTimelineError
from hull_stepper.geometry import Point, as_points, orientation, sort_points

logger = logging.getLogger(__name__)


class Frame(NamedTuple):
    """
    (upper, lower, points) the renderer draws for one cursor position.
    In the lower phase `lower` starts with the final upper chain.
    """
    upper: List[Point]
    lower: List[Point]
    points: List[Point]


@dataclass(frozen=True)
class HullResult:
    """Input points and both operation logs of one calculate() call."""
    points: Tuple[Point, ...]
    upper: ChainLog
    lower: ChainLog

    @property
    def step_count(self) -> int:
        return len(self.upper) + len(self.lower)

    def log(self, phase: Phase) -> ChainLog:
        return self.upper if phase is Phase.UPPER else self.lower


class HullAlgorithm(ABC):
    """
    Shared capabilities of every hull algorithm shown in the viewer.
    Subclasses implement _run() and the phase/snapshot accessors; validation,
    atomic replacement of the result and the generation counter live here.
    """
    title: str = "Hull algorithm"
    description: str = ""

    def __init__(self, points=None):
        self._points: List[Point] = as_points(points) if points is not None else []
        self._result: Optional[HullResult] = None
        # Bumped every time the installed points/result change.
        self.generation = 0

    @property
    def points(self) -> List[Point]:
        return list(self._points)

    @property
    def result(self) -> Optional[HullResult]:
        return self._result

    @property
    def has_result(self) -> bool:
        return self._result is not None

    def set_points(self, points) -> None:
        """Replace the point set; the old result is dropped until calculate() runs again."""
        validated = as_points(points)
        self._points = validated
        self._result = None
        self.generation += 1

    def calculate(self, points=None) -> HullResult:
        """
        Recompute the full history for `points` (or the current point set).
        Raises NonFiniteCoordinateError before touching any state.
        """
        validated = as_points(points) if points is not None else list(self._points)
        result = self._run(validated)

        self._points = validated
        self._result = result
        self.generation += 1
        logger.info("%s: %d points => %d steps (%s)",
                    self.title, len(validated), result.step_count,
                    ", ".join(f"{phase.value}={n}" for phase, n in self.phase_lengths()))
        return result

    def maximum_step_count(self) -> int:
        """
        Steps of the whole timeline; 0 => nothing to animate.
        Both passes push every point, so a single point already gives 2 steps
        and a count of 1 never occurs.
        """
        return self._result.step_count if self._result is not None else 0

    def _require_result(self) -> HullResult:
        if self._result is None:
            raise NoTimelineError(f"{self.title}: calculate() has not been run for the current points")
        return self._result

    @abstractmethod
    def _run(self, points: List[Point]) -> HullResult:
        ...

    @abstractmethod
    def phase_lengths(self) -> List[Tuple[Phase, int]]:
        """Phases in timeline order with their step counts."""

    @abstractmethod
    def chain_at(self, phase: Phase, index: int) -> List[Point]:
        ...

    @abstractmethod
    def frame_at(self, phase: Phase, index: int) -> Frame:
        ...

    def empty_frame(self) -> Frame:
        return Frame(upper=[], lower=[], points=self.points)


class MonotoneChainScan(HullAlgorithm):
    """Andrew's monotone chain: upper chain first, then lower chain, each with its own log."""
    title = "Graham scan"
    description = ("Points are sorted by x, then y. The upper chain is scanned left to right and "
                   "drops the middle point of every left turn; the lower chain repeats the scan "
                   "and drops the middle point of every right turn.")

    def _run(self, points: List[Point]) -> HullResult:
        # Each pass consumes its own sorted copy.
        upper = build_chain(sort_points(points), Phase.UPPER)
        lower = build_chain(sort_points(points), Phase.LOWER)
        return HullResult(points=tuple(points), upper=upper, lower=lower)

    def phase_lengths(self) -> List[Tuple[Phase, int]]:
        if self._result is None:
            return []
        return [(Phase.UPPER, len(self._result.upper)), (Phase.LOWER, len(self._result.lower))]

    def chain_at(self, phase: Phase, index: int) -> List[Point]:
        return self._require_result().log(phase).chain_at(index)

    def frame_at(self, phase: Phase, index: int) -> Frame:
        """
        Upper phase => the upper chain as it was at `index`, no lower chain yet.
        Lower phase => the FINAL upper chain stays visible and is also prefixed
                       to the lower chain at `index`.
        """
        result = self._require_result()
        chain = result.log(phase).chain_at(index)
        if phase is Phase.UPPER:
            return Frame(upper=chain, lower=[], points=list(result.points))

        final_upper = result.upper.final_chain
        return Frame(upper=final_upper, lower=final_upper + chain, points=list(result.points))

    def upper_chain(self) -> List[Point]:
        return self._require_result().upper.final_chain

    def lower_chain(self) -> List[Point]:
        return self._require_result().lower.final_chain

    def hull(self) -> List[Point]:
        """
        Final hull in counterclockwise order, starting at the leftmost point.
        The chains keep duplicates and collinear points; the hull does not:
        their vertices are deduplicated and rescanned with <= so that only
        strict turns survive. All-collinear input => the two endpoints.
        """
        S = sorted(set(self.upper_chain()) | set(self.lower_chain()))
        if len(S) <= 2:
            return S

        L: List[Point] = []
        for p in S:
            while len(L) >= 2 and orientation(L[-2], L[-1], p) <= 0:
                L.pop()
            L.append(p)

        U: List[Point] = []
        for p in reversed(S):
            while len(U) >= 2 and orientation(U[-2], U[-1], p) <= 0:
                U.pop()
            U.append(p)

        # First and last point of each chain are shared.
        return L[:-1] + U[:-1]

    def timeline_frame(self) -> pd.DataFrame:
        """
        One row per step of the combined timeline.
        Columns: step, phase, index, op, x, y, chain_length
        (for a pop, x/y are the removed point).
        """
        result = self._require_result()
        rows = []
        step = 0
        for log in (result.upper, result.lower):
            for op in log.operations:
                rows.append({
                    "step": step,
                    "phase": op.phase.value,
                    "index": op.index,
                    "op": op.kind.value,
                    "x": op.point.x,
                    "y": op.point.y,
                    "chain_length": log.length_at(op.index),
                })
                step += 1
        return pd.DataFrame(rows, columns=["step", "phase", "index", "op", "x", "y", "chain_length"])


ALGORITHMS: Dict[str, Type[HullAlgorithm]] = {
    "graham_scan": MonotoneChainScan,
}


def create_algorithm(name: str, points=None) -> HullAlgorithm:
    try:
        cls = ALGORITHMS[name]
    except KeyError:
        raise ValueError(f"Unknown hull algorithm {name!r}; choose from {sorted(ALGORITHMS)}") from None
    return cls(points)
