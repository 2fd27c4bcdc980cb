"""
Module: chain_builder
Description: One monotone-chain pass (upper or lower) that records every Push/Pop
             it performs, so any intermediate chain can be looked up afterwards.

Every step keeps a reference to the head of its chain. Chains are persistent
linked stacks: a Push adds a node on top of the previous head, a Pop builds a
new head that skips the second-to-last node. Old heads are never modified;
the history holds exactly one node per step.
"""
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence

from hull_stepper.geometry import Point, orientation


class Phase(Enum):
    UPPER = "upper"
    LOWER = "lower"


class OpKind(Enum):
    PUSH = "push"
    POP = "pop"


class Operation(NamedTuple):
    """
    One atomic event of a chain's construction.
    For PUSH `point` is the appended point, for POP it is the removed one.
    """
    kind: OpKind
    phase: Phase
    index: int
    point: Point


class _Node(NamedTuple):
    point: Point
    below: Optional["_Node"]
    depth: int


def _materialize(node: Optional[_Node]) -> List[Point]:
    chain: List[Point] = []
    while node is not None:
        chain.append(node.point)
        node = node.below
    chain.reverse()
    return chain


def violates_convexity(phase: Phase, turn: float) -> bool:
    """
    True when the middle point of the last three must be removed.
    upper => a left turn (> 0) makes the middle point redundant
    lower => a right turn (< 0) makes the middle point redundant
    Collinear triples (== 0) are kept in both phases.
    """
    if phase is Phase.UPPER:
        return turn > 0
    return turn < 0


class ChainLog:
    """Operation log of a single phase plus O(1) access to every intermediate chain."""

    def __init__(self, phase: Phase):
        self.phase = phase
        self.operations: List[Operation] = []
        self._heads: List[Optional[_Node]] = []

    def __len__(self) -> int:
        return len(self.operations)

    def __repr__(self) -> str:
        return (f"ChainLog({self.phase.value}, steps={len(self)}, "
                f"pushes={self.push_count}, pops={self.pop_count})")

    @property
    def _head(self) -> Optional[_Node]:
        return self._heads[-1] if self._heads else None

    @property
    def chain_length(self) -> int:
        head = self._head
        return head.depth if head is not None else 0

    def length_at(self, index: int) -> int:
        """Number of chain points right after operation `index`."""
        return self._heads[index].depth

    def last_three(self):
        """(a, b, c) = last three chain points, oldest first."""
        c = self._head
        b = c.below
        return b.below.point, b.point, c.point

    # ---------- Recording ----------
    def push(self, point: Point) -> None:
        head = self._head
        depth = head.depth + 1 if head is not None else 1
        self._record(OpKind.PUSH, point, _Node(point, head, depth))

    def pop(self) -> None:
        """Remove the second-to-last point of the chain."""
        head = self._head
        if head is None or head.depth < 2:
            raise IndexError("pop needs at least two points on the chain")
        removed = head.below
        self._record(OpKind.POP, removed.point, _Node(head.point, removed.below, head.depth - 1))

    def _record(self, kind: OpKind, point: Point, head: _Node) -> None:
        self.operations.append(Operation(kind, self.phase, len(self.operations), point))
        self._heads.append(head)

    # ---------- Snapshots ----------
    def chain_at(self, index: int) -> List[Point]:
        """Chain contents right after operations [0..=index] were applied."""
        if not 0 <= index < len(self):
            raise IndexError(f"{self.phase.value} step {index} out of range [0, {len(self)})")
        return _materialize(self._heads[index])

    def replay(self, index: int) -> List[Point]:
        """Same result as chain_at(), rebuilt by folding the operation log from an empty chain."""
        if not 0 <= index < len(self):
            raise IndexError(f"{self.phase.value} step {index} out of range [0, {len(self)})")
        chain: List[Point] = []
        for op in self.operations[:index + 1]:
            if op.kind is OpKind.PUSH:
                chain.append(op.point)
            else:
                del chain[-2]
        return chain

    @property
    def final_chain(self) -> List[Point]:
        return _materialize(self._head)

    @property
    def push_count(self) -> int:
        return sum(1 for op in self.operations if op.kind is OpKind.PUSH)

    @property
    def pop_count(self) -> int:
        return sum(1 for op in self.operations if op.kind is OpKind.POP)


def build_chain(sorted_points: Sequence[Point], phase: Phase) -> ChainLog:
    """
    Monotone-chain scan over points already sorted by (x, y).
      - push the first two points,
      - for every further point: push it, then pop the middle of the last three
        while they violate the convexity rule of this phase.
    Fewer than two points => whatever exists is pushed and the scan stops.
    Every pop shrinks the chain and needs >= 3 points, so collinear input terminates.
    """
    log = ChainLog(phase)
    for p in sorted_points[:2]:
        log.push(p)
    if len(sorted_points) < 2:
        return log

    for p in sorted_points[2:]:
        log.push(p)
        while log.chain_length >= 3 and violates_convexity(phase, orientation(*log.last_three())):
            log.pop()
    return log
