# chain_builder_test.py
# PyTest unit tests for the orientation test and a single monotone-chain pass

import math

import numpy as np
import pytest

from hull_stepper.chain_builder import ChainLog, OpKind, Phase, build_chain, violates_convexity
from hull_stepper.geometry import Point, as_points, orientation, sort_points


def sorted_random(n, seed):
    rng = np.random.default_rng(seed)
    return sort_points(as_points(rng.random((n, 2)) * 10.0))


# ---------- Orientation ----------

def test_orientation_signs():
    a, b = Point(0, 0), Point(1, 0)
    assert orientation(a, b, Point(1, 1)) > 0    # left turn
    assert orientation(a, b, Point(1, -1)) < 0   # right turn
    assert orientation(a, b, Point(2, 0)) == 0   # collinear


def test_orientation_uses_consecutive_edges():
    # cross((b-a), (c-b)) = (2,0) x (1,3) = 6
    assert orientation((0, 0), (2, 0), (3, 3)) == 6


def test_orientation_propagates_nan():
    assert math.isnan(orientation((0, 0), (1, math.nan), (2, 2)))


def test_violates_convexity_thresholds():
    assert violates_convexity(Phase.UPPER, 1.0)
    assert not violates_convexity(Phase.UPPER, 0.0)
    assert not violates_convexity(Phase.UPPER, -1.0)
    assert violates_convexity(Phase.LOWER, -1.0)
    assert not violates_convexity(Phase.LOWER, 0.0)
    assert not violates_convexity(Phase.LOWER, 1.0)


def test_as_points_rejects_bad_shape():
    with pytest.raises(ValueError):
        as_points([(1, 2, 3)])
    assert as_points([]) == []


# ---------- Chain builder ----------

@pytest.mark.parametrize("phase", [Phase.UPPER, Phase.LOWER])
def test_small_inputs(phase):
    assert len(build_chain([], phase)) == 0
    assert build_chain([], phase).final_chain == []

    one = build_chain([Point(1, 1)], phase)
    assert [op.kind for op in one.operations] == [OpKind.PUSH]
    assert one.final_chain == [(1, 1)]

    two = build_chain([Point(0, 0), Point(1, 1)], phase)
    assert [op.kind for op in two.operations] == [OpKind.PUSH, OpKind.PUSH]
    assert two.final_chain == [(0, 0), (1, 1)]


@pytest.mark.parametrize("phase", [Phase.UPPER, Phase.LOWER])
def test_operations_are_tagged_and_indexed(phase):
    log = build_chain(sorted_random(40, 5), phase)
    assert [op.index for op in log.operations] == list(range(len(log)))
    assert all(op.phase is phase for op in log.operations)
    assert log.push_count == 40
    assert log.pop_count <= 38
    assert len(log) == log.push_count + log.pop_count


@pytest.mark.parametrize("phase", [Phase.UPPER, Phase.LOWER])
def test_snapshot_lookup_matches_replay(phase):
    log = build_chain(sorted_random(60, 9), phase)
    for k in range(len(log)):
        chain = log.chain_at(k)
        assert chain == log.replay(k)
        assert log.length_at(k) == len(chain)
    assert log.chain_at(len(log) - 1) == log.final_chain


def test_snapshots_are_not_mutated_by_later_steps():
    pts = [Point(0, 0), Point(1, 1), Point(2, 2.5), Point(3, 0)]
    log = build_chain(pts, Phase.UPPER)
    # (1,1) is popped once (2,2.5) arrives; the step before still shows it.
    assert log.chain_at(2) == [(0, 0), (1, 1), (2, 2.5)]
    assert log.chain_at(3) == [(0, 0), (2, 2.5)]
    assert log.final_chain == [(0, 0), (2, 2.5), (3, 0)]


def test_pop_removes_second_to_last():
    log = ChainLog(Phase.LOWER)
    for p in [Point(0, 0), Point(1, 5), Point(2, 0)]:
        log.push(p)
    log.pop()
    assert log.final_chain == [(0, 0), (2, 0)]
    assert log.operations[-1].point == (1, 5)


def test_pop_needs_two_points():
    log = ChainLog(Phase.UPPER)
    log.push(Point(0, 0))
    with pytest.raises(IndexError):
        log.pop()


def test_chain_at_out_of_range():
    log = build_chain([Point(0, 0), Point(1, 0)], Phase.UPPER)
    with pytest.raises(IndexError):
        log.chain_at(2)
    with pytest.raises(IndexError):
        log.replay(-1)


@pytest.mark.parametrize("phase", [Phase.UPPER, Phase.LOWER])
def test_collinear_points_terminate_and_are_kept(phase):
    pts = sort_points([Point(i, 3 * i + 1) for i in range(8)])
    log = build_chain(pts, phase)
    assert log.pop_count == 0
    assert log.final_chain == pts


def test_upper_and_lower_pop_on_opposite_turns():
    # (1, 2) is above the segment, (1, -2) below it.
    pts = sort_points([Point(0, 0), Point(1, 2), Point(1, -2), Point(2, 0)])
    upper = build_chain(pts, Phase.UPPER).final_chain
    lower = build_chain(pts, Phase.LOWER).final_chain
    assert upper == [(0, 0), (1, 2), (2, 0)]
    assert lower == [(0, 0), (1, -2), (2, 0)]
