"""
Module: geometry
Description: Point type, orientation test and the helpers that turn raw input
             (lists of pairs or Nx2 numpy arrays) into validated point lists.
"""
from typing import Iterable, List, NamedTuple

import numpy as np

from hull_stepper.errors import NonFiniteCoordinateError


class Point(NamedTuple):
    """Immutable 2D point. Compares equal to a plain (x, y) tuple."""
    x: float
    y: float


# ---------- Geometry helpers ----------
def orientation(a: Point, b: Point, c: Point) -> float:
    """
    z-component of cross((b-a), (c-b)).
    > 0  => a->b->c is a left turn (counterclockwise)
    < 0  => right turn (clockwise)
    == 0 => collinear
    NaN/Inf coordinates propagate to the result.
    """
    return (b[0] - a[0]) * (c[1] - b[1]) - (b[1] - a[1]) * (c[0] - b[0])


def sort_points(points: Iterable[Point]) -> List[Point]:
    """Lexicographic copy: x ascending, ties broken by lower y first."""
    return sorted(points, key=lambda p: (p[0], p[1]))


def as_points(points) -> List[Point]:
    """
    Convert a sequence of (x, y) pairs or an Nx2 array into a list of Points.
    Raises NonFiniteCoordinateError on the first NaN/Inf coordinate.
    """
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"expected an Nx2 collection of coordinates, got shape {arr.shape}")

    finite = np.isfinite(arr).all(axis=1)
    if not finite.all():
        bad = int(np.argmin(finite))
        raise NonFiniteCoordinateError(bad, tuple(arr[bad].tolist()))
    return [Point(float(x), float(y)) for x, y in arr]
