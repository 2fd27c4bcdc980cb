"""
Module: benchmark
Description: Empirically evaluate the recorded monotone-chain hull.
             - Generate random 2D point sets.
             - Measure runtime of calculate() (full step history included).
             - Compare against theoretical O(n log n) growth (normalized n log n curve).
             - Produce a runtime-vs-theory plot and an optional CSV table.

Usage:
    $ python -m hull_stepper.benchmark --sizes 1000 2000 4000 --repeats 5
"""
import argparse
import logging
import math
import os
import time
from statistics import median
from typing import List, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from hull_stepper.hull_engine import MonotoneChainScan
from hull_stepper.logging_config import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_SIZES = (250, 500, 1000, 2000, 4000, 8000)


def nlogn(n: int) -> float:
    return n * math.log2(n) if n > 1 else float(n)


def time_calculate(points: np.ndarray, repeats: int = 3) -> float:
    """Median wall time (seconds) of calculate() over `repeats` fresh runs."""
    timings = []
    for _ in range(repeats):
        algorithm = MonotoneChainScan()
        t0 = time.perf_counter()
        algorithm.calculate(points)
        timings.append(time.perf_counter() - t0)
    return median(timings)


def run_benchmark(sizes: Sequence[int] = DEFAULT_SIZES, repeats: int = 3, seed: int = 42) -> pd.DataFrame:
    """
    One row per size: n, seconds, steps, pops, nlogn_scaled.
    nlogn_scaled is n log n normalized so it matches the measured time at the largest n.
    """
    if not sizes:
        raise ValueError("at least one size is required")
    rng = np.random.default_rng(seed)
    rows = []
    for n in sizes:
        pts = rng.random((n, 2)) * 100.0
        seconds = time_calculate(pts, repeats)
        algorithm = MonotoneChainScan()
        result = algorithm.calculate(pts)
        rows.append({
            "n": n,
            "seconds": seconds,
            "steps": result.step_count,
            "pops": result.upper.pop_count + result.lower.pop_count,
        })
        logger.info("n=%d: %.6fs, %d steps", n, seconds, result.step_count)

    df = pd.DataFrame(rows, columns=["n", "seconds", "steps", "pops"])
    largest = df.loc[df["n"].idxmax()]
    top = nlogn(int(largest["n"]))
    scale = largest["seconds"] / top if top > 0 else 0.0
    df["nlogn_scaled"] = df["n"].map(nlogn) * scale
    return df


def plot_runtime(df: pd.DataFrame, ax: Optional[plt.Axes] = None) -> plt.Axes:
    """Measured runtime vs normalized n log n curve."""
    if ax is None:
        _, ax = plt.subplots()
    ax.plot(df["n"], df["seconds"], "o-", label="calculate() (measured)")
    ax.plot(df["n"], df["nlogn_scaled"], "--", label="n log n (normalized)")
    ax.set_xlabel("n")
    ax.set_ylabel("seconds")
    ax.set_title("Recorded monotone chain: experimental vs O(n log n)")
    ax.legend()
    return ax


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Runtime of the recorded hull vs n log n.")
    parser.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES))
    parser.add_argument("--repeats", type=int, default=3)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--csv", default=None, help="write the result table to this CSV file")
    parser.add_argument("--no-plot", action="store_true", help="skip the matplotlib window")
    args = parser.parse_args(argv)

    setup_logging()
    df = run_benchmark(args.sizes, args.repeats, args.seed)
    print(df.to_string(index=False))

    if args.csv:
        os.makedirs(os.path.dirname(os.path.abspath(args.csv)), exist_ok=True)
        df.to_csv(args.csv, index=False)
        logger.info("Wrote %s", args.csv)
    if not args.no_plot:
        plot_runtime(df)
        plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
