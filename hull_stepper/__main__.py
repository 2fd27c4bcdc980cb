"""Command-line interface: python -m hull_stepper [--points N] [--tick-rate MS] ..."""
import argparse
import sys
from typing import List, Optional

from hull_stepper.config import TICK_RATE_MS, ViewerConfig
from hull_stepper.errors import HullError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hull_stepper",
        description="Step forward and backward through a monotone-chain convex hull construction.",
    )
    parser.add_argument("--tick-rate", type=int, default=TICK_RATE_MS,
                        help="time in ms between two autoplay ticks (default: %(default)s)")
    parser.add_argument("--points", type=int, default=None,
                        help="generate this many random points on start")
    parser.add_argument("--seed", type=int, default=None, help="seed for the point generator")
    parser.add_argument("--log-level", default="info",
                        choices=["debug", "info", "warning", "error"])
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = ViewerConfig.from_args(args)
        # Imported late so --help works without a display backend.
        from hull_stepper.viewer import run_viewer
        run_viewer(config)
    except (HullError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
