"""Repeatedly differentiate x^x and report the size of the result."""

import argparse
import logging
import sys
from typing import List, Optional

from symderiv.config import DriverConfig
from symderiv.driver import plot_growth, run
from symderiv.expr.render import ELIDE_THRESHOLD

logger = logging.getLogger(__name__)


MIN_RECURSION_LIMIT = 100


def non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid argument: {value!r} is not an integer")
    if n < 0:
        raise argparse.ArgumentTypeError(f"invalid argument: {value!r} is negative")
    return n


def recursion_limit(value: str) -> int:
    n = non_negative_int(value)
    if n < MIN_RECURSION_LIMIT:
        raise argparse.ArgumentTypeError(
            f"invalid argument: recursion limit {n} is below {MIN_RECURSION_LIMIT}"
        )
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="symderiv", description=__doc__)
    parser.add_argument("n", type=non_negative_int, nargs="?", default=None,
                        help="number of differentiations")
    parser.add_argument("--var", default="x", help="differentiation variable (default: x)")
    parser.add_argument("--threshold", type=non_negative_int, default=ELIDE_THRESHOLD,
                        help="elide expressions with more nodes than this")
    parser.add_argument("--minimal", action="store_true",
                        help="print with precedence-based brackets")
    parser.add_argument("--recursion-limit", type=recursion_limit, default=None,
                        help="raise the interpreter recursion limit for deep trees "
                             f"(at least {MIN_RECURSION_LIMIT})")
    parser.add_argument("--plot", metavar="PATH", default=None,
                        help="save a chart of node count per derivative order")
    parser.add_argument("--progress", action="store_true",
                        help="show a progress bar while differentiating")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> DriverConfig:
    return DriverConfig(
        iterations=args.n,
        var=args.var,
        elide_threshold=args.threshold,
        minimal_brackets=args.minimal,
        recursion_limit=args.recursion_limit,
        plot_path=args.plot,
        show_progress=args.progress,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.n is None:
        parser.error("invalid argument: missing number of differentiations")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    config = config_from_args(args)

    if config.recursion_limit is not None:
        try:
            sys.setrecursionlimit(config.recursion_limit)
        except RecursionError as e:
            parser.error(f"invalid argument: {e}")

    counts = [] if config.plot_path is not None else None
    try:
        run(
            config.iterations,
            name=config.var,
            threshold=config.elide_threshold,
            minimal=config.minimal_brackets,
            counts=counts,
            progress=config.show_progress,
        )
    except RecursionError:
        logger.error("Expression too deep after differentiation; try --recursion-limit")
        return 1

    if config.plot_path is not None:
        import matplotlib

        matplotlib.use("Agg")
        plot_growth(counts, config.plot_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
