import logging
from typing import Callable, List, Optional, TypeVar

from tqdm import tqdm

from symderiv.expr import ExprNode, count, d, pow, string_of, var
from symderiv.expr.render import ELIDE_THRESHOLD

logger = logging.getLogger(__name__)

A = TypeVar("A")


def nest(n: int, f: Callable[[A], A], x: A) -> A:
    for _ in range(n):
        x = f(x)
    return x


def seed_expr(name: str = "x") -> ExprNode:
    # x^x
    x = var(name)
    return pow(x, x)


def deriv_step(
    expr: ExprNode,
    name: str = "x",
    echo: Optional[Callable[[str], None]] = print,
    threshold: int = ELIDE_THRESHOLD,
    minimal: bool = False,
) -> ExprNode:
    df = d(name, expr)
    if echo is not None:
        before = string_of(expr, threshold=threshold, minimal=minimal)
        after = string_of(df, threshold=threshold, minimal=minimal)
        echo(f"D({before}) = {after}")
    return df


def run(
    n: int,
    seed: Optional[ExprNode] = None,
    name: str = "x",
    echo: Optional[Callable[[str], None]] = print,
    threshold: int = ELIDE_THRESHOLD,
    minimal: bool = False,
    counts: Optional[List[int]] = None,
    progress: bool = False,
) -> ExprNode:
    """Differentiate `seed` n times, echoing each step and then the final node count.

    When `counts` is given, the node count of the seed and of every derivative
    is appended to it.
    """
    expr = seed_expr(name) if seed is None else seed
    if counts is not None:
        counts.append(count(expr))
    for i in tqdm(range(n), desc="differentiating", disable=not progress):
        expr = deriv_step(expr, name, echo=echo, threshold=threshold, minimal=minimal)
        if counts is not None:
            counts.append(count(expr))
            logger.debug("step %d: %d nodes", i + 1, counts[-1])
        elif logger.isEnabledFor(logging.DEBUG):
            logger.debug("step %d: %d nodes", i + 1, count(expr))
    if echo is not None:
        echo(str(counts[-1] if counts else count(expr)))
    return expr


def growth_profile(
    n: int, seed: Optional[ExprNode] = None, name: str = "x", progress: bool = False
) -> List[int]:
    """Node counts of the seed and of each of its first n derivatives."""
    counts = []
    run(n, seed=seed, name=name, echo=None, counts=counts, progress=progress)
    return counts


def plot_growth(counts: List[int], path: str) -> None:
    from matplotlib import pyplot as plt

    plt.figure(figsize=(10, 6))
    plt.plot(range(len(counts)), counts, marker="o")
    plt.yscale("log")
    plt.title(f"Term growth under repeated differentiation\nFinal count: {counts[-1]}")
    plt.xlabel("Derivative order")
    plt.ylabel("Node count")
    plt.gca().spines[["top", "right"]].set_visible(False)
    plt.savefig(path)
    plt.close()
    logger.info("Saved growth plot to %s", path)
