from dataclasses import dataclass
from typing import Optional

from symderiv.expr.render import ELIDE_THRESHOLD


@dataclass
class DriverConfig:
    """Settings for one run of the repeated-differentiation driver."""

    iterations: int = 0
    var: str = "x"                      # Differentiation variable; the seed is var^var
    elide_threshold: int = ELIDE_THRESHOLD  # Render "<<count>>" above this many nodes
    minimal_brackets: bool = False      # Precedence-based printing instead of full parentheses
    recursion_limit: Optional[int] = None  # None keeps the interpreter default
    plot_path: Optional[str] = None     # Save a term-growth chart here when set
    show_progress: bool = False         # tqdm bar over the differentiation steps
