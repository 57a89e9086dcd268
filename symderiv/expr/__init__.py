from symderiv.expr.constructors import add, ln, mul, pow, pown
from symderiv.expr.derivative import d
from symderiv.expr.expr_node import (
    ExprNode,
    ExprNodeType,
    const,
    minus_one,
    one,
    var,
    zero,
)
from symderiv.expr.render import ELIDE_THRESHOLD, count, string_of, string_of_expr
