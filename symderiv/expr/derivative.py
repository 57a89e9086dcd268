from symderiv.expr.constructors import add, ln, mul, pow
from symderiv.expr.expr_node import ExprNode, ExprNodeType, minus_one, one, zero


def d(x: str, f: ExprNode) -> ExprNode:
    """Derivative of f with respect to the variable named x, in normal form."""
    if f.type == ExprNodeType.INT:
        return zero

    if f.type == ExprNodeType.VAR:
        return one if f.arg == x else zero

    if f.type == ExprNodeType.ADD:
        return add(d(x, f.left), d(x, f.right))

    if f.type == ExprNodeType.MUL:
        a, b = f.left, f.right
        return add(mul(a, d(x, b)), mul(b, d(x, a)))

    if f.type == ExprNodeType.POW:
        # d(a^b) = a^b * (b * a' / a + ln(a) * b')
        a, b = f.left, f.right
        return mul(
            pow(a, b),
            add(
                mul(mul(b, d(x, a)), pow(a, minus_one)),
                mul(ln(a), d(x, b)),
            ),
        )

    if f.type == ExprNodeType.LN:
        a = f.left
        return mul(d(x, a), pow(a, minus_one))

    raise NotImplementedError(f"Unsupported expression type {f.type}")
