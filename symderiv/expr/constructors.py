"""Normalizing constructors.

Each constructor takes operands that are already in normal form and returns
an expression in normal form: constants are folded, units are elided, and
sum/product chains are right-associated with at most one leading constant.
Operands are never re-normalized deeply.
"""
from typing import Optional, Tuple

from symderiv.expr.expr_node import ExprNode, ExprNodeType, const, one, zero


def pown(a: int, b: int) -> int:
    """a**b by recursive halving of the exponent."""
    if b < 0:
        raise ValueError(f"pown expects a non-negative exponent, got {b}")
    if b == 0:
        return 1
    if b == 1:
        return a
    half = pown(a, b // 2)
    return half * half * (1 if b % 2 == 0 else a)


def _split_leading_int(expr: ExprNode, action: ExprNodeType) -> Optional[Tuple[int, ExprNode]]:
    # action(Int(n), rest) -> (n, rest)
    if expr.type == action and expr.left.is_int():
        return expr.left.arg, expr.right
    return None


def add(f: ExprNode, g: ExprNode) -> ExprNode:
    if f.is_int() and g.is_int():
        return const(f.arg + g.arg)
    if f.is_int(0):
        return g
    if g.is_int(0):
        return f
    if g.is_int():
        return add(g, f)

    split = _split_leading_int(g, ExprNodeType.ADD)
    if split is not None:
        n, rest = split
        if f.is_int():
            return add(const(f.arg + n), rest)
        return add(const(n), add(f, rest))

    if f.type == ExprNodeType.ADD:
        # (a + b) + g -> a + (b + g)
        return add(f.left, add(f.right, g))

    return ExprNode(ExprNodeType.ADD, left=f, right=g)


def mul(f: ExprNode, g: ExprNode) -> ExprNode:
    if f.is_int() and g.is_int():
        return const(f.arg * g.arg)
    if f.is_int(0) or g.is_int(0):
        return zero
    if f.is_int(1):
        return g
    if g.is_int(1):
        return f
    if g.is_int():
        return mul(g, f)

    split = _split_leading_int(g, ExprNodeType.MUL)
    if split is not None:
        n, rest = split
        if f.is_int():
            return mul(const(f.arg * n), rest)
        return mul(const(n), mul(f, rest))

    if f.type == ExprNodeType.MUL:
        # (a * b) * g -> a * (b * g)
        return mul(f.left, mul(f.right, g))

    return ExprNode(ExprNodeType.MUL, left=f, right=g)


def pow(f: ExprNode, g: ExprNode) -> ExprNode:
    if f.is_int() and g.is_int() and g.arg >= 0:
        return const(pown(f.arg, g.arg))
    # Exponent checks come first: 0^0 == 1.
    if g.is_int(0):
        return one
    if g.is_int(1):
        return f
    if f.is_int(0):
        return zero
    return ExprNode(ExprNodeType.POW, left=f, right=g)


def ln(f: ExprNode) -> ExprNode:
    if f.is_int(1):
        return zero
    return ExprNode(ExprNodeType.LN, left=f)
