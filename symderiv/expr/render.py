from symderiv.expr.expr_node import LEAF_TYPES, ExprNode, ExprNodeType

ELIDE_THRESHOLD = 100

# Binding strength used by the minimal-bracket printer.
_PREC = {
    ExprNodeType.ADD: 1,
    ExprNodeType.MUL: 2,
    ExprNodeType.POW: 3,
}


def count(expr: ExprNode) -> int:
    if expr.type in LEAF_TYPES:
        return 1
    if expr.type == ExprNodeType.LN:
        return count(expr.left)
    return count(expr.left) + count(expr.right)


def string_of_expr(expr: ExprNode) -> str:
    if expr.type == ExprNodeType.INT:
        return str(expr.arg)

    if expr.type == ExprNodeType.VAR:
        return expr.arg

    if expr.type == ExprNodeType.ADD:
        return f"({string_of_expr(expr.left)} + {string_of_expr(expr.right)})"

    if expr.type == ExprNodeType.MUL:
        return f"({string_of_expr(expr.left)} * {string_of_expr(expr.right)})"

    if expr.type == ExprNodeType.POW:
        return f"({string_of_expr(expr.left)}^{string_of_expr(expr.right)})"

    if expr.type == ExprNodeType.LN:
        return f"ln({string_of_expr(expr.left)})"

    raise NotImplementedError(f"Unsupported expression type {expr.type}")


def _string_of_minimal(expr: ExprNode, outer: int) -> str:
    if expr.type == ExprNodeType.INT:
        if expr.arg < 0 and outer > _PREC[ExprNodeType.POW]:
            return f"({expr.arg})"
        return str(expr.arg)

    if expr.type == ExprNodeType.VAR:
        return expr.arg

    if expr.type == ExprNodeType.LN:
        return f"ln({_string_of_minimal(expr.left, 1)})"

    prec = _PREC[expr.type]
    if expr.type == ExprNodeType.ADD:
        body = f"{_string_of_minimal(expr.left, 1)} + {_string_of_minimal(expr.right, 1)}"
    elif expr.type == ExprNodeType.MUL:
        body = f"{_string_of_minimal(expr.left, 2)}*{_string_of_minimal(expr.right, 2)}"
    else:
        # ^ is right-associative: a^b^c == a^(b^c)
        body = f"{_string_of_minimal(expr.left, 4)}^{_string_of_minimal(expr.right, 3)}"

    if prec < outer:
        return f"({body})"
    return body


def string_of(expr: ExprNode, threshold: int = ELIDE_THRESHOLD, minimal: bool = False) -> str:
    """Render expr, or "<<count>>" when it has more than `threshold` nodes."""
    n = count(expr)
    if n > threshold:
        return f"<<{n}>>"
    if minimal:
        return _string_of_minimal(expr, 1)
    return string_of_expr(expr)
