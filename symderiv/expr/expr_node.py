from dataclasses import dataclass
from enum import IntEnum, auto
from typing import Optional, Union

import sympy as sp


class ExprNodeType(IntEnum):
    INT = 0
    VAR = auto()
    ADD = auto()
    MUL = auto()
    POW = auto()
    LN = auto()


LEAF_TYPES = (ExprNodeType.INT, ExprNodeType.VAR)


@dataclass(frozen=True, repr=False)
class ExprNode(object):
    type: ExprNodeType
    arg: Optional[Union[int, str]] = None
    left: Optional["ExprNode"] = None
    right: Optional["ExprNode"] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def is_int(self, value: Optional[int] = None) -> bool:
        return self.type == ExprNodeType.INT and (value is None or self.arg == value)

    def topological_sort(self) -> list:
        if self.left is None and self.right is None:
            return [self]
        elif self.right is None:
            return self.left.topological_sort() + [self]
        else:
            return self.left.topological_sort() + self.right.topological_sort() + [self]

    @classmethod
    def from_sympy(cls, expr: Union[sp.Expr, int]) -> "ExprNode":
        # Built through the normalizing constructors, so the result is in normal form.
        from symderiv.expr import constructors as c

        if isinstance(expr, sp.Add):
            node = cls.from_sympy(expr.args[0])
            for arg in expr.args[1:]:
                node = c.add(node, cls.from_sympy(arg))
            return node

        if isinstance(expr, sp.Mul):
            node = cls.from_sympy(expr.args[0])
            for arg in expr.args[1:]:
                node = c.mul(node, cls.from_sympy(arg))
            return node

        if isinstance(expr, sp.Pow):
            return c.pow(cls.from_sympy(expr.base), cls.from_sympy(expr.exp))

        if isinstance(expr, sp.log):
            return c.ln(cls.from_sympy(expr.args[0]))

        if isinstance(expr, (sp.Integer, int)):
            return const(int(expr))

        if isinstance(expr, sp.Symbol):
            return var(expr.name)

        raise NotImplementedError(f"Unsupported expression type {type(expr)}")

    def to_sympy(self) -> sp.Expr:
        if self.type == ExprNodeType.INT:
            return sp.Integer(self.arg)
        if self.type == ExprNodeType.VAR:
            return sp.Symbol(self.arg)
        if self.type == ExprNodeType.ADD:
            return sp.Add(self.left.to_sympy(), self.right.to_sympy())
        if self.type == ExprNodeType.MUL:
            return sp.Mul(self.left.to_sympy(), self.right.to_sympy())
        if self.type == ExprNodeType.POW:
            return sp.Pow(self.left.to_sympy(), self.right.to_sympy())
        if self.type == ExprNodeType.LN:
            return sp.log(self.left.to_sympy())

        raise NotImplementedError(f"Unsupported expression type {self.type}")

    def __repr__(self) -> str:
        from symderiv.expr.render import string_of_expr

        return string_of_expr(self)

    def __str__(self) -> str:
        from symderiv.expr.render import string_of

        return string_of(self)


def const(n: int) -> ExprNode:
    return ExprNode(ExprNodeType.INT, n)


def var(name: str) -> ExprNode:
    return ExprNode(ExprNodeType.VAR, name)


zero = const(0)
one = const(1)
minus_one = const(-1)
