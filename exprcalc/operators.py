import enum
import operator
from dataclasses import dataclass
from typing import Callable

from exprcalc.utils import PrintableEnum


class Associativity(PrintableEnum):
    LEFT = enum.auto()
    RIGHT = enum.auto()


@dataclass(frozen=True)
class Operator:
    symbol: str
    precedence: int
    associativity: Associativity
    apply: Callable[[float, float], float]

    def yields_to(self, other: "Operator") -> bool:
        """Whether ``self``, sitting on the operator stack, must be emitted before ``other`` is pushed"""
        if other.associativity is Associativity.LEFT:
            return self.precedence >= other.precedence
        return self.precedence > other.precedence


OPERATORS: dict[str, Operator] = {
    op.symbol: op
    for op in [
        Operator("+", 1, Associativity.LEFT, operator.add),
        Operator("-", 1, Associativity.LEFT, operator.sub),
        Operator("*", 2, Associativity.LEFT, operator.mul),
        Operator("/", 2, Associativity.LEFT, operator.truediv),
    ]
}


def get_operator(symbol: str) -> Operator:
    return OPERATORS[symbol]
