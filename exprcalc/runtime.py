from typing import Mapping

from exprcalc.errors import CalculationError
from exprcalc.operators import get_operator
from exprcalc.shunting_yard import to_postfix
from exprcalc.tokenizer import Token, TokenType, tokenize


class EvalError(CalculationError):
    stage = "Evaluation"


def evaluate(postfix: list[Token], variables: Mapping[str, float]) -> float:
    stack: list[float] = []
    for token in postfix:
        if token.type is TokenType.NUMBER:
            try:
                stack.append(float(token.lexeme))
            except ValueError:
                raise EvalError(f"Invalid number: {token.lexeme}", offset=token.offset)
        elif token.type is TokenType.VARIABLE:
            if token.lexeme not in variables:
                raise EvalError(f"Undefined variable: {token.lexeme}", offset=token.offset)
            stack.append(variables[token.lexeme])
        elif token.type is TokenType.OPERATOR:
            if len(stack) < 2:
                raise EvalError(f"Insufficient operands for operator {token.lexeme}", offset=token.offset)
            b = stack.pop()
            a = stack.pop()
            stack.append(eval_binary_operation(token, a, b))
        else:
            raise EvalError("Invalid token in evaluation", offset=token.offset)

    if len(stack) != 1:
        raise EvalError("Invalid expression: too many operands", offset=0)
    return stack[0]


def eval_binary_operation(token: Token, a: float, b: float) -> float:
    try:
        operator = get_operator(token.lexeme)
    except KeyError:
        raise EvalError(f"Unknown operator: {token.lexeme}", offset=token.offset)
    if token.lexeme == "/" and b == 0:
        raise EvalError("Division by zero", offset=token.offset)
    return operator.apply(a, b)


def evaluate_expression(code: str, variables: Mapping[str, float]) -> float:
    return evaluate(to_postfix(tokenize(code)), variables)
