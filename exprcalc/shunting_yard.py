"""Infix to postfix conversion with strict operand/operator alternation"""

from exprcalc.errors import CalculationError
from exprcalc.operators import get_operator
from exprcalc.tokenizer import Token, TokenType


class ExprSyntaxError(CalculationError):
    stage = "Syntax"


INVALID_TOKEN = "Invalid token in expression"
MISMATCHED_PARENTHESES = "Mismatched parentheses"


def to_postfix(tokens: list[Token]) -> list[Token]:
    output: list[Token] = []
    stack: list[Token] = []  # operators and opening brackets
    expect_operand = True

    for token in tokens:
        if token.type in (TokenType.NUMBER, TokenType.VARIABLE):
            if not expect_operand:
                raise ExprSyntaxError(INVALID_TOKEN, offset=token.offset)
            output.append(token)
            expect_operand = False
        elif token.type is TokenType.OPERATOR:
            if expect_operand:
                raise ExprSyntaxError(INVALID_TOKEN, offset=token.offset)
            try:
                current = get_operator(token.lexeme)
            except KeyError:
                raise ExprSyntaxError(f"Unknown operator: {token.lexeme}", offset=token.offset)
            while (
                stack
                and stack[-1].type is not TokenType.BRACKET_OPEN
                and get_operator(stack[-1].lexeme).yields_to(current)
            ):
                output.append(stack.pop())
            stack.append(token)
            expect_operand = True
        elif token.type is TokenType.BRACKET_OPEN:
            if not expect_operand:
                raise ExprSyntaxError(INVALID_TOKEN, offset=token.offset)
            stack.append(token)
        elif token.type is TokenType.BRACKET_CLOSE:
            if expect_operand:
                raise ExprSyntaxError(INVALID_TOKEN, offset=token.offset)
            while stack and stack[-1].type is not TokenType.BRACKET_OPEN:
                output.append(stack.pop())
            if not stack:
                raise ExprSyntaxError(MISMATCHED_PARENTHESES, offset=token.offset)
            stack.pop()
        else:
            raise ExprSyntaxError(f"Unexpected token type: {token.type}", offset=token.offset)

    while stack:
        top = stack.pop()
        if top.type is TokenType.BRACKET_OPEN:
            raise ExprSyntaxError(MISMATCHED_PARENTHESES, offset=top.offset)
        output.append(top)

    if expect_operand:
        raise ExprSyntaxError(INVALID_TOKEN, offset=tokens[-1].offset if tokens else 0)

    return output
