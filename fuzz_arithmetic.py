import math
import random
import re
import string
import warnings

from exprcalc.errors import CalculationError
from exprcalc.runtime import evaluate
from exprcalc.shunting_yard import to_postfix
from exprcalc.tokenizer import Token, TokenType, tokenize

warnings.filterwarnings("ignore")


def eval_py(code: str) -> float | str:
    try:
        result = eval(code)
    except Exception as e:
        return str(e)
    if not isinstance(result, (int, float)):
        return f"not a number: {result!r}"  # e.g. () evaluates to an empty tuple
    return float(result)


def parenthesize(postfix: list[Token]) -> str:
    """Fully bracketed infix form of a postfix sequence, so python applies the operators in exactly our order"""
    stack: list[str] = []
    for token in postfix:
        if token.type is TokenType.OPERATOR:
            b = stack.pop()
            a = stack.pop()
            stack.append(f"({a} {token.lexeme} {b})")
        else:
            stack.append(repr(float(token.lexeme)))
    return stack[0]


def check(code: str) -> str | None:
    res_py = eval_py(code)
    try:
        postfix = to_postfix(tokenize(code))
        res_my: float | str = evaluate(postfix, variables={})
    except CalculationError as e:
        postfix = None
        res_my = str(e)

    if postfix is not None and isinstance(res_my, float):
        res_order = eval_py(parenthesize(postfix))
        if not (isinstance(res_order, float) and math.isclose(res_order, res_my)):
            return f"{code!r}\npostfix order: {res_order}\nmy: {res_my}"

    if isinstance(res_py, float) and isinstance(res_my, float) and math.isclose(res_py, res_my):
        return None
    if isinstance(res_py, str) and isinstance(res_my, str):
        return None
    if isinstance(res_py, str) and res_py.startswith("leading zeros in decimal integer literals are not permitted"):
        return None
    return f"{code!r}\npy: {res_py}\nmy: {res_my}"


if __name__ == "__main__":
    alphabet = string.digits + ".()+-*/ "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\s*\*", code):
            continue  # avoid generating powers (10**4)

        if re.findall(r"/\s*/", code):
            continue  # avoid generating int devision (10 // 3)

        if re.findall(r"(^|[-+*/(])\s*[-+]", code):
            continue  # python accepts unary signs, we don't

        mismatch = check(code)
        if mismatch is not None:
            print(mismatch + "\n\n")
