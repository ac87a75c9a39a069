from exprcalc.errors import CalculationError
from exprcalc.runtime import evaluate
from exprcalc.shunting_yard import to_postfix
from exprcalc.tokenizer import tokenize, untokenize

variables: dict[str, float] = {"x": 3.0, "rate": 0.25}

for code in [
    "5",
    "1 + 1",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "7/6/2000",
    "10 - 4 - 3",
    "x * (1 + rate)",
    "2 + + 3",
    "(2 + 3",
    "2 + 3)",
    "5 / 0",
    "y + 1",
    "2 $ 3",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
        print(f"tokens: {' '.join(str(t) for t in tokens)}")
        postfix = to_postfix(tokens)
        print(f"postfix: {untokenize(postfix)}")
        print(f"result: {evaluate(postfix, variables)}")
    except CalculationError as e:
        print(e.pretty(code))
