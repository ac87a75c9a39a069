import logging

from exprcalc.runtime import evaluate
from exprcalc.shunting_yard import to_postfix
from exprcalc.tokenizer import is_identifier, tokenize, untokenize

logger = logging.getLogger(__name__)


class Calculator:
    """Evaluation session: variable bindings that outlive a single expression, plus optional tracing

    Not safe for concurrent use; callers sharing one instance between threads must serialize evaluations.
    """

    def __init__(self, debug: bool = False) -> None:
        self.variables: dict[str, float] = dict()
        self.debug = debug

    def evaluate(self, code: str) -> float:
        tokens = tokenize(code)
        if self.debug:
            logger.info("Tokens: %s", " ".join(str(t) for t in tokens))

        postfix = to_postfix(tokens)
        if self.debug:
            logger.info("Postfix: %s", untokenize(postfix))

        result = evaluate(postfix, self.variables)
        if self.debug:
            logger.info("Result: %s", result)
        return result

    def set_variable(self, name: str, value: float) -> None:
        if not is_identifier(name):
            raise ValueError(f"Invalid variable name: {name!r}")
        self.variables[name] = float(value)

    def get_variable(self, name: str) -> float:
        return self.variables[name]

    def has_variable(self, name: str) -> bool:
        return name in self.variables

    def set_debug_mode(self, enabled: bool) -> None:
        self.debug = enabled
