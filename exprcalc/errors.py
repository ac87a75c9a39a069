from dataclasses import dataclass

from exprcalc.utils import point_at


@dataclass
class CalculationError(Exception):
    message: str
    offset: int = 0

    stage = "Calculation"

    def __str__(self) -> str:
        return self.message

    def pretty(self, code: str) -> str:
        excerpt, caret = point_at(code, self.offset)
        return "\n".join([f"[{self.stage} error] {self.message}", excerpt, caret])
