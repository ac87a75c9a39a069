import enum
import re
from dataclasses import dataclass

from exprcalc.errors import CalculationError
from exprcalc.utils import PrintableEnum


class LexError(CalculationError):
    stage = "Tokenizer"


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    OPERATOR = enum.auto()
    VARIABLE = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    offset: int

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}@{self.offset}"


DIGITS = "0123456789"


def _is_valid_in_number(s: str) -> bool:
    return s in DIGITS or s == "."


def _is_valid_in_identifier(s: str) -> bool:
    return s.isalpha() or s in DIGITS


SINGLE_CHAR_TOKENS = {
    "+": TokenType.OPERATOR,
    "-": TokenType.OPERATOR,
    "*": TokenType.OPERATOR,
    "/": TokenType.OPERATOR,
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
}


def is_identifier(name: str) -> bool:
    """Whether ``name`` would be tokenized as a single variable"""
    return bool(name) and name[0].isalpha() and all(_is_valid_in_identifier(c) for c in name)


def tokenize(code: str) -> list[Token]:
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        if code[i].isspace():
            i += 1
        elif _is_valid_in_number(code[i]):
            number_end_idx = i + 1
            while number_end_idx < len(code) and _is_valid_in_number(code[number_end_idx]):
                number_end_idx += 1
            tokens.append(Token(type=TokenType.NUMBER, lexeme=code[i:number_end_idx], offset=i))
            i = number_end_idx
        elif code[i] in SINGLE_CHAR_TOKENS:
            tokens.append(Token(type=SINGLE_CHAR_TOKENS[code[i]], lexeme=code[i], offset=i))
            i += 1
        elif code[i].isalpha():
            ident_end_idx = i + 1
            while ident_end_idx < len(code) and _is_valid_in_identifier(code[ident_end_idx]):
                ident_end_idx += 1
            tokens.append(Token(type=TokenType.VARIABLE, lexeme=code[i:ident_end_idx], offset=i))
            i = ident_end_idx
        else:
            raise LexError(f"Unexpected character: {code[i]!r}", offset=i)
    return tokens


def untokenize(tokens: list[Token]) -> str:
    result = " ".join(t.lexeme for t in tokens)

    # ( 1 + 2 ) => (1 + 2)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)
    return result
