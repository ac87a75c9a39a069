import pytest

from exprcalc.tokenizer import LexError, Token, TokenType, is_identifier, tokenize, untokenize


def test_tokenize_offsets() -> None:
    tokens = tokenize("2 + 3 * x")
    assert tokens == [
        Token(TokenType.NUMBER, "2", 0),
        Token(TokenType.OPERATOR, "+", 2),
        Token(TokenType.NUMBER, "3", 4),
        Token(TokenType.OPERATOR, "*", 6),
        Token(TokenType.VARIABLE, "x", 8),
    ]


def test_tokenize_brackets() -> None:
    tokens = tokenize("(2 + 3)")
    assert [t.type for t in tokens] == [
        TokenType.BRACKET_OPEN,
        TokenType.NUMBER,
        TokenType.OPERATOR,
        TokenType.NUMBER,
        TokenType.BRACKET_CLOSE,
    ]
    assert [t.offset for t in tokens] == [0, 1, 3, 5, 6]


@pytest.mark.parametrize(
    "code, lexemes",
    [
        pytest.param("", []),
        pytest.param("   \t ", []),
        pytest.param("3.14", ["3.14"]),
        pytest.param("1.2.3", ["1.2.3"]),
        pytest.param("x1y2", ["x1y2"]),
        pytest.param("2x", ["2", "x"]),
        pytest.param("a+b", ["a", "+", "b"]),
        pytest.param("((1))", ["(", "(", "1", ")", ")"]),
    ],
)
def test_tokenize_lexemes(code: str, lexemes: list[str]) -> None:
    assert [t.lexeme for t in tokenize(code)] == lexemes


def test_offsets_non_decreasing() -> None:
    offsets = [t.offset for t in tokenize(" (alpha+ 12.5)*  beta / 3 ")]
    assert offsets == sorted(offsets)


@pytest.mark.parametrize(
    "code, offset",
    [
        pytest.param("2 + @", 4),
        pytest.param("$", 0),
        pytest.param("1 ^ 2", 2),
        pytest.param("a = 1", 2),
        pytest.param("1 + ²", 4),
        pytest.param("٣", 0),
        pytest.param("x²", 1),
    ],
)
def test_tokenize_unexpected_character(code: str, offset: int) -> None:
    with pytest.raises(LexError) as exc_info:
        tokenize(code)
    assert exc_info.value.offset == offset
    assert exc_info.value.message == f"Unexpected character: {code[offset]!r}"


def test_lex_error_pretty() -> None:
    with pytest.raises(LexError) as exc_info:
        tokenize("2 + @")
    assert exc_info.value.pretty("2 + @") == "\n".join(
        [
            "[Tokenizer error] Unexpected character: '@'",
            "2 + @",
            "    ^",
        ]
    )


def test_untokenize() -> None:
    assert untokenize(tokenize("( 1+2 )*x")) == "(1 + 2) * x"


@pytest.mark.parametrize(
    "name, expected",
    [
        pytest.param("x", True),
        pytest.param("x2", True),
        pytest.param("2x", False),
        pytest.param("", False),
        pytest.param("a_b", False),
        pytest.param("x²", False),
    ],
)
def test_is_identifier(name: str, expected: bool) -> None:
    assert is_identifier(name) is expected
