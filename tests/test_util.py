import pytest

from bundleversion import IntegerParseError, IntegerParseErrorKind, TokenCursor
from bundleversion.util import count_tokens, parse_u32


@pytest.mark.parametrize(
    "s, count", [("", 1), ("1", 1), ("1.2", 2), ("1.2.3.4", 4), ("...", 4)]
)
def test_count_tokens(s: str, count: int) -> None:
    assert count_tokens(s) == count


@pytest.mark.parametrize(
    "token, value",
    [("0", 0), ("42", 42), ("007", 7), ("+4", 4), ("4294967295", 4294967295)],
)
def test_parse_u32(token: str, value: int) -> None:
    assert parse_u32(token) == value


@pytest.mark.parametrize(
    "token, kind",
    [
        ("", IntegerParseErrorKind.empty),
        ("x", IntegerParseErrorKind.invalid_digit),
        ("-1", IntegerParseErrorKind.invalid_digit),
        ("+", IntegerParseErrorKind.invalid_digit),
        ("+-1", IntegerParseErrorKind.invalid_digit),
        ("++1", IntegerParseErrorKind.invalid_digit),
        (" 1", IntegerParseErrorKind.invalid_digit),
        ("1_000", IntegerParseErrorKind.invalid_digit),
        ("\N{FULLWIDTH DIGIT ONE}", IntegerParseErrorKind.invalid_digit),
        ("4294967296", IntegerParseErrorKind.overflow),
    ],
)
def test_parse_u32_invalid(token: str, kind: IntegerParseErrorKind) -> None:
    with pytest.raises(IntegerParseError) as excinfo:
        parse_u32(token)

    assert excinfo.value.kind is kind
    assert excinfo.value.token == token


def test_token_cursor() -> None:
    tokens = TokenCursor("1.2.3")

    assert tokens.remaining == 3
    assert tokens.peek() == "1"
    assert tokens.peek() == "1"
    assert tokens.advance() == "1"
    assert next(tokens) == "2"
    assert list(tokens) == ["3"]
    assert tokens.remaining == 0
    assert tokens.peek() is None
    assert next(tokens, None) is None
    with pytest.raises(StopIteration):
        tokens.advance()
