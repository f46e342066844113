from __future__ import annotations

import re
from collections.abc import Iterator

from ._types import UINT32_MAX, IntegerParseError, IntegerParseErrorKind

SEPARATOR = "."

_DIGITS_PATTERN = re.compile(r"\+?[0-9]+")


def count_tokens(s: str) -> int:
    return s.count(SEPARATOR) + 1


def parse_u32(token: str) -> int:
    if not token:
        raise IntegerParseError(IntegerParseErrorKind.empty, token)
    if _DIGITS_PATTERN.fullmatch(token) is None:
        raise IntegerParseError(IntegerParseErrorKind.invalid_digit, token)
    value = int(token)
    if value > UINT32_MAX:
        raise IntegerParseError(IntegerParseErrorKind.overflow, token)
    return value


class TokenCursor(Iterator[str]):
    """Cursor over the ``.``-separated tokens of a version string.

    Consumers take the tokens they need with :meth:`advance` (or ``next``)
    and leave the cursor positioned at the rest.
    """

    def __init__(self, s: str) -> None:
        self._tokens = tuple(s.split(SEPARATOR))
        self._position = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tokens={self._tokens!r}, position={self._position})"

    def __next__(self) -> str:
        return self.advance()

    @property
    def remaining(self) -> int:
        return len(self._tokens) - self._position

    def peek(self) -> str | None:
        if not self.remaining:
            return None
        return self._tokens[self._position]

    def advance(self) -> str:
        if not self.remaining:
            raise StopIteration
        token = self._tokens[self._position]
        self._position += 1
        return token
