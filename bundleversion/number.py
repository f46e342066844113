from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from functools import total_ordering
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, model_serializer, model_validator

from ._types import (
    ExtraVersionInvalid,
    IntegerParseError,
    UInt32,
    VersionTripleError,
    VersionTripleInvalid,
)
from .triple import VersionTriple
from .util import SEPARATOR, TokenCursor, count_tokens, parse_u32

logger = logging.getLogger(__name__)

TRIPLE_ARITY = 3


@total_ordering
class VersionNumber(BaseModel):
    """A version triple optionally followed by extra numeric components.

    ``extra is None`` means no extra components were given. An empty tuple
    displays the same as ``None`` but does not compare equal to it.
    """

    model_config = ConfigDict(frozen=True)

    triple: VersionTriple
    extra: tuple[UInt32, ...] | None = None

    def __str__(self) -> str:
        def item() -> Iterator[str]:
            yield f"{self.triple}"
            for number in self.extra or ():
                yield f"{SEPARATOR}{number}"

        return "".join(item())

    def __lt__(self, other: Self, /) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        if self.triple != other.triple:
            return self.triple < other.triple
        match self.extra, other.extra:
            case None, None:
                return False
            case None, _:
                return True
            case _, None:
                return False
            case lhs, rhs:
                return lhs < rhs

    @classmethod
    def new(cls, triple: VersionTriple, extra: Sequence[int] | None) -> Self:
        return cls(triple=triple, extra=extra)

    @classmethod
    def new_from_triple(cls, triple: VersionTriple) -> Self:
        return cls(triple=triple, extra=None)

    @classmethod
    def from_other_and_number(cls, other: VersionNumber, number: int) -> Self:
        extra = (*(other.extra or ()), number)
        logger.debug("appending %d to %s", number, other)
        return cls.new(other.triple, extra)

    @classmethod
    def from_str(cls, v: str) -> Self:
        triple, extra = _parse(v)
        return cls.new(triple, extra)

    @model_serializer
    def _serialize(self) -> str:
        return str(self)

    @model_validator(mode="before")  # type: ignore [arg-type]
    @staticmethod
    def _model_validator(data: Any) -> Any:
        if isinstance(data, str):
            triple, extra = _parse(data)
            return {"triple": triple, "extra": extra}
        return data


def _parse(v: str) -> tuple[VersionTriple, tuple[int, ...] | None]:
    count = count_tokens(v)
    if count <= TRIPLE_ARITY:
        logger.debug("parsing %r as a bare triple", v)
        try:
            return VersionTriple.from_str(v), None
        except VersionTripleError as e:
            raise VersionTripleInvalid(v) from e

    logger.debug("parsing %r as a triple with %d extra", v, count - TRIPLE_ARITY)
    tokens = TokenCursor(v)
    try:
        triple = VersionTriple.from_split(tokens, v)
    except VersionTripleError as e:
        raise VersionTripleInvalid(v) from e

    try:
        extra = tuple(parse_u32(token) for token in tokens)
    except IntegerParseError as e:
        raise ExtraVersionInvalid(v) from e
    return triple, extra
