from __future__ import annotations

from collections.abc import Sequence
from functools import total_ordering
from typing import Any, Self

from pydantic import ConfigDict, RootModel, model_serializer, model_validator

from ._types import (
    IntegerParseError,
    MajorInvalid,
    MinorInvalid,
    PatchInvalid,
    UInt32,
    VersionStringInvalid,
)
from .util import TokenCursor, count_tokens, parse_u32

_COMPONENT_ERRORS = (MajorInvalid, MinorInvalid, PatchInvalid)


@total_ordering
class VersionTriple(RootModel[tuple[UInt32, UInt32, UInt32]]):
    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return ".".join(map(str, self.root))

    def __lt__(self, other: Self, /) -> bool:
        if not isinstance(other, VersionTriple):
            return NotImplemented
        return self.root < other.root

    @property
    def major(self) -> int:
        return self.root[0]

    @property
    def minor(self) -> int:
        return self.root[1]

    @property
    def patch(self) -> int:
        return self.root[2]

    @classmethod
    def new(cls, major: int, minor: int = 0, patch: int = 0) -> Self:
        return cls((major, minor, patch))

    @classmethod
    def from_str(cls, v: str) -> Self:
        count = count_tokens(v)
        if count > len(_COMPONENT_ERRORS):
            raise VersionStringInvalid(v)
        tokens = TokenCursor(v)
        components = [
            _parse_component(error, tokens.advance(), v)
            for error in _COMPONENT_ERRORS[:count]
        ]
        return cls.new(*components)

    @classmethod
    def from_split(cls, tokens: TokenCursor, original: str) -> Self:
        """Build a triple from the next three tokens of ``tokens``.

        Exactly the consumed tokens are advanced past; ``original`` only
        appears in error messages.
        """
        components = [
            _parse_component(error, next(tokens, ""), original)
            for error in _COMPONENT_ERRORS
        ]
        return cls.new(*components)

    @model_serializer
    def _serialize(self) -> str:
        return str(self)

    @model_validator(mode="before")  # type: ignore [arg-type]
    @staticmethod
    def _model_validator(root: Any) -> Any:
        match root:
            case VersionTriple():
                return root.root
            case str():
                return VersionTriple.from_str(root).root
            case (major,):
                return major, 0, 0
            case (major, minor):
                return major, minor, 0
            case Sequence():
                return tuple(root)
            case _:
                return root


def _parse_component(
    error: type[MajorInvalid | MinorInvalid | PatchInvalid],
    token: str,
    version: str,
) -> int:
    try:
        return parse_u32(token)
    except IntegerParseError as e:
        raise error(version) from e

