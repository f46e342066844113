import enum
from typing import Annotated, NewType

from pydantic import Field

UINT32_MAX = 0xFFFF_FFFF

UInt32 = Annotated[int, Field(ge=0, le=UINT32_MAX)]

VersionString = NewType("VersionString", str)


class IntegerParseErrorKind(enum.Enum):
    empty = enum.auto()
    invalid_digit = enum.auto()
    overflow = enum.auto()

    def __str__(self) -> str:
        return {
            IntegerParseErrorKind.empty: "cannot parse integer from empty string",
            IntegerParseErrorKind.invalid_digit: "invalid digit found in string",
            IntegerParseErrorKind.overflow: "number too large to fit in target type",
        }[self]


class IntegerParseError(ValueError):
    def __init__(self, kind: IntegerParseErrorKind, token: str) -> None:
        super().__init__(kind, token)
        self.kind = kind
        self.token = token

    def __str__(self) -> str:
        return str(self.kind)


class VersionTripleError(ValueError):
    pass


class _ComponentInvalid(VersionTripleError):
    __component__: str

    def __init__(self, version: str) -> None:
        super().__init__(version)
        self.version = version

    def __str__(self) -> str:
        message = f"Failed to parse {self.__component__} version from {self.version!r}"
        if self.__cause__ is None:
            return message
        return f"{message}: {self.__cause__}"


class MajorInvalid(_ComponentInvalid):
    __component__ = "major"


class MinorInvalid(_ComponentInvalid):
    __component__ = "minor"


class PatchInvalid(_ComponentInvalid):
    __component__ = "patch"


class VersionStringInvalid(VersionTripleError):
    def __init__(self, version: str) -> None:
        super().__init__(version)
        self.version = version

    def __str__(self) -> str:
        return (
            f"Failed to parse version triple from {self.version!r}: "
            "expected at most 3 components"
        )


class VersionNumberError(ValueError):
    def __init__(self, version: str) -> None:
        super().__init__(version)
        self.version = version


class ExtraVersionInvalid(VersionNumberError):
    def __str__(self) -> str:
        return f"Failed to parse extra version from {self.version!r}: {self.__cause__}"


class VersionTripleInvalid(VersionNumberError):
    def __str__(self) -> str:
        return f"Failed to parse version triple from {self.version!r}: {self.__cause__}"
