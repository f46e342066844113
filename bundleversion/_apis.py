from collections.abc import Iterable, Iterator
from contextlib import suppress
from functools import lru_cache

from schema import And, Optional, Schema

from ._decorators import schema2checker
from ._types import VersionNumberError, VersionString, VersionTripleError
from .number import VersionNumber
from .triple import VersionTriple


@schema2checker(VersionString)
def is_version_number_string() -> Schema:
    return _version_number_string_schema()


@schema2checker(VersionString)
def is_version_triple_string() -> Schema:
    return _version_triple_string_schema()


@schema2checker(dict)
def is_config() -> Schema:
    return _config_schema()


def _is_version_number(s: str) -> bool:
    with suppress(VersionNumberError):
        VersionNumber.from_str(s)
        return True
    return False


def _is_version_triple(s: str) -> bool:
    with suppress(VersionTripleError):
        VersionTriple.from_str(s)
        return True
    return False


@lru_cache(1)
def _version_number_string_schema() -> Schema:
    return Schema(And(str, _is_version_number))


@lru_cache(1)
def _version_triple_string_schema() -> Schema:
    return Schema(And(str, _is_version_triple))


@lru_cache(1)
def _config_schema() -> Schema:
    return Schema(
        {
            "bundle": {
                "version": _version_triple_string_schema(),
                Optional("bundle-version"): _version_number_string_schema(),
                Optional("bundle-version-short"): _version_triple_string_schema(),
            }
        },
        ignore_extra_keys=True,
    )


def iter_version_numbers(strings: Iterable[str]) -> Iterator[VersionNumber]:
    for s in strings:
        yield VersionNumber.from_str(s)


def sort_version_numbers(
    strings: Iterable[str], *, reverse: bool = False
) -> list[VersionNumber]:
    return sorted(iter_version_numbers(strings), reverse=reverse)


def compare(lhs: VersionNumber, rhs: VersionNumber) -> int:
    return (lhs > rhs) - (lhs < rhs)

