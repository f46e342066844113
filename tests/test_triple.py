import pytest
from pydantic import ValidationError

from bundleversion import (
    IntegerParseError,
    MajorInvalid,
    MinorInvalid,
    PatchInvalid,
    TokenCursor,
    VersionStringInvalid,
    VersionTriple,
)


@pytest.mark.parametrize("patch", range(2))
@pytest.mark.parametrize("minor", range(2))
@pytest.mark.parametrize("major", range(2))
def test_version_triple(major: int, minor: int, patch: int) -> None:
    triple = VersionTriple.new(major, minor, patch)

    assert triple == VersionTriple.from_str(f"{triple!s}")
    assert (triple.major, triple.minor, triple.patch) == (major, minor, patch)


@pytest.mark.parametrize(
    "s, expected",
    [
        ("7", "7.0.0"),
        ("7.1", "7.1.0"),
        ("7.1.2", "7.1.2"),
        ("007.01.0", "7.1.0"),
        ("+1.+2.+3", "1.2.3"),
    ],
)
def test_canonical_form(s: str, expected: str) -> None:
    assert f"{VersionTriple.from_str(s)}" == expected


@pytest.mark.parametrize(
    "s, error",
    [
        ("", MajorInvalid),
        ("x.1.2", MajorInvalid),
        ("1.x", MinorInvalid),
        ("1.2.", PatchInvalid),
        ("1.2.+", PatchInvalid),
        ("4294967296", MajorInvalid),
    ],
)
def test_component_invalid(s: str, error: type[Exception]) -> None:
    with pytest.raises(error) as excinfo:
        VersionTriple.from_str(s)

    assert isinstance(excinfo.value.__cause__, IntegerParseError)
    assert repr(s) in f"{excinfo.value}"


def test_too_many_components() -> None:
    with pytest.raises(VersionStringInvalid, match="'1.2.3.4'"):
        VersionTriple.from_str("1.2.3.4")


def test_from_split_leaves_remaining_tokens() -> None:
    tokens = TokenCursor("1.2.3.4.5")

    triple = VersionTriple.from_split(tokens, "1.2.3.4.5")

    assert triple == VersionTriple.new(1, 2, 3)
    assert tokens.remaining == 2
    assert list(tokens) == ["4", "5"]


def test_from_split_missing_component() -> None:
    with pytest.raises(PatchInvalid, match="'1.2'"):
        VersionTriple.from_split(TokenCursor("1.2"), "1.2")


def test_ordering() -> None:
    assert VersionTriple.new(1, 2, 3) < VersionTriple.new(1, 2, 4)
    assert VersionTriple.new(1, 2, 9) < VersionTriple.new(1, 10)
    assert VersionTriple.new(2) > VersionTriple.new(1, 99, 99)
    assert VersionTriple.from_str("1.2") == VersionTriple.from_str("1.2.0")


@pytest.mark.parametrize("root", ["1.2.3", [1, 2, 3], (1, 2), [1]])
def test_validate(root: object) -> None:
    triple = VersionTriple.model_validate(root)

    assert triple.major == 1
    assert triple.model_dump() == f"{triple}"


@pytest.mark.parametrize("root", ["1.2.3.4", [1, 2, 3, 4], [-1, 0, 0], "v1"])
def test_validate_invalid(root: object) -> None:
    with pytest.raises(ValidationError):
        VersionTriple.model_validate(root)
