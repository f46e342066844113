from __future__ import annotations

from ._types import (
    ExtraVersionInvalid,
    IntegerParseError,
    IntegerParseErrorKind,
    MajorInvalid,
    MinorInvalid,
    PatchInvalid,
    VersionNumberError,
    VersionStringInvalid,
    VersionTripleError,
    VersionTripleInvalid,
)
from .config import BundleConfig, BundleVersions, Config
from .number import VersionNumber
from .triple import VersionTriple
from .util import TokenCursor, count_tokens, parse_u32

__version__ = "0.1.0"

__all__ = [
    "BundleConfig",
    "BundleVersions",
    "Config",
    "ExtraVersionInvalid",
    "IntegerParseError",
    "IntegerParseErrorKind",
    "MajorInvalid",
    "MinorInvalid",
    "PatchInvalid",
    "TokenCursor",
    "VersionNumber",
    "VersionNumberError",
    "VersionStringInvalid",
    "VersionTriple",
    "VersionTripleError",
    "VersionTripleInvalid",
    "count_tokens",
    "parse_u32",
]
