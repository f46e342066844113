from __future__ import annotations

import logging
import tomllib
from typing import IO, Annotated, NamedTuple, Self

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator

from ._apis import is_config
from .number import VersionNumber
from .triple import VersionTriple

logger = logging.getLogger(__name__)


@PlainValidator
def _validate_version_triple(v: VersionTriple | str) -> VersionTriple:
    if isinstance(v, VersionTriple):
        return v
    elif isinstance(v, str):
        return VersionTriple.from_str(v)
    else:
        raise ValueError(v)


@PlainValidator
def _validate_version_number(v: VersionNumber | str) -> VersionNumber:
    if isinstance(v, VersionNumber):
        return v
    elif isinstance(v, str):
        return VersionNumber.from_str(v)
    else:
        raise ValueError(v)


@PlainSerializer
def _serialize_version(v: VersionTriple | VersionNumber) -> str:
    return str(v)


AnnotatedVersionTriple = Annotated[
    VersionTriple, _validate_version_triple, _serialize_version
]
AnnotatedVersionNumber = Annotated[
    VersionNumber, _validate_version_number, _serialize_version
]


class BundleVersions(NamedTuple):
    short: VersionTriple
    bundle: VersionNumber

    @property
    def plist(self) -> dict[str, str]:
        return {
            "CFBundleShortVersionString": str(self.short),
            "CFBundleVersion": str(self.bundle),
        }


class BundleConfig(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: AnnotatedVersionTriple
    bundle_version: AnnotatedVersionNumber | None = Field(
        default=None, alias="bundle-version"
    )
    bundle_version_short: AnnotatedVersionTriple | None = Field(
        default=None, alias="bundle-version-short"
    )

    def resolve(self, build_number: int | None = None) -> BundleVersions:
        bundle_version = self.bundle_version
        if bundle_version is None:
            bundle_version = VersionNumber.new_from_triple(self.version)
        short = self.bundle_version_short
        if short is None:
            short = bundle_version.triple
        if build_number is not None:
            bundle_version = VersionNumber.from_other_and_number(
                bundle_version, build_number
            )
        logger.debug("resolved bundle versions %s / %s", short, bundle_version)
        return BundleVersions(short=short, bundle=bundle_version)


class Config(BaseModel):
    bundle: BundleConfig

    @classmethod
    def load(cls, config_io: IO[bytes]) -> Self:
        document = tomllib.load(config_io)
        is_config(document)
        return cls.model_validate(document)
