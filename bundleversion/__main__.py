from __future__ import annotations

import json
import logging
import plistlib
import sys
import tomllib
from collections.abc import Callable, Sequence
from functools import wraps
from typing import IO, ParamSpec, TypeVar

import click
from pydantic import ValidationError
from schema import SchemaError

from ._apis import compare, is_version_number_string, sort_version_numbers
from ._types import UINT32_MAX, VersionNumberError
from .config import Config
from .number import VersionNumber

P = ParamSpec("P")
T = TypeVar("T")


def report_version_errors(f: Callable[P, T]) -> Callable[P, T]:
    @wraps(f)
    def wrapped(*args: P.args, **kwargs: P.kwargs) -> T:
        try:
            return f(*args, **kwargs)
        except (
            VersionNumberError,
            ValidationError,
            SchemaError,
            tomllib.TOMLDecodeError,
        ) as e:
            raise click.ClickException(f"{e}") from e

    return wrapped


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@main.command()
@click.argument("versions", metavar="VERSION...", nargs=-1, required=True)
@report_version_errors
def parse(versions: Sequence[str]) -> None:
    for v in versions:
        version = VersionNumber.from_str(v)
        record = {
            "version": f"{version}",
            "triple": list(version.triple.root),
            "extra": None if version.extra is None else list(version.extra),
        }
        click.echo(json.dumps(record))


@main.command()
@click.argument("versions", metavar="VERSION...", nargs=-1, required=True)
def check(versions: Sequence[str]) -> None:
    invalid = 0
    for v in versions:
        if is_version_number_string(v, check=False):
            click.echo(f"{v}\tok")
        else:
            invalid += 1
            click.echo(f"{v}\tinvalid")
    if invalid:
        sys.exit(1)


@main.command(name="sort")
@click.option("--reverse", "-r", is_flag=True)
@click.argument("versions", metavar="VERSION...", nargs=-1, required=True)
@report_version_errors
def sort_(versions: Sequence[str], reverse: bool) -> None:
    for version in sort_version_numbers(versions, reverse=reverse):
        click.echo(f"{version}")


@main.command(name="compare")
@click.argument("lhs")
@click.argument("rhs")
@report_version_errors
def compare_(lhs: str, rhs: str) -> None:
    result = compare(VersionNumber.from_str(lhs), VersionNumber.from_str(rhs))
    click.echo({-1: "<", 0: "=", 1: ">"}[result])


@main.command()
@click.argument("version")
@click.argument("number", type=click.IntRange(min=0, max=UINT32_MAX))
@report_version_errors
def append(version: str, number: int) -> None:
    other = VersionNumber.from_str(version)
    click.echo(f"{VersionNumber.from_other_and_number(other, number)}")


@main.command()
@click.argument(
    "config_io",
    metavar="CONFIG.TOML",
    type=click.File(mode="rb"),
)
@click.option(
    "--build-number", type=click.IntRange(min=0, max=UINT32_MAX), default=None
)
@report_version_errors
def plist(config_io: IO[bytes], build_number: int | None) -> None:
    config = Config.load(config_io)
    versions = config.bundle.resolve(build_number)
    click.echo(plistlib.dumps(versions.plist).decode("utf-8"), nl=False)


if __name__ == "__main__":
    main()
