"""Command-line interface for flexver."""

import json
from pathlib import Path
from typing import Annotated

import typer

from .._logging import setup_logging
from ..config import ParserSettings, load_settings
from ..exceptions import ConfigError, InvalidVersionError
from ..parser import VersionParser
from ..update_check import check_update
from ._helpers import (
    console,
    outcome_table,
    print_error,
    print_success,
    print_warning,
)

app = typer.Typer(help="Best-effort parsing of dotted version strings")

BignumOption = Annotated[
    bool | None,
    typer.Option(
        ...,
        "--bignum/--no-bignum",
        help=(
            "Measure overflow with arbitrary-precision integers or floats. "
            "Defaults to the configured value."
        ),
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to config file (flexver.toml or pyproject.toml)",
    ),
]


def _settings(config: Path | None) -> ParserSettings:
    settings = load_settings(config)
    setup_logging(settings.log_level)
    return settings


def _has_bignum(settings: ParserSettings, bignum: bool | None) -> bool:
    return settings.has_bignum if bignum is None else bignum


@app.command()
def parse(
    version: Annotated[str, typer.Argument(..., help="Version string to parse")],
    as_json: Annotated[
        bool, typer.Option(..., "--json", help="Print the outcome as JSON")
    ] = False,
    bignum: BignumOption = None,
    config: ConfigOption = None,
) -> None:
    """Parse a version string and report what was recovered."""
    try:
        settings = _settings(config)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    parser = VersionParser(has_bignum=_has_bignum(settings, bignum))
    outcome = parser.parse(version)

    if as_json:
        console.print_json(json.dumps(outcome.to_dict()))
    else:
        console.print(outcome_table(outcome))

    if not outcome.is_usable:
        print_error(f"Unparseable version: {version!r}")
        raise typer.Exit(1)
    if settings.require_exact and not outcome.is_exact:
        print_error(f"Inexact version ({outcome.status.name}): {version!r}")
        raise typer.Exit(1)


@app.command()
def compare(
    installed: Annotated[str, typer.Argument(..., help="Installed version")],
    available: Annotated[
        str, typer.Argument(..., help="Version string reported by the registry")
    ],
    bignum: BignumOption = None,
    config: ConfigOption = None,
) -> None:
    """Check whether the available version is newer than the installed one."""
    try:
        settings = _settings(config)
        result = check_update(
            installed, available, has_bignum=_has_bignum(settings, bignum)
        )
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e
    except InvalidVersionError as e:
        print_error(f"Installed version: {e}")
        raise typer.Exit(1) from e

    if result.update_available is None:
        print_error(f"Cannot compare: unparseable available version {available!r}")
        raise typer.Exit(1)

    if not result.available.is_exact:
        print_warning(
            f"Available version {available!r} parsed as "
            f"{result.available.version} ({result.available.status.name})"
        )
    if settings.require_exact and not result.available.is_exact:
        print_error(f"Inexact available version: {available!r}")
        raise typer.Exit(1)

    if result.update_available:
        print_success(
            f"Update available: {result.installed} → {result.available.version}"
        )
    else:
        console.print(f"Up to date: {result.installed}")
