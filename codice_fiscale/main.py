"""Command-line entry point.

Usage:
    codice-fiscale encode --name Michele --surname Beltrame --birthdate 1977-11-04 --sex M --place MANIAGO
    codice-fiscale parse BLTMHL77S04E889G
    codice-fiscale check BLTMHL77S04E889G
    codice-fiscale lookup E889

Also runnable as ``python -m codice_fiscale.main``.
"""

from __future__ import annotations

import logging
import sys

import click
import structlog

from codice_fiscale.codec import CodiceFiscaleCodec
from codice_fiscale.config import settings
from codice_fiscale.models.enums import Sex
from codice_fiscale.schemas.codice_fiscale import Person, Place

logger = logging.getLogger(__name__)


# ── Logging setup ────────────────────────────────────────────────────


def configure_logging(level: str | None = None) -> None:
    """Wire stdlib logging and structlog to stderr at the configured level."""
    logging.basicConfig(
        level=getattr(logging, level or settings.log_level),
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
        stream=sys.stderr,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


# ── Helpers ──────────────────────────────────────────────────────────


def _resolve_place(codec: CodiceFiscaleCodec, query: str) -> Place | None:
    """A place by Belfiore code first, then by name."""
    return codec.directory.lookup_by_code(query) or codec.directory.lookup_by_name(query)


def _format_place(place: Place) -> str:
    province = f" ({place.province})" if place.province else ""
    return f"{place.belfiore_code} {place.name}{province}"


# ── Commands ─────────────────────────────────────────────────────────


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override CF_LOG_LEVEL.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Encode, parse and validate Italian codici fiscali.

    The bundled birthplace table is only a sample; set CF_BELFIORE_PATH to a
    complete code,province,name file to parse codes from any municipality.
    """
    configure_logging(log_level.upper() if log_level else None)
    ctx.obj = CodiceFiscaleCodec()


@cli.command()
@click.option("--name", required=True)
@click.option("--surname", required=True)
@click.option("--birthdate", required=True, help="YYYY-MM-DD")
@click.option("--sex", type=click.Choice([s.value for s in Sex], case_sensitive=False), required=True)
@click.option("--place", "place_query", required=True, help="Municipality/country name or Belfiore code.")
@click.pass_obj
def encode(
    codec: CodiceFiscaleCodec,
    name: str,
    surname: str,
    birthdate: str,
    sex: str,
    place_query: str,
) -> None:
    """Print the codice fiscale for a person."""
    place = _resolve_place(codec, place_query)
    if place is None:
        click.echo(f"Unknown place: {place_query}", err=True)
        sys.exit(1)

    person = Person(name=name, surname=surname, birthdate=birthdate, sex=Sex(sex.upper()), place=place)
    result = codec.encode(person)
    if result.is_err():
        click.echo(f"{result.error.value}: {result.message}", err=True)
        sys.exit(1)
    click.echo(result.unwrap().code)


@cli.command()
@click.argument("code")
@click.option("--current-year", type=int, default=None, help="Reference year for the century (default: today).")
@click.pass_obj
def parse(codec: CodiceFiscaleCodec, code: str, current_year: int | None) -> None:
    """Print the data encoded in a codice fiscale."""
    result = codec.parse(code, current_year=current_year)
    if result.is_err():
        click.echo(f"{result.error.value}: {result.message}", err=True)
        sys.exit(1)

    cf = result.unwrap()
    click.echo(f"code:       {cf.code}")
    click.echo(f"surname:    {cf.parts.surname}")
    click.echo(f"name:       {cf.parts.name}")
    click.echo(f"birthdate:  {cf.birthdate.isoformat()}")
    click.echo(f"sex:        {cf.sex.value}")
    click.echo(f"birthplace: {_format_place(cf.person.place)}")


@cli.command()
@click.argument("code")
@click.pass_obj
def check(codec: CodiceFiscaleCodec, code: str) -> None:
    """Exit 0 when the code is valid, 1 otherwise."""
    if codec.check(code):
        click.echo("valid")
        return
    click.echo("invalid")
    sys.exit(1)


@cli.command()
@click.argument("query")
@click.pass_obj
def lookup(codec: CodiceFiscaleCodec, query: str) -> None:
    """Find a place by name or Belfiore code."""
    place = _resolve_place(codec, query)
    if place is None:
        click.echo(f"Not found: {query}", err=True)
        sys.exit(1)
    click.echo(_format_place(place))


# ── Entry point ──────────────────────────────────────────────────────

if __name__ == "__main__":
    cli()
