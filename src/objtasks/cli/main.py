"""objtasks CLI entry point: Click group with subcommands."""

from __future__ import annotations

import json
import logging
import sys

import click

from objtasks import __version__
from objtasks.config import ObjtasksConfig
from objtasks.model.rectangle import Rectangle
from objtasks.selector import PartKind, Selector, SelectorError, css_selector_builder
from objtasks.selector import combine as combine_selectors
from objtasks.serialization import to_json

# Command-line spelling of each part kind.
_PART_NAMES: dict[str, PartKind] = {
    "element": PartKind.ELEMENT,
    "id": PartKind.ID,
    "class": PartKind.CLASS,
    "attr": PartKind.ATTRIBUTE,
    "pseudo-class": PartKind.PSEUDO_CLASS,
    "pseudo-element": PartKind.PSEUDO_ELEMENT,
}


def _parse_part(raw: str) -> tuple[PartKind, str]:
    """Split a ``kind=value`` argument; the value may itself contain ``=``."""
    name, sep, value = raw.partition("=")
    if not sep:
        raise click.BadParameter(f"expected KIND=VALUE, got {raw!r}", param_hint="PART")
    kind = _PART_NAMES.get(name)
    if kind is None:
        choices = ", ".join(_PART_NAMES)
        raise click.BadParameter(
            f"unknown part kind {name!r} (choose from {choices})", param_hint="PART"
        )
    return kind, value


@click.group()
@click.version_option(version=__version__, prog_name="objtasks")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """objtasks - rectangles, JSON helpers and a CSS selector builder."""
    config = ObjtasksConfig()
    level = logging.DEBUG if verbose else getattr(logging, config.log_level)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument("parts", nargs=-1, required=True)
def selector(parts: tuple[str, ...]) -> None:
    """Build a compound selector from KIND=VALUE parts, in order.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.
    """
    parsed = [_parse_part(raw) for raw in parts]

    built = css_selector_builder
    try:
        for kind, value in parsed:
            built = built.append(kind, value)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(built.stringify())


@cli.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Join two already-built selectors with a combinator."""
    result = combine_selectors(Selector(left), combinator, Selector(right))
    click.echo(result.stringify())


@cli.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    click.echo(f"{Rectangle(width, height).area():g}")


@cli.command("json")
@click.argument("text")
@click.option("--indent", type=int, default=None, help="Indent nested values")
@click.option("--sort-keys", is_flag=True, help="Sort object keys")
def json_command(text: str, indent: int | None, sort_keys: bool) -> None:
    """Re-encode TEXT as canonical JSON."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        click.echo(f"Error: invalid JSON: {exc}", err=True)
        sys.exit(1)

    config = ObjtasksConfig(json_indent=indent, json_sort_keys=sort_keys)
    click.echo(to_json(data, config=config))
