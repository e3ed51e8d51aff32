"""Glyph catalog printer.

Lists every member of a category next to its glyph, which is the quickest way
to see which emoji a given terminal can display::

    mythoji-catalog creatures
    mythoji-catalog people --label-width 30

``people`` also prints every skin tone x gender combination under each
person, indented by ``CatalogStyle.indent``.
"""

from dataclasses import dataclass
import logging
from typing import Callable, Dict, List

import click

from mythoji.categories import (
    Creature,
    Gender,
    Item,
    Location,
    Person,
    SkinTone,
    Symbol,
)
from mythoji.errors import MythojiError
from mythoji.render import render, render_person
from mythoji.utils.category import members

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogStyle:
    """Presentation settings for catalog lines.

    Attributes:
        label_width: Column width of the member label.
        indent: Spaces before each person variant line.
    """

    label_width: int = 25
    indent: int = 2


DEFAULT_STYLE = CatalogStyle()


def _line(label: str, glyph: str, width: int) -> str:
    return f"{label:<{width}} = {glyph}"


def _simple_catalog(category: type) -> Callable[[CatalogStyle], List[str]]:
    def build(style: CatalogStyle) -> List[str]:
        lines = [f"mythoji.{category.__name__}::", ""]
        for member in members(category):
            lines.append(_line(member.name, render(member), style.label_width))
        return lines

    return build


def people_catalog(style: CatalogStyle = DEFAULT_STYLE) -> List[str]:
    """Every person, followed by all of its skin tone and gender variants."""
    lines = ["mythoji.Person::", ""]
    pad = " " * style.indent
    variant_width = max(style.label_width - style.indent, 0)
    for person in members(Person):
        lines.append(_line(person.name, render(person), style.label_width))
        for skin_tone in members(SkinTone):
            for gender in members(Gender):
                label = f"{skin_tone.name} + {gender.name}"
                glyph = render_person(person, skin_tone, gender)
                lines.append(pad + _line(label, glyph, variant_width))
    return lines


CATALOG_REGISTRY: Dict[str, Callable[[CatalogStyle], List[str]]] = {
    "people": people_catalog,
    "creatures": _simple_catalog(Creature),
    "locations": _simple_catalog(Location),
    "items": _simple_catalog(Item),
    "symbols": _simple_catalog(Symbol),
}


@click.command()
@click.argument("catalog", type=click.Choice(sorted(CATALOG_REGISTRY)))
@click.option(
    "--label-width",
    default=DEFAULT_STYLE.label_width,
    show_default=True,
    type=click.IntRange(min=1),
    help="Width of the name column.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(catalog: str, label_width: int, verbose: bool) -> None:
    """Print every glyph of CATALOG."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    style = CatalogStyle(label_width=label_width)
    logger.debug("Rendering %s catalog with %s", catalog, style)
    try:
        lines = CATALOG_REGISTRY[catalog](style)
    except MythojiError as exc:
        raise click.ClickException(str(exc)) from exc
    for line in lines:
        click.echo(line)


if __name__ == "__main__":
    main()
