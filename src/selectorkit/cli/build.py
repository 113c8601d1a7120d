"""CLI command: selectorkit build -- assemble a selector from its fragments."""

from __future__ import annotations

import sys

import click

from selectorkit.builder import SelectorBuilder
from selectorkit.config import SelectorkitConfig
from selectorkit.errors import SelectorError
from selectorkit.model.selector import Selector


@click.command()
@click.option("--element", "element", default=None, help="Element (type) selector")
@click.option("--id", "id_", default=None, help="Id selector, without '#'")
@click.option("--class", "classes", multiple=True, help="Class name, repeatable")
@click.option("--attr", "attrs", multiple=True, help="Attribute test, repeatable")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class, repeatable")
@click.option("--pseudo-element", "pseudo_element", default=None, help="Pseudo-element")
@click.option(
    "--then",
    "then",
    nargs=2,
    multiple=True,
    metavar="COMBINATOR SELECTOR",
    help="Join a raw selector string with a combinator, repeatable",
)
@click.pass_obj
def build(
    config: SelectorkitConfig | None,
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
    then: tuple[tuple[str, str], ...],
) -> None:
    """Print the selector built from the given fragments.

    Fragments are applied in the canonical order, so the command only fails
    when a combinator is unknown.
    """
    builder = SelectorBuilder(config)
    selector = Selector()

    try:
        if element is not None:
            selector = selector.element(element)
        if id_ is not None:
            selector = selector.id(id_)
        for value in classes:
            selector = selector.class_(value)
        for value in attrs:
            selector = selector.attr(value)
        for value in pseudo_classes:
            selector = selector.pseudo_class(value)
        if pseudo_element is not None:
            selector = selector.pseudo_element(pseudo_element)

        for combinator, raw in then:
            selector = builder.combine(selector, combinator, Selector(combined=raw))
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(builder.stringify(selector))
