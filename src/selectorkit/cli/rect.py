"""CLI command: selectorkit rect -- show a rectangle and its area."""

from __future__ import annotations

import click

from selectorkit.model.rectangle import Rectangle
from selectorkit.serialization import get_json


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def rect(width: float, height: float) -> None:
    """Print a WIDTH x HEIGHT rectangle as JSON followed by its area."""
    rectangle = Rectangle(width=width, height=height)
    click.echo(get_json(rectangle))
    click.echo(f"Area: {rectangle.area():g}")
