"""Output formatting for iconharvest commands."""

import json
from collections.abc import Sequence

import typer

from iconharvest.models import Category
from iconharvest.models import Package
from iconharvest.models import SvgIcon


def print_icons(icons: Sequence[SvgIcon], package: Package) -> None:
    """Print feature names of icons to stdout, sorted, followed by a summary.

    Args:
        icons: Icons read from the package
        package: Package the icons were read from
    """
    for name in sorted(icon.name for icon in icons):
        typer.echo(name)

    num_icons = len(icons)
    typer.secho(
        f"✓ Found {num_icons} icon{'s' if num_icons != 1 else ''} "
        f"in {package.short_name}",
        fg=typer.colors.GREEN,
        bold=True,
        err=True,
    )


def print_icons_json(icons: Sequence[SvgIcon]) -> None:
    """Print icons as a JSON array of {name, viewBox, content} objects."""
    data = [
        {
            "name": icon.name,
            "viewBox": icon.svg.view_box,
            "content": icon.svg.content,
        }
        for icon in sorted(icons, key=lambda icon: icon.name)
    ]
    typer.echo(json.dumps(data, indent=2))


def print_feature_name(name: str, categories: Sequence[Category]) -> None:
    """Print a feature name and the categories that went into it.

    Args:
        name: Synthesized feature name
        categories: Categories after the package rule was applied
    """
    typer.echo(name)
    if categories:
        typer.secho(
            f"  categories: {', '.join(str(c) for c in categories)}",
            fg=typer.colors.BRIGHT_BLACK,
        )
