"""Command-line interface for iconharvest."""

from pathlib import Path
from typing import Annotated

import typer

from iconharvest import __version__
from iconharvest.exceptions import IconHarvestError
from iconharvest.exceptions import IconParseError
from iconharvest.exceptions import IconReadError
from iconharvest.exceptions import UnrecognizedSizeError
from iconharvest.log import setup_logging
from iconharvest.models import Category
from iconharvest.models import IconSize
from iconharvest.models import Package
from iconharvest.models import PackageType
from iconharvest.naming import feature_name
from iconharvest.naming import parse_raw_icon_name
from iconharvest.operations import read_package_icons
from iconharvest.output import print_feature_name
from iconharvest.output import print_icons
from iconharvest.output import print_icons_json

app = typer.Typer(help="Icon package feature name generator")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"iconharvest {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
    debug: Annotated[
        bool, typer.Option("--debug", help="Enable debug logging")
    ] = False,
) -> None:
    """Icon package feature name generator."""
    setup_logging(debug)


@app.command()
def scan(
    short_name: Annotated[
        str, typer.Option("--short-name", "-s", help="Package short name, e.g. Ai")
    ],
    icons_dir: Annotated[
        Path | None,
        typer.Argument(help="Icon directory (default: the package's cache dir)"),
    ] = None,
    package_type: Annotated[
        PackageType, typer.Option("--type", "-t", help="Icon package family")
    ] = PackageType.OTHER,
    json_output: Annotated[
        bool, typer.Option("--json", help="Print icons as JSON")
    ] = False,
) -> None:
    """Read all icons of a package and print their feature names."""
    package = Package(short_name=short_name, ty=package_type)

    try:
        icons = read_package_icons(package, icons_dir)
    except (FileNotFoundError, NotADirectoryError) as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None
    except IconParseError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, bold=True, err=True)
        typer.secho(f"   Cause: {e.__cause__}", err=True)
        raise typer.Exit(1) from None
    except IconReadError as e:
        typer.secho(
            f"✗ Filesystem error: {e}", fg=typer.colors.RED, bold=True, err=True
        )
        typer.secho(f"   Cause: {e.__cause__}", err=True)
        raise typer.Exit(1) from None
    except IconHarvestError as e:
        typer.secho(f"✗ Error: {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None

    if json_output:
        print_icons_json(icons)
    else:
        print_icons(icons, package)


@app.command()
def name(
    file_stem: Annotated[str, typer.Argument(help="Icon file name without extension")],
    short_name: Annotated[
        str, typer.Option("--short-name", "-s", help="Package short name, e.g. Ai")
    ],
    package_type: Annotated[
        PackageType, typer.Option("--type", "-t", help="Icon package family")
    ] = PackageType.OTHER,
    category: Annotated[
        list[str] | None,
        typer.Option(
            "--category", "-c", help="Category inherited from a directory (repeatable)"
        ),
    ] = None,
    size: Annotated[
        str | None,
        typer.Option(help="Size numeral inherited from a directory, e.g. 24"),
    ] = None,
) -> None:
    """Show the feature name an icon file would receive."""
    try:
        inherited_size = IconSize.parse(size) if size is not None else None
    except UnrecognizedSizeError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None

    categories = [Category(c) for c in category or []]
    raw_name, size_from_name = parse_raw_icon_name(package_type, file_stem, categories)
    print_feature_name(
        feature_name(raw_name, size_from_name or inherited_size, categories, short_name),
        categories,
    )


def main() -> None:
    """Main entry point for the iconharvest CLI."""
    app()


if __name__ == "__main__":
    main()
