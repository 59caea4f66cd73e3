import logging
import sys
from pathlib import Path

import click
from devtools import debug
from pydantic import ValidationError

from . import config
from .core.graph import ExportOrder
from .core.map_model import MapProject
from .export.questjs import QuestJSExporter


def configure_logging(verbose: bool = False) -> None:
    """Set up the root logger from QUESTMAP_LOG_LEVEL, or DEBUG when verbose."""
    level = logging.DEBUG if verbose else config.LOG_LEVEL.upper()
    logging.basicConfig(level=level, format=config.LOG_FORMAT)


def load_project(map_file: str) -> MapProject:
    """Load a map file, exiting with an error message if it can't be read."""
    try:
        return MapProject.load(map_file)
    except FileNotFoundError:
        click.echo(f"Error: Map file '{map_file}' not found", err=True)
        sys.exit(1)
    except ValidationError as e:
        click.echo(f"Error: '{map_file}' is not a valid map file\n{e}", err=True)
        sys.exit(1)


order_option = click.option(
    "--order",
    type=click.Choice([order.value for order in ExportOrder]),
    default=ExportOrder.DECLARED.value,
    show_default=True,
    help="Order to write rooms in",
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log every name and record")
def main(verbose: bool = False):
    """questmap: export text-adventure maps as QuestJS scripts."""
    configure_logging(verbose)


@main.command()
@click.argument("map_file")
@click.argument("output_file")
@click.option("--title", default=None, help="Title for the header comment")
@order_option
@click.option("--debug", "show_debug", is_flag=True, help="Dump the map and export result")
def export(map_file: str, output_file: str, title: str | None, order: str, show_debug: bool = False):
    """Export a map as a QuestJS script.

    MAP_FILE: Path to the JSON map file
    OUTPUT_FILE: Where to write the script (.js is added if there's no extension)
    """
    project = load_project(map_file)
    if show_debug:
        debug(project)

    exporter = QuestJSExporter(project, order)
    if not Path(output_file).suffix:
        output_file += exporter.default_extension

    try:
        result = exporter.export(output_file, title)
    except ValueError as e:
        click.echo(f"Error: {str(e)}", err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(f"Error: Could not write '{output_file}': {e.strerror or e}", err=True)
        sys.exit(1)

    if show_debug:
        debug(result)
    click.echo(
        f"Exported {len(result.room_names)} rooms and {len(result.thing_names)} objects to {output_file}"
    )


@main.command()
@click.argument("map_file")
@order_option
def names(map_file: str, order: str):
    """List the export name given to every room and object.

    MAP_FILE: Path to the JSON map file
    """
    project = load_project(map_file)
    exporter = QuestJSExporter(project, order)
    try:
        exporter.prepare()
    except ValueError as e:
        click.echo(f"Error: {str(e)}", err=True)
        sys.exit(1)

    click.echo("Rooms:")
    for location in exporter.locations_in_export_order:
        click.echo(f"  {location.room.id} -> {location.export_name}")
    click.echo("Objects:")
    for item in exporter.things:
        click.echo(f"  {'  ' * item.depth}{item.thing.id} -> {item.export_name}")


if __name__ == "__main__":
    main()
