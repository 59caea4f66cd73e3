"""Shared machinery for exporting a map as source code for a text-adventure system.

A CodeExporter turns a MapProject into a script in three parts: a header, the
content (rooms and objects) and a footer. Before anything is written every room
and thing gets a unique export name; rooms and things are named independently.
Subclasses supply the format details.
"""

import io
import logging
from pathlib import Path
from typing import Sequence, TextIO

from pydantic import BaseModel, Field

from questmap import config
from questmap.core.direction import Direction
from questmap.core.graph import ExportOrder, resolve_export_order
from questmap.core.map_model import MapProject, Room, Thing
from questmap.export.names import NameRegistry, allocate_name

logger = logging.getLogger(__name__)


class ExportLocation(BaseModel):
    """A room paired with the name it is exported under."""
    room: Room
    export_name: str


class ExportThing(BaseModel):
    """A thing paired with the name it is exported under."""
    thing: Thing
    export_name: str
    depth: int = 0  # 0 for things resting in a room


class ExportResult(BaseModel):
    """What an export run produced besides the text itself."""

    room_names: dict[str, str] = Field(default_factory=dict)  # room_id -> export name
    thing_names: dict[str, str] = Field(default_factory=dict)  # thing_id -> export name

    # Reverse halves of two-way passages, as (room_id, direction)
    reciprocated: set[tuple[str, Direction]] = Field(default_factory=set)

    def is_reciprocated(self, room_id: str, direction: Direction) -> bool:
        return (room_id, direction) in self.reciprocated

    def mark_exported(self, project: MapProject) -> int:
        """
        Set the exported flag on the exits recorded as reciprocated.

        Export itself never touches the map; this is for callers that want the
        flags on the model.

        Returns:
            The number of exits marked
        """
        marked = 0
        for room_id, direction in sorted(self.reciprocated):
            room_exit = project.best_exit(room_id, direction)
            if room_exit is not None:
                room_exit.exported = True
                marked += 1
        return marked


class CodeExporter:
    """
    Base class for exporters that write a map out as source code.

    Subclasses override export_header, export_content and (optionally)
    export_footer, and set the format's reserved words and file metadata.
    """

    file_dialog_title: str = "Export Source Code"
    file_dialog_filters: tuple[tuple[str, str], ...] = ()  # (label, extension)
    reserved_words: tuple[str, ...] = ()

    # Placed between a name and its disambiguating number
    room_name_separator: str = "_"
    thing_name_separator: str = ""

    def __init__(
        self,
        project: MapProject,
        order: Sequence[str] | ExportOrder | str = ExportOrder.DECLARED,
    ):
        self.project = project
        self.order = order
        self.locations: list[ExportLocation] = []
        self.things: list[ExportThing] = []
        self.room_names: dict[str, str] = {}
        self.thing_names: dict[str, str] = {}
        self.reciprocated: set[tuple[str, Direction]] = set()

    @property
    def default_extension(self) -> str:
        """The extension of the first file dialog filter."""
        return self.file_dialog_filters[0][1] if self.file_dialog_filters else ".txt"

    @property
    def locations_in_export_order(self) -> list[ExportLocation]:
        return self.locations

    # Naming
    def get_room_export_name(self, room: Room, suffix: int | None = None) -> str:
        return allocate_name(
            room.name, suffix, reserved_words=self.reserved_words, separator=self.room_name_separator
        )

    def get_thing_export_name(self, thing: Thing, suffix: int | None = None) -> str:
        return allocate_name(
            thing.name, suffix, reserved_words=self.reserved_words, separator=self.thing_name_separator
        )

    def prepare(self) -> None:
        """
        Resolve the export order and allocate every export name.

        Rooms are named in export order. Things are named in the order they
        will be written: room by room, each container followed by its contents.
        """
        room_registry = NameRegistry(self.reserved_words, self.room_name_separator)
        thing_registry = NameRegistry(self.reserved_words, self.thing_name_separator)

        self.locations = []
        self.things = []
        self.room_names = {}
        self.thing_names = {}
        self.reciprocated = set()

        for room_id in resolve_export_order(self.project, self.order):
            room = self.project.room(room_id)
            export_name = room_registry.assign(room.name)
            if export_name != self.get_room_export_name(room):
                logger.warning(f"Room '{room.name}' ({room.id}) exported as {export_name} to keep names unique")
            self.room_names[room.id] = export_name
            self.locations.append(ExportLocation(room=room, export_name=export_name))

        def name_things(things: list[Thing], depth: int) -> None:
            for thing in things:
                export_name = thing_registry.assign(thing.name)
                self.thing_names[thing.id] = export_name
                self.things.append(ExportThing(thing=thing, export_name=export_name, depth=depth))
                name_things(self.project.contents(thing.id), depth + 1)

        for location in self.locations:
            name_things(self.project.top_level_things(location.room.id), 0)

        logger.debug(f"Allocated {len(room_registry)} room names and {len(thing_registry)} thing names")

    # Writing
    def export_header(self, writer: TextIO, title: str) -> None:
        pass

    def export_content(self, writer: TextIO) -> None:
        raise NotImplementedError

    def export_footer(self, writer: TextIO) -> None:
        pass

    def write(self, writer: TextIO, title: str | None = None) -> ExportResult:
        """
        Export the whole map to an open text stream.

        Args:
            writer: Where the script goes
            title: Title for the header comment; defaults to the map's title

        Returns:
            The names used and the reciprocated exits found
        """
        self.prepare()
        title = title or self.project.title or config.DEFAULT_TITLE

        self.export_header(writer, title)
        self.export_content(writer)
        self.export_footer(writer)

        logger.info(f"Exported {len(self.locations)} rooms and {len(self.things)} things")
        return ExportResult(
            room_names=dict(self.room_names),
            thing_names=dict(self.thing_names),
            reciprocated=set(self.reciprocated),
        )

    def export(self, filepath: str | Path, title: str | None = None) -> ExportResult:
        """Export the map to a file, replacing it if it exists."""
        with open(filepath, "w", encoding=config.DEFAULT_ENCODING, newline="\n") as writer:
            result = self.write(writer, title)
        logger.info(f"Wrote {filepath}")
        return result

    def export_to_string(self, title: str | None = None) -> str:
        """Export the map and return the script as a string."""
        buffer = io.StringIO()
        self.write(buffer, title)
        return buffer.getvalue()
