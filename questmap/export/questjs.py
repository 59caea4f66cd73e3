import logging
from typing import TextIO

from questmap import config
from questmap.core.direction import ALL_DIRECTIONS, to_token
from questmap.core.map_model import Thing
from questmap.export.exporter import CodeExporter, ExportLocation
from questmap.export.names import object_words
from questmap.export.strings import escape_string

logger = logging.getLogger(__name__)

CURLY_OPEN = "{"
INDENT = "  "


class QuestJSExporter(CodeExporter):
    """
    Writes a map as a QuestJS script.

    Each room becomes a createRoom(...) call and each thing a createItem(...)
    call. All rooms are written first, then the things room by room, with
    every container followed by what it holds.
    """

    file_dialog_title = "Export QuestJS Source Code"
    file_dialog_filters = (
        ("QuestJS Source File", ".js"),
        ("Text Files", ".txt"),
    )
    reserved_words = ("object", "objects")

    def export_header(self, writer: TextIO, title: str) -> None:
        writer.write(f"/*{title} - exported by {config.PROGRAM_NAME} */\n")
        writer.write("\n")

    def export_content(self, writer: TextIO) -> None:
        for location in self.locations_in_export_order:
            self.export_location(writer, location)

        for location in self.locations_in_export_order:
            self.export_things(writer, self.project.top_level_things(location.room.id), None, 1)

    def export_location(self, writer: TextIO, location: ExportLocation) -> None:
        room = location.room
        writer.write(f'createRoom("{location.export_name}", {CURLY_OPEN}\n')

        if room.description and room.description.strip():
            writer.write(f"{INDENT}desc:{escape_string(room.description)},\n")

        for direction in ALL_DIRECTIONS:
            room_exit = self.project.best_exit(room.id, direction)
            if room_exit is None:
                continue
            writer.write(f'{INDENT}{to_token(direction)}: "{self.room_names[room_exit.target_id]}",\n')
            if self.project.is_reciprocated(room_exit):
                self.reciprocated.add((room_exit.target_id, direction.opposite()))

        if room.is_dark:
            writer.write(f"{INDENT}dark:true,\n")

        writer.write("})\n")
        writer.write("\n")
        logger.debug(f"Wrote room {location.export_name}")

    def export_things(self, writer: TextIO, things: list[Thing], container: Thing | None, depth: int) -> None:
        """
        Write every thing in things whose container is container, then recurse
        into the ones that hold something.

        Args:
            writer: Where the script goes
            things: Candidate things, in the order to write them
            container: Only things inside this container are written; None
                means things resting directly in a room
            depth: Nesting level, 1 for things resting in a room
        """
        container_id = container.id if container is not None else None
        for thing in things:
            if thing.container_id != container_id:
                continue

            contents = self.project.contents(thing.id)
            export_name = self.thing_names[thing.id]
            writer.write(f'createItem("{export_name}",{self.get_flags(thing)} {CURLY_OPEN}\n')

            if thing.container_id is None:
                writer.write(f'{INDENT}loc:"{self.room_names[thing.room_id]}",\n')
            else:
                writer.write(f'{INDENT}loc:"{self.thing_names[thing.container_id]}",\n')

            words = object_words(thing.name)
            if len(words) > 1:
                quoted = "', '".join(words[:-1])
                writer.write(f"{INDENT}synonyms:['{quoted}'],\n")
            writer.write(f'{INDENT}synonyms:["{words[-1]}"],\n')

            writer.write("})\n")
            writer.write("\n")
            logger.debug(f"Wrote thing {export_name} at depth {depth}")

            if contents:
                self.export_things(writer, contents, thing, depth + 1)

    def get_flags(self, thing: Thing) -> str:
        flags = "TAKEABLE(),"
        if self.project.has_contents(thing.id):
            flags += " CONTAINER(false),"
        return flags
