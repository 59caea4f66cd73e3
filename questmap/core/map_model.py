from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from questmap.core.direction import Direction


class Room(BaseModel):
    """
    A location on the map.

    Rooms are immutable for the duration of an export; the exporter only
    reads them.
    """

    # ID
    id: str

    # Descriptive properties
    name: str
    description: str = ""  # primary description, may be blank

    # Flags
    is_dark: bool = False
    is_start_room: bool = False


class Exit(BaseModel):
    """
    A one-way connection leaving a room in a given direction.
    """

    source_id: str
    direction: Direction
    target_id: str

    # Set once the reverse of a reciprocated pair has been accounted for.
    # Advisory only, see ExportResult.mark_exported.
    exported: bool = False

    @field_validator("direction", mode="before")
    @classmethod
    def parse_direction(cls, value):
        if isinstance(value, str) and not isinstance(value, Direction):
            return Direction.parse(value)
        return value


class Thing(BaseModel):
    """
    A portable object, either resting in a room or held by another thing.
    """

    id: str
    name: str  # display name, may be several words
    room_id: str  # the room the thing (or its outermost container) is in
    container_id: str | None = None


class MapProject(BaseModel):
    """
    The complete map: rooms, exits between them and the objects placed in them.

    Things form a tree. Each thing points at its parent through container_id
    and children are derived, so a thing is always owned by exactly one room or
    one container.
    """

    title: str = ""
    rooms: list[Room] = Field(default_factory=list)
    exits: list[Exit] = Field(default_factory=list)
    things: list[Thing] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_references(self):
        rooms_by_id: dict[str, Room] = {}
        for room in self.rooms:
            if room.id in rooms_by_id:
                raise ValueError(f"Room with id '{room.id}' already exists")
            rooms_by_id[room.id] = room

        things_by_id: dict[str, Thing] = {}
        for thing in self.things:
            if thing.id in things_by_id:
                raise ValueError(f"Thing with id '{thing.id}' already exists")
            things_by_id[thing.id] = thing

        for room_exit in self.exits:
            self._check_exit(room_exit, rooms_by_id)

        for thing in self.things:
            self._check_thing(thing, rooms_by_id, things_by_id)

        # Walk up from every thing; revisiting a thing means a containment loop
        for thing in self.things:
            seen = {thing.id}
            parent_id = thing.container_id
            while parent_id is not None:
                if parent_id in seen:
                    raise ValueError(f"Thing '{thing.id}' is (indirectly) inside itself")
                seen.add(parent_id)
                parent_id = things_by_id[parent_id].container_id

        return self

    @staticmethod
    def _check_exit(room_exit: Exit, rooms_by_id: dict[str, Room]) -> None:
        if room_exit.source_id not in rooms_by_id or room_exit.target_id not in rooms_by_id:
            raise ValueError(
                f"Exit {room_exit.source_id} -({room_exit.direction.token})-> {room_exit.target_id} "
                "must connect two existing rooms"
            )

    @staticmethod
    def _check_thing(thing: Thing, rooms_by_id: dict[str, Room], things_by_id: dict[str, Thing]) -> None:
        if thing.room_id not in rooms_by_id:
            raise ValueError(f"Thing '{thing.id}' is in unknown room '{thing.room_id}'")
        if thing.container_id is None:
            return
        container = things_by_id.get(thing.container_id)
        if container is None:
            raise ValueError(f"Thing '{thing.id}' is in unknown container '{thing.container_id}'")
        if container.room_id != thing.room_id:
            raise ValueError(
                f"Thing '{thing.id}' is in room '{thing.room_id}' "
                f"but its container is in '{container.room_id}'"
            )

    # Building
    def add_room(self, room: Room) -> Room:
        """Add a room to the map.

        Raises:
            ValueError: If a room with the same ID already exists
        """
        if any(existing.id == room.id for existing in self.rooms):
            raise ValueError(f"Room with id '{room.id}' already exists")
        self.rooms.append(room)
        return room

    def add_exit(self, room_exit: Exit) -> Exit:
        """Add a one-way exit between two rooms already on the map."""
        self._check_exit(room_exit, {room.id: room for room in self.rooms})
        self.exits.append(room_exit)
        return room_exit

    def add_thing(self, thing: Thing) -> Thing:
        """Place a thing in a room, or inside a container already on the map."""
        things_by_id = {existing.id: existing for existing in self.things}
        if thing.id in things_by_id:
            raise ValueError(f"Thing with id '{thing.id}' already exists")
        self._check_thing(thing, {room.id: room for room in self.rooms}, things_by_id)
        self.things.append(thing)
        return thing

    # Lookups
    def room(self, room_id: str) -> Room:
        """Get a room by ID."""
        for room in self.rooms:
            if room.id == room_id:
                return room
        raise ValueError(f"Room '{room_id}' does not exist")

    def thing(self, thing_id: str) -> Thing:
        """Get a thing by ID."""
        for thing in self.things:
            if thing.id == thing_id:
                return thing
        raise ValueError(f"Thing '{thing_id}' does not exist")

    def start_room(self) -> Room | None:
        """Get the room flagged as the start, falling back to the first room."""
        for room in self.rooms:
            if room.is_start_room:
                return room
        return self.rooms[0] if self.rooms else None

    # Exits
    def exits_from(self, room_id: str, direction: Direction) -> list[Exit]:
        """All exits leaving a room in one direction, in declared order."""
        return [
            room_exit for room_exit in self.exits
            if room_exit.source_id == room_id and room_exit.direction == direction
        ]

    def best_exit(self, room_id: str, direction: Direction) -> Exit | None:
        """
        Get the exit to use for a direction.

        When several exits leave the room the same way, the first declared one
        wins.

        Args:
            room_id: The room the exit leaves from
            direction: The direction to look in

        Returns:
            The chosen Exit, or None if the room has no exit that way
        """
        self.room(room_id)
        exits = self.exits_from(room_id, direction)
        return exits[0] if exits else None

    def reverse_exit(self, room_exit: Exit) -> Exit | None:
        """Get the target room's best exit in the opposite direction."""
        return self.best_exit(room_exit.target_id, room_exit.direction.opposite())

    def is_reciprocated(self, room_exit: Exit) -> bool:
        """Check whether an exit's target leads straight back the opposite way."""
        reverse = self.reverse_exit(room_exit)
        return reverse is not None and reverse.target_id == room_exit.source_id

    # Things
    def top_level_things(self, room_id: str) -> list[Thing]:
        """Things resting directly in a room (not inside a container)."""
        self.room(room_id)
        return [
            thing for thing in self.things
            if thing.room_id == room_id and thing.container_id is None
        ]

    def contents(self, thing_id: str) -> list[Thing]:
        """Things held directly by a container, in declared order."""
        self.thing(thing_id)
        return [thing for thing in self.things if thing.container_id == thing_id]

    def has_contents(self, thing_id: str) -> bool:
        return any(thing.container_id == thing_id for thing in self.things)

    # Persistence
    def save(self, filepath: str | Path) -> None:
        """Save the map to a JSON file"""
        Path(filepath).write_text(self.model_dump_json(indent=2))

    @classmethod
    def load(cls, filepath: str | Path) -> "MapProject":
        """
        Load a map from a JSON file.

        Args:
            filepath: Path to the JSON map file

        Returns:
            A validated MapProject
        """
        return cls.model_validate_json(Path(filepath).read_text())
