import pytest

from questmap.core.map_model import Exit, MapProject, Room, Thing


@pytest.fixture
def cave_project() -> MapProject:
    """Two connected rooms, a chest holding a lantern, and two keys."""
    return MapProject(
        title="The Cave",
        rooms=[
            Room(id="entrance", name="Entrance", description="A gaping hole.", is_start_room=True),
            Room(id="cave", name="Dark Cave", description="It's pitch black.", is_dark=True),
        ],
        exits=[
            Exit(source_id="entrance", direction="s", target_id="cave"),
            Exit(source_id="cave", direction="north", target_id="entrance"),
        ],
        things=[
            Thing(id="chest", name="old chest", room_id="cave"),
            Thing(id="lamp", name="brass lantern", room_id="cave", container_id="chest"),
            Thing(id="key1", name="key", room_id="entrance"),
            Thing(id="key2", name="key", room_id="cave"),
        ],
    )


@pytest.fixture
def cave_script() -> str:
    return (
        "/*The Cave - exported by questmap */\n"
        "\n"
        'createRoom("ENTRANCE", {\n'
        '  desc:"A gaping hole.",\n'
        '  south: "DARK_CAVE",\n'
        "})\n"
        "\n"
        'createRoom("DARK_CAVE", {\n'
        '  desc:"It\'s pitch black.",\n'
        '  north: "ENTRANCE",\n'
        "  dark:true,\n"
        "})\n"
        "\n"
        'createItem("KEY",TAKEABLE(), {\n'
        '  loc:"ENTRANCE",\n'
        '  synonyms:["KEY"],\n'
        "})\n"
        "\n"
        'createItem("OLD_CHEST",TAKEABLE(), CONTAINER(false), {\n'
        '  loc:"DARK_CAVE",\n'
        "  synonyms:['OLD'],\n"
        '  synonyms:["CHEST"],\n'
        "})\n"
        "\n"
        'createItem("BRASS_LANTERN",TAKEABLE(), {\n'
        '  loc:"OLD_CHEST",\n'
        "  synonyms:['BRASS'],\n"
        '  synonyms:["LANTERN"],\n'
        "})\n"
        "\n"
        'createItem("KEY1",TAKEABLE(), {\n'
        '  loc:"DARK_CAVE",\n'
        '  synonyms:["KEY"],\n'
        "})\n"
        "\n"
    )
