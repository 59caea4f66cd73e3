from enum import Enum
from typing import Sequence

import networkx as nx

from questmap.core.direction import ALL_DIRECTIONS
from questmap.core.map_model import MapProject


class ExportOrder(str, Enum):
    """How rooms are ordered when the caller doesn't give an explicit list."""

    DECLARED = "declared"
    START_FIRST = "start-first"


def build_map_graph(project: MapProject) -> nx.MultiDiGraph:
    """Build a directed graph of the map using each room's best exits.

    Nodes are room ids. There is at most one edge per (room, direction), keyed
    by the direction.
    """
    G = nx.MultiDiGraph()

    for room in project.rooms:
        G.add_node(room.id, name=room.name)

    for room in project.rooms:
        for direction in ALL_DIRECTIONS:
            room_exit = project.best_exit(room.id, direction)
            if room_exit is not None:
                G.add_edge(room.id, room_exit.target_id, key=direction, direction=direction)

    return G


def direction_ordered_neighbours(G: nx.MultiDiGraph):
    """Neighbour function for networkx traversals that follows exits in canonical direction order."""
    rank = {direction: index for index, direction in enumerate(ALL_DIRECTIONS)}

    def neighbours(room_id: str):
        edges = sorted(G.out_edges(room_id, keys=True), key=lambda edge: rank[edge[2]])
        return iter([target for _, target, _ in edges])

    return neighbours


def start_first_order(project: MapProject) -> list[str]:
    """
    Order rooms breadth-first from the start room.

    Neighbours are visited in canonical direction order. Rooms that can't be
    reached from the start follow in declared order, each one starting a new
    breadth-first walk.
    """
    G = build_map_graph(project)
    start = project.start_room()
    if start is None:
        return []

    neighbours = direction_ordered_neighbours(G)
    order: list[str] = []
    visited: set[str] = set()
    roots = [start.id] + [room.id for room in project.rooms if room.id != start.id]

    for root in roots:
        if root in visited:
            continue
        visited.add(root)
        order.append(root)
        for _, target in nx.generic_bfs_edges(G, root, neighbors=neighbours):
            if target not in visited:
                visited.add(target)
                order.append(target)

    return order


def resolve_export_order(
    project: MapProject,
    order: Sequence[str] | ExportOrder | str = ExportOrder.DECLARED,
) -> list[str]:
    """
    Turn an explicit room id list or an ordering policy into a list of room ids.

    Args:
        project: The map being exported
        order: Either a sequence of room ids or an ExportOrder policy

    Returns:
        Every room id exactly once

    Raises:
        ValueError: If an explicit order misses, repeats or invents a room
    """
    if isinstance(order, str):
        policy = ExportOrder(order)
        if policy == ExportOrder.START_FIRST:
            return start_first_order(project)
        return [room.id for room in project.rooms]

    room_ids = list(order)
    known = {room.id for room in project.rooms}
    unknown = [room_id for room_id in room_ids if room_id not in known]
    if unknown:
        raise ValueError(f"Export order names unknown rooms: {', '.join(unknown)}")
    if len(set(room_ids)) != len(room_ids):
        raise ValueError("Export order lists a room more than once")
    missing = [room.id for room in project.rooms if room.id not in set(room_ids)]
    if missing:
        raise ValueError(f"Export order is missing rooms: {', '.join(missing)}")
    return room_ids
