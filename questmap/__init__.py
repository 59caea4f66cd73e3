from .core.map_model import MapProject, Room, Exit, Thing
from .core.direction import Direction
from .export.questjs import QuestJSExporter

__all__ = ['MapProject', 'Room', 'Exit', 'Thing', 'Direction', 'QuestJSExporter']
