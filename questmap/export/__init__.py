from .exporter import CodeExporter, ExportResult
from .names import NameRegistry, allocate_name, object_words
from .questjs import QuestJSExporter
from .strings import escape_string

__all__ = [
    'CodeExporter', 'ExportResult', 'NameRegistry', 'allocate_name',
    'object_words', 'QuestJSExporter', 'escape_string',
]
