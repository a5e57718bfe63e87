"""Request dispatch and save notifications for the management console pages."""

from .client import Dispatcher
from .codec import from_wire, to_wire
from .errors import PageError, ParseError, ShapeError, TransportError
from .notification import FileSessionStore, MemorySessionStore, NotificationStore, Toast
from .protocol import parse_get_envelope, parse_mutation_outcome
from .renderers import FeatureTag, RendererRegistry
from .widgets import sync_switch

__all__ = [
    "Dispatcher",
    "FeatureTag",
    "RendererRegistry",
    "NotificationStore",
    "MemorySessionStore",
    "FileSessionStore",
    "Toast",
    "parse_get_envelope",
    "parse_mutation_outcome",
    "to_wire",
    "from_wire",
    "sync_switch",
    "PageError",
    "TransportError",
    "ParseError",
    "ShapeError",
]
