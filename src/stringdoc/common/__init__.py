from pathlib import Path

from stringdoc.needle import Needle, find_project_root
from .messaging.bus import MessageBus
from .interfaces import DocumentAdapter
from .adapters import YamlAdapter, JsonAdapter

# --- Composition Root for stringdoc's Core Services ---

# Packaged catalogs come first so that a project's .stringdoc/needle overrides them.
assets_root = Path(__file__).parent / "assets"
needle = Needle(roots=[assets_root, find_project_root()])

bus = MessageBus(needle)

__all__ = [
    "bus",
    "needle",
    "MessageBus",
    "DocumentAdapter",
    "YamlAdapter",
    "JsonAdapter",
]
