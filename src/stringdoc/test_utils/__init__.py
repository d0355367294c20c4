from .bus import SpyBus
from .needle import MockNeedle
from .workspace import WorkspaceFactory

__all__ = ["SpyBus", "MockNeedle", "WorkspaceFactory"]
