from .pointer import L, SemanticPointer
from .runtime import Needle, find_project_root
from .loader import Loader, read_catalog

__all__ = [
    "L",
    "SemanticPointer",
    "Needle",
    "find_project_root",
    "Loader",
    "read_catalog",
]
