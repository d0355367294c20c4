from .core import StringdocApp

__all__ = ["StringdocApp"]
