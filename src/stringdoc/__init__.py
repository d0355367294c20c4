"""
stringdoc
=========

Structured documentation from docstrings: descriptions, argument defaults,
argument descriptions and presets.
"""

from .docstring import DocString, DocstringParser, parse_docstring
from .spec import (
    DocumentationRecord,
    Preset,
    StringdocError,
    SerializationError,
    FormatError,
    MissingValueError,
)
from . import util

__version__ = "0.1.0"

__all__ = [
    "DocString",
    "DocstringParser",
    "parse_docstring",
    "DocumentationRecord",
    "Preset",
    "StringdocError",
    "SerializationError",
    "FormatError",
    "MissingValueError",
    "util",
]
