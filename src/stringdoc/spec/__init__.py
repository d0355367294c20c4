from .models import (
    ARGUMENTS_MARKER,
    PRESETS_MARKER,
    BlockKind,
    DocumentationRecord,
    Pair,
    Preset,
)
from .errors import (
    StringdocError,
    SerializationError,
    FormatError,
    MissingValueError,
    SeparatorNotFoundError,
    CursorBorrowedError,
    TargetNotFoundError,
)
from .protocols import (
    LineCursorProtocol,
    IndentScopeProtocol,
    DocstringParserProtocol,
    DocstringLoaderProtocol,
)

__all__ = [
    "ARGUMENTS_MARKER",
    "PRESETS_MARKER",
    "BlockKind",
    "DocumentationRecord",
    "Pair",
    "Preset",
    # Errors
    "StringdocError",
    "SerializationError",
    "FormatError",
    "MissingValueError",
    "SeparatorNotFoundError",
    "CursorBorrowedError",
    "TargetNotFoundError",
    # Protocols
    "LineCursorProtocol",
    "IndentScopeProtocol",
    "DocstringParserProtocol",
    "DocstringLoaderProtocol",
]
