from typing import Optional


class StringdocError(Exception):
    """Base class for all errors raised by stringdoc."""


class SerializationError(StringdocError):
    pass


class FormatError(SerializationError, ValueError):
    """
    Raised when a pretty-printed string cannot be reversed to its compact form.
    """

    def __init__(
        self,
        message: str,
        lineno: Optional[int] = None,
        preset: Optional[str] = None,
    ):
        super().__init__(message)
        self.lineno = lineno
        self.preset = preset


class MissingValueError(SerializationError):
    def __init__(self, preset: str, item: str):
        super().__init__(f"preset {preset} has no value for argument {item}")
        self.preset = preset
        self.item = item


class SeparatorNotFoundError(StringdocError, ValueError):
    def __init__(self, text: str, separator: str):
        super().__init__(f"separator {separator!r} not found in {text!r}")
        self.text = text
        self.separator = separator


class CursorBorrowedError(StringdocError, RuntimeError):
    """
    Raised when a cursor is advanced while an indent scope over it is alive.
    """


class TargetNotFoundError(StringdocError):
    def __init__(self, target: str, reason: str = ""):
        message = f"could not find '{target}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.target = target
