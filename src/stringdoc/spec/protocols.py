from typing import Iterator, Optional, Protocol

from .models import DocumentationRecord


class LineCursorProtocol(Protocol):
    """
    A forward-only, peekable view over a sequence of lines.

    Every operation returns None instead of a line once the view is exhausted.
    """

    def peek(self) -> Optional[str]:
        """Returns the current line without advancing."""
        ...

    def peek_unempty(self) -> Optional[str]:
        """Returns the first non-empty line at or after the current position."""
        ...

    def next_line(self) -> Optional[str]:
        """Returns the current line and advances by one."""
        ...

    def next_if_unempty(self) -> Optional[str]:
        """Advances only if the current line is non-empty."""
        ...

    def gobble_empty_lines(self) -> None:
        """Skips a run of empty lines starting at the current position."""
        ...

    def dedent(self, min_indent: int) -> "IndentScopeProtocol":
        """Opens a nested view over the indented block that follows."""
        ...

    def __iter__(self) -> Iterator[str]: ...


class IndentScopeProtocol(LineCursorProtocol, Protocol):
    """
    A cursor over an indented block that borrows its parent until released.
    """

    def release(self) -> None: ...

    def __enter__(self) -> "IndentScopeProtocol": ...

    def __exit__(self, exc_type, exc_value, traceback) -> None: ...


class DocstringParserProtocol(Protocol):
    def parse(self, doc: str) -> DocumentationRecord: ...


class DocstringLoaderProtocol(Protocol):
    def load(self, target: str) -> str:
        """
        Returns the raw docstring of the object addressed by `target`.

        Raises TargetNotFoundError if the object cannot be located.
        """
        ...
