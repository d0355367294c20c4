from typing import Iterator, Optional, Sequence

from stringdoc.spec import CursorBorrowedError, LineCursorProtocol
from .dedent import leading_spaces


class LineCursor(LineCursorProtocol):
    """
    Shared behaviour of the line cursors.

    Subclasses provide the two lookahead operations and the raw `_advance` /
    `_gobble` primitives. The public advancing operations refuse to run while
    an IndentScope borrows the cursor; the scope itself drives its parent
    through the primitives.
    """

    def __init__(self) -> None:
        self._borrowed = False

    # --- Primitives (to be implemented by subclasses) ---
    def peek(self) -> Optional[str]:
        raise NotImplementedError

    def peek_unempty(self) -> Optional[str]:
        raise NotImplementedError

    def _advance(self) -> Optional[str]:
        raise NotImplementedError

    def _gobble(self) -> None:
        raise NotImplementedError

    # --- Public API ---
    @property
    def borrowed(self) -> bool:
        return self._borrowed

    def _check_not_borrowed(self) -> None:
        if self._borrowed:
            raise CursorBorrowedError(
                f"{type(self).__name__} cannot advance while an indent scope over it is open"
            )

    def next_line(self) -> Optional[str]:
        self._check_not_borrowed()
        return self._advance()

    def next_if_unempty(self) -> Optional[str]:
        self._check_not_borrowed()
        if not self.peek():
            return None
        return self._advance()

    def gobble_empty_lines(self) -> None:
        self._check_not_borrowed()
        self._gobble()

    def dedent(self, min_indent: int) -> "IndentScope":
        return IndentScope(self, min_indent)

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


class ListLineCursor(LineCursor):
    """A cursor over a list of lines that are already trimmed at the end."""

    def __init__(self, lines: Sequence[str]):
        super().__init__()
        self._lines = lines
        self._index = 0

    def peek(self) -> Optional[str]:
        if self._index < len(self._lines):
            return self._lines[self._index]
        return None

    def peek_unempty(self) -> Optional[str]:
        for index in range(self._index, len(self._lines)):
            if self._lines[index]:
                return self._lines[index]
        return None

    def _advance(self) -> Optional[str]:
        line = self.peek()
        if line is not None:
            self._index += 1
        return line

    def _gobble(self) -> None:
        while self._index < len(self._lines) and not self._lines[self._index]:
            self._index += 1


class IndentScope(LineCursor):
    """
    A cursor over the indented block that follows the parent's position.

    Lines are yielded with the block indentation stripped, until a non-empty
    line indented less than the block occurs. Empty lines are yielded as
    blank lines of the block as long as the block continues after them.

    The block indentation is that of the first non-empty line. If it is below
    `min_indent`, the block indentation is set one deeper, which leaves the
    block empty.
    """

    def __init__(self, parent: LineCursor, min_indent: int):
        super().__init__()
        parent._check_not_borrowed()
        parent._gobble()
        line = parent.peek_unempty()
        if line is None:
            indent = 0
        else:
            detected = leading_spaces(line)
            indent = detected if detected >= min_indent else detected + 1

        self.min_indent = min_indent
        self.indent = indent
        self._parent = parent
        self._released = False
        parent._borrowed = True

    def _check_not_borrowed(self) -> None:
        if self._released:
            raise CursorBorrowedError("indent scope has already been released")
        super()._check_not_borrowed()

    def _dedent_line(self, line: Optional[str]) -> Optional[str]:
        if line is None or leading_spaces(line) < self.indent:
            return None
        return line[self.indent :]

    def peek(self) -> Optional[str]:
        if self.peek_unempty() is None:
            return None
        line = self._parent.peek()
        return line[self.indent :] if line else line

    def peek_unempty(self) -> Optional[str]:
        return self._dedent_line(self._parent.peek_unempty())

    def _advance(self) -> Optional[str]:
        if self.peek_unempty() is None:
            return None
        line = self._parent._advance()
        return line[self.indent :] if line else line

    def _gobble(self) -> None:
        self._parent._gobble()

    def release(self) -> None:
        if self._released:
            return
        if self._borrowed:
            raise CursorBorrowedError(
                "cannot release an indent scope while a nested scope is open"
            )
        self._released = True
        self._parent._borrowed = False

    def __enter__(self) -> "IndentScope":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.release()
