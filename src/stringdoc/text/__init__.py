from .dedent import split_and_dedent, join_lines, leading_spaces
from .cursor import LineCursor, ListLineCursor, IndentScope

__all__ = [
    "split_and_dedent",
    "join_lines",
    "leading_spaces",
    "LineCursor",
    "ListLineCursor",
    "IndentScope",
]
