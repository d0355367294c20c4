from typing import Iterable, List

from stringdoc.common import bus
from stringdoc.needle import L


def leading_spaces(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def split_and_dedent(doc: str) -> List[str]:
    """
    Splits a docstring into lines and removes their common indentation.

    The first line is assumed to be unindented. The remaining lines are
    dedented by the leading spaces of the first non-empty one among them,
    measured before trimming, so a whitespace-only line can set the indent.
    If any line is indented less than that, the lines are returned
    undedented. All lines are trimmed at the end.
    """
    raw_lines = doc.split("\n")
    indent = ""
    for line in raw_lines[1:]:
        if line:
            indent = " " * leading_spaces(line)
            break

    lines = [line.rstrip() for line in raw_lines]
    head, rest = lines[0], lines[1:]

    dedented = [head]
    for lineno, line in enumerate(rest, start=2):
        if not line:
            dedented.append("")
        elif line.startswith(indent):
            dedented.append(line[len(indent) :])
        else:
            bus.debug(L.docstring.dedent.fallback, lineno=lineno, indent=len(indent))
            # Split on terminators: a trailing newline does not open a new line.
            if doc.endswith("\n"):
                doc = doc[:-1]
            return [line.rstrip() for line in doc.split("\n")]
    return dedented


def join_lines(lines: Iterable[str]) -> str:
    """Returns the lines joined, each followed by a newline."""
    return "".join(f"{line}\n" for line in lines)
