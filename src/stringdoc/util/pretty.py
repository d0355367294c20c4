from typing import List, Tuple

from stringdoc.spec import FormatError
from stringdoc.text.dedent import leading_spaces
from .protection import OPEN, CLOSE, is_protected, safesplit

INDENT = "  "

# (line number, line)
_Line = Tuple[int, str]


def _has_structure(s: str) -> bool:
    return len(safesplit(s, ",")) > 1 or len(safesplit(s, "=", maxsplit=1)) > 1


def _prettify_lines(s: str) -> List[str]:
    lines: List[str] = []
    for item in safesplit(s, ","):
        parts = safesplit(item, "=", maxsplit=1)
        if len(parts) == 2 and is_protected(parts[1]):
            inner = parts[1][1:-1]
            if _has_structure(inner):
                lines.append(parts[0] + "=")
                lines.extend(INDENT + line for line in _prettify_lines(inner))
                continue
        lines.append(item)
    return lines


def prettify(s: str) -> str:
    """
    Renders a compact comma separated string over multiple lines.

    Every top-level item goes on its own line. A `key={...}` item whose
    protected value is itself structured is written as `key=` followed by the
    value's items, indented.
    """
    return "\n".join(_prettify_lines(s))


def _parse_block(lines: List[_Line], start: int, indent: int) -> Tuple[List[str], int]:
    items: List[str] = []
    index = start
    while index < len(lines):
        lineno, line = lines[index]
        current = leading_spaces(line)
        if current < indent:
            break
        if current > indent:
            raise FormatError(
                f"line {lineno}: indentation does not match any enclosing level",
                lineno=lineno,
            )
        item = line[indent:]
        index += 1
        if index < len(lines) and leading_spaces(lines[index][1]) > indent:
            children, index = _parse_block(
                lines, index, leading_spaces(lines[index][1])
            )
            item += OPEN + ",".join(children) + CLOSE
        items.append(item)
    return items, index


def deprettify(s: str) -> str:
    """Reverses `prettify`, joining an indented multi-line string into one line."""
    lines: List[_Line] = []
    for lineno, line in enumerate(s.split("\n"), start=1):
        line = line.rstrip()
        if not line:
            continue
        if line[leading_spaces(line)].isspace():
            raise FormatError(
                f"line {lineno}: indentation must consist of spaces only",
                lineno=lineno,
            )
        lines.append((lineno, line))
    if not lines:
        return ""

    items, index = _parse_block(lines, 0, leading_spaces(lines[0][1]))
    if index < len(lines):
        lineno = lines[index][0]
        raise FormatError(
            f"line {lineno}: unindent below the first line of the block",
            lineno=lineno,
        )
    return ",".join(items)
