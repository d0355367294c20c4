"""
Delimiter-aware splitting and reversible protection of strings.

A string is protected by wrapping it in a pair of curly braces. Separators
inside braces never split, so protected values can carry commas, equal signs
or other separators of an enclosing structure. Inside braces a backslash
escapes the next character; this is how strings that are themselves
unbalanced get protected.
"""

from typing import Iterator, List, Optional, Tuple

from stringdoc.spec import SeparatorNotFoundError

OPEN = "{"
CLOSE = "}"
ESCAPE = "\\"


def _check_separator(sep: str) -> None:
    if len(sep) != 1:
        raise ValueError("expected a separator of length 1")


def _top_level_positions(s: str, sep: str) -> Iterator[int]:
    depth = 0
    escaped = False
    for index, char in enumerate(s):
        if escaped:
            escaped = False
        elif char == ESCAPE and depth > 0:
            escaped = True
        elif char == OPEN:
            depth += 1
        elif char == CLOSE:
            # A stray closing brace at the top level is taken literally.
            depth = max(depth - 1, 0)
        elif char == sep and depth == 0:
            yield index


def _closing_index(s: str) -> Optional[int]:
    """Returns the index of the brace that closes the one opening `s`."""
    if not s.startswith(OPEN):
        return None
    depth = 0
    escaped = False
    for index, char in enumerate(s):
        if escaped:
            escaped = False
        elif char == ESCAPE and depth > 0:
            escaped = True
        elif char == OPEN:
            depth += 1
        elif char == CLOSE:
            depth -= 1
            if depth == 0:
                return index
    return None


def is_protected(s: str) -> bool:
    return len(s) >= 2 and _closing_index(s) == len(s) - 1


def is_balanced(s: str) -> bool:
    depth = 0
    escaped = False
    for char in s:
        if escaped:
            escaped = False
        elif char == ESCAPE and depth > 0:
            escaped = True
        elif char == OPEN:
            depth += 1
        elif char == CLOSE:
            depth -= 1
            if depth < 0:
                return False
    return depth == 0 and not escaped


def safesplit(s: str, sep: str, maxsplit: int = -1) -> List[str]:
    """
    Splits `s` on every occurrence of `sep` that is not protected.

    An empty string yields no items at all.
    """
    _check_separator(sep)
    if not s:
        return []
    parts: List[str] = []
    start = 0
    for index in _top_level_positions(s, sep):
        if 0 <= maxsplit <= len(parts):
            break
        parts.append(s[start:index])
        start = index + 1
    parts.append(s[start:])
    return parts


def safesplit_once(s: str, sep: str) -> Tuple[str, str]:
    parts = safesplit(s, sep, maxsplit=1)
    if len(parts) != 2:
        raise SeparatorNotFoundError(s, sep)
    return parts[0], parts[1]


def _escape(s: str) -> str:
    return "".join(ESCAPE + char if char in (OPEN, CLOSE, ESCAPE) else char for char in s)


def _unescape(s: str) -> str:
    chars = []
    escaped = False
    for char in s:
        if char == ESCAPE and not escaped:
            escaped = True
            continue
        escaped = False
        chars.append(char)
    return "".join(chars)


def protect_unconditionally(s: str) -> str:
    if is_balanced(s) and ESCAPE not in s:
        return OPEN + s + CLOSE
    return OPEN + _escape(s) + CLOSE


def protect(s: str, *seps: str) -> str:
    """
    Protects `s` if it would not survive splitting on any of `seps`, or would
    otherwise be altered by `unprotect`.
    """
    for sep in seps:
        _check_separator(sep)
    if (
        not is_balanced(s)
        or is_protected(s)
        or any(next(_top_level_positions(s, sep), None) is not None for sep in seps)
    ):
        return protect_unconditionally(s)
    return s


def protect_unbalanced(s: str) -> str:
    return protect(s)


def unprotect(s: str) -> str:
    if is_protected(s):
        return _unescape(s[1:-1])
    return s
