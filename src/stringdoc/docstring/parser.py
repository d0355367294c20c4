from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from stringdoc.spec import (
    BlockKind,
    DocstringParserProtocol,
    DocumentationRecord,
    FormatError,
    LineCursorProtocol,
    MissingValueError,
    Pair,
    Preset,
    SeparatorNotFoundError,
)
from stringdoc.text import ListLineCursor, join_lines, split_and_dedent
from stringdoc.util import deprettify, safesplit, safesplit_once, unprotect

# Indentation a marked block must have relative to its marker line.
BLOCK_INDENT = 3
# Indentation of descriptions and parameters relative to their item line.
ITEM_INDENT = 2


@dataclass
class _RecordBuilder:
    text: str = ""
    defaults: List[Pair] = field(default_factory=list)
    argdocs: List[Pair] = field(default_factory=list)
    presets: List[Preset] = field(default_factory=list)

    def build(self, full_text: str) -> DocumentationRecord:
        return DocumentationRecord(
            full_text=full_text,
            body_text=self.text.strip(),
            defaults=tuple(self.defaults),
            argdocs=tuple(self.argdocs),
            presets=tuple(self.presets),
        )


def split_argument_spec(spec: str) -> Tuple[str, Optional[str]]:
    """
    Splits `name [default]` into its name and default literal.

    Returns the name and None if no bracketed default is given.
    """
    index = spec.find(" [")
    if index >= 0 and spec.endswith("]"):
        return spec[:index], spec[index + 2 : -1]
    return spec, None


class DocstringParser(DocstringParserProtocol):
    def parse(self, doc: str) -> DocumentationRecord:
        lines = split_and_dedent(doc)
        builder = _RecordBuilder()

        cursor = ListLineCursor(lines)
        while True:
            cursor.gobble_empty_lines()
            line = cursor.peek_unempty()
            if line is None:
                break
            kind = BlockKind.classify(line)
            if kind is BlockKind.ARGUMENTS:
                cursor.next_line()
                with cursor.dedent(BLOCK_INDENT) as block:
                    self._parse_arguments(block, builder)
            elif kind is BlockKind.PRESETS:
                cursor.next_line()
                with cursor.dedent(BLOCK_INDENT) as block:
                    self._parse_presets(block, builder)
            else:
                self._copy_paragraph(cursor, builder)

        return builder.build(full_text=join_lines(lines))

    def _parse_arguments(
        self, block: LineCursorProtocol, builder: _RecordBuilder
    ) -> None:
        for line in block:
            name, default = split_argument_spec(line.strip())
            if default is not None:
                builder.defaults.append((name, default))
            with block.dedent(ITEM_INDENT) as description:
                builder.argdocs.append((name, join_lines(description).rstrip()))

    def _parse_presets(
        self, block: LineCursorProtocol, builder: _RecordBuilder
    ) -> None:
        for line in block:
            preset = line.strip()
            with block.dedent(ITEM_INDENT) as parameter_lines:
                pretty = join_lines(parameter_lines)
            try:
                parameter_string = deprettify(pretty)
            except FormatError as e:
                raise FormatError(
                    f"preset {preset}: {e}", lineno=e.lineno, preset=preset
                ) from e

            parameters: List[Pair] = []
            for item in safesplit(parameter_string, ","):
                try:
                    key, value = safesplit_once(item, "=")
                except SeparatorNotFoundError:
                    raise MissingValueError(preset, unprotect(item)) from None
                parameters.append((unprotect(key), unprotect(value)))
            builder.presets.append(Preset(name=preset, parameters=tuple(parameters)))

    def _copy_paragraph(
        self, cursor: LineCursorProtocol, builder: _RecordBuilder
    ) -> None:
        # Separate paragraphs by a single white line.
        if builder.text:
            builder.text += "\n"
        while True:
            line = cursor.next_if_unempty()
            if line is None:
                break
            builder.text += line + "\n"


def parse_docstring(doc: str) -> DocumentationRecord:
    return DocstringParser().parse(doc)
