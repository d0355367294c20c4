from typing import Any, Dict, Optional

from stringdoc.spec import DocstringParserProtocol, DocumentationRecord
from .parser import DocstringParser


class DocString:
    """
    The parsed documentation of a callable.

    Reads `f.__doc__` and exposes the description (`text`), the argument
    defaults and descriptions, and the documented presets. `str()` returns the
    dedented docstring.
    """

    def __init__(self, f: Any, parser: Optional[DocstringParserProtocol] = None):
        doc = getattr(f, "__doc__", None) or ""
        self.record = (parser or DocstringParser()).parse(doc)

    @classmethod
    def from_text(
        cls, text: str, parser: Optional[DocstringParserProtocol] = None
    ) -> "DocString":
        instance = cls.__new__(cls)
        instance.record = (parser or DocstringParser()).parse(text)
        return instance

    @classmethod
    def from_record(cls, record: DocumentationRecord) -> "DocString":
        instance = cls.__new__(cls)
        instance.record = record
        return instance

    @property
    def text(self) -> str:
        return self.record.body_text

    @property
    def defaults(self) -> Dict[str, str]:
        return self.record.defaults_map()

    @property
    def argdocs(self) -> Dict[str, str]:
        return self.record.argdocs_map()

    @property
    def presets(self) -> Dict[str, Dict[str, str]]:
        return self.record.presets_map()

    def __str__(self) -> str:
        return self.record.full_text

    def __repr__(self) -> str:
        summary = self.text.split("\n", 1)[0]
        return f"<DocString: {summary!r}>"
