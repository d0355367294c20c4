import sys
from pathlib import Path
from typing import List, Optional, Tuple

from stringdoc.adapter import GriffeDocstringLoader
from stringdoc.common import bus, DocumentAdapter, JsonAdapter, YamlAdapter
from stringdoc.config import StringdocConfig, load_config_from_path
from stringdoc.docstring import DocstringParser
from stringdoc.needle import L
from stringdoc.spec import (
    DocstringLoaderProtocol,
    DocstringParserProtocol,
    DocumentationRecord,
    FormatError,
    StringdocError,
    TargetNotFoundError,
)
from stringdoc.util import deprettify, prettify, protect

STDIN = "-"


class StringdocApp:
    def __init__(
        self,
        root_path: Path,
        loader: Optional[DocstringLoaderProtocol] = None,
        parser: Optional[DocstringParserProtocol] = None,
        config: Optional[StringdocConfig] = None,
    ):
        self.root_path = root_path
        self.parser = parser or DocstringParser()
        self._loader = loader
        self._config = config

    @property
    def config(self) -> StringdocConfig:
        if self._config is None:
            self._config = load_config_from_path(self.root_path)
        return self._config

    def load_config(self) -> Optional[StringdocConfig]:
        try:
            return self.config
        except ValueError as e:
            bus.error(L.error.config, error=e)
            return None

    @property
    def loader(self) -> DocstringLoaderProtocol:
        if self._loader is None:
            self._loader = GriffeDocstringLoader(self.config.resolved_search_paths())
        return self._loader

    def _get_adapter(self, fmt: Optional[str]) -> DocumentAdapter:
        if (fmt or self.config.format) == "json":
            return JsonAdapter()
        return YamlAdapter()

    def _read_source(
        self, target: Optional[str], file: Optional[str]
    ) -> Optional[Tuple[str, str]]:
        """Returns the raw docstring and a label naming where it came from."""
        if file and not target:
            return self._read_file(file)
        if target and not file:
            return self._load_target(target)
        bus.error(L.error.target.missing)
        return None

    def _read_file(self, file: str) -> Optional[Tuple[str, str]]:
        try:
            if file == STDIN:
                return sys.stdin.read(), "<stdin>"
            return (self.root_path / file).read_text(encoding="utf-8"), file
        except (OSError, UnicodeDecodeError) as e:
            bus.error(L.error.input.unreadable, path=file, error=e)
            return None

    def _load_target(self, target: str) -> Optional[Tuple[str, str]]:
        try:
            doc = self.loader.load(target)
        except TargetNotFoundError as e:
            bus.error(L.error.target.not_found, target=target, error=e)
            return None
        bus.debug(L.docstring.parse.loaded, target=target, count=len(doc.splitlines()))
        return doc, target

    def parse(
        self, target: Optional[str] = None, file: Optional[str] = None
    ) -> Optional[Tuple[DocumentationRecord, str]]:
        if self.load_config() is None:
            return None
        source = self._read_source(target, file)
        if source is None:
            return None

        doc, label = source
        try:
            record = self.parser.parse(doc)
        except StringdocError as e:
            bus.error(L.error.parse, target=label, error=e)
            return None
        return record, label

    def run_show(
        self,
        target: Optional[str] = None,
        file: Optional[str] = None,
        fmt: Optional[str] = None,
    ) -> Optional[str]:
        parsed = self.parse(target, file)
        if parsed is None:
            return None
        record, label = parsed
        if record.is_empty():
            bus.warning(L.docstring.parse.empty, target=label)
        return self._get_adapter(fmt).dump(record.to_data())

    def run_presets(
        self,
        target: Optional[str] = None,
        file: Optional[str] = None,
        pretty: bool = False,
    ) -> Optional[List[str]]:
        parsed = self.parse(target, file)
        if parsed is None:
            return None
        record, label = parsed
        if not record.presets:
            bus.info(L.docstring.presets.none, target=label)
            return []

        bus.debug(L.docstring.presets.count, target=label, count=len(record.presets))
        lines: List[str] = []
        for preset in record.presets:
            compact = ",".join(
                f"{protect(key, ',', '=')}={protect(value, ',')}"
                for key, value in preset.parameters
            )
            if pretty:
                lines.append(preset.name)
                if compact:
                    lines.extend(
                        "  " + line for line in prettify(compact).split("\n")
                    )
            else:
                lines.append(f"{preset.name}: {compact}")
        return lines

    def run_prettify(self, s: str) -> str:
        return prettify(s)

    def run_deprettify(self, s: str) -> Optional[str]:
        try:
            return deprettify(s)
        except FormatError as e:
            bus.error(L.error.format, error=e)
            return None
