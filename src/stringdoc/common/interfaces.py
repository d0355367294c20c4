from typing import Any, Dict, Protocol


class DocumentAdapter(Protocol):
    """Renders plain documentation data to a textual document format."""

    def dump(self, data: Dict[str, Any]) -> str: ...
