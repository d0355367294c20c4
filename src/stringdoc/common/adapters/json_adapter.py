import json
from typing import Any, Dict

from stringdoc.common.interfaces import DocumentAdapter


class JsonAdapter(DocumentAdapter):
    def dump(self, data: Dict[str, Any]) -> str:
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
