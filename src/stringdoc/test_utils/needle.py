from contextlib import contextmanager
from typing import Any, Dict

import stringdoc.common


class MockNeedle:
    """
    A test utility to mock the global `needle` runtime.
    """

    def __init__(self, templates: Dict[str, str]):
        self._templates = templates

    def _mock_get(self, key: Any, lang: Any = None) -> str:
        key_str = str(key)
        return self._templates.get(key_str, key_str)

    @contextmanager
    def patch(self, monkeypatch: Any):
        """
        Patches the `get` method of the needle instance the bus resolves
        templates with, for the duration of the `with` block.
        """
        monkeypatch.setattr(stringdoc.common.needle, "get", self._mock_get)
        yield
