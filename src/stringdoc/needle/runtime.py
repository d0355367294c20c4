import os
from pathlib import Path
from typing import Dict, List, Optional, Set, Union

from .loader import Loader
from .pointer import SemanticPointer

LANG_ENV_VAR = "STRINGDOC_LANG"


def find_project_root(start_dir: Optional[Path] = None) -> Path:
    """
    Searches upwards for the project root.
    Search priority: pyproject.toml -> .git
    """
    current_dir = (start_dir or Path.cwd()).resolve()
    while current_dir.parent != current_dir:
        if (current_dir / "pyproject.toml").is_file():
            return current_dir
        if (current_dir / ".git").is_dir():
            return current_dir
        current_dir = current_dir.parent
    return start_dir or Path.cwd()


class Needle:
    """
    Resolves semantic pointers to message templates.

    Every root may carry a `needle/<lang>` directory (packaged assets) and a
    `.stringdoc/needle/<lang>` directory (project overrides). Later roots
    override earlier ones.
    """

    def __init__(self, roots: Optional[List[Path]] = None):
        self.default_lang = "en"
        self.roots: List[Path] = list(roots) if roots else [find_project_root()]
        self._registry: Dict[str, Dict[str, str]] = {}
        self._loader = Loader()
        self._loaded_langs: Set[str] = set()

    def add_root(self, path: Path):
        """Adds a new search root to the beginning of the list."""
        if path not in self.roots:
            self.roots.insert(0, path)
            self.reset()

    def reset(self):
        self._registry.clear()
        self._loaded_langs.clear()

    def _ensure_lang_loaded(self, lang: str):
        if lang in self._loaded_langs:
            return

        merged_registry: Dict[str, str] = {}
        for root in self.roots:
            merged_registry.update(self._loader.load_directory(root / "needle" / lang))
            merged_registry.update(
                self._loader.load_directory(root / ".stringdoc" / "needle" / lang)
            )

        self._registry[lang] = merged_registry
        self._loaded_langs.add(lang)

    def get(
        self, pointer: Union[SemanticPointer, str], lang: Optional[str] = None
    ) -> str:
        """
        Resolves a semantic pointer to a string value with graceful fallback.

        Lookup Order:
        1. Target Language
        2. Default Language (en)
        3. Identity (the key itself)
        """
        key = str(pointer)
        target_lang = lang or os.getenv(LANG_ENV_VAR, self.default_lang)

        self._ensure_lang_loaded(target_lang)
        val = self._registry.get(target_lang, {}).get(key)
        if val is not None:
            return val

        if target_lang != self.default_lang:
            self._ensure_lang_loaded(self.default_lang)
            val = self._registry.get(self.default_lang, {}).get(key)
            if val is not None:
                return val

        return key
