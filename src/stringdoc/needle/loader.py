import json
import os
from pathlib import Path
from typing import Dict

CATALOG_SUFFIX = ".json"


def read_catalog(path: Path) -> Dict[str, str]:
    """
    Reads a flat JSON catalog mapping message ids to templates.

    Unreadable files, invalid JSON and documents that are not objects yield an
    empty catalog.
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            content = json.load(f)
    except (OSError, ValueError):
        return {}
    if not isinstance(content, dict):
        return {}
    return {str(key): str(value) for key, value in content.items()}


class Loader:
    def load_directory(self, root_path: Path) -> Dict[str, str]:
        """Merges every catalog below `root_path`, in path order."""
        registry: Dict[str, str] = {}

        if not root_path.is_dir():
            return registry

        for dirpath, _, filenames in sorted(os.walk(root_path)):
            for filename in sorted(filenames):
                path = Path(dirpath) / filename
                if path.suffix.lower() == CATALOG_SUFFIX:
                    registry.update(read_catalog(path))

        return registry
