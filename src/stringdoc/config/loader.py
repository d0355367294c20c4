import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

FORMATS = ("yaml", "json")


@dataclass
class StringdocConfig:
    search_paths: List[str] = field(default_factory=lambda: ["src", "."])
    format: str = "yaml"
    root_path: Path = field(default_factory=Path.cwd)

    def resolved_search_paths(self) -> List[Path]:
        return [(self.root_path / path).resolve() for path in self.search_paths]


def _find_pyproject_toml(search_path: Path) -> Path:
    current_dir = search_path.resolve()
    while current_dir.parent != current_dir:
        pyproject_path = current_dir / "pyproject.toml"
        if pyproject_path.is_file():
            return pyproject_path
        current_dir = current_dir.parent
    raise FileNotFoundError("Could not find pyproject.toml in any parent directory.")


def load_config_from_path(search_path: Path) -> StringdocConfig:
    try:
        config_path = _find_pyproject_toml(search_path)
    except FileNotFoundError:
        return StringdocConfig(root_path=search_path.resolve())

    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    stringdoc_data: Dict[str, Any] = data.get("tool", {}).get("stringdoc", {})

    defaults = StringdocConfig()
    search_paths = stringdoc_data.get("search_paths", defaults.search_paths)
    if not isinstance(search_paths, list) or not all(
        isinstance(path, str) for path in search_paths
    ):
        raise ValueError("'search_paths' must be a list of strings")

    fmt = stringdoc_data.get("format", defaults.format)
    if fmt not in FORMATS:
        raise ValueError(f"'format' must be one of {', '.join(FORMATS)}, got {fmt!r}")

    return StringdocConfig(
        search_paths=search_paths, format=fmt, root_path=config_path.parent
    )
