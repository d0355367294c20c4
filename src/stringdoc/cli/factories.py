from pathlib import Path

from stringdoc.app import StringdocApp


def get_project_root() -> Path:
    return Path.cwd()


def make_app() -> StringdocApp:
    return StringdocApp(root_path=get_project_root())
