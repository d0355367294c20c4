from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import griffe
from griffe import AliasResolutionError

from stringdoc.spec import DocstringLoaderProtocol, TargetNotFoundError


def split_target(target: str) -> Tuple[str, Optional[str]]:
    """Splits `package.module:object.path` into module and member path."""
    module, sep, member = target.partition(":")
    if not module or (sep and not member):
        raise TargetNotFoundError(target, "expected 'module' or 'module:object'")
    return module, member or None


class GriffeDocstringLoader(DocstringLoaderProtocol):
    """
    Loads docstrings statically with griffe, without importing the target.
    """

    def __init__(self, search_paths: Optional[Sequence[Union[str, Path]]] = None):
        self.search_paths: List[str] = [str(path) for path in search_paths or []]

    def _load_object(self, target: str) -> Union[griffe.Object, griffe.Alias]:
        module_name, member = split_target(target)
        try:
            obj = griffe.load(module_name, search_paths=self.search_paths)
            if member:
                obj = obj[member]
        except ImportError as e:
            raise TargetNotFoundError(target, str(e)) from e
        except KeyError as e:
            raise TargetNotFoundError(target, f"no member {e}") from e
        return obj

    def load(self, target: str) -> str:
        obj = self._load_object(target)
        try:
            docstring = obj.docstring
        except AliasResolutionError as e:
            raise TargetNotFoundError(target, f"unresolvable alias: {e}") from e
        return docstring.value if docstring else ""
