from .parser import DocstringParser, parse_docstring, split_argument_spec
from .docstring import DocString

__all__ = ["DocstringParser", "parse_docstring", "split_argument_spec", "DocString"]
