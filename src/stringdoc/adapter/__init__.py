from .griffe_loader import GriffeDocstringLoader, split_target

__all__ = ["GriffeDocstringLoader", "split_target"]
