from .protection import (
    safesplit,
    safesplit_once,
    protect,
    protect_unconditionally,
    protect_unbalanced,
    unprotect,
    is_balanced,
    is_protected,
)
from .pretty import prettify, deprettify

__all__ = [
    "safesplit",
    "safesplit_once",
    "protect",
    "protect_unconditionally",
    "protect_unbalanced",
    "unprotect",
    "is_balanced",
    "is_protected",
    "prettify",
    "deprettify",
]
