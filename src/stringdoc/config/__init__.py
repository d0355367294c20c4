from .loader import FORMATS, StringdocConfig, load_config_from_path

__all__ = ["FORMATS", "StringdocConfig", "load_config_from_path"]
