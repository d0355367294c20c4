from .yaml_adapter import YamlAdapter
from .json_adapter import JsonAdapter

__all__ = ["YamlAdapter", "JsonAdapter"]
