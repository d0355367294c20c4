from typing import Any, Dict

import yaml

from stringdoc.common.interfaces import DocumentAdapter


class _MultilineDumper(yaml.SafeDumper):
    pass


def _str_presenter(dumper: yaml.SafeDumper, data: str):
    # Block style only where it reads better; single lines stay plain.
    style = "|" if "\n" in data else None
    return dumper.represent_scalar("tag:yaml.org,2002:str", data, style=style)


_MultilineDumper.add_representer(str, _str_presenter)


class YamlAdapter(DocumentAdapter):
    def dump(self, data: Dict[str, Any]) -> str:
        # Documentation order is meaningful, so keys are never sorted.
        return yaml.dump(
            data,
            Dumper=_MultilineDumper,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
